"""Use Case for populating an empty database with reference and sample data."""

from datetime import datetime, timezone
from decimal import Decimal

from application.services import (
    AddressService,
    ClientService,
    CounterpartyService,
    PostcodePoolService,
    PostOfficeService,
    ShipmentService,
    ShipmentTrackingDetailService,
    TariffGridService,
)
from domain.entities import (
    Address,
    BarcodeInnerNumber,
    Client,
    Counterparty,
    Parcel,
    ParcelItem,
    PostcodePool,
    PostOffice,
    Shipment,
    ShipmentTrackingDetail,
    TariffGrid,
)
from domain.enums import BarcodeStatus, DeliveryType, ShipmentStatus, W2wVariation
from infrastructure.config import get_logger

# (max weight kg, max length cm, TOWN price, REGION price, COUNTRY price)
TARIFF_ROWS = [
    (0.25, 30, 12, 15, 21),
    (0.5, 30, 15, 18, 24),
    (1, 30, 18, 21, 27),
    (2, 30, 21, 24, 30),
    (5, 70, 24, 27, 36),
    (10, 70, 27, 30, 42),
    (15, 70, 30, 36, 48),
    (20, 70, 36, 42, 54),
    (30, 70, 42, 48, 60),
]

# (name, quantity, weight, price), two items per parcel
PARCEL_ITEMS = [
    ("Some item", 1, 2.0, "10.5"),
    ("Some other item", 2, 3.0, "20.5"),
    ("Some other item", 1, 4.0, "20.5"),
    ("Some other item", 2, 5.0, "25.5"),
    ("Some other item", 6, 6.5, "30.5"),
    ("Some other item", 4, 7.8, "27.5"),
    ("Some other item", 1, 2.5, "10.5"),
    ("Some other item", 3, 2.8, "23.5"),
    ("Some other item", 2, 3.5, "33.5"),
    ("Some other item", 4, 5.8, "22.5"),
    ("Some other item", 2, 3.5, "33.5"),
    ("Some other item", 4, 5.8, "22.5"),
]

# (weight, length, width, height, declared price, price)
PARCELS = [
    (3, 1, 3, 3, "8.5", "2.25"),
    (3, 3, 3, 3, "7.5", "2.25"),
    (3, 3, 5, 3, "4.5", "2.25"),
    (3, 3, 3, 6, "6.5", "2.25"),
    (2, 3, 7, 3, "1.5", "2.25"),
    (3, 6, 6, 3, "9.5", "2.25"),
]


class InitDbUseCase:
    """Seed tariffs, pools, clients, shipments and tracking on first start."""

    def __init__(
        self,
        tariff_grid_service: TariffGridService,
        postcode_pool_service: PostcodePoolService,
        address_service: AddressService,
        counterparty_service: CounterpartyService,
        client_service: ClientService,
        shipment_service: ShipmentService,
        post_office_service: PostOfficeService,
        shipment_tracking_detail_service: ShipmentTrackingDetailService,
    ):
        self.tariff_grid_service = tariff_grid_service
        self.postcode_pool_service = postcode_pool_service
        self.address_service = address_service
        self.counterparty_service = counterparty_service
        self.client_service = client_service
        self.shipment_service = shipment_service
        self.post_office_service = post_office_service
        self.tracking_service = shipment_tracking_detail_service
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self) -> bool:
        """
        Populate the database unless it already holds tariffs.

        Returns:
            True if data was written
        """
        if await self.tariff_grid_service.get_all():
            self.logger.info("Tariff grid already present, skipping database seeding")
            return False

        self.logger.info("Seeding database")
        await self._populate_tariff_grid()

        # Pool with pre-issued barcodes
        pool = await self.postcode_pool_service.save(PostcodePool(postcode="00001", closed=False))
        await self.postcode_pool_service.add_barcode_inner_numbers(
            pool.id,
            [
                BarcodeInnerNumber(inner_number="0000001", status=BarcodeStatus.USED),
                BarcodeInnerNumber(inner_number="0000002", status=BarcodeStatus.RESERVED),
                BarcodeInnerNumber(inner_number="0000003", status=BarcodeStatus.RESERVED),
            ],
        )

        addresses = [
            await self.address_service.save(Address(
                postcode="00001", region="Ternopil", district="Monastiriska", city="Monastiriska",
                street="Sadova", house_number="51", apartment_number="",
            )),
            await self.address_service.save(Address(
                postcode="00002", region="Kiev", district="", city="Kiev",
                street="Khreschatik", house_number="121", apartment_number="37",
            )),
        ]

        # Clients of one counterparty
        counterparty_pool = await self.postcode_pool_service.save(PostcodePool(postcode="00003", closed=False))
        counterparty = await self.counterparty_service.save(
            Counterparty(name="Modna kasta", postcode_pool=counterparty_pool)
        )
        clients = [
            await self.client_service.save(Client(
                name="FOP Ivanov", uniq_registration_number="001",
                address=addresses[0], counterparty=counterparty,
            )),
            await self.client_service.save(Client(
                name="Petrov PP", uniq_registration_number="002",
                address=addresses[1], counterparty=counterparty,
            )),
        ]

        parcels = self._build_parcels()
        shipments = [
            await self.shipment_service.save(Shipment(
                sender=clients[0], recipient=clients[1], delivery_type=DeliveryType.W2W,
                post_pay=Decimal("15"), parcels=parcels[0:2],
            )),
            await self.shipment_service.save(Shipment(
                sender=clients[0], recipient=clients[0], delivery_type=DeliveryType.W2D,
                post_pay=Decimal("20.5"), parcels=parcels[2:4],
            )),
            await self.shipment_service.save(Shipment(
                sender=clients[1], recipient=clients[0], delivery_type=DeliveryType.D2D,
                post_pay=Decimal("13.5"), parcels=parcels[4:6],
            )),
        ]

        office_pool = await self.postcode_pool_service.save(PostcodePool(postcode="00002", closed=False))
        post_office = await self.post_office_service.save(
            PostOffice(name="Lviv post office", address=addresses[0], postcode_pool=office_pool)
        )

        await self.tracking_service.save(ShipmentTrackingDetail(
            shipment_id=shipments[0].id,
            post_office=post_office,
            shipment_status=ShipmentStatus.PREPARED,
            date=datetime.now(timezone.utc),
        ))

        self.logger.info(f"Database seeded with {len(shipments)} shipments")
        return True

    async def _populate_tariff_grid(self) -> None:
        variations = (W2wVariation.TOWN, W2wVariation.REGION, W2wVariation.COUNTRY)
        for weight, length, *prices in TARIFF_ROWS:
            for variation, price in zip(variations, prices):
                await self.tariff_grid_service.save(
                    TariffGrid(weight=weight, length=length, w2w_variation=variation, price=Decimal(price))
                )

    @staticmethod
    def _build_parcels() -> list[Parcel]:
        items = [
            ParcelItem(name=name, quantity=quantity, weight=weight, price=Decimal(price))
            for name, quantity, weight, price in PARCEL_ITEMS
        ]
        return [
            Parcel(
                parcel_items=items[2 * i:2 * i + 2],
                weight=weight,
                length=length,
                width=width,
                height=height,
                declared_price=Decimal(declared_price),
                price=Decimal(price),
            )
            for i, (weight, length, width, height, declared_price, price) in enumerate(PARCELS)
        ]
