"""Pytest configuration and shared fixtures."""

from decimal import Decimal
from types import SimpleNamespace

import pytest
import pytest_asyncio

from application.services import (
    AddressService,
    BarcodeInnerNumberService,
    ClientService,
    CounterpartyService,
    ParcelService,
    PostcodePoolService,
    PostOfficeService,
    ShipmentService,
    ShipmentTrackingDetailService,
    TariffGridService,
)
from application.use_cases import InitDbUseCase
from application.use_cases.init_db import TARIFF_ROWS
from domain.entities import Address, Client, Counterparty, PostcodePool, TariffGrid
from domain.enums import W2wVariation
from fakes import (
    FakeAddressRepository,
    FakeBarcodeInnerNumberRepository,
    FakeClientRepository,
    FakeCounterpartyRepository,
    FakeParcelRepository,
    FakePostcodePoolRepository,
    FakePostOfficeRepository,
    FakeShipmentRepository,
    FakeShipmentTrackingDetailRepository,
    FakeTariffGridRepository,
)


@pytest.fixture
def repositories():
    """Fresh in-memory repositories for one test."""
    pools = FakePostcodePoolRepository()
    shipments = FakeShipmentRepository()
    return SimpleNamespace(
        addresses=FakeAddressRepository(),
        pools=pools,
        barcodes=FakeBarcodeInnerNumberRepository(pools),
        counterparties=FakeCounterpartyRepository(),
        clients=FakeClientRepository(),
        post_offices=FakePostOfficeRepository(),
        tariffs=FakeTariffGridRepository(),
        shipments=shipments,
        parcels=FakeParcelRepository(shipments),
        tracking=FakeShipmentTrackingDetailRepository(),
    )


@pytest.fixture
def services(repositories):
    """Application services wired to the in-memory repositories."""
    r = repositories
    address_service = AddressService(r.addresses)
    barcode_service = BarcodeInnerNumberService(r.barcodes, r.pools)
    parcel_service = ParcelService(r.parcels, r.tariffs, address_service)
    return SimpleNamespace(
        addresses=address_service,
        pools=PostcodePoolService(r.pools),
        barcodes=barcode_service,
        counterparties=CounterpartyService(r.counterparties, r.pools),
        clients=ClientService(r.clients, r.addresses, r.counterparties),
        post_offices=PostOfficeService(r.post_offices, r.addresses, r.pools),
        tariffs=TariffGridService(r.tariffs),
        parcels=parcel_service,
        shipments=ShipmentService(r.shipments, r.clients, barcode_service, parcel_service),
        tracking=ShipmentTrackingDetailService(r.tracking, r.shipments, r.post_offices),
    )


@pytest.fixture
def init_db_use_case(services):
    return InitDbUseCase(
        tariff_grid_service=services.tariffs,
        postcode_pool_service=services.pools,
        address_service=services.addresses,
        counterparty_service=services.counterparties,
        client_service=services.clients,
        shipment_service=services.shipments,
        post_office_service=services.post_offices,
        shipment_tracking_detail_service=services.tracking,
    )


@pytest_asyncio.fixture
async def tariff_grid(repositories):
    """The standard 27 row tariff grid."""
    variations = (W2wVariation.TOWN, W2wVariation.REGION, W2wVariation.COUNTRY)
    for weight, length, *prices in TARIFF_ROWS:
        for variation, price in zip(variations, prices):
            await repositories.tariffs.save(
                TariffGrid(weight=weight, length=length, w2w_variation=variation, price=Decimal(price))
            )
    return repositories.tariffs


@pytest_asyncio.fixture
async def world(repositories, tariff_grid):
    """
    Three clients over the standard tariff grid.

    Ivanov (Monastiriska, Ternopil region) and Petrov (Kiev) belong to the
    counterparty with the empty pool ``00003``. Sydorenko lives in Ternopil
    city and has no counterparty.
    """
    r = repositories
    pool = await r.pools.save(PostcodePool(postcode="00003"))
    counterparty = await r.counterparties.save(Counterparty(name="Modna kasta", postcode_pool=pool))
    monastiriska = await r.addresses.save(Address(
        postcode="48300", region="Ternopil", district="Monastiriska", city="Monastiriska",
        street="Sadova", house_number="51",
    ))
    kiev = await r.addresses.save(Address(
        postcode="01001", region="Kiev", city="Kiev", street="Khreschatik",
        house_number="121", apartment_number="37",
    ))
    ternopil = await r.addresses.save(Address(
        postcode="46001", region="ternopil ", city="Ternopil", street="Ruska", house_number="1",
    ))
    ivanov = await r.clients.save(Client(
        name="FOP Ivanov", uniq_registration_number="001", address=monastiriska, counterparty=counterparty,
    ))
    petrov = await r.clients.save(Client(
        name="Petrov PP", uniq_registration_number="002", address=kiev, counterparty=counterparty,
    ))
    sydorenko = await r.clients.save(Client(
        name="Sydorenko", uniq_registration_number="003", address=ternopil,
    ))
    return SimpleNamespace(
        pool=pool,
        counterparty=counterparty,
        ivanov=ivanov,
        petrov=petrov,
        sydorenko=sydorenko,
    )

