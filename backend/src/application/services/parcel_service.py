"""Parcel service: reads and tariff-based pricing."""

from decimal import Decimal
from typing import Optional

from domain.entities import Parcel, Shipment
from domain.enums import DeliveryType, W2wVariation
from domain.exceptions import TariffNotFoundError
from domain.repositories import IParcelRepository, ITariffGridRepository
from application.services.address_service import AddressService
from infrastructure.config import get_logger

# Charged once per leg served at the client's door
DOOR_DELIVERY_SURCHARGE = Decimal("9")


class ParcelService:
    """
    Prices parcels against the tariff grid.

    Parcels are created, changed and removed through their shipment, so
    this service only reads them and computes their price.
    """

    def __init__(
        self,
        parcel_repository: IParcelRepository,
        tariff_grid_repository: ITariffGridRepository,
        address_service: AddressService,
    ):
        self.parcel_repo = parcel_repository
        self.tariff_grid_repo = tariff_grid_repository
        self.address_service = address_service
        self.logger = get_logger(self.__class__.__name__)

    async def get_all(self) -> list[Parcel]:
        self.logger.info("Getting all parcels")
        return await self.parcel_repo.get_all()

    async def get_by_id(self, parcel_id: int) -> Optional[Parcel]:
        self.logger.info(f"Getting parcel by id {parcel_id}")
        return await self.parcel_repo.get_by_id(parcel_id)

    async def get_by_shipment(self, shipment_id: int) -> list[Parcel]:
        self.logger.info(f"Getting parcels of shipment {shipment_id}")
        return await self.parcel_repo.get_by_shipment(shipment_id)

    async def calculate_price(self, parcel: Parcel, shipment: Shipment) -> Decimal:
        """
        Price a parcel and store the price on it.

        The heaviest row of the shipment's zone prices oversized parcels;
        smaller parcels get the smallest row covering their weight and length.
        Door pickup and door delivery each add a fixed surcharge.

        Args:
            parcel: Parcel to price
            shipment: Shipment providing addresses and delivery type

        Returns:
            Parcel price

        Raises:
            TariffNotFoundError: If the zone has no tariff rows
        """
        variation = self.get_w2w_variation(shipment)
        tariff = await self.tariff_grid_repo.get_last(variation)
        if tariff is None:
            raise TariffNotFoundError(
                f"No tariff grid for variation {variation}",
                {"w2w_variation": variation.value},
            )

        if parcel.weight < tariff.weight and parcel.length < tariff.length:
            covering = await self.tariff_grid_repo.get_by_dimension(parcel.weight, parcel.length, variation)
            if covering is not None:
                tariff = covering

        price = tariff.price + self.get_surcharges(shipment.delivery_type)
        parcel.price = price
        self.logger.info(f"Calculated price {price} for parcel {parcel} ({variation}, {shipment.delivery_type})")
        return price

    def get_w2w_variation(self, shipment: Shipment) -> W2wVariation:
        """Pick the tariff zone from the sender and recipient addresses."""
        sender_address = shipment.sender.address if shipment.sender else None
        recipient_address = shipment.recipient.address if shipment.recipient else None
        if sender_address is None or recipient_address is None:
            return W2wVariation.COUNTRY
        if self.address_service.is_located_in_same_town(sender_address, recipient_address):
            return W2wVariation.TOWN
        if self.address_service.is_located_in_same_region(sender_address, recipient_address):
            return W2wVariation.REGION
        return W2wVariation.COUNTRY

    @staticmethod
    def get_surcharges(delivery_type: DeliveryType) -> Decimal:
        return DOOR_DELIVERY_SURCHARGE * delivery_type.door_legs
