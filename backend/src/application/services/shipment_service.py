"""Shipment service: CRUD orchestration and price aggregation."""

from decimal import Decimal
from typing import Any, Optional

from domain.entities import Parcel, Shipment
from domain.enums import BarcodeStatus
from domain.repositories import IClientRepository, IShipmentRepository
from application.services.base import copy_properties
from application.services.parcel_service import ParcelService
from application.services.postcode_pool_service import BarcodeInnerNumberService
from infrastructure.config import get_logger


class ShipmentService:
    """
    Orchestrates the shipment lifecycle.
    
    A saved shipment always carries a barcode issued from the sender's
    counterparty pool, and its price equals the sum of its parcel prices.
    """

    def __init__(
        self,
        shipment_repository: IShipmentRepository,
        client_repository: IClientRepository,
        barcode_inner_number_service: BarcodeInnerNumberService,
        parcel_service: ParcelService,
    ):
        self.shipment_repo = shipment_repository
        self.client_repo = client_repository
        self.barcode_service = barcode_inner_number_service
        self.parcel_service = parcel_service
        self.logger = get_logger(self.__class__.__name__)

    async def get_all(self) -> list[Shipment]:
        self.logger.info("Getting all shipments")
        return await self.shipment_repo.get_all()

    async def get_all_by_client_id(self, client_id: int) -> Optional[list[Shipment]]:
        """
        Get the shipments sent by a client.

        Returns:
            Shipments, or None if the client doesn't exist
        """
        client = await self.client_repo.get_by_id(client_id)
        if client is None:
            self.logger.debug(f"Can't get shipment list by client. Client {client_id} doesn't exist")
            return None
        self.logger.info(f"Getting all shipments by client {client}")
        return await self.shipment_repo.get_all_by_client(client_id)

    async def get_by_id(self, shipment_id: int) -> Optional[Shipment]:
        self.logger.info(f"Getting shipment by id {shipment_id}")
        return await self.shipment_repo.get_by_id(shipment_id)

    async def save(self, shipment: Shipment) -> Optional[Shipment]:
        """
        Save a new shipment.

        ``shipment.sender`` and ``shipment.recipient`` only need their ids;
        both are reloaded. A barcode is issued from the sender's counterparty
        pool, and every parcel is priced.

        Returns:
            Saved shipment, or None if sender, recipient or the sender's
            postcode pool doesn't exist

        Raises:
            PostcodePoolClosedError: If the sender's pool can't issue barcodes
            TariffNotFoundError: If a parcel can't be priced
        """
        sender = await self._load_client(shipment.sender)
        recipient = await self._load_client(shipment.recipient)
        if sender is None or recipient is None:
            self.logger.debug("Can't save shipment. Sender or recipient doesn't exist")
            return None
        if sender.counterparty is None or sender.counterparty.postcode_pool is None:
            self.logger.debug(f"Can't save shipment. Sender {sender} has no postcode pool")
            return None

        postcode_pool = sender.counterparty.postcode_pool
        shipment.barcode = await self.barcode_service.generate_barcode_inner_number(
            postcode_pool, BarcodeStatus.USED
        )
        shipment.sender = sender
        shipment.recipient = recipient
        self.logger.info(f"Saving shipment with assigned barcode {shipment.barcode.inner_number}")

        if shipment.parcels is None:
            shipment.parcels = []
        await self._price_parcels(shipment)
        shipment.attach_parcels()
        shipment.price = self.calculate_price(shipment)

        return await self.shipment_repo.save(shipment)

    async def update(self, shipment_id: int, changes: dict[str, Any]) -> Optional[Shipment]:
        """
        Merge incoming attributes onto a stored shipment and reprice it.

        Returns:
            Updated shipment, or None if it (or a new sender/recipient) doesn't exist
        """
        target = await self.shipment_repo.get_by_id(shipment_id)
        if target is None:
            self.logger.debug(f"Can't update shipment. Shipment doesn't exist {shipment_id}")
            return None

        copy_properties(target, changes, self.logger)
        target.sender = await self._load_client(target.sender)
        target.recipient = await self._load_client(target.recipient)
        if target.sender is None or target.recipient is None:
            self.logger.debug(f"Can't update shipment {shipment_id}. Sender or recipient doesn't exist")
            return None

        target.id = shipment_id
        await self._price_parcels(target)
        target.attach_parcels()
        target.price = self.calculate_price(target)
        self.logger.info(f"Updating shipment {target}")
        return await self.shipment_repo.update(target)

    async def delete(self, shipment_id: int) -> bool:
        shipment = await self.shipment_repo.get_by_id(shipment_id)
        if shipment is None:
            self.logger.debug(f"Can't delete shipment. Shipment doesn't exist {shipment_id}")
            return False
        self.logger.info(f"Deleting shipment {shipment}")
        await self.shipment_repo.delete(shipment)
        return True

    async def add_parcels(self, shipment_id: int, parcels: list[Parcel]) -> bool:
        """
        Put new parcels in front of a shipment's parcel list.

        Returns:
            False if the shipment doesn't exist
        """
        shipment = await self.shipment_repo.get_by_id(shipment_id)
        if shipment is None:
            self.logger.debug(f"Can't add parcels list to shipment. Shipment doesn't exist {shipment_id}")
            return False

        shipment.parcels = list(parcels) + list(shipment.parcels or [])
        await self._price_parcels(shipment, parcels)
        shipment.attach_parcels()
        shipment.price = self.calculate_price(shipment)
        self.logger.info(f"Adding parcels list to shipment {shipment}")
        await self.shipment_repo.update(shipment)
        return True

    async def remove_parcel(self, shipment_id: int, parcel_id: int) -> bool:
        """
        Remove one parcel from a shipment and recompute the total.

        Returns:
            False if the shipment doesn't exist or doesn't hold the parcel
        """
        shipment = await self.shipment_repo.get_by_id(shipment_id)
        if shipment is None:
            self.logger.debug(f"Can't remove parcel. Shipment doesn't exist {shipment_id}")
            return False

        remaining = [parcel for parcel in shipment.parcels or [] if parcel.id != parcel_id]
        if len(remaining) == len(shipment.parcels or []):
            self.logger.debug(f"Can't remove parcel. Parcel {parcel_id} isn't in shipment {shipment_id}")
            return False

        shipment.parcels = remaining
        shipment.price = self.calculate_price(shipment)
        self.logger.info(f"Removing parcel {parcel_id} from shipment {shipment}")
        await self.shipment_repo.update(shipment)
        return True

    def calculate_price(self, shipment: Shipment) -> Decimal:
        """Sum the parcel prices of a shipment."""
        if shipment.parcels is None:
            self.logger.info("Can't calculate price. Parcels are empty")
            return Decimal("0")
        return sum((Decimal(parcel.price) for parcel in shipment.parcels), Decimal("0"))

    async def _price_parcels(self, shipment: Shipment, parcels: Optional[list[Parcel]] = None) -> None:
        for parcel in shipment.parcels if parcels is None else parcels:
            await self.parcel_service.calculate_price(parcel, shipment)

    async def _load_client(self, client):
        if client is None or client.id is None:
            return None
        return await self.client_repo.get_by_id(client.id)
