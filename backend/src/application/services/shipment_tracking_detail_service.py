"""Shipment tracking detail service."""

from typing import Optional

from domain.entities import ShipmentTrackingDetail
from domain.repositories import (
    IPostOfficeRepository,
    IShipmentRepository,
    IShipmentTrackingDetailRepository,
)
from application.services.base import CrudService


class ShipmentTrackingDetailService(CrudService[ShipmentTrackingDetail]):
    """Records and reads the status history of shipments."""

    entity_name = "shipment tracking detail"

    def __init__(
        self,
        tracking_detail_repository: IShipmentTrackingDetailRepository,
        shipment_repository: IShipmentRepository,
        post_office_repository: IPostOfficeRepository,
    ):
        super().__init__(tracking_detail_repository)
        self.shipment_repo = shipment_repository
        self.post_office_repo = post_office_repository

    async def get_all_by_shipment_id(self, shipment_id: int) -> Optional[list[ShipmentTrackingDetail]]:
        """
        Get the tracking history of a shipment, oldest first.

        Returns:
            Tracking details, or None if the shipment doesn't exist
        """
        if await self.shipment_repo.get_by_id(shipment_id) is None:
            self.logger.debug(f"Can't get tracking details. Shipment {shipment_id} doesn't exist")
            return None
        self.logger.info(f"Getting tracking details of shipment {shipment_id}")
        return await self.repository.get_all_by_shipment(shipment_id)

    async def _resolve_references(self, entity: ShipmentTrackingDetail) -> bool:
        if entity.shipment_id is None or await self.shipment_repo.get_by_id(entity.shipment_id) is None:
            self.logger.debug(f"Can't resolve shipment {entity.shipment_id} for {self.entity_name}")
            return False
        found, post_office = await self._reload(self.post_office_repo, entity.post_office, "post office")
        entity.post_office = post_office
        return found
