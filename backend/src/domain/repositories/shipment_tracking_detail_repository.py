"""Shipment tracking detail repository interface."""

from abc import abstractmethod

from domain.entities import ShipmentTrackingDetail
from domain.repositories.base import ICrudRepository


class IShipmentTrackingDetailRepository(ICrudRepository[ShipmentTrackingDetail]):
    """Abstract repository interface for ShipmentTrackingDetail entity."""

    @abstractmethod
    async def get_all_by_shipment(self, shipment_id: int) -> list[ShipmentTrackingDetail]:
        """Retrieve the tracking history of a shipment, oldest first."""
        pass
