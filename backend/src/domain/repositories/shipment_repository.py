"""Shipment repository interface - Abstract definition."""

from abc import abstractmethod

from domain.entities import Shipment
from domain.repositories.base import ICrudRepository


class IShipmentRepository(ICrudRepository[Shipment]):
    """Abstract repository interface for Shipment aggregate (with its parcels)."""

    @abstractmethod
    async def get_all_by_client(self, client_id: int) -> list[Shipment]:
        """
        Retrieve shipments sent by a client.

        Args:
            client_id: Sender client ID

        Returns:
            Shipments of the client
        """
        pass
