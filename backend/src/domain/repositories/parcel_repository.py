"""Parcel repository interface - Abstract definition."""

from abc import abstractmethod

from domain.entities import Parcel
from domain.repositories.base import ICrudRepository


class IParcelRepository(ICrudRepository[Parcel]):
    """
    Abstract repository interface for Parcel entity.

    Parcels are saved individually only when they already carry a
    ``shipment_id``; otherwise they are persisted together with their shipment.
    """

    @abstractmethod
    async def get_by_shipment(self, shipment_id: int) -> list[Parcel]:
        """
        Retrieve the parcels of a shipment.

        Args:
            shipment_id: Owning shipment ID

        Returns:
            Parcels in insertion order
        """
        pass
