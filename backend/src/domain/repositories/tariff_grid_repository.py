"""Tariff grid repository interface."""

from abc import abstractmethod
from typing import Optional

from domain.entities import TariffGrid
from domain.enums import W2wVariation
from domain.repositories.base import ICrudRepository


class ITariffGridRepository(ICrudRepository[TariffGrid]):
    """Abstract repository interface for TariffGrid rows."""

    @abstractmethod
    async def get_by_dimension(
        self,
        weight: float,
        length: float,
        w2w_variation: W2wVariation,
    ) -> Optional[TariffGrid]:
        """
        Find the cheapest row of a zone covering the given parcel size.

        Args:
            weight: Parcel weight in kilograms
            length: Parcel length in centimetres
            w2w_variation: Distance zone

        Returns:
            Smallest covering row, None if the parcel exceeds every row
        """
        pass

    @abstractmethod
    async def get_last(self, w2w_variation: W2wVariation) -> Optional[TariffGrid]:
        """
        Find the heaviest row of a zone.

        Returns:
            Row with the largest weight, None if the zone has no rows
        """
        pass
