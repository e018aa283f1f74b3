"""Tariff grid service."""

from typing import Optional

from domain.entities import TariffGrid
from domain.enums import W2wVariation
from domain.repositories import ITariffGridRepository
from application.services.base import CrudService


class TariffGridService(CrudService[TariffGrid]):
    """CRUD over the price table and lookups used by parcel pricing."""

    entity_name = "tariff grid"

    def __init__(self, tariff_grid_repository: ITariffGridRepository):
        super().__init__(tariff_grid_repository)

    async def get_by_dimension(
        self,
        weight: float,
        length: float,
        w2w_variation: W2wVariation,
    ) -> Optional[TariffGrid]:
        self.logger.info(f"Getting tariff grid by weight {weight}, length {length}, variation {w2w_variation}")
        return await self.repository.get_by_dimension(weight, length, w2w_variation)

    async def get_last(self, w2w_variation: W2wVariation) -> Optional[TariffGrid]:
        self.logger.info(f"Getting last tariff grid for variation {w2w_variation}")
        return await self.repository.get_last(w2w_variation)
