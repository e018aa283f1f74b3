"""SQLAlchemy implementation of tariff grid repository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import select

from domain.entities import TariffGrid
from domain.enums import W2wVariation
from domain.repositories import ITariffGridRepository
from infrastructure.database.models import TariffGridModel
from infrastructure.database.repositories.base import SQLAlchemyCrudRepository


class SQLAlchemyTariffGridRepository(
    SQLAlchemyCrudRepository[TariffGridModel, TariffGrid],
    ITariffGridRepository,
):
    """Concrete implementation of ITariffGridRepository using SQLAlchemy."""
    
    model_class = TariffGridModel
    entity_name = "Tariff grid"
    
    def _ordering(self):
        return (TariffGridModel.w2w_variation, TariffGridModel.weight, TariffGridModel.length)
    
    async def get_by_dimension(
        self,
        weight: float,
        length: float,
        w2w_variation: W2wVariation,
    ) -> Optional[TariffGrid]:
        """Find the cheapest row of a zone covering the given parcel size."""
        stmt = (
            select(TariffGridModel)
            .where(
                TariffGridModel.w2w_variation == w2w_variation.value,
                TariffGridModel.weight >= weight,
                TariffGridModel.length >= length,
            )
            .order_by(TariffGridModel.weight, TariffGridModel.length)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def get_last(self, w2w_variation: W2wVariation) -> Optional[TariffGrid]:
        """Find the heaviest row of a zone."""
        stmt = (
            select(TariffGridModel)
            .where(TariffGridModel.w2w_variation == w2w_variation.value)
            .order_by(TariffGridModel.weight.desc(), TariffGridModel.length.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    def _entity_to_model(self, entity: TariffGrid) -> TariffGridModel:
        """Convert domain entity to ORM model."""
        model = TariffGridModel()
        self._update_model_from_entity(model, entity)
        return model
    
    def _update_model_from_entity(self, model: TariffGridModel, entity: TariffGrid) -> None:
        """Update ORM model from domain entity."""
        model.weight = entity.weight
        model.length = entity.length
        model.w2w_variation = entity.w2w_variation.value
        model.price = entity.price
    
    def _model_to_entity(self, model: TariffGridModel) -> TariffGrid:
        """Convert ORM model to domain entity."""
        return TariffGrid(
            id=model.id,
            weight=model.weight,
            length=model.length,
            w2w_variation=W2wVariation(model.w2w_variation),
            price=Decimal(model.price),
        )
