"""SQLAlchemy implementation of parcel repository."""

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from domain.entities import Parcel
from domain.repositories import IParcelRepository
from infrastructure.database.models import ParcelModel
from infrastructure.database.repositories.base import SQLAlchemyCrudRepository
from infrastructure.database.repositories.mappers import (
    parcel_to_entity,
    parcel_to_model,
    update_parcel_model,
)


class SQLAlchemyParcelRepository(SQLAlchemyCrudRepository[ParcelModel, Parcel], IParcelRepository):
    """Concrete implementation of IParcelRepository using SQLAlchemy."""
    
    model_class = ParcelModel
    entity_name = "Parcel"
    
    def _load_options(self):
        return (selectinload(ParcelModel.parcel_items),)
    
    def _ordering(self):
        return (ParcelModel.shipment_id, ParcelModel.position, ParcelModel.id)
    
    async def get_by_shipment(self, shipment_id: int) -> list[Parcel]:
        """Retrieve the parcels of a shipment."""
        models = await self._fetch_all(ParcelModel.shipment_id == shipment_id)
        return [self._model_to_entity(model) for model in models]
    
    async def save(self, entity: Parcel) -> Parcel:
        """Create a parcel at the end of its shipment's parcel list."""
        if entity.shipment_id is None:
            raise ValueError("Parcel must belong to a shipment")
        
        stmt = select(func.max(ParcelModel.position)).where(ParcelModel.shipment_id == entity.shipment_id)
        last_position = (await self.session.execute(stmt)).scalar()
        
        model = parcel_to_model(entity, 0 if last_position is None else last_position + 1)
        model.shipment_id = entity.shipment_id
        self.session.add(model)
        await self.session.flush()
        model = await self._fetch(model.id, refresh=True)
        return self._model_to_entity(model)
    
    def _entity_to_model(self, entity: Parcel) -> ParcelModel:
        """Convert domain entity to ORM model."""
        model = parcel_to_model(entity)
        model.shipment_id = entity.shipment_id
        return model
    
    def _update_model_from_entity(self, model: ParcelModel, entity: Parcel) -> None:
        """Update ORM model from domain entity."""
        update_parcel_model(model, entity)
    
    def _model_to_entity(self, model: ParcelModel) -> Parcel:
        """Convert ORM model to domain entity."""
        return parcel_to_entity(model)
