"""SQLAlchemy implementation of shipment tracking detail repository."""

from sqlalchemy.orm import selectinload

from domain.entities import ShipmentTrackingDetail
from domain.enums import ShipmentStatus
from domain.repositories import IShipmentTrackingDetailRepository
from infrastructure.database.models import PostOfficeModel, ShipmentTrackingDetailModel
from infrastructure.database.repositories.base import SQLAlchemyCrudRepository
from infrastructure.database.repositories.mappers import entity_id, post_office_to_entity


class SQLAlchemyShipmentTrackingDetailRepository(
    SQLAlchemyCrudRepository[ShipmentTrackingDetailModel, ShipmentTrackingDetail],
    IShipmentTrackingDetailRepository,
):
    """Concrete implementation of IShipmentTrackingDetailRepository using SQLAlchemy."""
    
    model_class = ShipmentTrackingDetailModel
    entity_name = "Shipment tracking detail"
    
    def _load_options(self):
        return (
            selectinload(ShipmentTrackingDetailModel.post_office).selectinload(PostOfficeModel.address),
            selectinload(ShipmentTrackingDetailModel.post_office).selectinload(PostOfficeModel.postcode_pool),
        )
    
    def _ordering(self):
        return (ShipmentTrackingDetailModel.date, ShipmentTrackingDetailModel.id)
    
    async def get_all_by_shipment(self, shipment_id: int) -> list[ShipmentTrackingDetail]:
        """Retrieve the tracking history of a shipment, oldest first."""
        models = await self._fetch_all(ShipmentTrackingDetailModel.shipment_id == shipment_id)
        return [self._model_to_entity(model) for model in models]
    
    def _entity_to_model(self, entity: ShipmentTrackingDetail) -> ShipmentTrackingDetailModel:
        """Convert domain entity to ORM model."""
        model = ShipmentTrackingDetailModel()
        self._update_model_from_entity(model, entity)
        return model
    
    def _update_model_from_entity(
        self,
        model: ShipmentTrackingDetailModel,
        entity: ShipmentTrackingDetail,
    ) -> None:
        """Update ORM model from domain entity."""
        model.shipment_id = entity.shipment_id
        model.post_office_id = entity_id(entity.post_office)
        model.shipment_status = entity.shipment_status.value
        model.date = entity.date
    
    def _model_to_entity(self, model: ShipmentTrackingDetailModel) -> ShipmentTrackingDetail:
        """Convert ORM model to domain entity."""
        return ShipmentTrackingDetail(
            id=model.id,
            shipment_id=model.shipment_id,
            post_office=post_office_to_entity(model.post_office),
            shipment_status=ShipmentStatus(model.shipment_status),
            date=model.date,
        )
