"""SQLAlchemy implementation of shipment repository."""

from decimal import Decimal

from sqlalchemy.orm import selectinload

from domain.entities import Shipment
from domain.enums import DeliveryType
from domain.repositories import IShipmentRepository
from infrastructure.database.models import ParcelModel, ShipmentModel
from infrastructure.database.repositories.base import SQLAlchemyCrudRepository
from infrastructure.database.repositories.mappers import (
    barcode_to_entity,
    client_to_entity,
    entity_id,
    parcel_to_entity,
    parcel_to_model,
    update_parcel_model,
)
from infrastructure.database.repositories.sqlalchemy_client_repository import client_load_options


class SQLAlchemyShipmentRepository(SQLAlchemyCrudRepository[ShipmentModel, Shipment], IShipmentRepository):
    """
    Concrete implementation of IShipmentRepository using SQLAlchemy.
    
    Parcels and their items are stored as part of the shipment aggregate.
    """
    
    model_class = ShipmentModel
    entity_name = "Shipment"
    
    def _load_options(self):
        return (
            *client_load_options(ShipmentModel.sender),
            *client_load_options(ShipmentModel.recipient),
            selectinload(ShipmentModel.barcode),
            selectinload(ShipmentModel.parcels).selectinload(ParcelModel.parcel_items),
        )
    
    async def get_all_by_client(self, client_id: int) -> list[Shipment]:
        """Retrieve shipments sent by a client."""
        models = await self._fetch_all(ShipmentModel.sender_id == client_id)
        return [self._model_to_entity(model) for model in models]
    
    def _entity_to_model(self, entity: Shipment) -> ShipmentModel:
        """Convert domain entity to ORM model."""
        model = ShipmentModel()
        self._update_model_from_entity(model, entity)
        return model
    
    def _update_model_from_entity(self, model: ShipmentModel, entity: Shipment) -> None:
        """Update ORM model from domain entity, synchronizing parcels by id."""
        model.sender_id = entity_id(entity.sender)
        model.recipient_id = entity_id(entity.recipient)
        model.barcode_id = entity_id(entity.barcode)
        model.delivery_type = entity.delivery_type.value
        model.price = entity.price
        model.post_pay = entity.post_pay
        model.description = entity.description or ""
        
        existing = {parcel.id: parcel for parcel in model.parcels if parcel.id is not None}
        parcels = []
        for position, parcel in enumerate(entity.parcels or []):
            parcel_model = existing.get(parcel.id) if parcel.id is not None else None
            if parcel_model is None:
                parcel_model = parcel_to_model(parcel, position)
            else:
                update_parcel_model(parcel_model, parcel)
                parcel_model.position = position
            parcels.append(parcel_model)
        model.parcels = parcels
    
    def _model_to_entity(self, model: ShipmentModel) -> Shipment:
        """Convert ORM model to domain entity."""
        return Shipment(
            id=model.id,
            sender=client_to_entity(model.sender),
            recipient=client_to_entity(model.recipient),
            delivery_type=DeliveryType(model.delivery_type),
            price=Decimal(model.price),
            post_pay=Decimal(model.post_pay),
            description=model.description,
            barcode=barcode_to_entity(model.barcode),
            parcels=[parcel_to_entity(parcel) for parcel in model.parcels],
        )
