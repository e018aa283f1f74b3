"""SQLAlchemy implementation of address repository."""

from domain.entities import Address
from domain.repositories import IAddressRepository
from infrastructure.database.models import AddressModel
from infrastructure.database.repositories.base import SQLAlchemyCrudRepository
from infrastructure.database.repositories.mappers import address_to_entity


class SQLAlchemyAddressRepository(SQLAlchemyCrudRepository[AddressModel, Address], IAddressRepository):
    """Concrete implementation of IAddressRepository using SQLAlchemy."""
    
    model_class = AddressModel
    entity_name = "Address"
    
    def _entity_to_model(self, entity: Address) -> AddressModel:
        """Convert domain entity to ORM model."""
        model = AddressModel()
        self._update_model_from_entity(model, entity)
        return model
    
    def _update_model_from_entity(self, model: AddressModel, entity: Address) -> None:
        """Update ORM model from domain entity."""
        model.postcode = entity.postcode
        model.region = entity.region
        model.district = entity.district
        model.city = entity.city
        model.street = entity.street
        model.house_number = entity.house_number
        model.apartment_number = entity.apartment_number
    
    def _model_to_entity(self, model: AddressModel) -> Address:
        """Convert ORM model to domain entity."""
        return address_to_entity(model)
