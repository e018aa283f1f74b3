"""SQLAlchemy implementation of post office repository."""

from sqlalchemy.orm import selectinload

from domain.entities import PostOffice
from domain.repositories import IPostOfficeRepository
from infrastructure.database.models import PostOfficeModel
from infrastructure.database.repositories.base import SQLAlchemyCrudRepository
from infrastructure.database.repositories.mappers import entity_id, post_office_to_entity


class SQLAlchemyPostOfficeRepository(
    SQLAlchemyCrudRepository[PostOfficeModel, PostOffice],
    IPostOfficeRepository,
):
    """Concrete implementation of IPostOfficeRepository using SQLAlchemy."""
    
    model_class = PostOfficeModel
    entity_name = "Post office"
    
    def _load_options(self):
        return (
            selectinload(PostOfficeModel.address),
            selectinload(PostOfficeModel.postcode_pool),
        )
    
    def _entity_to_model(self, entity: PostOffice) -> PostOfficeModel:
        """Convert domain entity to ORM model."""
        model = PostOfficeModel()
        self._update_model_from_entity(model, entity)
        return model
    
    def _update_model_from_entity(self, model: PostOfficeModel, entity: PostOffice) -> None:
        """Update ORM model from domain entity."""
        model.name = entity.name
        model.address_id = entity_id(entity.address)
        model.postcode_pool_id = entity_id(entity.postcode_pool)
    
    def _model_to_entity(self, model: PostOfficeModel) -> PostOffice:
        """Convert ORM model to domain entity."""
        return post_office_to_entity(model)
