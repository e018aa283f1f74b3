"""SQLAlchemy implementations of client and counterparty repositories."""

from sqlalchemy.orm import selectinload

from domain.entities import Client, Counterparty
from domain.repositories import IClientRepository, ICounterpartyRepository
from infrastructure.database.models import ClientModel, CounterpartyModel
from infrastructure.database.repositories.base import SQLAlchemyCrudRepository
from infrastructure.database.repositories.mappers import (
    client_to_entity,
    counterparty_to_entity,
    entity_id,
)


def client_load_options(relationship):
    """Loader options for a client reached through ``relationship``."""
    return (
        selectinload(relationship).selectinload(ClientModel.address),
        selectinload(relationship)
        .selectinload(ClientModel.counterparty)
        .selectinload(CounterpartyModel.postcode_pool),
    )


class SQLAlchemyCounterpartyRepository(
    SQLAlchemyCrudRepository[CounterpartyModel, Counterparty],
    ICounterpartyRepository,
):
    """Concrete implementation of ICounterpartyRepository using SQLAlchemy."""
    
    model_class = CounterpartyModel
    entity_name = "Counterparty"
    
    def _load_options(self):
        return (selectinload(CounterpartyModel.postcode_pool),)
    
    def _entity_to_model(self, entity: Counterparty) -> CounterpartyModel:
        """Convert domain entity to ORM model."""
        model = CounterpartyModel()
        self._update_model_from_entity(model, entity)
        return model
    
    def _update_model_from_entity(self, model: CounterpartyModel, entity: Counterparty) -> None:
        """Update ORM model from domain entity."""
        model.name = entity.name
        model.description = entity.description or ""
        model.postcode_pool_id = entity_id(entity.postcode_pool)
    
    def _model_to_entity(self, model: CounterpartyModel) -> Counterparty:
        """Convert ORM model to domain entity."""
        return counterparty_to_entity(model)


class SQLAlchemyClientRepository(SQLAlchemyCrudRepository[ClientModel, Client], IClientRepository):
    """Concrete implementation of IClientRepository using SQLAlchemy."""
    
    model_class = ClientModel
    entity_name = "Client"
    
    def _load_options(self):
        return (
            selectinload(ClientModel.address),
            selectinload(ClientModel.counterparty).selectinload(CounterpartyModel.postcode_pool),
        )
    
    async def get_all_by_counterparty(self, counterparty_id: int) -> list[Client]:
        """Retrieve the clients of a counterparty."""
        models = await self._fetch_all(ClientModel.counterparty_id == counterparty_id)
        return [self._model_to_entity(model) for model in models]
    
    def _entity_to_model(self, entity: Client) -> ClientModel:
        """Convert domain entity to ORM model."""
        model = ClientModel()
        self._update_model_from_entity(model, entity)
        return model
    
    def _update_model_from_entity(self, model: ClientModel, entity: Client) -> None:
        """Update ORM model from domain entity."""
        model.name = entity.name
        model.uniq_registration_number = entity.uniq_registration_number
        model.phone_number = entity.phone_number
        model.address_id = entity_id(entity.address)
        model.counterparty_id = entity_id(entity.counterparty)
    
    def _model_to_entity(self, model: ClientModel) -> Client:
        """Convert ORM model to domain entity."""
        return client_to_entity(model)
