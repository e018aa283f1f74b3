"""Client and counterparty repository interfaces."""

from abc import abstractmethod

from domain.entities import Client, Counterparty
from domain.repositories.base import ICrudRepository


class IClientRepository(ICrudRepository[Client]):
    """Abstract repository interface for Client entity."""

    @abstractmethod
    async def get_all_by_counterparty(self, counterparty_id: int) -> list[Client]:
        """Retrieve the clients of a counterparty."""
        pass


class ICounterpartyRepository(ICrudRepository[Counterparty]):
    """Abstract repository interface for Counterparty entity."""
