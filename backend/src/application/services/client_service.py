"""Client and counterparty services."""

from typing import Optional

from domain.entities import Client, Counterparty
from domain.repositories import (
    IAddressRepository,
    IClientRepository,
    ICounterpartyRepository,
    IPostcodePoolRepository,
)
from application.services.base import CrudService


class CounterpartyService(CrudService[Counterparty]):
    """CRUD over counterparties; the postcode pool is resolved by id."""

    entity_name = "counterparty"

    def __init__(
        self,
        counterparty_repository: ICounterpartyRepository,
        postcode_pool_repository: IPostcodePoolRepository,
    ):
        super().__init__(counterparty_repository)
        self.postcode_pool_repo = postcode_pool_repository

    async def _resolve_references(self, entity: Counterparty) -> bool:
        found, pool = await self._reload(self.postcode_pool_repo, entity.postcode_pool, "postcode pool")
        entity.postcode_pool = pool
        return found


class ClientService(CrudService[Client]):
    """CRUD over clients; address and counterparty are resolved by id."""

    entity_name = "client"

    def __init__(
        self,
        client_repository: IClientRepository,
        address_repository: IAddressRepository,
        counterparty_repository: ICounterpartyRepository,
    ):
        super().__init__(client_repository)
        self.address_repo = address_repository
        self.counterparty_repo = counterparty_repository

    async def get_all_by_counterparty_id(self, counterparty_id: int) -> Optional[list[Client]]:
        """
        Get the clients of a counterparty.

        Returns:
            Clients, or None if the counterparty doesn't exist
        """
        counterparty = await self.counterparty_repo.get_by_id(counterparty_id)
        if counterparty is None:
            self.logger.debug(f"Can't get client list by counterparty. Counterparty {counterparty_id} doesn't exist")
            return None
        self.logger.info(f"Getting all clients by counterparty {counterparty}")
        return await self.repository.get_all_by_counterparty(counterparty_id)

    async def _resolve_references(self, entity: Client) -> bool:
        found_address, address = await self._reload(self.address_repo, entity.address, "address")
        found_counterparty, counterparty = await self._reload(
            self.counterparty_repo, entity.counterparty, "counterparty"
        )
        entity.address = address
        entity.counterparty = counterparty
        return found_address and found_counterparty
