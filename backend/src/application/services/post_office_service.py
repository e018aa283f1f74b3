"""Post office service."""

from domain.entities import PostOffice
from domain.repositories import IAddressRepository, IPostcodePoolRepository, IPostOfficeRepository
from application.services.base import CrudService


class PostOfficeService(CrudService[PostOffice]):
    entity_name = "post office"

    def __init__(
        self,
        post_office_repository: IPostOfficeRepository,
        address_repository: IAddressRepository,
        postcode_pool_repository: IPostcodePoolRepository,
    ):
        super().__init__(post_office_repository)
        self.address_repo = address_repository
        self.postcode_pool_repo = postcode_pool_repository

    async def _resolve_references(self, entity: PostOffice) -> bool:
        found_address, address = await self._reload(self.address_repo, entity.address, "address")
        found_pool, pool = await self._reload(self.postcode_pool_repo, entity.postcode_pool, "postcode pool")
        entity.address = address
        entity.postcode_pool = pool
        return found_address and found_pool
