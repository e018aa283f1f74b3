"""Address service."""

from domain.entities import Address
from domain.repositories import IAddressRepository
from application.services.base import CrudService


class AddressService(CrudService[Address]):
    """CRUD over addresses plus zone comparisons used for pricing."""

    entity_name = "address"

    def __init__(self, address_repository: IAddressRepository):
        super().__init__(address_repository)

    def is_located_in_same_town(self, first: Address, second: Address) -> bool:
        return first.is_in_same_town(second)

    def is_located_in_same_region(self, first: Address, second: Address) -> bool:
        return first.is_in_same_region(second)
