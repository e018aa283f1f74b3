"""Address repository interface."""

from domain.entities import Address
from domain.repositories.base import ICrudRepository


class IAddressRepository(ICrudRepository[Address]):
    """Abstract repository interface for Address entity."""
