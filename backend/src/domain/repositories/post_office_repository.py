"""Post office repository interface."""

from domain.entities import PostOffice
from domain.repositories.base import ICrudRepository


class IPostOfficeRepository(ICrudRepository[PostOffice]):
    """Abstract repository interface for PostOffice entity."""
