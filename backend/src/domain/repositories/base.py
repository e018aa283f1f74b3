"""Generic repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ICrudRepository(ABC, Generic[T]):
    """
    Abstract CRUD contract shared by all aggregate repositories.

    Concrete implementations live in the infrastructure layer and work
    inside the caller's transaction; they flush but never commit.
    """

    @abstractmethod
    async def get_all(self) -> list[T]:
        """
        Retrieve all records.

        Returns:
            List of entities, possibly empty
        """
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Retrieve a record by ID.

        Args:
            entity_id: Record identifier

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, entity: T) -> T:
        """
        Persist a new record.

        Args:
            entity: Entity without an id

        Returns:
            Saved entity carrying its generated id
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """
        Persist changes of an existing record.

        Args:
            entity: Entity with the id of an existing record

        Returns:
            Updated entity

        Raises:
            ValueError: If no record has the entity's id
        """
        pass

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """
        Delete a record.

        Args:
            entity: Entity with the id of an existing record
        """
        pass
