"""Shared behaviour of application services."""

from dataclasses import fields, is_dataclass
from typing import Any, Generic, Optional, TypeVar

from domain.repositories import ICrudRepository
from infrastructure.config import get_logger

T = TypeVar("T")


def copy_properties(target: Any, source: dict[str, Any], logger) -> list[str]:
    """
    Merge incoming attribute values onto a persisted entity.

    The ``id`` is never copied. Names that are not fields of the target are
    logged and skipped.

    Args:
        target: Dataclass entity to update in place
        source: Attribute names mapped to new values
        logger: Logger receiving copy errors

    Returns:
        Names of the attributes that were copied
    """
    known = {f.name for f in fields(target)} if is_dataclass(target) else set(vars(target))
    copied = []
    for name, value in source.items():
        if name == "id":
            continue
        if name not in known:
            logger.error(
                f"Can't copy property '{name}' to {type(target).__name__}: no such attribute"
            )
            continue
        setattr(target, name, value)
        copied.append(name)
    return copied


class CrudService(Generic[T]):
    """
    CRUD orchestration over one repository.

    Missing entities are reported with ``None`` (reads, saves, updates) or
    ``False`` (deletes) rather than exceptions.
    """

    entity_name = "entity"

    def __init__(self, repository: ICrudRepository[T]):
        self.repository = repository
        self.logger = get_logger(self.__class__.__name__)

    async def get_all(self) -> list[T]:
        self.logger.info(f"Getting all {self.entity_name}s")
        return await self.repository.get_all()

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        self.logger.info(f"Getting {self.entity_name} by id {entity_id}")
        return await self.repository.get_by_id(entity_id)

    async def save(self, entity: T) -> Optional[T]:
        if not await self._resolve_references(entity):
            return None
        self.logger.info(f"Saving {self.entity_name} {entity}")
        return await self.repository.save(entity)

    async def update(self, entity_id: int, changes: dict[str, Any]) -> Optional[T]:
        target = await self.repository.get_by_id(entity_id)
        if target is None:
            self.logger.debug(f"Can't update {self.entity_name}. {self.entity_name} doesn't exist {entity_id}")
            return None

        copy_properties(target, changes, self.logger)
        if not await self._resolve_references(target):
            return None
        target.id = entity_id
        self.logger.info(f"Updating {self.entity_name} {target}")
        return await self.repository.update(target)

    async def delete(self, entity_id: int) -> bool:
        entity = await self.repository.get_by_id(entity_id)
        if entity is None:
            self.logger.debug(f"Can't delete {self.entity_name}. {self.entity_name} doesn't exist {entity_id}")
            return False
        self.logger.info(f"Deleting {self.entity_name} {entity}")
        await self.repository.delete(entity)
        return True

    async def _resolve_references(self, entity: T) -> bool:
        """
        Replace referenced entities given by id with their stored state.

        Returns:
            False if a referenced entity doesn't exist
        """
        return True

    async def _reload(self, repository: ICrudRepository, reference: Any, name: str) -> tuple[bool, Any]:
        """
        Reload one optional reference.

        Returns:
            (found, entity) where a None reference counts as found
        """
        if reference is None:
            return True, None
        loaded = await repository.get_by_id(reference.id) if reference.id is not None else None
        if loaded is None:
            self.logger.debug(f"Can't resolve {name} {reference.id} for {self.entity_name}")
            return False, None
        return True, loaded
