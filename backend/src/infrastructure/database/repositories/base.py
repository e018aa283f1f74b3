"""Shared SQLAlchemy CRUD behaviour for repository implementations."""

from abc import abstractmethod
from typing import Any, Generic, Optional, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

M = TypeVar("M")
E = TypeVar("E")


class SQLAlchemyCrudRepository(Generic[M, E]):
    """
    Base for repositories storing one aggregate in one root table.

    Subclasses provide the model class, eager loading options and the
    conversions between model and entity.
    """

    model_class: type
    entity_name: str = "Entity"

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    def _load_options(self) -> Sequence[Any]:
        """Loader options applied to every query of the root model."""
        return ()

    def _ordering(self) -> Sequence[Any]:
        return (self.model_class.id,)

    async def _fetch(self, entity_id: Optional[int], refresh: bool = False) -> Optional[M]:
        """Load a root model by id with its eager relationships."""
        if entity_id is None:
            return None
        stmt = (
            select(self.model_class)
            .where(self.model_class.id == entity_id)
            .options(*self._load_options())
        )
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _fetch_all(self, *criteria) -> list[M]:
        stmt = (
            select(self.model_class)
            .where(*criteria)
            .options(*self._load_options())
            .order_by(*self._ordering())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_all(self) -> list[E]:
        """Retrieve all records."""
        return [self._model_to_entity(model) for model in await self._fetch_all()]

    async def get_by_id(self, entity_id: int) -> Optional[E]:
        """Retrieve a record by ID."""
        model = await self._fetch(entity_id)

        if model is None:
            return None

        return self._model_to_entity(model)

    async def save(self, entity: E) -> E:
        """Create a new record in the database."""
        model = self._entity_to_model(entity)
        self.session.add(model)
        await self.session.flush()
        model = await self._fetch(model.id, refresh=True)
        return self._model_to_entity(model)

    async def update(self, entity: E) -> E:
        """Update an existing record."""
        model = await self._fetch(entity.id)

        if model is None:
            raise ValueError(f"{self.entity_name} {entity.id} not found")

        self._update_model_from_entity(model, entity)
        await self.session.flush()
        model = await self._fetch(model.id, refresh=True)

        return self._model_to_entity(model)

    async def delete(self, entity: E) -> None:
        """Delete a record; a missing record is ignored."""
        model = await self._fetch(entity.id)

        if model is None:
            return

        await self.session.delete(model)
        await self.session.flush()

    @abstractmethod
    def _entity_to_model(self, entity: E) -> M:
        """Convert domain entity to ORM model."""

    @abstractmethod
    def _update_model_from_entity(self, model: M, entity: E) -> None:
        """Update ORM model from domain entity."""

    @abstractmethod
    def _model_to_entity(self, model: M) -> E:
        """Convert ORM model to domain entity."""
