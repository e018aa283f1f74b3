"""SQLAlchemy implementations of postcode pool and barcode repositories."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities import BarcodeInnerNumber, PostcodePool
from domain.repositories import IBarcodeInnerNumberRepository, IPostcodePoolRepository
from infrastructure.database.models import BarcodeInnerNumberModel, PostcodePoolModel
from infrastructure.database.repositories.base import SQLAlchemyCrudRepository
from infrastructure.database.repositories.mappers import barcode_to_entity, postcode_pool_to_entity


def _barcode_to_model(entity: BarcodeInnerNumber) -> BarcodeInnerNumberModel:
    return BarcodeInnerNumberModel(
        inner_number=entity.inner_number,
        status=entity.status.value,
    )


class SQLAlchemyPostcodePoolRepository(
    SQLAlchemyCrudRepository[PostcodePoolModel, PostcodePool],
    IPostcodePoolRepository,
):
    """Concrete implementation of IPostcodePoolRepository using SQLAlchemy."""
    
    model_class = PostcodePoolModel
    entity_name = "Postcode pool"
    
    def _load_options(self):
        return (selectinload(PostcodePoolModel.barcode_inner_numbers),)
    
    async def add_barcode_inner_number(
        self,
        pool_id: int,
        barcode: BarcodeInnerNumber,
    ) -> BarcodeInnerNumber:
        """Append a barcode to a pool's collection and persist it."""
        model = await self._fetch(pool_id)
        
        if model is None:
            raise ValueError(f"Postcode pool {pool_id} not found")
        
        barcode_model = _barcode_to_model(barcode)
        model.barcode_inner_numbers.append(barcode_model)
        await self.session.flush()
        
        return barcode_to_entity(barcode_model)
    
    async def close(self, pool_id: int) -> None:
        """Mark a pool closed in a transaction of its own."""
        stmt = update(PostcodePoolModel).where(PostcodePoolModel.id == pool_id).values(closed=True)
        async with AsyncSession(self.session.bind) as session:
            async with session.begin():
                await session.execute(stmt)
        
        await self._fetch(pool_id, refresh=True)
    
    def _entity_to_model(self, entity: PostcodePool) -> PostcodePoolModel:
        """Convert domain entity to ORM model."""
        model = PostcodePoolModel(postcode=entity.postcode, closed=entity.closed)
        for barcode in entity.barcode_inner_numbers:
            model.barcode_inner_numbers.append(_barcode_to_model(barcode))
        return model
    
    def _update_model_from_entity(self, model: PostcodePoolModel, entity: PostcodePool) -> None:
        """Update ORM model from domain entity; barcodes without an id are appended."""
        model.postcode = entity.postcode
        model.closed = entity.closed
        
        existing = {b.id: b for b in model.barcode_inner_numbers}
        for barcode in entity.barcode_inner_numbers:
            if barcode.id is None:
                model.barcode_inner_numbers.append(_barcode_to_model(barcode))
            elif barcode.id in existing:
                existing[barcode.id].status = barcode.status.value
    
    def _model_to_entity(self, model: PostcodePoolModel) -> PostcodePool:
        """Convert ORM model to domain entity."""
        return postcode_pool_to_entity(model, with_barcodes=True)


class SQLAlchemyBarcodeInnerNumberRepository(
    SQLAlchemyCrudRepository[BarcodeInnerNumberModel, BarcodeInnerNumber],
    IBarcodeInnerNumberRepository,
):
    """Concrete implementation of IBarcodeInnerNumberRepository using SQLAlchemy."""
    
    model_class = BarcodeInnerNumberModel
    entity_name = "Barcode inner number"
    
    def _ordering(self):
        return (BarcodeInnerNumberModel.inner_number,)
    
    async def get_all_by_postcode_pool(self, pool_id: int) -> list[BarcodeInnerNumber]:
        """Retrieve barcodes issued from a pool, ordered by number."""
        stmt = (
            select(BarcodeInnerNumberModel)
            .where(BarcodeInnerNumberModel.postcode_pool_id == pool_id)
            .order_by(BarcodeInnerNumberModel.inner_number)
        )
        result = await self.session.execute(stmt)
        return [barcode_to_entity(model) for model in result.scalars().all()]
    
    def _entity_to_model(self, entity: BarcodeInnerNumber) -> BarcodeInnerNumberModel:
        """Convert domain entity to ORM model."""
        return _barcode_to_model(entity)
    
    def _update_model_from_entity(
        self,
        model: BarcodeInnerNumberModel,
        entity: BarcodeInnerNumber,
    ) -> None:
        """Update ORM model from domain entity."""
        model.inner_number = entity.inner_number
        model.status = entity.status.value
    
    def _model_to_entity(self, model: BarcodeInnerNumberModel) -> BarcodeInnerNumber:
        """Convert ORM model to domain entity."""
        return barcode_to_entity(model)
