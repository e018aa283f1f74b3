"""Postcode pool and barcode inner number services."""

from typing import Any, Optional

from domain.entities import BarcodeInnerNumber, PostcodePool
from domain.enums import BarcodeStatus
from domain.exceptions import EntityNotFoundError, PostcodePoolClosedError
from domain.repositories import IBarcodeInnerNumberRepository, IPostcodePoolRepository
from application.services.base import CrudService, copy_properties
from infrastructure.config import get_logger


class PostcodePoolService(CrudService[PostcodePool]):
    """CRUD over postcode pools and bulk registration of their barcodes."""

    entity_name = "postcode pool"

    def __init__(self, postcode_pool_repository: IPostcodePoolRepository):
        super().__init__(postcode_pool_repository)

    async def add_barcode_inner_numbers(
        self,
        pool_id: int,
        barcodes: list[BarcodeInnerNumber],
    ) -> Optional[PostcodePool]:
        """
        Register existing barcode numbers in a pool.

        Args:
            pool_id: Postcode pool ID
            barcodes: Barcodes without ids

        Returns:
            Updated pool, or None if the pool doesn't exist
        """
        pool = await self.repository.get_by_id(pool_id)
        if pool is None:
            self.logger.debug(f"Can't add barcode inner numbers. Postcode pool doesn't exist {pool_id}")
            return None

        self.logger.info(f"Adding {len(barcodes)} barcode inner numbers to postcode pool {pool}")
        for barcode in barcodes:
            await self.repository.add_barcode_inner_number(pool_id, barcode)
        return await self.repository.get_by_id(pool_id)


class BarcodeInnerNumberService:
    """
    Issues and manages barcode inner numbers of postcode pools.

    Numbers are issued sequentially per pool, starting after the highest
    number already present.
    """

    def __init__(
        self,
        barcode_repository: IBarcodeInnerNumberRepository,
        postcode_pool_repository: IPostcodePoolRepository,
    ):
        self.barcode_repo = barcode_repository
        self.postcode_pool_repo = postcode_pool_repository
        self.logger = get_logger(self.__class__.__name__)

    async def get_all(self, pool_id: int) -> Optional[list[BarcodeInnerNumber]]:
        pool = await self.postcode_pool_repo.get_by_id(pool_id)
        if pool is None:
            self.logger.debug(f"Can't get barcode inner numbers. Postcode pool doesn't exist {pool_id}")
            return None
        self.logger.info(f"Getting all barcode inner numbers of postcode pool {pool}")
        return await self.barcode_repo.get_all_by_postcode_pool(pool_id)

    async def get_by_id(self, barcode_id: int) -> Optional[BarcodeInnerNumber]:
        self.logger.info(f"Getting barcode inner number by id {barcode_id}")
        return await self.barcode_repo.get_by_id(barcode_id)

    async def save(self, pool_id: int, barcode: BarcodeInnerNumber) -> Optional[BarcodeInnerNumber]:
        pool = await self.postcode_pool_repo.get_by_id(pool_id)
        if pool is None:
            self.logger.debug(f"Can't save barcode inner number. Postcode pool doesn't exist {pool_id}")
            return None
        self.logger.info(f"Saving barcode inner number {barcode.inner_number} to postcode pool {pool}")
        return await self.postcode_pool_repo.add_barcode_inner_number(pool_id, barcode)

    async def update(self, barcode_id: int, changes: dict[str, Any]) -> Optional[BarcodeInnerNumber]:
        target = await self.barcode_repo.get_by_id(barcode_id)
        if target is None:
            self.logger.debug(f"Can't update barcode inner number. Barcode doesn't exist {barcode_id}")
            return None
        copy_properties(target, changes, self.logger)
        target.id = barcode_id
        self.logger.info(f"Updating barcode inner number {target}")
        return await self.barcode_repo.update(target)

    async def delete(self, barcode_id: int) -> bool:
        barcode = await self.barcode_repo.get_by_id(barcode_id)
        if barcode is None:
            self.logger.debug(f"Can't delete barcode inner number. Barcode doesn't exist {barcode_id}")
            return False
        self.logger.info(f"Deleting barcode inner number {barcode}")
        await self.barcode_repo.delete(barcode)
        return True

    async def generate_barcode_inner_number(
        self,
        postcode_pool: PostcodePool,
        status: BarcodeStatus = BarcodeStatus.RESERVED,
    ) -> BarcodeInnerNumber:
        """
        Issue the next barcode of a pool.

        The new barcode is persisted into the pool and appended to
        ``postcode_pool.barcode_inner_numbers``.

        Args:
            postcode_pool: Pool to issue from
            status: Status of the new barcode

        Returns:
            Saved barcode

        Raises:
            EntityNotFoundError: If the pool doesn't exist
            PostcodePoolClosedError: If the pool is closed or exhausted
        """
        stored = await self.postcode_pool_repo.get_by_id(postcode_pool.id)
        if stored is None:
            raise EntityNotFoundError("Postcode pool", postcode_pool.id)
        if stored.closed:
            raise PostcodePoolClosedError(
                f"Postcode pool {stored.postcode} is closed",
                {"postcode_pool_id": stored.id},
            )

        inner_number = stored.next_inner_number()
        if inner_number is None:
            await self.postcode_pool_repo.close(stored.id)
            postcode_pool.close()
            self.logger.warning(f"Postcode pool {stored.postcode} is exhausted and has been closed")
            raise PostcodePoolClosedError(
                f"Postcode pool {stored.postcode} is exhausted",
                {"postcode_pool_id": stored.id},
            )

        barcode = await self.postcode_pool_repo.add_barcode_inner_number(
            stored.id,
            BarcodeInnerNumber(inner_number=inner_number, status=status),
        )
        postcode_pool.barcode_inner_numbers.append(barcode)
        self.logger.info(f"Generated barcode inner number {inner_number} in postcode pool {stored.postcode}")
        return barcode
