"""Postcode pool and barcode repository interfaces."""

from abc import abstractmethod

from domain.entities import BarcodeInnerNumber, PostcodePool
from domain.repositories.base import ICrudRepository


class IPostcodePoolRepository(ICrudRepository[PostcodePool]):
    """
    Abstract repository interface for PostcodePool aggregate.

    Pools returned here always carry their barcode inner numbers.
    """

    @abstractmethod
    async def add_barcode_inner_number(
        self,
        pool_id: int,
        barcode: BarcodeInnerNumber,
    ) -> BarcodeInnerNumber:
        """
        Append a barcode to a pool's collection and persist it.

        Args:
            pool_id: Postcode pool ID
            barcode: Barcode without an id

        Returns:
            Saved barcode carrying its generated id

        Raises:
            ValueError: If the pool does not exist
        """
        pass

    @abstractmethod
    async def close(self, pool_id: int) -> None:
        """
        Mark a pool closed.

        The flag is committed on its own, so it stays set even when the
        calling unit of work is rolled back.
        """
        pass


class IBarcodeInnerNumberRepository(ICrudRepository[BarcodeInnerNumber]):
    """Abstract repository interface for BarcodeInnerNumber entity."""

    @abstractmethod
    async def get_all_by_postcode_pool(self, pool_id: int) -> list[BarcodeInnerNumber]:
        """Retrieve barcodes issued from a pool, ordered by number."""
        pass
