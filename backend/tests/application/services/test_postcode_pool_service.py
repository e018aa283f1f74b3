"""Tests for postcode pool and barcode services."""

import pytest
from domain.entities import BarcodeInnerNumber, PostcodePool, MAX_INNER_NUMBER
from domain.enums import BarcodeStatus
from domain.exceptions import EntityNotFoundError, PostcodePoolClosedError


@pytest.mark.asyncio
class TestGenerateBarcodeInnerNumber:

    async def test_numbers_are_sequential(self, services):
        pool = await services.pools.save(PostcodePool(postcode="00001"))

        first = await services.barcodes.generate_barcode_inner_number(pool)
        second = await services.barcodes.generate_barcode_inner_number(pool)

        assert first.inner_number == "0000001"
        assert first.status == BarcodeStatus.RESERVED
        assert second.inner_number == "0000002"
        assert [b.inner_number for b in pool.barcode_inner_numbers] == ["0000001", "0000002"]

    async def test_continues_after_registered_numbers(self, services):
        pool = await services.pools.save(PostcodePool(postcode="00001"))
        await services.pools.add_barcode_inner_numbers(
            pool.id,
            [
                BarcodeInnerNumber(inner_number="0000001", status=BarcodeStatus.USED),
                BarcodeInnerNumber(inner_number="0000002"),
                BarcodeInnerNumber(inner_number="0000003"),
            ],
        )

        barcode = await services.barcodes.generate_barcode_inner_number(pool, BarcodeStatus.USED)

        assert barcode.inner_number == "0000004"
        assert barcode.status == BarcodeStatus.USED

    async def test_closed_pool_raises(self, services):
        pool = await services.pools.save(PostcodePool(postcode="00001", closed=True))

        with pytest.raises(PostcodePoolClosedError, match="closed"):
            await services.barcodes.generate_barcode_inner_number(pool)

    async def test_exhausted_pool_is_closed_and_raises(self, services, repositories):
        pool = await services.pools.save(PostcodePool(postcode="00001"))
        await services.pools.add_barcode_inner_numbers(
            pool.id, [BarcodeInnerNumber(inner_number=str(MAX_INNER_NUMBER))]
        )

        with pytest.raises(PostcodePoolClosedError, match="exhausted") as exc_info:
            await services.barcodes.generate_barcode_inner_number(pool)

        assert pool.closed
        assert (await repositories.pools.get_by_id(pool.id)).closed
        assert exc_info.value.details == {"postcode_pool_id": pool.id}

    async def test_missing_pool_raises_not_found(self, services):
        with pytest.raises(EntityNotFoundError) as exc_info:
            await services.barcodes.generate_barcode_inner_number(PostcodePool(id=999, postcode="00001"))

        assert exc_info.value.details == {"entity": "Postcode pool", "id": 999}


@pytest.mark.asyncio
class TestBarcodeCrud:

    async def test_get_all_of_pool(self, services):
        pool = await services.pools.save(PostcodePool(postcode="00001"))
        other = await services.pools.save(PostcodePool(postcode="00002"))
        await services.barcodes.save(pool.id, BarcodeInnerNumber(inner_number="0000002"))
        await services.barcodes.save(pool.id, BarcodeInnerNumber(inner_number="0000001"))
        await services.barcodes.save(other.id, BarcodeInnerNumber(inner_number="0000005"))

        barcodes = await services.barcodes.get_all(pool.id)

        assert [b.inner_number for b in barcodes] == ["0000001", "0000002"]

    async def test_missing_pool(self, services):
        assert await services.barcodes.get_all(999) is None
        assert await services.barcodes.save(999, BarcodeInnerNumber(inner_number="0000001")) is None
        assert await services.pools.add_barcode_inner_numbers(999, []) is None

    async def test_update_status(self, services):
        pool = await services.pools.save(PostcodePool(postcode="00001"))
        barcode = await services.barcodes.save(pool.id, BarcodeInnerNumber(inner_number="0000001"))

        updated = await services.barcodes.update(barcode.id, {"status": BarcodeStatus.USED})

        assert updated.status == BarcodeStatus.USED
        assert (await services.barcodes.get_by_id(barcode.id)).status == BarcodeStatus.USED

    async def test_delete(self, services):
        pool = await services.pools.save(PostcodePool(postcode="00001"))
        barcode = await services.barcodes.save(pool.id, BarcodeInnerNumber(inner_number="0000001"))

        assert await services.barcodes.delete(barcode.id) is True
        assert await services.barcodes.delete(barcode.id) is False
        assert await services.barcodes.update(barcode.id, {"status": BarcodeStatus.USED}) is None


@pytest.mark.asyncio
async def test_add_barcode_inner_numbers_returns_updated_pool(services):
    pool = await services.pools.save(PostcodePool(postcode="00001"))

    updated = await services.pools.add_barcode_inner_numbers(
        pool.id,
        [BarcodeInnerNumber(inner_number="0000001"), BarcodeInnerNumber(inner_number="0000002")],
    )

    assert updated.id == pool.id
    assert len(updated.barcode_inner_numbers) == 2
    assert all(b.id is not None for b in updated.barcode_inner_numbers)
