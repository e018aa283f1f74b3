"""Unit tests for PostcodePool and BarcodeInnerNumber entities."""

import pytest
from domain.entities import BarcodeInnerNumber, PostcodePool, MAX_INNER_NUMBER
from domain.enums import BarcodeStatus


class TestBarcodeInnerNumber:

    def test_default_status_is_reserved(self):
        assert BarcodeInnerNumber(inner_number="0000001").status == BarcodeStatus.RESERVED

    @pytest.mark.parametrize("inner_number", ["1", "000000001", "abcdefg"])
    def test_invalid_inner_number_raises_error(self, inner_number):
        with pytest.raises(ValueError, match="7 digits"):
            BarcodeInnerNumber(inner_number=inner_number)

    def test_sequence(self):
        assert BarcodeInnerNumber(inner_number="0000120").sequence == 120


class TestNextInnerNumber:

    def test_empty_pool_starts_at_one(self):
        assert PostcodePool(postcode="00001").next_inner_number() == "0000001"

    def test_follows_highest_number_not_last_added(self):
        pool = PostcodePool(
            postcode="00001",
            barcode_inner_numbers=[
                BarcodeInnerNumber(inner_number="0000007"),
                BarcodeInnerNumber(inner_number="0000003"),
            ],
        )
        assert pool.next_inner_number() == "0000008"

    def test_exhausted_pool_returns_none(self):
        pool = PostcodePool(
            postcode="00001",
            barcode_inner_numbers=[BarcodeInnerNumber(inner_number=str(MAX_INNER_NUMBER))],
        )
        assert pool.next_inner_number() is None

    def test_close(self):
        pool = PostcodePool(postcode="00001")
        pool.close()
        assert pool.closed
