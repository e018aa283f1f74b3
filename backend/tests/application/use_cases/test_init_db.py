"""Tests for the database seeding use case."""

from decimal import Decimal

import pytest
from domain.enums import BarcodeStatus, DeliveryType, ShipmentStatus


@pytest.mark.asyncio
class TestInitDbUseCase:

    async def test_seeds_empty_database(self, init_db_use_case, repositories):
        assert await init_db_use_case.execute() is True

        assert len(repositories.tariffs.records) == 27
        assert len(repositories.addresses.records) == 2
        assert len(repositories.clients.records) == 2
        assert len(repositories.post_offices.records) == 1
        assert len(repositories.tracking.records) == 1

    async def test_pools_and_barcodes(self, init_db_use_case, repositories):
        await init_db_use_case.execute()

        pools = {p.postcode: p for p in await repositories.pools.get_all()}
        assert set(pools) == {"00001", "00002", "00003"}
        assert [(b.inner_number, b.status) for b in pools["00001"].barcode_inner_numbers] == [
            ("0000001", BarcodeStatus.USED),
            ("0000002", BarcodeStatus.RESERVED),
            ("0000003", BarcodeStatus.RESERVED),
        ]
        # One barcode per seeded shipment
        assert [b.inner_number for b in pools["00003"].barcode_inner_numbers] == [
            "0000001", "0000002", "0000003",
        ]

    async def test_shipments_are_priced(self, init_db_use_case, repositories):
        await init_db_use_case.execute()

        shipments = await repositories.shipments.get_all()
        assert [s.delivery_type for s in shipments] == [DeliveryType.W2W, DeliveryType.W2D, DeliveryType.D2D]
        assert [s.price for s in shipments] == [Decimal("72"), Decimal("66"), Decimal("102")]
        for shipment in shipments:
            assert len(shipment.parcels) == 2
            assert all(len(p.parcel_items) == 2 for p in shipment.parcels)
            assert shipment.price == sum(p.price for p in shipment.parcels)

    async def test_first_shipment_is_tracked(self, init_db_use_case, repositories):
        await init_db_use_case.execute()

        detail = next(iter(repositories.tracking.records.values()))
        assert detail.shipment_id == 1
        assert detail.shipment_status == ShipmentStatus.PREPARED
        assert detail.post_office.name == "Lviv post office"

    async def test_second_run_is_skipped(self, init_db_use_case, repositories):
        await init_db_use_case.execute()

        assert await init_db_use_case.execute() is False
        assert len(repositories.tariffs.records) == 27
        assert len(repositories.shipments.records) == 3
