"""Tests for ShipmentService."""

import logging
from decimal import Decimal

import pytest
from domain.entities import Client, Shipment
from domain.enums import BarcodeStatus, DeliveryType
from domain.exceptions import PostcodePoolClosedError
from fakes import make_parcel


def new_shipment(sender, recipient, delivery_type=DeliveryType.W2W, parcels=None):
    """Shipment as received from a client: references carry only ids."""
    return Shipment(
        sender=Client(id=sender.id),
        recipient=Client(id=recipient.id),
        delivery_type=delivery_type,
        post_pay=Decimal("15"),
        parcels=parcels if parcels is not None else [make_parcel(3, 1, items=2), make_parcel(3, 3, items=2)],
    )


@pytest.mark.asyncio
class TestSave:

    async def test_price_is_sum_of_parcel_prices(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        assert saved.id is not None
        assert [p.price for p in saved.parcels] == [Decimal("36"), Decimal("36")]
        assert saved.price == Decimal("72")

    async def test_barcode_is_issued_from_sender_pool(self, services, world, repositories):
        first = await services.shipments.save(new_shipment(world.ivanov, world.petrov))
        second = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        assert first.barcode.inner_number == "0000001"
        assert first.barcode.status == BarcodeStatus.USED
        assert second.barcode.inner_number == "0000002"
        assert str(second.tracking_code) == "000030000002"
        pool = await repositories.pools.get_by_id(world.pool.id)
        assert [b.inner_number for b in pool.barcode_inner_numbers] == ["0000001", "0000002"]

    async def test_references_are_reloaded(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        assert saved.sender.name == "FOP Ivanov"
        assert saved.recipient.address.city == "Kiev"

    async def test_back_references_are_wired(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        for parcel in saved.parcels:
            assert parcel.shipment_id == saved.id
            assert all(item.parcel_id == parcel.id for item in parcel.parcel_items)

    async def test_empty_shipment_costs_nothing(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov, parcels=[]))

        assert saved.price == Decimal("0")

    async def test_missing_sender_returns_none(self, services, world, repositories):
        shipment = new_shipment(world.ivanov, world.petrov)
        shipment.sender = Client(id=999)

        assert await services.shipments.save(shipment) is None
        assert await repositories.shipments.get_all() == []

    async def test_sender_without_postcode_pool_returns_none(self, services, world):
        assert await services.shipments.save(new_shipment(world.sydorenko, world.petrov)) is None

    async def test_closed_pool_raises(self, services, world, repositories):
        pool = await repositories.pools.get_by_id(world.pool.id)
        pool.closed = True
        await repositories.pools.update(pool)

        with pytest.raises(PostcodePoolClosedError):
            await services.shipments.save(new_shipment(world.ivanov, world.petrov))


@pytest.mark.asyncio
class TestReads:

    async def test_get_all_by_client_id(self, services, world):
        await services.shipments.save(new_shipment(world.ivanov, world.petrov))
        await services.shipments.save(new_shipment(world.petrov, world.ivanov))

        shipments = await services.shipments.get_all_by_client_id(world.ivanov.id)

        assert len(shipments) == 1
        assert shipments[0].sender.id == world.ivanov.id

    async def test_get_all_by_missing_client_returns_none(self, services, world):
        assert await services.shipments.get_all_by_client_id(999) is None

    async def test_get_by_missing_id_returns_none(self, services, world):
        assert await services.shipments.get_by_id(999) is None


@pytest.mark.asyncio
class TestUpdate:

    async def test_merge_and_reprice(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        updated = await services.shipments.update(
            saved.id,
            {"delivery_type": DeliveryType.D2D, "description": "Fragile"},
        )

        assert updated.id == saved.id
        assert updated.description == "Fragile"
        assert updated.post_pay == Decimal("15")
        assert [p.price for p in updated.parcels] == [Decimal("54"), Decimal("54")]
        assert updated.price == Decimal("108")

    async def test_changed_recipient_changes_zone(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        updated = await services.shipments.update(saved.id, {"recipient": Client(id=world.ivanov.id)})

        assert updated.recipient.name == "FOP Ivanov"
        assert updated.price == Decimal("48")

    async def test_id_is_never_overwritten(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        updated = await services.shipments.update(saved.id, {"id": 42})

        assert updated.id == saved.id

    async def test_unknown_attribute_is_logged_and_skipped(self, services, world, caplog):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        with caplog.at_level(logging.ERROR):
            updated = await services.shipments.update(saved.id, {"colour": "red", "description": "Books"})

        assert updated.description == "Books"
        assert not hasattr(updated, "colour")
        assert any("colour" in record.getMessage() for record in caplog.records)

    async def test_missing_shipment_returns_none(self, services, world):
        assert await services.shipments.update(999, {"description": "x"}) is None


@pytest.mark.asyncio
class TestParcels:

    async def test_add_parcels_puts_new_parcels_first(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        assert await services.shipments.add_parcels(saved.id, [make_parcel(0.2, 10)])

        shipment = await services.shipments.get_by_id(saved.id)
        assert len(shipment.parcels) == 3
        assert shipment.parcels[0].price == Decimal("21")
        assert shipment.parcels[0].id is not None
        assert shipment.parcels[0].shipment_id == saved.id
        assert shipment.price == Decimal("93")

    async def test_add_parcels_to_missing_shipment(self, services, world):
        assert await services.shipments.add_parcels(999, [make_parcel(1, 10)]) is False

    async def test_remove_parcel_recomputes_total(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        assert await services.shipments.remove_parcel(saved.id, saved.parcels[0].id)

        shipment = await services.shipments.get_by_id(saved.id)
        assert [p.id for p in shipment.parcels] == [saved.parcels[1].id]
        assert shipment.price == Decimal("36")

    async def test_remove_unknown_parcel(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        assert await services.shipments.remove_parcel(saved.id, 999) is False
        assert await services.shipments.remove_parcel(999, saved.parcels[0].id) is False

    async def test_parcels_are_readable_through_parcel_service(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        parcels = await services.parcels.get_by_shipment(saved.id)

        assert [p.id for p in parcels] == [p.id for p in saved.parcels]
        assert await services.parcels.get_by_id(saved.parcels[0].id) is not None


@pytest.mark.asyncio
class TestDelete:

    async def test_delete(self, services, world):
        saved = await services.shipments.save(new_shipment(world.ivanov, world.petrov))

        assert await services.shipments.delete(saved.id) is True
        assert await services.shipments.get_by_id(saved.id) is None

    async def test_delete_missing_shipment_returns_false(self, services, world):
        assert await services.shipments.delete(999) is False


class TestCalculatePrice:

    def test_none_parcels_cost_nothing(self, services):
        assert services.shipments.calculate_price(Shipment(parcels=None)) == Decimal("0")

    def test_decimal_sum_is_exact(self, services):
        parcels = [make_parcel(1, 1), make_parcel(1, 1), make_parcel(1, 1)]
        for parcel in parcels:
            parcel.price = Decimal("0.1")
        assert services.shipments.calculate_price(Shipment(parcels=parcels)) == Decimal("0.3")
