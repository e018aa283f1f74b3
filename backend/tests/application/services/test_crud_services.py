"""Tests for the CRUD services and reference resolution."""

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from application.services import copy_properties
from domain.entities import (
    Address,
    Client,
    Counterparty,
    PostcodePool,
    PostOffice,
    Shipment,
    ShipmentTrackingDetail,
)
from domain.enums import ShipmentStatus, W2wVariation
from fakes import make_parcel


class TestCopyProperties:

    def test_copies_known_and_skips_id(self):
        address = Address(city="Kiev", id=1)

        copied = copy_properties(address, {"id": 7, "city": "Lviv"}, logging.getLogger("test"))

        assert copied == ["city"]
        assert address.city == "Lviv"
        assert address.id == 1

    def test_unknown_names_are_logged(self, caplog):
        address = Address(city="Kiev")

        with caplog.at_level(logging.ERROR):
            copied = copy_properties(address, {"planet": "Mars"}, logging.getLogger("test"))

        assert copied == []
        assert "planet" in caplog.text


@pytest.mark.asyncio
class TestClientService:

    async def test_save_resolves_references(self, services):
        pool = await services.pools.save(PostcodePool(postcode="00003"))
        counterparty = await services.counterparties.save(
            Counterparty(name="Modna kasta", postcode_pool=PostcodePool(id=pool.id))
        )
        address = await services.addresses.save(Address(region="Kiev", city="Kiev"))

        client = await services.clients.save(Client(
            name="Petrov PP",
            uniq_registration_number="002",
            address=Address(id=address.id),
            counterparty=Counterparty(id=counterparty.id),
        ))

        assert client.address.city == "Kiev"
        assert client.counterparty.postcode_pool.postcode == "00003"

    async def test_save_with_missing_reference_returns_none(self, services):
        client = Client(name="Nobody", address=Address(id=999))

        assert await services.clients.save(client) is None
        assert await services.clients.get_all() == []

    async def test_get_all_by_counterparty_id(self, services, world):
        clients = await services.clients.get_all_by_counterparty_id(world.counterparty.id)

        assert {c.name for c in clients} == {"FOP Ivanov", "Petrov PP"}
        assert await services.clients.get_all_by_counterparty_id(999) is None

    async def test_update_and_delete(self, services, world):
        updated = await services.clients.update(world.sydorenko.id, {"phone_number": "+380501112233"})

        assert updated.phone_number == "+380501112233"
        assert updated.address.city == "Ternopil"
        assert await services.clients.update(999, {"name": "x"}) is None
        assert await services.clients.delete(world.sydorenko.id) is True
        assert await services.clients.delete(world.sydorenko.id) is False


@pytest.mark.asyncio
class TestOtherServices:

    async def test_post_office_resolves_address_and_pool(self, services):
        pool = await services.pools.save(PostcodePool(postcode="00002"))
        address = await services.addresses.save(Address(region="Lviv", city="Lviv"))

        office = await services.post_offices.save(
            PostOffice(name="Lviv post office", address=Address(id=address.id), postcode_pool=PostcodePool(id=pool.id))
        )

        assert office.address.city == "Lviv"
        assert office.postcode_pool.postcode == "00002"
        assert await services.post_offices.save(PostOffice(name="x", postcode_pool=PostcodePool(id=999))) is None

    async def test_tariff_lookups(self, services, tariff_grid):
        row = await services.tariffs.get_by_dimension(0.3, 10, W2wVariation.REGION)
        last = await services.tariffs.get_last(W2wVariation.TOWN)

        assert (row.weight, row.price) == (0.5, Decimal("18"))
        assert (last.weight, last.price) == (30, Decimal("42"))
        assert await services.tariffs.get_by_dimension(31, 10, W2wVariation.TOWN) is None

    async def test_address_zone_helpers(self, services):
        first = Address(region="Ternopil", city="Ternopil")
        second = Address(region="Ternopil", city="Monastiriska")

        assert services.addresses.is_located_in_same_region(first, second)
        assert not services.addresses.is_located_in_same_town(first, second)


@pytest.mark.asyncio
class TestShipmentTrackingDetailService:

    async def _shipment(self, services, world):
        return await services.shipments.save(Shipment(
            sender=Client(id=world.ivanov.id),
            recipient=Client(id=world.petrov.id),
            parcels=[make_parcel(1, 10)],
        ))

    async def test_history_is_ordered_by_date(self, services, world):
        shipment = await self._shipment(services, world)
        now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        await services.tracking.save(ShipmentTrackingDetail(
            shipment_id=shipment.id, shipment_status=ShipmentStatus.SENT, date=now + timedelta(hours=2),
        ))
        await services.tracking.save(ShipmentTrackingDetail(
            shipment_id=shipment.id, shipment_status=ShipmentStatus.PREPARED, date=now,
        ))

        history = await services.tracking.get_all_by_shipment_id(shipment.id)

        assert [d.shipment_status for d in history] == [ShipmentStatus.PREPARED, ShipmentStatus.SENT]

    async def test_missing_shipment(self, services, world):
        assert await services.tracking.get_all_by_shipment_id(999) is None
        assert await services.tracking.save(ShipmentTrackingDetail(shipment_id=999)) is None

    async def test_missing_post_office(self, services, world):
        shipment = await self._shipment(services, world)

        detail = ShipmentTrackingDetail(shipment_id=shipment.id, post_office=PostOffice(id=999))

        assert await services.tracking.save(detail) is None
