"""In-memory repositories implementing the domain interfaces."""

import itertools
from copy import deepcopy
from decimal import Decimal
from typing import Generic, Optional, TypeVar

from domain.entities import (
    Address,
    BarcodeInnerNumber,
    Client,
    Counterparty,
    Parcel,
    ParcelItem,
    PostcodePool,
    PostOffice,
    Shipment,
    ShipmentTrackingDetail,
    TariffGrid,
)
from domain.enums import W2wVariation
from domain.repositories import (
    IAddressRepository,
    IBarcodeInnerNumberRepository,
    IClientRepository,
    ICounterpartyRepository,
    IParcelRepository,
    IPostcodePoolRepository,
    IPostOfficeRepository,
    IShipmentRepository,
    IShipmentTrackingDetailRepository,
    ITariffGridRepository,
)

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Stores copies of entities so callers can't mutate stored state."""

    def __init__(self):
        self.records: dict[int, T] = {}
        self._ids = itertools.count(1)

    async def get_all(self) -> list[T]:
        return [deepcopy(record) for record in self.records.values()]

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        record = self.records.get(entity_id)
        return deepcopy(record) if record is not None else None

    async def save(self, entity: T) -> T:
        stored = deepcopy(entity)
        stored.id = next(self._ids)
        self._before_store(stored)
        self.records[stored.id] = stored
        return deepcopy(stored)

    async def update(self, entity: T) -> T:
        if entity.id not in self.records:
            raise ValueError(f"{type(entity).__name__} {entity.id} not found")
        stored = deepcopy(entity)
        self._before_store(stored)
        self.records[stored.id] = stored
        return deepcopy(stored)

    async def delete(self, entity: T) -> None:
        self.records.pop(entity.id, None)

    def _before_store(self, entity: T) -> None:
        pass


class FakeAddressRepository(InMemoryRepository[Address], IAddressRepository):
    pass


class FakePostcodePoolRepository(InMemoryRepository[PostcodePool], IPostcodePoolRepository):
    def __init__(self):
        super().__init__()
        self.barcode_ids = itertools.count(1)

    async def add_barcode_inner_number(self, pool_id: int, barcode: BarcodeInnerNumber) -> BarcodeInnerNumber:
        pool = self.records.get(pool_id)
        if pool is None:
            raise ValueError(f"Postcode pool {pool_id} not found")
        stored = deepcopy(barcode)
        stored.id = next(self.barcode_ids)
        pool.barcode_inner_numbers.append(stored)
        return deepcopy(stored)

    async def close(self, pool_id: int) -> None:
        self.records[pool_id].closed = True

    def _before_store(self, entity: PostcodePool) -> None:
        for barcode in entity.barcode_inner_numbers:
            if barcode.id is None:
                barcode.id = next(self.barcode_ids)


class FakeBarcodeInnerNumberRepository(IBarcodeInnerNumberRepository):
    """Barcodes live inside the pools of a FakePostcodePoolRepository."""

    def __init__(self, pool_repository: FakePostcodePoolRepository):
        self.pool_repo = pool_repository

    def _find(self, barcode_id: int) -> tuple[Optional[PostcodePool], Optional[BarcodeInnerNumber]]:
        for pool in self.pool_repo.records.values():
            for barcode in pool.barcode_inner_numbers:
                if barcode.id == barcode_id:
                    return pool, barcode
        return None, None

    async def get_all(self) -> list[BarcodeInnerNumber]:
        return [
            deepcopy(barcode)
            for pool in self.pool_repo.records.values()
            for barcode in pool.barcode_inner_numbers
        ]

    async def get_by_id(self, barcode_id: int) -> Optional[BarcodeInnerNumber]:
        _, barcode = self._find(barcode_id)
        return deepcopy(barcode) if barcode is not None else None

    async def get_all_by_postcode_pool(self, pool_id: int) -> list[BarcodeInnerNumber]:
        pool = self.pool_repo.records.get(pool_id)
        if pool is None:
            return []
        return sorted((deepcopy(b) for b in pool.barcode_inner_numbers), key=lambda b: b.inner_number)

    async def save(self, entity: BarcodeInnerNumber) -> BarcodeInnerNumber:
        raise ValueError("Barcodes are saved through their postcode pool")

    async def update(self, entity: BarcodeInnerNumber) -> BarcodeInnerNumber:
        pool, barcode = self._find(entity.id)
        if barcode is None:
            raise ValueError(f"Barcode inner number {entity.id} not found")
        index = pool.barcode_inner_numbers.index(barcode)
        pool.barcode_inner_numbers[index] = deepcopy(entity)
        return deepcopy(entity)

    async def delete(self, entity: BarcodeInnerNumber) -> None:
        pool, barcode = self._find(entity.id)
        if barcode is not None:
            pool.barcode_inner_numbers.remove(barcode)


class FakeCounterpartyRepository(InMemoryRepository[Counterparty], ICounterpartyRepository):
    def _before_store(self, entity: Counterparty) -> None:
        # Nested pools are loaded without their barcodes
        if entity.postcode_pool is not None:
            entity.postcode_pool.barcode_inner_numbers = []


class FakeClientRepository(InMemoryRepository[Client], IClientRepository):
    async def get_all_by_counterparty(self, counterparty_id: int) -> list[Client]:
        return [
            deepcopy(client)
            for client in self.records.values()
            if client.counterparty is not None and client.counterparty.id == counterparty_id
        ]


class FakePostOfficeRepository(InMemoryRepository[PostOffice], IPostOfficeRepository):
    pass


class FakeTariffGridRepository(InMemoryRepository[TariffGrid], ITariffGridRepository):
    async def get_by_dimension(
        self,
        weight: float,
        length: float,
        w2w_variation: W2wVariation,
    ) -> Optional[TariffGrid]:
        rows = sorted(
            (
                row for row in self.records.values()
                if row.w2w_variation == w2w_variation and row.weight >= weight and row.length >= length
            ),
            key=lambda row: (row.weight, row.length),
        )
        return deepcopy(rows[0]) if rows else None

    async def get_last(self, w2w_variation: W2wVariation) -> Optional[TariffGrid]:
        rows = [row for row in self.records.values() if row.w2w_variation == w2w_variation]
        if not rows:
            return None
        return deepcopy(max(rows, key=lambda row: row.weight))


class FakeShipmentRepository(InMemoryRepository[Shipment], IShipmentRepository):
    """Assigns ids to parcels and items the way cascaded inserts do."""

    def __init__(self):
        super().__init__()
        self.parcel_ids = itertools.count(1)
        self.item_ids = itertools.count(1)

    async def get_all_by_client(self, client_id: int) -> list[Shipment]:
        return [
            deepcopy(shipment)
            for shipment in self.records.values()
            if shipment.sender is not None and shipment.sender.id == client_id
        ]

    def _before_store(self, entity: Shipment) -> None:
        for parcel in entity.parcels or []:
            if parcel.id is None:
                parcel.id = next(self.parcel_ids)
            parcel.shipment_id = entity.id
            for item in parcel.parcel_items:
                if item.id is None:
                    item.id = next(self.item_ids)
                item.parcel_id = parcel.id


class FakeParcelRepository(IParcelRepository):
    """Parcels live inside the shipments of a FakeShipmentRepository."""

    def __init__(self, shipment_repository: FakeShipmentRepository):
        self.shipment_repo = shipment_repository

    def _parcels(self) -> list[Parcel]:
        return [
            parcel
            for shipment in self.shipment_repo.records.values()
            for parcel in shipment.parcels or []
        ]

    async def get_all(self) -> list[Parcel]:
        return [deepcopy(parcel) for parcel in self._parcels()]

    async def get_by_id(self, parcel_id: int) -> Optional[Parcel]:
        for parcel in self._parcels():
            if parcel.id == parcel_id:
                return deepcopy(parcel)
        return None

    async def get_by_shipment(self, shipment_id: int) -> list[Parcel]:
        return [deepcopy(p) for p in self._parcels() if p.shipment_id == shipment_id]

    async def save(self, entity: Parcel) -> Parcel:
        shipment = self.shipment_repo.records.get(entity.shipment_id)
        if shipment is None:
            raise ValueError("Parcel must belong to an existing shipment")
        stored = deepcopy(entity)
        shipment.parcels = (shipment.parcels or []) + [stored]
        self.shipment_repo._before_store(shipment)
        return deepcopy(stored)

    async def update(self, entity: Parcel) -> Parcel:
        for shipment in self.shipment_repo.records.values():
            for index, parcel in enumerate(shipment.parcels or []):
                if parcel.id == entity.id:
                    shipment.parcels[index] = deepcopy(entity)
                    return deepcopy(entity)
        raise ValueError(f"Parcel {entity.id} not found")

    async def delete(self, entity: Parcel) -> None:
        for shipment in self.shipment_repo.records.values():
            shipment.parcels = [p for p in shipment.parcels or [] if p.id != entity.id]


class FakeShipmentTrackingDetailRepository(
    InMemoryRepository[ShipmentTrackingDetail],
    IShipmentTrackingDetailRepository,
):
    async def get_all_by_shipment(self, shipment_id: int) -> list[ShipmentTrackingDetail]:
        details = [d for d in self.records.values() if d.shipment_id == shipment_id]
        return [deepcopy(d) for d in sorted(details, key=lambda d: d.date)]


def make_parcel(weight: float, length: float, items: int = 1) -> Parcel:
    """Build an unsaved parcel with ``items`` identical items."""
    return Parcel(
        weight=weight,
        length=length,
        width=10,
        height=10,
        declared_price=Decimal("5"),
        parcel_items=[
            ParcelItem(name=f"Item {n}", quantity=1, weight=weight / items, price=Decimal("1"))
            for n in range(items)
        ],
    )
