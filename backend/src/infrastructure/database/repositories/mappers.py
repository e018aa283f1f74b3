"""Conversions between ORM models and domain entities."""

from decimal import Decimal
from typing import Optional

from domain.entities import (
    Address,
    BarcodeInnerNumber,
    Client,
    Counterparty,
    Parcel,
    ParcelItem,
    PostcodePool,
    PostOffice,
)
from domain.enums import BarcodeStatus
from infrastructure.database.models import (
    AddressModel,
    BarcodeInnerNumberModel,
    ClientModel,
    CounterpartyModel,
    ParcelItemModel,
    ParcelModel,
    PostcodePoolModel,
    PostOfficeModel,
)


def entity_id(entity) -> Optional[int]:
    """Get the id of an optional nested entity."""
    return entity.id if entity is not None else None


def address_to_entity(model: Optional[AddressModel]) -> Optional[Address]:
    if model is None:
        return None
    return Address(
        id=model.id,
        postcode=model.postcode,
        region=model.region,
        district=model.district,
        city=model.city,
        street=model.street,
        house_number=model.house_number,
        apartment_number=model.apartment_number,
    )


def barcode_to_entity(model: Optional[BarcodeInnerNumberModel]) -> Optional[BarcodeInnerNumber]:
    if model is None:
        return None
    return BarcodeInnerNumber(
        id=model.id,
        inner_number=model.inner_number,
        status=BarcodeStatus(model.status),
    )


def postcode_pool_to_entity(
    model: Optional[PostcodePoolModel],
    with_barcodes: bool = False,
) -> Optional[PostcodePool]:
    """
    Convert a pool model.

    Barcodes are only read when requested, since they are loaded
    only by the postcode pool repository.
    """
    if model is None:
        return None
    barcodes = []
    if with_barcodes:
        barcodes = [barcode_to_entity(b) for b in model.barcode_inner_numbers]
    return PostcodePool(
        id=model.id,
        postcode=model.postcode,
        closed=model.closed,
        barcode_inner_numbers=barcodes,
    )


def counterparty_to_entity(model: Optional[CounterpartyModel]) -> Optional[Counterparty]:
    if model is None:
        return None
    return Counterparty(
        id=model.id,
        name=model.name,
        description=model.description,
        postcode_pool=postcode_pool_to_entity(model.postcode_pool),
    )


def client_to_entity(model: Optional[ClientModel]) -> Optional[Client]:
    if model is None:
        return None
    return Client(
        id=model.id,
        name=model.name,
        uniq_registration_number=model.uniq_registration_number,
        phone_number=model.phone_number,
        address=address_to_entity(model.address),
        counterparty=counterparty_to_entity(model.counterparty),
    )


def post_office_to_entity(model: Optional[PostOfficeModel]) -> Optional[PostOffice]:
    if model is None:
        return None
    return PostOffice(
        id=model.id,
        name=model.name,
        address=address_to_entity(model.address),
        postcode_pool=postcode_pool_to_entity(model.postcode_pool),
    )


def parcel_item_to_entity(model: ParcelItemModel) -> ParcelItem:
    return ParcelItem(
        id=model.id,
        parcel_id=model.parcel_id,
        name=model.name,
        quantity=model.quantity,
        weight=model.weight,
        price=Decimal(model.price),
    )


def parcel_to_entity(model: ParcelModel) -> Parcel:
    return Parcel(
        id=model.id,
        shipment_id=model.shipment_id,
        weight=model.weight,
        length=model.length,
        width=model.width,
        height=model.height,
        declared_price=Decimal(model.declared_price),
        price=Decimal(model.price),
        parcel_items=[parcel_item_to_entity(item) for item in model.parcel_items],
    )


def parcel_to_model(entity: Parcel, position: int = 0) -> ParcelModel:
    """Build a new parcel model together with its items."""
    model = ParcelModel(position=position)
    update_parcel_model(model, entity)
    return model


def update_parcel_model(model: ParcelModel, entity: Parcel) -> None:
    """Copy parcel fields and synchronize its items by id."""
    model.weight = entity.weight
    model.length = entity.length
    model.width = entity.width
    model.height = entity.height
    model.declared_price = entity.declared_price
    model.price = entity.price

    existing = {item.id: item for item in model.parcel_items if item.id is not None}
    items = []
    for item in entity.parcel_items:
        item_model = existing.get(item.id) if item.id is not None else None
        if item_model is None:
            item_model = ParcelItemModel()
        item_model.name = item.name
        item_model.quantity = item.quantity
        item_model.weight = item.weight
        item_model.price = item.price
        items.append(item_model)
    model.parcel_items = items
