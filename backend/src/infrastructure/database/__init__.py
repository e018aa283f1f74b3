"""Database infrastructure module."""

from .session import Base, get_session, init_db, close_db
from .models import (
    AddressModel,
    PostcodePoolModel,
    BarcodeInnerNumberModel,
    ClientModel,
    CounterpartyModel,
    PostOfficeModel,
    TariffGridModel,
    ShipmentModel,
    ParcelModel,
    ParcelItemModel,
    ShipmentTrackingDetailModel,
)

__all__ = [
    "Base",
    "get_session",
    "init_db",
    "close_db",
    "AddressModel",
    "PostcodePoolModel",
    "BarcodeInnerNumberModel",
    "ClientModel",
    "CounterpartyModel",
    "PostOfficeModel",
    "TariffGridModel",
    "ShipmentModel",
    "ParcelModel",
    "ParcelItemModel",
    "ShipmentTrackingDetailModel",
]
