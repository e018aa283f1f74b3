"""Domain Entities - Objects with identity."""

from .address import Address
from .postcode_pool import BarcodeInnerNumber, PostcodePool, MAX_INNER_NUMBER
from .client import Client, Counterparty
from .post_office import PostOffice
from .tariff_grid import TariffGrid
from .parcel import Parcel, ParcelItem
from .shipment import Shipment
from .shipment_tracking_detail import ShipmentTrackingDetail

__all__ = [
    "Address",
    "BarcodeInnerNumber",
    "PostcodePool",
    "MAX_INNER_NUMBER",
    "Client",
    "Counterparty",
    "PostOffice",
    "TariffGrid",
    "Parcel",
    "ParcelItem",
    "Shipment",
    "ShipmentTrackingDetail",
]
