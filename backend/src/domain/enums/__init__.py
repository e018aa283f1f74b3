"""Domain Enums - Constant values used across the domain."""

from .barcode_status import BarcodeStatus
from .delivery_type import DeliveryType
from .shipment_status import ShipmentStatus
from .w2w_variation import W2wVariation

__all__ = ["BarcodeStatus", "DeliveryType", "ShipmentStatus", "W2wVariation"]
