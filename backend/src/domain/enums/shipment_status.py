"""Shipment statuses recorded by tracking details."""

from enum import Enum


class ShipmentStatus(str, Enum):
    """Where a shipment is in its journey."""

    PREPARED = "PREPARED"
    SENT = "SENT"
    ARRIVED = "ARRIVED"
    DELIVERED = "DELIVERED"
    RETURNED = "RETURNED"

    def __str__(self) -> str:
        return self.value
