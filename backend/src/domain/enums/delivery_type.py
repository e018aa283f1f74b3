"""Delivery types offered for a shipment."""

from enum import Enum


class DeliveryType(str, Enum):
    """How a shipment is handed over at each end (warehouse or door)."""

    W2W = "W2W"
    W2D = "W2D"
    D2W = "D2W"
    D2D = "D2D"

    @property
    def door_legs(self) -> int:
        """Number of legs served at the client's door."""
        return self.value.count("D")

    def __str__(self) -> str:
        return self.value
