"""Lifecycle states of a barcode inner number."""

from enum import Enum


class BarcodeStatus(str, Enum):
    RESERVED = "RESERVED"
    USED = "USED"

    def __str__(self) -> str:
        return self.value
