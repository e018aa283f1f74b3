"""Distance zones used by the tariff grid."""

from enum import Enum


class W2wVariation(str, Enum):
    """Zone of a shipment, derived from sender and recipient addresses."""

    TOWN = "TOWN"
    REGION = "REGION"
    COUNTRY = "COUNTRY"

    def __str__(self) -> str:
        return self.value
