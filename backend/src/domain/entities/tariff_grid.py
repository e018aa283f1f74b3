"""Tariff grid entity."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from domain.enums import W2wVariation


@dataclass
class TariffGrid:
    """
    One row of the price table.

    A row prices parcels up to ``weight`` kilograms and ``length``
    centimetres sent within the ``w2w_variation`` zone.
    """

    weight: float = 0.0
    length: float = 0.0
    w2w_variation: W2wVariation = W2wVariation.COUNTRY
    price: Decimal = Decimal("0")
    id: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate row limits."""
        if self.weight <= 0:
            raise ValueError("Tariff weight must be positive")
        if self.length <= 0:
            raise ValueError("Tariff length must be positive")
        if self.price < 0:
            raise ValueError("Tariff price cannot be negative")
        self.price = Decimal(str(self.price))

    def covers(self, weight: float, length: float) -> bool:
        """Check whether a parcel of the given size falls under this row."""
        return weight <= self.weight and length <= self.length
