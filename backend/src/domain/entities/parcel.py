"""Parcel and parcel item entities."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass
class ParcelItem:
    """A declared item packed into a parcel."""

    name: str = ""
    quantity: int = 1
    weight: float = 0.0
    price: Decimal = Decimal("0")
    parcel_id: Optional[int] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Item quantity must be at least 1")


@dataclass
class Parcel:
    """
    A package belonging to one shipment.

    Attributes:
        weight: Weight in kilograms
        length: Longest side in centimetres
        width: Width in centimetres
        height: Height in centimetres
        declared_price: Value declared by the sender
        price: Delivery price computed from the tariff grid
        parcel_items: Items packed into the parcel
        shipment_id: Owning shipment
    """

    weight: float = 0.0
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    declared_price: Decimal = Decimal("0")
    price: Decimal = Decimal("0")
    parcel_items: list[ParcelItem] = field(default_factory=list)
    shipment_id: Optional[int] = None
    id: Optional[int] = None

    def attach_items(self) -> None:
        """Point every item back at this parcel."""
        for item in self.parcel_items:
            item.parcel_id = self.id

    def __str__(self) -> str:
        return f"Parcel(id={self.id}, weight={self.weight}, price={self.price})"
