"""Shipment entity - the aggregate root of a courier transaction."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from domain.entities.client import Client
from domain.entities.parcel import Parcel
from domain.entities.postcode_pool import BarcodeInnerNumber
from domain.enums import DeliveryType
from domain.value_objects import TrackingCode


@dataclass
class Shipment:
    """
    A courier transaction from a sender to a recipient.

    ``price`` is derived from the parcels and recomputed by the shipment
    service whenever parcels change. ``parcels`` may be None for shipments
    built from partial input.
    """

    sender: Optional[Client] = None
    recipient: Optional[Client] = None
    delivery_type: DeliveryType = DeliveryType.W2W
    post_pay: Decimal = Decimal("0")
    parcels: Optional[list[Parcel]] = field(default_factory=list)
    price: Decimal = Decimal("0")
    description: str = ""
    barcode: Optional[BarcodeInnerNumber] = None
    id: Optional[int] = None

    def attach_parcels(self) -> None:
        """Wire parcel to shipment and item to parcel back-references."""
        for parcel in self.parcels or []:
            parcel.shipment_id = self.id
            parcel.attach_items()

    @property
    def tracking_code(self) -> Optional[TrackingCode]:
        """Printable code: sender pool postcode followed by the barcode number."""
        if self.barcode is None or self.sender is None or self.sender.counterparty is None:
            return None
        pool = self.sender.counterparty.postcode_pool
        if pool is None:
            return None
        return TrackingCode(postcode=pool.postcode, inner_number=self.barcode.inner_number)

    def __str__(self) -> str:
        return (
            f"Shipment(id={self.id}, delivery_type={self.delivery_type}, "
            f"parcels={len(self.parcels or [])}, price={self.price})"
        )
