"""Shipment tracking detail entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from domain.entities.post_office import PostOffice
from domain.enums import ShipmentStatus


@dataclass
class ShipmentTrackingDetail:
    """A single status record of a shipment at a post office."""

    shipment_id: Optional[int] = None
    post_office: Optional[PostOffice] = None
    shipment_status: ShipmentStatus = ShipmentStatus.PREPARED
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: Optional[int] = None

    def __str__(self) -> str:
        return (
            f"ShipmentTrackingDetail(id={self.id}, shipment_id={self.shipment_id}, "
            f"status={self.shipment_status})"
        )
