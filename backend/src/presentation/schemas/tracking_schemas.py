"""Shipment tracking Pydantic schemas."""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field

from domain.entities import PostOffice, ShipmentTrackingDetail
from domain.enums import ShipmentStatus
from presentation.schemas.post_office_schemas import PostOfficeResponse
from presentation.schemas.common_schemas import UpdateRequest


class ShipmentTrackingDetailRequest(BaseModel):
    """Request schema for recording a shipment status."""
    
    shipment_id: int = Field(..., description="Tracked shipment")
    post_office_id: Optional[int] = Field(None, description="Post office reporting the status")
    shipment_status: ShipmentStatus = Field(ShipmentStatus.PREPARED, description="Shipment status")
    date: Optional[datetime] = Field(None, description="Status time, defaults to now")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shipment_id": 1,
                    "post_office_id": 1,
                    "shipment_status": "SENT"
                }
            ]
        }
    }

    def to_entity(self) -> ShipmentTrackingDetail:
        detail = ShipmentTrackingDetail(
            shipment_id=self.shipment_id,
            post_office=PostOffice(id=self.post_office_id) if self.post_office_id is not None else None,
            shipment_status=self.shipment_status,
        )
        if self.date is not None:
            detail.date = self.date
        return detail


class ShipmentTrackingDetailUpdateRequest(UpdateRequest):
    nullable_fields = frozenset({"post_office_id"})

    post_office_id: Optional[int] = None
    shipment_status: Optional[ShipmentStatus] = None
    date: Optional[datetime] = None

    def to_changes(self) -> dict[str, Any]:
        changes = super().to_changes()
        if "post_office_id" in changes:
            post_office_id = changes.pop("post_office_id")
            changes["post_office"] = PostOffice(id=post_office_id) if post_office_id is not None else None
        return changes


class ShipmentTrackingDetailResponse(BaseModel):
    id: int = Field(..., description="Tracking record ID")
    shipment_id: int
    post_office: Optional[PostOfficeResponse] = None
    shipment_status: ShipmentStatus
    date: datetime
    
    model_config = {"from_attributes": True}
