"""Shipment, parcel and parcel item Pydantic schemas."""

from decimal import Decimal
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from domain.entities import Client, Parcel, ParcelItem, Shipment
from domain.enums import DeliveryType
from presentation.schemas.client_schemas import ClientResponse
from presentation.schemas.postcode_pool_schemas import BarcodeInnerNumberResponse
from presentation.schemas.common_schemas import UpdateRequest


class ParcelItemRequest(BaseModel):
    name: str = Field(..., description="Item name", min_length=1, max_length=255)
    quantity: int = Field(1, description="Number of pieces", ge=1)
    weight: float = Field(..., description="Weight in kilograms", ge=0)
    price: Decimal = Field(..., description="Declared item price", ge=0)

    def to_entity(self) -> ParcelItem:
        return ParcelItem(**self.model_dump())


class ParcelRequest(BaseModel):
    """Request schema for a parcel; its price is computed by the service."""
    
    weight: float = Field(..., description="Weight in kilograms", gt=0)
    length: float = Field(..., description="Longest side in centimetres", gt=0)
    width: float = Field(..., description="Width in centimetres", gt=0)
    height: float = Field(..., description="Height in centimetres", gt=0)
    declared_price: Decimal = Field(Decimal("0"), description="Value declared by the sender", ge=0)
    parcel_items: list[ParcelItemRequest] = Field(default_factory=list, description="Packed items")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "weight": 3,
                    "length": 25,
                    "width": 20,
                    "height": 10,
                    "declared_price": "8.5",
                    "parcel_items": [
                        {"name": "Shoes", "quantity": 1, "weight": 1.2, "price": "40"}
                    ]
                }
            ]
        }
    }

    def to_entity(self) -> Parcel:
        return Parcel(
            weight=self.weight,
            length=self.length,
            width=self.width,
            height=self.height,
            declared_price=self.declared_price,
            parcel_items=[item.to_entity() for item in self.parcel_items],
        )


class ShipmentRequest(BaseModel):
    """Request schema for creating a shipment."""
    
    sender_id: int = Field(..., description="Sending client")
    recipient_id: int = Field(..., description="Receiving client")
    delivery_type: DeliveryType = Field(DeliveryType.W2W, description="Warehouse/door handover at each end")
    post_pay: Decimal = Field(Decimal("0"), description="Cash on delivery amount", ge=0)
    description: str = Field("", description="Free text description", max_length=1000)
    parcels: list[ParcelRequest] = Field(default_factory=list, description="Parcels of the shipment")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "sender_id": 1,
                    "recipient_id": 2,
                    "delivery_type": "W2D",
                    "post_pay": "15",
                    "description": "Fragile",
                    "parcels": [
                        {"weight": 0.4, "length": 20, "width": 10, "height": 5}
                    ]
                }
            ]
        }
    }

    def to_entity(self) -> Shipment:
        return Shipment(
            sender=Client(id=self.sender_id),
            recipient=Client(id=self.recipient_id),
            delivery_type=self.delivery_type,
            post_pay=self.post_pay,
            description=self.description,
            parcels=[parcel.to_entity() for parcel in self.parcels],
        )


class ShipmentUpdateRequest(UpdateRequest):
    """Partial shipment update; parcels are changed through the parcel routes."""
    
    sender_id: Optional[int] = None
    recipient_id: Optional[int] = None
    delivery_type: Optional[DeliveryType] = None
    post_pay: Optional[Decimal] = Field(None, ge=0)
    description: Optional[str] = Field(None, max_length=1000)

    def to_changes(self) -> dict[str, Any]:
        changes = super().to_changes()
        if "sender_id" in changes:
            changes["sender"] = Client(id=changes.pop("sender_id"))
        if "recipient_id" in changes:
            changes["recipient"] = Client(id=changes.pop("recipient_id"))
        return changes


class ParcelItemResponse(BaseModel):
    id: Optional[int] = None
    name: str
    quantity: int
    weight: float
    price: Decimal
    
    model_config = {"from_attributes": True}


class ParcelResponse(BaseModel):
    id: Optional[int] = Field(None, description="Parcel ID")
    shipment_id: Optional[int] = Field(None, description="Owning shipment")
    weight: float
    length: float
    width: float
    height: float
    declared_price: Decimal
    price: Decimal = Field(..., description="Delivery price from the tariff grid")
    parcel_items: list[ParcelItemResponse] = Field(default_factory=list)
    
    model_config = {"from_attributes": True}


class ShipmentResponse(BaseModel):
    """Response schema for a shipment."""
    
    id: int = Field(..., description="Shipment ID")
    sender: Optional[ClientResponse] = None
    recipient: Optional[ClientResponse] = None
    delivery_type: DeliveryType
    price: Decimal = Field(..., description="Sum of the parcel prices")
    post_pay: Decimal
    description: str = ""
    barcode: Optional[BarcodeInnerNumberResponse] = None
    tracking_code: Optional[str] = Field(None, description="Postcode followed by the barcode number")
    parcels: Optional[list[ParcelResponse]] = None
    
    model_config = {"from_attributes": True}

    @field_validator("tracking_code", mode="before")
    @classmethod
    def _tracking_code_to_str(cls, value: Any) -> Optional[str]:
        return str(value) if value is not None else None
