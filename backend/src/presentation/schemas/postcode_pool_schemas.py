"""Postcode pool and barcode Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, Field

from domain.entities import BarcodeInnerNumber, PostcodePool
from domain.enums import BarcodeStatus
from presentation.schemas.common_schemas import UpdateRequest


class BarcodeInnerNumberRequest(BaseModel):
    """Request schema for registering a barcode number in a pool."""
    
    inner_number: str = Field(
        ...,
        description="Zero padded seven digit number",
        pattern=r"^\d{7}$"
    )
    status: BarcodeStatus = Field(BarcodeStatus.RESERVED, description="Barcode status")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "inner_number": "0000004",
                    "status": "RESERVED"
                }
            ]
        }
    }

    def to_entity(self) -> BarcodeInnerNumber:
        return BarcodeInnerNumber(inner_number=self.inner_number, status=self.status)


class BarcodeInnerNumberUpdateRequest(UpdateRequest):
    inner_number: Optional[str] = Field(None, pattern=r"^\d{7}$")
    status: Optional[BarcodeStatus] = None


class BarcodeInnerNumberResponse(BaseModel):
    id: int = Field(..., description="Barcode ID")
    inner_number: str = Field(..., description="Zero padded seven digit number")
    status: BarcodeStatus = Field(..., description="Barcode status")
    
    model_config = {"from_attributes": True}


class PostcodePoolRequest(BaseModel):
    """Request schema for creating a postcode pool."""
    
    postcode: str = Field(..., description="Five digit postcode", pattern=r"^\d{5}$")
    closed: bool = Field(False, description="Whether the pool stopped issuing barcodes")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "postcode": "00003",
                    "closed": False
                }
            ]
        }
    }

    def to_entity(self) -> PostcodePool:
        return PostcodePool(postcode=self.postcode, closed=self.closed)


class PostcodePoolUpdateRequest(UpdateRequest):
    postcode: Optional[str] = Field(None, pattern=r"^\d{5}$")
    closed: Optional[bool] = None


class PostcodePoolResponse(BaseModel):
    id: int = Field(..., description="Postcode pool ID")
    postcode: str = Field(..., description="Five digit postcode")
    closed: bool = Field(..., description="Whether the pool stopped issuing barcodes")
    barcode_inner_numbers: list[BarcodeInnerNumberResponse] = Field(
        default_factory=list,
        description="Issued barcodes; empty when the pool is nested in another record"
    )
    
    model_config = {"from_attributes": True}
