"""Address Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, Field

from domain.entities import Address
from presentation.schemas.common_schemas import UpdateRequest


class AddressBase(BaseModel):
    postcode: str = Field(..., description="Five digit postcode", min_length=5, max_length=5)
    region: str = Field(..., description="Region name", min_length=1, max_length=100)
    district: str = Field("", description="District name", max_length=100)
    city: str = Field(..., description="City or settlement", min_length=1, max_length=100)
    street: str = Field(..., description="Street name", min_length=1, max_length=200)
    house_number: str = Field(..., description="House number", min_length=1, max_length=20)
    apartment_number: str = Field("", description="Apartment number", max_length=20)


class AddressRequest(AddressBase):
    """Request schema for creating an address."""
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "postcode": "00002",
                    "region": "Kiev",
                    "district": "",
                    "city": "Kiev",
                    "street": "Khreschatik",
                    "house_number": "121",
                    "apartment_number": "37"
                }
            ]
        }
    }

    def to_entity(self) -> Address:
        return Address(**self.model_dump())


class AddressUpdateRequest(UpdateRequest):
    """Partial address update; only the given fields are changed."""
    
    postcode: Optional[str] = Field(None, min_length=5, max_length=5)
    region: Optional[str] = Field(None, max_length=100)
    district: Optional[str] = Field(None, max_length=100)
    city: Optional[str] = Field(None, max_length=100)
    street: Optional[str] = Field(None, max_length=200)
    house_number: Optional[str] = Field(None, max_length=20)
    apartment_number: Optional[str] = Field(None, max_length=20)


class AddressResponse(BaseModel):
    """Response schema for an address."""
    
    id: int = Field(..., description="Address ID")
    postcode: str
    region: str
    district: str = ""
    city: str
    street: str
    house_number: str
    apartment_number: str = ""
    
    model_config = {"from_attributes": True}
