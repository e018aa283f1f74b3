"""Post office Pydantic schemas."""

from typing import Any, Optional
from pydantic import BaseModel, Field

from domain.entities import Address, PostcodePool, PostOffice
from presentation.schemas.address_schemas import AddressResponse
from presentation.schemas.postcode_pool_schemas import PostcodePoolResponse
from presentation.schemas.common_schemas import UpdateRequest


class PostOfficeRequest(BaseModel):
    """Request schema for creating a post office."""
    
    name: str = Field(..., description="Post office name", min_length=1, max_length=255)
    address_id: Optional[int] = Field(None, description="Post office address")
    postcode_pool_id: Optional[int] = Field(None, description="Postcode pool of the office")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Lviv post office",
                    "address_id": 1,
                    "postcode_pool_id": 3
                }
            ]
        }
    }

    def to_entity(self) -> PostOffice:
        return PostOffice(
            name=self.name,
            address=Address(id=self.address_id) if self.address_id is not None else None,
            postcode_pool=PostcodePool(id=self.postcode_pool_id) if self.postcode_pool_id is not None else None,
        )


class PostOfficeUpdateRequest(UpdateRequest):
    nullable_fields = frozenset({"address_id", "postcode_pool_id"})

    name: Optional[str] = Field(None, max_length=255)
    address_id: Optional[int] = None
    postcode_pool_id: Optional[int] = None

    def to_changes(self) -> dict[str, Any]:
        changes = super().to_changes()
        if "address_id" in changes:
            address_id = changes.pop("address_id")
            changes["address"] = Address(id=address_id) if address_id is not None else None
        if "postcode_pool_id" in changes:
            pool_id = changes.pop("postcode_pool_id")
            changes["postcode_pool"] = PostcodePool(id=pool_id) if pool_id is not None else None
        return changes


class PostOfficeResponse(BaseModel):
    id: int = Field(..., description="Post office ID")
    name: str
    address: Optional[AddressResponse] = None
    postcode_pool: Optional[PostcodePoolResponse] = None
    
    model_config = {"from_attributes": True}
