"""Client and counterparty Pydantic schemas."""

from typing import Any, Optional
from pydantic import BaseModel, Field

from domain.entities import Address, Client, Counterparty, PostcodePool
from presentation.schemas.address_schemas import AddressResponse
from presentation.schemas.postcode_pool_schemas import PostcodePoolResponse
from presentation.schemas.common_schemas import UpdateRequest


class CounterpartyRequest(BaseModel):
    """Request schema for creating a counterparty."""
    
    name: str = Field(..., description="Counterparty name", min_length=1, max_length=255)
    description: str = Field("", description="Free text description", max_length=1000)
    postcode_pool_id: Optional[int] = Field(None, description="Postcode pool issuing its barcodes")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Modna kasta",
                    "description": "Online clothing store",
                    "postcode_pool_id": 2
                }
            ]
        }
    }

    def to_entity(self) -> Counterparty:
        return Counterparty(
            name=self.name,
            description=self.description,
            postcode_pool=PostcodePool(id=self.postcode_pool_id) if self.postcode_pool_id is not None else None,
        )


class CounterpartyUpdateRequest(UpdateRequest):
    nullable_fields = frozenset({"postcode_pool_id"})

    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    postcode_pool_id: Optional[int] = None

    def to_changes(self) -> dict[str, Any]:
        changes = super().to_changes()
        if "postcode_pool_id" in changes:
            pool_id = changes.pop("postcode_pool_id")
            changes["postcode_pool"] = PostcodePool(id=pool_id) if pool_id is not None else None
        return changes


class CounterpartyResponse(BaseModel):
    id: int = Field(..., description="Counterparty ID")
    name: str
    description: str = ""
    postcode_pool: Optional[PostcodePoolResponse] = None
    
    model_config = {"from_attributes": True}


class ClientRequest(BaseModel):
    """Request schema for creating a client."""
    
    name: str = Field(..., description="Person or company name", min_length=1, max_length=255)
    uniq_registration_number: str = Field(
        ...,
        description="Tax or registry number",
        min_length=1,
        max_length=50
    )
    phone_number: Optional[str] = Field(None, description="Contact phone", max_length=30)
    address_id: Optional[int] = Field(None, description="Client address")
    counterparty_id: Optional[int] = Field(None, description="Counterparty the client belongs to")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "FOP Ivanov",
                    "uniq_registration_number": "001",
                    "phone_number": "+380501234567",
                    "address_id": 1,
                    "counterparty_id": 1
                }
            ]
        }
    }

    def to_entity(self) -> Client:
        return Client(
            name=self.name,
            uniq_registration_number=self.uniq_registration_number,
            phone_number=self.phone_number,
            address=Address(id=self.address_id) if self.address_id is not None else None,
            counterparty=Counterparty(id=self.counterparty_id) if self.counterparty_id is not None else None,
        )


class ClientUpdateRequest(UpdateRequest):
    nullable_fields = frozenset({"phone_number", "address_id", "counterparty_id"})

    name: Optional[str] = Field(None, max_length=255)
    uniq_registration_number: Optional[str] = Field(None, max_length=50)
    phone_number: Optional[str] = Field(None, max_length=30)
    address_id: Optional[int] = None
    counterparty_id: Optional[int] = None

    def to_changes(self) -> dict[str, Any]:
        changes = super().to_changes()
        if "address_id" in changes:
            address_id = changes.pop("address_id")
            changes["address"] = Address(id=address_id) if address_id is not None else None
        if "counterparty_id" in changes:
            counterparty_id = changes.pop("counterparty_id")
            changes["counterparty"] = Counterparty(id=counterparty_id) if counterparty_id is not None else None
        return changes


class ClientResponse(BaseModel):
    id: int = Field(..., description="Client ID")
    name: str
    uniq_registration_number: str
    phone_number: Optional[str] = None
    address: Optional[AddressResponse] = None
    counterparty: Optional[CounterpartyResponse] = None
    
    model_config = {"from_attributes": True}
