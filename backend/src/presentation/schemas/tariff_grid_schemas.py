"""Tariff grid Pydantic schemas."""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from domain.entities import TariffGrid
from domain.enums import W2wVariation
from presentation.schemas.common_schemas import UpdateRequest


class TariffGridRequest(BaseModel):
    """Request schema for creating a tariff row."""
    
    weight: float = Field(..., description="Maximum weight in kilograms", gt=0)
    length: float = Field(..., description="Maximum length in centimetres", gt=0)
    w2w_variation: W2wVariation = Field(..., description="Distance zone")
    price: Decimal = Field(..., description="Base price", ge=0)
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "weight": 0.5,
                    "length": 30,
                    "w2w_variation": "TOWN",
                    "price": "15"
                }
            ]
        }
    }

    def to_entity(self) -> TariffGrid:
        return TariffGrid(**self.model_dump())


class TariffGridUpdateRequest(UpdateRequest):
    weight: Optional[float] = Field(None, gt=0)
    length: Optional[float] = Field(None, gt=0)
    w2w_variation: Optional[W2wVariation] = None
    price: Optional[Decimal] = Field(None, ge=0)


class TariffGridResponse(BaseModel):
    id: int = Field(..., description="Tariff row ID")
    weight: float
    length: float
    w2w_variation: W2wVariation
    price: Decimal
    
    model_config = {"from_attributes": True}
