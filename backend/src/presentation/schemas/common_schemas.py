"""Schemas shared by all endpoints."""

from typing import Any, ClassVar

from pydantic import BaseModel, Field, model_validator


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="API version")
    environment: str = Field(..., description="Deployment environment")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "service": "Postal Back Office",
                    "version": "1.0.0",
                    "environment": "development"
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Body returned by the domain error handlers."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human readable message")
    details: dict = Field(default_factory=dict, description="Extra error context")


class DeleteResponse(BaseModel):
    """Confirmation of a successful delete."""
    
    deleted: bool = Field(True, description="Whether the record was deleted")
    id: int = Field(..., description="Deleted record ID")


class UpdateRequest(BaseModel):
    """
    Base of partial update requests.

    Only fields present in the request body are changed. Fields named in
    ``nullable_fields`` may be sent as null to clear them; a null for any
    other field is rejected.
    """
    
    nullable_fields: ClassVar[frozenset[str]] = frozenset()
    
    @model_validator(mode="after")
    def reject_nulls(self):
        nulls = sorted(
            name for name in self.model_fields_set
            if getattr(self, name) is None and name not in self.nullable_fields
        )
        if nulls:
            raise ValueError(f"Fields can't be null: {', '.join(nulls)}")
        return self
    
    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
