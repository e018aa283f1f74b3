"""
Domain exceptions for the postal back office.

Missing entities are normally reported by services through ``None``/``False``
results; these exceptions cover rule violations that cannot be expressed
that way.
"""

from typing import Any, Dict, Optional


class PostalError(Exception):
    """Base exception for all postal domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EntityNotFoundError(PostalError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            f"{entity} {entity_id} doesn't exist",
            {"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


class TariffNotFoundError(PostalError):
    """Raised when no tariff row can price a parcel."""
    pass


class PostcodePoolClosedError(PostalError):
    """Raised when a barcode is requested from a closed or exhausted pool."""
    pass
