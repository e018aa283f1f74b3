"""Domain Value Objects - Immutable objects without identity."""

from .tracking_code import TrackingCode, POSTCODE_LENGTH, INNER_NUMBER_LENGTH

__all__ = ["TrackingCode", "POSTCODE_LENGTH", "INNER_NUMBER_LENGTH"]
