"""Tracking code value object printed on shipping labels."""

from dataclasses import dataclass

POSTCODE_LENGTH = 5
INNER_NUMBER_LENGTH = 7


@dataclass(frozen=True)
class TrackingCode:
    """
    Immutable tracking code of a shipment.

    Attributes:
        postcode: Postcode of the pool the barcode was issued from
        inner_number: Zero padded sequence number within the pool
    """

    postcode: str
    inner_number: str

    def __post_init__(self) -> None:
        """Validate code parts."""
        if not self.postcode or len(self.postcode) != POSTCODE_LENGTH or not self.postcode.isdigit():
            raise ValueError(f"Postcode must be {POSTCODE_LENGTH} digits")
        if (
            not self.inner_number
            or len(self.inner_number) != INNER_NUMBER_LENGTH
            or not self.inner_number.isdigit()
        ):
            raise ValueError(f"Inner number must be {INNER_NUMBER_LENGTH} digits")

    def __str__(self) -> str:
        return f"{self.postcode}{self.inner_number}"
