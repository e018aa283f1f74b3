"""Address entity shared by clients and post offices."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Address:
    """
    Postal address.

    Attributes:
        id: Identifier assigned by the store
        postcode: Five digit postcode
        region: Region (oblast) name
        district: District name, may be empty for cities of regional rank
        city: City or settlement name
        street: Street name
        house_number: House number
        apartment_number: Apartment number, empty for private houses
    """

    postcode: str = ""
    region: str = ""
    district: str = ""
    city: str = ""
    street: str = ""
    house_number: str = ""
    apartment_number: str = ""
    id: Optional[int] = None

    def is_in_same_region(self, other: "Address") -> bool:
        """Check whether both addresses lie in the same region."""
        return _normalized(self.region) == _normalized(other.region)

    def is_in_same_town(self, other: "Address") -> bool:
        """Check whether both addresses lie in the same town of the same region."""
        return self.is_in_same_region(other) and _normalized(self.city) == _normalized(other.city)

    def __str__(self) -> str:
        parts = [self.street, self.house_number]
        if self.apartment_number:
            parts.append(f"apt. {self.apartment_number}")
        parts.extend(p for p in (self.city, self.district, self.region) if p)
        parts.append(self.postcode)
        return ", ".join(p for p in parts if p)


def _normalized(value: Optional[str]) -> str:
    return (value or "").strip().lower()
