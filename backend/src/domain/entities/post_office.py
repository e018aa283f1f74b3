"""Post office entity."""

from dataclasses import dataclass
from typing import Optional

from domain.entities.address import Address
from domain.entities.postcode_pool import PostcodePool


@dataclass
class PostOffice:
    name: str = ""
    address: Optional[Address] = None
    postcode_pool: Optional[PostcodePool] = None
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"PostOffice(id={self.id}, name={self.name})"
