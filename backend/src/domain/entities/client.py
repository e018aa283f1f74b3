"""Client and counterparty entities."""

from dataclasses import dataclass
from typing import Optional

from domain.entities.address import Address
from domain.entities.postcode_pool import PostcodePool


@dataclass
class Counterparty:
    """
    A contracted business sending shipments through the post.

    Barcodes for its shipments are issued from its postcode pool.
    """

    name: str = ""
    postcode_pool: Optional[PostcodePool] = None
    description: str = ""
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"Counterparty(id={self.id}, name={self.name})"


@dataclass
class Client:
    """
    A sender or recipient of shipments.

    Attributes:
        name: Person or company name
        uniq_registration_number: Tax or registry number of the client
        address: Postal address, used to pick the tariff zone
        counterparty: Counterparty the client belongs to
        phone_number: Optional contact phone
    """

    name: str = ""
    uniq_registration_number: str = ""
    address: Optional[Address] = None
    counterparty: Optional[Counterparty] = None
    phone_number: Optional[str] = None
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"Client(id={self.id}, name={self.name})"
