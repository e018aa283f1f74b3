"""Postcode pool and barcode inner number entities."""

from dataclasses import dataclass, field
from typing import Optional

from domain.enums import BarcodeStatus
from domain.value_objects import INNER_NUMBER_LENGTH

MAX_INNER_NUMBER = 10 ** INNER_NUMBER_LENGTH - 1


@dataclass
class BarcodeInnerNumber:
    """
    A unique number issued from a postcode pool.

    Attributes:
        inner_number: Zero padded seven digit number
        status: Whether the number is only reserved or already printed
    """

    inner_number: str = ""
    status: BarcodeStatus = BarcodeStatus.RESERVED
    id: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate inner number format."""
        if len(self.inner_number) != INNER_NUMBER_LENGTH or not self.inner_number.isdigit():
            raise ValueError(f"Inner number must be {INNER_NUMBER_LENGTH} digits")

    @property
    def sequence(self) -> int:
        return int(self.inner_number)


@dataclass
class PostcodePool:
    """
    Inventory of tracking codes belonging to one postcode.

    Counterparties and post offices each own a pool. When a pool is
    loaded through other aggregates, ``barcode_inner_numbers`` is left empty.
    """

    postcode: str = ""
    closed: bool = False
    barcode_inner_numbers: list[BarcodeInnerNumber] = field(default_factory=list)
    id: Optional[int] = None

    def next_inner_number(self) -> Optional[str]:
        """
        Get the number following the highest one issued so far.

        Returns:
            Zero padded number, or None when the pool is exhausted
        """
        last = max((b.sequence for b in self.barcode_inner_numbers), default=0)
        if last >= MAX_INNER_NUMBER:
            return None
        return str(last + 1).zfill(INNER_NUMBER_LENGTH)

    def close(self) -> None:
        self.closed = True

    def __str__(self) -> str:
        return f"PostcodePool(id={self.id}, postcode={self.postcode}, closed={self.closed})"
