"""Unit tests for DeliveryType enum."""

import pytest
from domain.enums import DeliveryType


@pytest.mark.parametrize(
    "delivery_type, door_legs",
    [
        (DeliveryType.W2W, 0),
        (DeliveryType.W2D, 1),
        (DeliveryType.D2W, 1),
        (DeliveryType.D2D, 2),
    ],
)
def test_door_legs(delivery_type, door_legs):
    assert delivery_type.door_legs == door_legs


def test_delivery_type_from_value():
    """Stored string values map back to members."""
    assert DeliveryType("D2W") is DeliveryType.D2W
    assert str(DeliveryType.W2D) == "W2D"
