"""Unit tests for TrackingCode value object."""

import pytest
from domain.value_objects import TrackingCode


class TestTrackingCodeValidation:
    """Test TrackingCode validation logic."""

    def test_valid_tracking_code_creation(self):
        code = TrackingCode(postcode="00003", inner_number="0000001")
        assert code.postcode == "00003"
        assert code.inner_number == "0000001"

    @pytest.mark.parametrize("postcode", ["", "0003", "000030", "0000a"])
    def test_invalid_postcode_raises_error(self, postcode):
        with pytest.raises(ValueError, match="Postcode must be 5 digits"):
            TrackingCode(postcode=postcode, inner_number="0000001")

    @pytest.mark.parametrize("inner_number", ["", "000001", "00000001", "00000x1"])
    def test_invalid_inner_number_raises_error(self, inner_number):
        with pytest.raises(ValueError, match="Inner number must be 7 digits"):
            TrackingCode(postcode="00003", inner_number=inner_number)

    def test_tracking_code_is_immutable(self):
        code = TrackingCode(postcode="00003", inner_number="0000001")
        with pytest.raises(AttributeError):
            code.postcode = "00004"


class TestTrackingCodeFormatting:

    def test_str_is_twelve_characters(self):
        """Test __str__ joins postcode and inner number."""
        code = TrackingCode(postcode="00003", inner_number="0000042")
        assert str(code) == "000030000042"
        assert len(str(code)) == 12
