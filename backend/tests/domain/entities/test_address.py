"""Unit tests for Address entity."""

from domain.entities import Address


class TestAddressZones:

    def test_same_town_ignores_case_and_whitespace(self):
        first = Address(region="Ternopil", city="Ternopil")
        second = Address(region=" ternopil", city="TERNOPIL ")
        assert first.is_in_same_town(second)
        assert first.is_in_same_region(second)

    def test_same_region_different_town(self):
        first = Address(region="Ternopil", city="Ternopil")
        second = Address(region="Ternopil", city="Monastiriska")
        assert first.is_in_same_region(second)
        assert not first.is_in_same_town(second)

    def test_same_city_name_in_other_region_is_not_same_town(self):
        """Towns with equal names in different regions are different towns."""
        first = Address(region="Kharkiv", city="Pervomaiskyi")
        second = Address(region="Mykolaiv", city="Pervomaiskyi")
        assert not first.is_in_same_town(second)
        assert not first.is_in_same_region(second)


def test_str_skips_empty_parts():
    address = Address(postcode="00002", region="Kiev", city="Kiev", street="Khreschatik", house_number="121")
    assert str(address) == "Khreschatik, 121, Kiev, Kiev, 00002"
