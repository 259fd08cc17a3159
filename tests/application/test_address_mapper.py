"""Tests for the wire-to-domain address mapping."""

from application.mapping import map_address
from domain.models import Address
from integration.models import AddressDto


def test_maps_state_to_region() -> None:
    dto = AddressDto(street="1 Main St", city="Springfield", state="IL", postal_code="62701", country="USA")

    assert map_address(dto) == Address(street="1 Main St", city="Springfield", region="IL", postal_code="62701", country="USA")


def test_missing_optional_fields_stay_empty() -> None:
    address = map_address(AddressDto(street="1 Main St", city="Springfield"))

    assert address.region is None
    assert address.postal_code is None
    assert address.country is None


def test_equal_inputs_map_to_equal_addresses() -> None:
    dto = AddressDto(street="1 Main St", city="Springfield")

    assert map_address(dto) == map_address(AddressDto(street="1 Main St", city="Springfield"))
