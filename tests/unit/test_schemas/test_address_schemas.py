"""Unit tests for address suggestion and hand-off schemas."""

import pytest
from pydantic import ValidationError

from address_resolver.lib.resolver import AddressRecord, to_canonical
from address_resolver.schemas.address import AddressHandoff, AddressSuggestion

EVERGREEN = AddressRecord(
    latitude=39.7817,
    longitude=-89.6501,
    house_number="742",
    road="Evergreen Terrace",
    city="Springfield",
    state="IL",
    postcode="62704",
)


class TestAddressSuggestion:
    """Tests for AddressSuggestion."""

    def test_from_record_uses_display_lines(self) -> None:
        suggestion = AddressSuggestion.from_record(EVERGREEN)
        assert suggestion.line1 == "742 Evergreen Terrace"
        assert suggestion.line2 == "Springfield IL, 62704"
        assert suggestion.latitude == 39.7817

    def test_rejects_out_of_range_latitude(self) -> None:
        with pytest.raises(ValidationError):
            AddressSuggestion(line1="", line2="", latitude=95.0, longitude=0.0)


class TestAddressHandoff:
    """Tests for AddressHandoff."""

    def test_from_canonical_serializes_camel_case(self) -> None:
        handoff = AddressHandoff.from_canonical(to_canonical(EVERGREEN, "Apt 4"))
        assert handoff.model_dump(by_alias=True) == {
            "addressLine1": "742 Evergreen Terrace",
            "addressLine2": "Apt 4",
            "city": "Springfield",
            "state": "IL",
            "zip": "62704",
        }

    def test_populate_by_field_name(self) -> None:
        handoff = AddressHandoff(address_line1="1 Main St", city="Springfield", state="IL", zip="62701")
        assert handoff.address_line2 == ""
