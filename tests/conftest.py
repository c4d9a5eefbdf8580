"""Shared test fixtures: raw address records, a loaded store, and a session."""

from typing import Any

import pytest

from address_resolver.lib.resolver import AddressSession, AddressStore


def make_raw(
    house_number: str | None = None,
    road: str | None = None,
    *,
    lat: Any = "39.78",
    lon: Any = "-89.65",
    **address: str,
) -> dict[str, Any]:
    """Build a raw geocoder-style record."""
    components: dict[str, Any] = {"house_number": house_number, "road": road, **address}
    return {"address": {k: v for k, v in components.items() if v is not None}, "lat": lat, "lon": lon}


@pytest.fixture
def raw_records() -> list[dict[str, Any]]:
    """Small Springfield-area dataset in store order."""
    return [
        make_raw(
            "742", "Evergreen Terrace", city="Springfield", state="IL", postcode="62704", lat="39.7817", lon="-89.6501"
        ),
        make_raw("100", "Main Street", city="Springfield", state="IL", postcode="62701", lat="39.8017", lon="-89.6436"),
        make_raw("12", "Elm Street", town="Chatham", state="IL", postcode="62629", lat="39.6761", lon="-89.7045"),
        make_raw("7", "Church Road", village="Rochester", state="IL", postcode="62563", lat="39.7495", lon="-89.5318"),
        make_raw(
            "305", "Washington Street", city="Decatur", state="IL", postcode="62523", lat="39.8403", lon="-88.9548"
        ),
    ]


@pytest.fixture
def store(raw_records: list[dict[str, Any]]) -> AddressStore:
    """Store loaded with ``raw_records``."""
    return AddressStore(raw_records)


@pytest.fixture
def session(store: AddressStore) -> AddressSession:
    """Unbiased session over ``store``."""
    return AddressSession(store)
