"""Address record and bias point types, and parsing of raw geocoder-style records.

Raw records follow the Nominatim ``addressdetails`` shape used by both the
static dataset and the reverse geocoder::

    {"address": {"house_number": ..., "road": ..., "city": ..., "town": ...,
                 "village": ..., "state": ..., "postcode": ...},
     "lat": "39.78", "lon": "-89.65"}
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from address_resolver.lib.resolver.errors import MalformedRecordError

# Text components read from the raw ``address`` block, in schema order
ADDRESS_FIELDS = ("house_number", "road", "city", "town", "village", "state", "postcode")


@dataclass(frozen=True)
class AddressRecord:
    """One postal location.

    ``city``, ``town`` and ``village`` are kept apart so the locality
    fallback chains in :mod:`address_resolver.lib.resolver.normalize` can
    resolve them. Records are immutable; edits produce a new record.
    """

    latitude: float
    longitude: float
    house_number: str = ""
    road: str = ""
    city: str = ""
    town: str = ""
    village: str = ""
    state: str = ""
    postcode: str = ""


@dataclass(frozen=True)
class BiasPoint:
    """Approximate user location used only to re-order matches."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (-90 <= self.latitude <= 90):
            msg = f"latitude must be between -90 and 90, got {self.latitude}"
            raise ValueError(msg)
        if not (-180 <= self.longitude <= 180):
            msg = f"longitude must be between -180 and 180, got {self.longitude}"
            raise ValueError(msg)


_COORDINATE_LIMITS = {"lat": 90.0, "lon": 180.0}


def _check_coordinate(value: float, name: str, index: int | None) -> float:
    if not math.isfinite(value):
        raise MalformedRecordError(f"non-finite {name}: {value!r}", index)
    limit = _COORDINATE_LIMITS[name]
    if not -limit <= value <= limit:
        raise MalformedRecordError(f"{name} out of range: {value!r}", index)
    return value


def _parse_coordinate(value: Any, name: str, index: int | None) -> float:
    """Parse a latitude/longitude that may arrive as a numeric string."""
    if value is None or isinstance(value, bool):
        raise MalformedRecordError(f"missing {name}", index)
    try:
        parsed = float(value)
    except (TypeError, ValueError) as e:
        raise MalformedRecordError(f"unparsable {name}: {value!r}", index) from e
    return _check_coordinate(parsed, name, index)


def validate_record(record: AddressRecord, index: int | None = None) -> AddressRecord:
    """Apply the coordinate checks of :func:`parse_record` to an already-built record.

    Raises:
        MalformedRecordError: If a coordinate is non-finite or out of range.
    """
    _check_coordinate(record.latitude, "lat", index)
    _check_coordinate(record.longitude, "lon", index)
    return record


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def parse_record(raw: Mapping[str, Any], index: int | None = None) -> AddressRecord:
    """Parse a raw geocoder-style record into an AddressRecord.

    Missing address components are treated as empty strings; only the
    coordinates are required.

    Args:
        raw: Mapping in the input schema (``address`` block plus ``lat``/``lon``).
        index: Optional position of the record in its source, for error messages.

    Returns:
        The parsed AddressRecord.

    Raises:
        MalformedRecordError: If the record is not a mapping or its
            coordinates are missing, unparsable or out of range.
    """
    if not isinstance(raw, Mapping):
        raise MalformedRecordError(f"expected a mapping, got {type(raw).__name__}", index)

    latitude = _parse_coordinate(raw.get("lat"), "lat", index)
    longitude = _parse_coordinate(raw.get("lon"), "lon", index)

    address = raw.get("address")
    if not isinstance(address, Mapping):
        address = {}

    components = {key: _text(address.get(key)) for key in ADDRESS_FIELDS}
    return AddressRecord(latitude=latitude, longitude=longitude, **components)
