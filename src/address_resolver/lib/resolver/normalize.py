"""Display lines and the canonical hand-off shape for address records.

The same functions format candidate rows, the confirm screen and the
confirmed hand-off, so display and confirmation cannot drift apart. All
functions are pure and total: empty components render as empty strings.
"""

from dataclasses import dataclass

from address_resolver.lib.resolver.records import AddressRecord


@dataclass(frozen=True)
class CanonicalAddress:
    """Normalized address handed to consumers of a confirmed selection.

    ``line2`` carries the unit/secondary line only; it is never merged
    into ``line1``.
    """

    line1: str
    line2: str
    city: str
    state: str
    zip: str

    def to_dict(self) -> dict[str, str]:
        """Convert to the external output schema.

        Returns:
            Dictionary with ``addressLine1``, ``addressLine2``, ``city``,
            ``state`` and ``zip`` keys.
        """
        return {
            "addressLine1": self.line1,
            "addressLine2": self.line2,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
        }


def city_name(record: AddressRecord) -> str:
    """Resolve the display locality: city, then town, then village."""
    return record.city or record.town or record.village or ""


def structured_city(record: AddressRecord) -> str:
    """Resolve the locality used for structured output: city, then town."""
    return record.city or record.town or ""


def street_line(record: AddressRecord) -> str:
    """Build the street line, e.g. ``742 Evergreen Terrace``."""
    return f"{record.house_number} {record.road}".strip()


def locality_line(record: AddressRecord) -> str:
    """Build the locality line, e.g. ``Springfield IL, 62704``."""
    return f"{city_name(record)} {record.state}, {record.postcode}"


def display_lines(record: AddressRecord) -> tuple[str, str]:
    """Return the (street, locality) pair shown for a record."""
    return street_line(record), locality_line(record)


def to_canonical(record: AddressRecord, unit: str | None = None) -> CanonicalAddress:
    """Derive the canonical hand-off shape from a record.

    Args:
        record: Store record or session working copy.
        unit: Optional unit/secondary line (apartment, suite).

    Returns:
        CanonicalAddress for the record.
    """
    return CanonicalAddress(
        line1=street_line(record),
        line2=unit or "",
        city=structured_city(record),
        state=record.state,
        zip=record.postcode,
    )
