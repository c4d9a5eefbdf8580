"""In-memory address record store.

Holds the materialized dataset. Read-only after ``load``; safe to share
between sessions.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from address_resolver.lib.resolver.errors import LoadError, MalformedRecordError
from address_resolver.lib.resolver.records import AddressRecord, parse_record, validate_record


@dataclass
class LoadResult:
    """Outcome of a store load.

    Attributes:
        loaded: Number of records placed in the store.
        dropped: Number of malformed records skipped.
        errors: One error per dropped record, in input order.
    """

    loaded: int = 0
    dropped: int = 0
    errors: list[MalformedRecordError] = field(default_factory=list)


class AddressStore:
    """Immutable view over a loaded address dataset."""

    def __init__(self, records: Sequence[AddressRecord | Mapping[str, Any]] | None = None) -> None:
        self._records: tuple[AddressRecord, ...] = ()
        if records is not None:
            self.load(records)

    def load(self, records: Sequence[AddressRecord | Mapping[str, Any]]) -> LoadResult:
        """Replace the store contents.

        Entries may be raw geocoder-style mappings or AddressRecord
        instances. Malformed entries are skipped and reported in the result.

        Args:
            records: Sequence of records to load.

        Returns:
            LoadResult with loaded/dropped counts.

        Raises:
            LoadError: If ``records`` is not a sequence of records. The
                previous contents are kept.
        """
        if isinstance(records, str | bytes | Mapping) or not isinstance(records, Sequence):
            msg = f"Expected a sequence of address records, got {type(records).__name__}"
            raise LoadError(msg)

        result = LoadResult()
        parsed: list[AddressRecord] = []

        for i, raw in enumerate(records):
            try:
                if isinstance(raw, AddressRecord):
                    parsed.append(validate_record(raw, index=i))
                else:
                    parsed.append(parse_record(raw, index=i))
            except MalformedRecordError as e:
                logger.warning(f"Skipping malformed address {e}")
                result.errors.append(e)

        self._records = tuple(parsed)
        result.loaded = len(parsed)
        result.dropped = len(result.errors)

        logger.info(f"Loaded {result.loaded} addresses ({result.dropped} dropped)")
        return result

    def all(self) -> tuple[AddressRecord, ...]:
        """Return every record in insertion order."""
        return self._records

    def __len__(self) -> int:
        return len(self._records)
