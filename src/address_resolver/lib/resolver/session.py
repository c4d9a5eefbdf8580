"""Per-user address session tying search, bias point and selection together.

One session is one logical user flow: it owns its search engine (and the
last-results cache), the optional bias point and the selection state
machine. The store is shared read-only, so many sessions may use it.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from address_resolver.lib.resolver.normalize import CanonicalAddress
from address_resolver.lib.resolver.records import AddressRecord, BiasPoint, parse_record
from address_resolver.lib.resolver.search import SearchEngine
from address_resolver.lib.resolver.selection import (
    ConfirmListener,
    EditFields,
    SelectionListener,
    SelectionState,
    SelectionStateMachine,
)
from address_resolver.lib.resolver.store import AddressStore


class AddressSession:
    """Search-then-confirm flow for a single user."""

    def __init__(self, store: AddressStore, bias: BiasPoint | None = None) -> None:
        self._store = store
        self._engine = SearchEngine(store)
        self._selection = SelectionStateMachine()
        self._bias = bias
        self._return_query = ""
        self._return_results: tuple[AddressRecord, ...] = ()

    @property
    def store(self) -> AddressStore:
        return self._store

    @property
    def bias(self) -> BiasPoint | None:
        return self._bias

    @property
    def state(self) -> SelectionState:
        return self._selection.state

    @property
    def working_copy(self) -> AddressRecord | None:
        return self._selection.working_copy

    @property
    def last_results(self) -> tuple[AddressRecord, ...]:
        return self._engine.last_results

    def set_bias(self, latitude: float, longitude: float) -> BiasPoint:
        """Set or refresh the bias point used to rank search results."""
        self._bias = BiasPoint(latitude=latitude, longitude=longitude)
        logger.debug(f"Bias point set: {latitude}, {longitude}")
        return self._bias

    def clear_bias(self) -> None:
        self._bias = None

    def search(self, query: str | None) -> tuple[AddressRecord, ...]:
        """Run a ranked prefix search using the session's bias point."""
        return self._engine.search(query, self._bias)

    def select(self, record: AddressRecord) -> AddressRecord:
        """Select a record and remember the search that produced it."""
        self._return_query = self._engine.last_query
        self._return_results = self._engine.last_results
        return self._selection.select(record)

    def return_to_search(self) -> tuple[str, tuple[AddressRecord, ...]]:
        """Go back to the candidate list without re-running the query.

        An open edit is cancelled; the selection itself is kept until the
        next ``select`` or ``reset``.

        Returns:
            The query text and results shown before the last selection.
        """
        if self._selection.editing:
            self._selection.cancel_edit()
        return self._return_query, self._return_results

    def accept_reverse_geocode(
        self,
        result: AddressRecord | Mapping[str, Any],
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> AddressRecord:
        """Select the address resolved for the user's current location.

        Args:
            result: Reverse-geocoder record (raw mapping or parsed record).
            latitude: Device latitude; refreshes the bias point when given
                together with ``longitude``.
            longitude: Device longitude.

        Returns:
            The fresh working copy.

        Raises:
            MalformedRecordError: If a raw result has no parseable coordinates.
                The session is left unchanged.
        """
        record = result if isinstance(result, AddressRecord) else parse_record(result)
        if latitude is not None and longitude is not None:
            self.set_bias(latitude, longitude)
        return self._selection.select(record)

    def begin_edit(self) -> EditFields:
        return self._selection.begin_edit()

    def save_edit(self, line1: str, city: str, state: str, zip: str) -> AddressRecord:  # noqa: A002
        return self._selection.save_edit(line1, city, state, zip)

    def cancel_edit(self) -> None:
        self._selection.cancel_edit()

    def confirm(self, unit: str | None = "") -> CanonicalAddress:
        return self._selection.confirm(unit)

    def reset(self) -> None:
        self._selection.reset()

    def on_selection_changed(self, listener: SelectionListener) -> None:
        self._selection.on_selection_changed(listener)

    def on_confirmed(self, listener: ConfirmListener) -> None:
        self._selection.on_confirmed(listener)
