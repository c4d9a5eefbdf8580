"""Selection and edit state machine for a chosen address.

States::

    idle --select--> selected <--begin_edit / save_edit, cancel_edit--> editing
                        |
                     confirm
                        v
                    confirmed --confirm--> confirmed

``select`` and ``reset`` are valid from any state. Every other operation
raises InvalidTransitionError when called from a state that forbids it,
leaving the machine unchanged.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import StrEnum

from loguru import logger

from address_resolver.lib.resolver.errors import InvalidTransitionError
from address_resolver.lib.resolver.normalize import CanonicalAddress, street_line, structured_city, to_canonical
from address_resolver.lib.resolver.records import AddressRecord

SelectionListener = Callable[[AddressRecord], None]
ConfirmListener = Callable[[CanonicalAddress], None]


class SelectionState(StrEnum):
    """Lifecycle state of the current selection."""

    IDLE = "idle"
    SELECTED = "selected"
    EDITING = "editing"
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class EditFields:
    """Editable field values exposed when an edit begins."""

    line1: str
    city: str
    state: str
    zip: str


class SelectionStateMachine:
    """Owns the working copy of the selected address and its lifecycle.

    The working copy is decoupled from the store: edits replace it with a
    new record and never touch the store's instance.
    """

    def __init__(self) -> None:
        self._state = SelectionState.IDLE
        self._working: AddressRecord | None = None
        self._unit = ""
        self._selection_listeners: list[SelectionListener] = []
        self._confirm_listeners: list[ConfirmListener] = []

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def editing(self) -> bool:
        return self._state is SelectionState.EDITING

    @property
    def working_copy(self) -> AddressRecord | None:
        """The selected record including any saved edits, or None when idle."""
        return self._working

    @property
    def unit(self) -> str:
        return self._unit

    def on_selection_changed(self, listener: SelectionListener) -> None:
        """Register a callback invoked with the working copy after each ``select``."""
        self._selection_listeners.append(listener)

    def on_confirmed(self, listener: ConfirmListener) -> None:
        """Register a callback invoked with the canonical address after each ``confirm``."""
        self._confirm_listeners.append(listener)

    def _require(self, operation: str, *allowed: SelectionState) -> AddressRecord:
        if self._state not in allowed or self._working is None:
            raise InvalidTransitionError(operation, self._state.value)
        return self._working

    def select(self, record: AddressRecord) -> AddressRecord:
        """Select a record, discarding any previous selection and its edits.

        Args:
            record: Record chosen from search results or a reverse geocode.

        Returns:
            The fresh working copy.
        """
        self._working = replace(record)
        self._unit = ""
        self._state = SelectionState.SELECTED
        logger.debug(f"Selected address: {street_line(self._working)}")

        for listener in self._selection_listeners:
            listener(self._working)
        return self._working

    def begin_edit(self) -> EditFields:
        """Open the working copy for manual correction.

        Returns:
            The current field values to pre-fill the edit form.

        Raises:
            InvalidTransitionError: Unless the state is ``selected``.
        """
        working = self._require("begin_edit", SelectionState.SELECTED)

        self._state = SelectionState.EDITING
        return EditFields(
            line1=street_line(working),
            city=structured_city(working),
            state=working.state,
            zip=working.postcode,
        )

    def save_edit(self, line1: str, city: str, state: str, zip: str) -> AddressRecord:  # noqa: A002
        """Apply edited fields to the working copy.

        The first whitespace-separated token of ``line1`` becomes the house
        number and the rest becomes the road. Only ``city`` is overwritten, so
        a blank city still falls back to the record's town. Coordinates are
        kept from the original hit even though the text changed.

        Args:
            line1: Street line, e.g. ``100 Main St``.
            city: City name.
            state: State.
            zip: Postal code.

        Returns:
            The updated working copy.

        Raises:
            InvalidTransitionError: Unless the state is ``editing``.
        """
        working = self._require("save_edit", SelectionState.EDITING)

        tokens = line1.split()
        self._working = replace(
            working,
            house_number=tokens[0] if tokens else "",
            road=" ".join(tokens[1:]),
            city=city.strip(),
            state=state.strip(),
            postcode=zip.strip(),
        )
        self._state = SelectionState.SELECTED
        logger.info(f"Address manually edited: {to_canonical(self._working, self._unit).to_dict()}")
        return self._working

    def cancel_edit(self) -> None:
        """Close the edit form without applying pending values.

        Raises:
            InvalidTransitionError: Unless the state is ``editing``.
        """
        self._require("cancel_edit", SelectionState.EDITING)
        self._state = SelectionState.SELECTED

    def confirm(self, unit: str | None = "") -> CanonicalAddress:
        """Confirm the working copy and produce the canonical hand-off.

        Confirming again before a new ``select`` re-normalizes the same
        working copy with the given unit.

        Args:
            unit: Optional unit/secondary line.

        Returns:
            The canonical address.

        Raises:
            InvalidTransitionError: Unless the state is ``selected`` or ``confirmed``.
        """
        working = self._require("confirm", SelectionState.SELECTED, SelectionState.CONFIRMED)

        self._unit = unit or ""
        self._state = SelectionState.CONFIRMED
        canonical = to_canonical(working, self._unit)
        logger.bind(json_output=True, handoff=canonical.to_dict()).info(f"Address confirmed: {canonical.line1}")

        for listener in self._confirm_listeners:
            listener(canonical)
        return canonical

    def reset(self) -> None:
        """Return to ``idle`` and discard the working copy."""
        self._working = None
        self._unit = ""
        self._state = SelectionState.IDLE
