"""Error taxonomy for the address resolution core.

Every error raised by the core is recoverable at the call boundary: a
malformed record is dropped, an invalid transition leaves the state
machine untouched.
"""


class ResolverError(Exception):
    """Base class for all address resolution errors."""


class LoadError(ResolverError):
    """Raised when a dataset (or one of its records) cannot be loaded."""


class MalformedRecordError(LoadError):
    """Raised when a record lacks parseable coordinates.

    Args:
        message: Human-readable description of the defect.
        index: Position of the record in its source sequence, when known.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        self.message = message
        self.index = index
        prefix = f"record {index}: " if index is not None else ""
        super().__init__(f"{prefix}{message}")


class InvalidTransitionError(ResolverError):
    """Raised when a selection operation is not allowed in the current state.

    Args:
        operation: Name of the rejected operation (e.g. ``save_edit``).
        state: State the machine was in when the operation was attempted.
    """

    def __init__(self, operation: str, state: str) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while {state}")
