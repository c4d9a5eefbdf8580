"""Address resolution core — in-memory store, ranked prefix search, selection.

Pure and synchronous: no I/O happens here. Dataset loading and reverse
geocoding live in ``address_resolver.lib.dataset`` and
``address_resolver.lib.geocoder`` and hand their results in as plain values.

Public API:
    - AddressRecord / BiasPoint: Record and bias point types
    - parse_record / validate_record: Parse a raw record or check a built one
    - AddressStore / LoadResult: Read-only dataset and load outcome
    - SearchEngine: Prefix search with proximity ranking
    - SelectionStateMachine / SelectionState / EditFields: Selection lifecycle
    - AddressSession: Per-user composition of search and selection
    - CanonicalAddress / to_canonical / street_line / locality_line / city_name:
      Normalization
    - ResolverError / LoadError / MalformedRecordError / InvalidTransitionError:
      Error taxonomy
"""

from address_resolver.lib.resolver.errors import (
    InvalidTransitionError,
    LoadError,
    MalformedRecordError,
    ResolverError,
)
from address_resolver.lib.resolver.normalize import (
    CanonicalAddress,
    city_name,
    display_lines,
    locality_line,
    street_line,
    structured_city,
    to_canonical,
)
from address_resolver.lib.resolver.records import AddressRecord, BiasPoint, parse_record, validate_record
from address_resolver.lib.resolver.search import MAX_RESULTS, MIN_QUERY_LENGTH, SearchEngine, scaled_distance_sq
from address_resolver.lib.resolver.selection import EditFields, SelectionState, SelectionStateMachine
from address_resolver.lib.resolver.session import AddressSession
from address_resolver.lib.resolver.store import AddressStore, LoadResult

__all__ = [
    "MAX_RESULTS",
    "MIN_QUERY_LENGTH",
    "AddressRecord",
    "AddressSession",
    "AddressStore",
    "BiasPoint",
    "CanonicalAddress",
    "EditFields",
    "InvalidTransitionError",
    "LoadError",
    "LoadResult",
    "MalformedRecordError",
    "ResolverError",
    "SearchEngine",
    "SelectionState",
    "SelectionStateMachine",
    "city_name",
    "display_lines",
    "locality_line",
    "parse_record",
    "scaled_distance_sq",
    "street_line",
    "structured_city",
    "to_canonical",
    "validate_record",
]
