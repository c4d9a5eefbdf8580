"""Prefix search over the address store with optional proximity ranking.

A record matches when the lower-cased query is a prefix of its full street
line, its road, its locality name, or its postcode as stored. With a bias
point, matches are ordered by a scaled squared distance; otherwise store
order is kept.
"""

import math

from address_resolver.lib.resolver.normalize import city_name, street_line
from address_resolver.lib.resolver.records import AddressRecord, BiasPoint
from address_resolver.lib.resolver.store import AddressStore

MIN_QUERY_LENGTH = 2
MAX_RESULTS = 5


def scaled_distance_sq(bias: BiasPoint, record: AddressRecord) -> float:
    """Equirectangular squared distance from the bias point to a record.

    Longitude deltas are scaled by ``cos(bias latitude)``. Only useful for
    ordering; the value is in squared degrees.

    Args:
        bias: Reference point.
        record: Candidate record.

    Returns:
        ``dLat² + (dLon · cos(biasLat))²``.
    """
    d_lat = record.latitude - bias.latitude
    d_lon = (record.longitude - bias.longitude) * math.cos(math.radians(bias.latitude))
    return d_lat * d_lat + d_lon * d_lon


def matches(record: AddressRecord, query: str) -> bool:
    """Check whether a trimmed query prefix-matches any search key of a record."""
    q = query.lower()
    return (
        street_line(record).lower().startswith(q)
        or record.road.lower().startswith(q)
        or city_name(record).lower().startswith(q)
        or record.postcode.startswith(q)
    )


class SearchEngine:
    """Stateless ranking search, except for the cached last result list."""

    def __init__(self, store: AddressStore) -> None:
        self._store = store
        self._last_query = ""
        self._last_results: tuple[AddressRecord, ...] = ()

    @property
    def last_query(self) -> str:
        """Trimmed text of the most recent search."""
        return self._last_query

    @property
    def last_results(self) -> tuple[AddressRecord, ...]:
        """Ranked, truncated results of the most recent search."""
        return self._last_results

    def search(self, query: str | None, bias: BiasPoint | None = None) -> tuple[AddressRecord, ...]:
        """Find up to ``MAX_RESULTS`` records whose keys start with the query.

        Queries shorter than ``MIN_QUERY_LENGTH`` after trimming return an
        empty result without scanning the store.

        Args:
            query: Raw query text.
            bias: Optional point used to order matches by proximity.

        Returns:
            Tuple of matching records, nearest first when biased.
        """
        text = (query or "").strip()
        self._last_query = text

        if len(text) < MIN_QUERY_LENGTH:
            self._last_results = ()
            return self._last_results

        matched = [record for record in self._store.all() if matches(record, text)]

        if bias is not None:
            # list.sort is stable: equal distances keep store order
            matched.sort(key=lambda record: scaled_distance_sq(bias, record))

        self._last_results = tuple(matched[:MAX_RESULTS])
        return self._last_results
