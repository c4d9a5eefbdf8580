"""Reverse geocoding — resolve a device location to an address record.

Public API:
    - BaseReverseGeocoder: Abstract provider interface
    - GeocodingProviderError: Transport/service failure
    - NominatimReverseGeocoder: OpenStreetMap Nominatim provider
    - get_reverse_geocoder: Build the configured provider
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from address_resolver.lib.geocoder.base import BaseReverseGeocoder, GeocodingProviderError
from address_resolver.lib.geocoder.nominatim import NominatimReverseGeocoder

if TYPE_CHECKING:
    from address_resolver.core.config import Settings


def get_reverse_geocoder(settings: Settings) -> BaseReverseGeocoder | None:
    """Build the reverse geocoder described by settings.

    Args:
        settings: Application settings.

    Returns:
        A configured provider, or None when reverse geocoding is disabled.
    """
    if not settings.nominatim_enabled:
        return None
    return NominatimReverseGeocoder(
        timeout=settings.nominatim_timeout,
        email=settings.nominatim_email,
        user_agent=settings.nominatim_user_agent,
        base_url=settings.nominatim_base_url,
    )


__all__ = [
    "BaseReverseGeocoder",
    "GeocodingProviderError",
    "NominatimReverseGeocoder",
    "get_reverse_geocoder",
]
