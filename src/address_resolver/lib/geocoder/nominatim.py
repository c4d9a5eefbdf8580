"""OpenStreetMap Nominatim reverse geocoder.

Uses the Nominatim reverse API (https://nominatim.org/release-docs/develop/api/Reverse/)
to turn a device location into an address record with the same schema as
the static dataset. Free but rate-limited to 1 req/sec.
"""

from typing import Any

import httpx
from loguru import logger

from address_resolver.lib.geocoder.base import BaseReverseGeocoder, GeocodingProviderError
from address_resolver.lib.resolver import AddressRecord, MalformedRecordError, parse_record

NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "address-resolver/0.1"
# Building-level detail
REVERSE_ZOOM = 18


class NominatimReverseGeocoder(BaseReverseGeocoder):
    """OpenStreetMap Nominatim reverse geocoder."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        email: str = "",
        user_agent: str = DEFAULT_USER_AGENT,
        base_url: str = NOMINATIM_BASE_URL,
    ) -> None:
        self._timeout = timeout
        self._email = email
        self._user_agent = user_agent
        self._url = base_url.rstrip("/") + "/reverse"

    @property
    def provider_name(self) -> str:
        return "nominatim"

    async def reverse(self, latitude: float, longitude: float) -> AddressRecord | None:
        """Reverse-geocode a coordinate using the Nominatim API.

        Args:
            latitude: WGS84 latitude.
            longitude: WGS84 longitude.

        Returns:
            AddressRecord or None if Nominatim has no address there.

        Raises:
            GeocodingProviderError: On transport or service errors.
        """
        params: dict[str, str | int | float] = {
            "lat": latitude,
            "lon": longitude,
            "format": "jsonv2",
            "addressdetails": 1,
            "zoom": REVERSE_ZOOM,
        }
        if self._email:
            params["email"] = self._email

        headers = {"User-Agent": self._user_agent, "Accept": "application/json"}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._url, params=params, headers=headers)
                response.raise_for_status()

            data = response.json()
            return self._parse_response(data)

        except httpx.TimeoutException as e:
            logger.warning("Nominatim reverse geocoder timeout")
            raise GeocodingProviderError("nominatim", "Reverse geocoding request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"Nominatim reverse geocoder HTTP error {e.response.status_code}")
            raise GeocodingProviderError(
                "nominatim",
                f"Provider returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.ConnectError as e:
            logger.warning("Nominatim reverse geocoder connection error")
            raise GeocodingProviderError("nominatim", "Connection to geocoding provider failed") from e
        except GeocodingProviderError:
            raise
        except Exception as e:
            logger.exception("Nominatim reverse geocoder unexpected error")
            raise GeocodingProviderError("nominatim", f"Unexpected error: {e}") from e

    def _parse_response(self, data: dict[str, Any]) -> AddressRecord | None:
        """Parse a Nominatim reverse response into an AddressRecord.

        Args:
            data: Raw JSON object from the reverse endpoint.

        Returns:
            AddressRecord or None when the response carries no address.

        Raises:
            GeocodingProviderError: If the address has no parseable coordinates.
        """
        if not isinstance(data, dict) or "error" in data or not data.get("address"):
            return None

        try:
            return parse_record(data)
        except MalformedRecordError as e:
            logger.warning(f"Failed to parse Nominatim response: {e}")
            raise GeocodingProviderError("nominatim", f"Failed to parse response: {e}") from e
