"""Abstract reverse geocoder interface and provider error."""

from abc import ABC, abstractmethod

from address_resolver.lib.resolver import AddressRecord


class GeocodingProviderError(Exception):
    """Raised when a geocoding provider experiences a transport or service error.

    Distinguishes provider failures (timeout, HTTP error, connection error)
    from a successful response with no address (which returns None).

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")


class BaseReverseGeocoder(ABC):
    """Resolve a device location to an address record."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this geocoder provider."""

    @abstractmethod
    async def reverse(self, latitude: float, longitude: float) -> AddressRecord | None:
        """Reverse-geocode a coordinate.

        Args:
            latitude: WGS84 latitude.
            longitude: WGS84 longitude.

        Returns:
            AddressRecord in the dataset schema, or None if no address was found.
        """
