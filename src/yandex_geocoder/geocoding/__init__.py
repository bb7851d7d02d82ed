"""
Client for the Yandex HTTP Geocoder.

Provides a fluent request builder and a dispatcher that classifies outcomes:
- GeocoderFilters: accumulates query parameters with defaults
- YandexGeocoder: issues the request, keeps the parsed response
- GeocoderResponse / GeoObject: read access to the payload

Usage:
    from yandex_geocoder.geocoding import YandexGeocoder, geocode

    # Using the client
    geocoder = YandexGeocoder("my-api-key")
    geocoder.set_query("Moscow, Tverskaya 7").set_limit(5).load()
    response = geocoder.get_response()

    # Using convenience function (key from YANDEX_GEOCODER_API_KEY)
    response = geocode("Moscow, Tverskaya 7")
"""

from yandex_geocoder.geocoding.base import (
    GeoObject,
    GeocodingError,
    ConfigurationError,
    TransportError,
    EmptyPayloadError,
    ServiceError,
)
from yandex_geocoder.geocoding.filters import (
    GeocoderFilters,
    KIND_HOUSE,
    KIND_STREET,
    KIND_METRO,
    KIND_DISTRICT,
    KIND_LOCALITY,
    LANG_RU,
    LANG_UA,
    LANG_BY,
    LANG_US,
    LANG_BR,
    LANG_TR,
)
from yandex_geocoder.geocoding.transport import (
    TransportResult,
    BaseTransport,
    RequestsTransport,
)
from yandex_geocoder.geocoding.response import GeocoderResponse
from yandex_geocoder.geocoding.client import YandexGeocoder
from yandex_geocoder.geocoding.facade import get_geocoder, geocode, reverse_geocode

__all__ = [
    # Results and errors
    "GeoObject",
    "GeocodingError",
    "ConfigurationError",
    "TransportError",
    "EmptyPayloadError",
    "ServiceError",
    # Filters
    "GeocoderFilters",
    "KIND_HOUSE",
    "KIND_STREET",
    "KIND_METRO",
    "KIND_DISTRICT",
    "KIND_LOCALITY",
    "LANG_RU",
    "LANG_UA",
    "LANG_BY",
    "LANG_US",
    "LANG_BR",
    "LANG_TR",
    # Transport
    "TransportResult",
    "BaseTransport",
    "RequestsTransport",
    # Client
    "GeocoderResponse",
    "YandexGeocoder",
    # Convenience functions
    "get_geocoder",
    "geocode",
    "reverse_geocode",
]
