"""
Yandex HTTP Geocoder client.

Usage:
    from yandex_geocoder import YandexGeocoder

    geocoder = YandexGeocoder("my-api-key")
    geocoder.set_point(37.611, 55.758).set_kind("metro").load()
    for obj in geocoder.get_response():
        print(obj.name, obj.latitude, obj.longitude)
"""

from yandex_geocoder.version import __version__
from yandex_geocoder.geocoding import (
    YandexGeocoder,
    GeocoderResponse,
    GeoObject,
    GeocodingError,
    TransportError,
    EmptyPayloadError,
    ServiceError,
    geocode,
    reverse_geocode,
)

__all__ = [
    "__version__",
    "YandexGeocoder",
    "GeocoderResponse",
    "GeoObject",
    "GeocodingError",
    "TransportError",
    "EmptyPayloadError",
    "ServiceError",
    "geocode",
    "reverse_geocode",
]
