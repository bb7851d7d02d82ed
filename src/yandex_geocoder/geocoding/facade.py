"""
Geocoding facade providing a simple interface to the client.
"""

import logging
from typing import Optional

from yandex_geocoder.core import settings, ApiConfig
from yandex_geocoder.geocoding.base import ConfigurationError
from yandex_geocoder.geocoding.client import YandexGeocoder
from yandex_geocoder.geocoding.response import GeocoderResponse
from yandex_geocoder.geocoding.transport import BaseTransport

logger = logging.getLogger(__name__)


def get_geocoder(
    api_key: Optional[str] = None,
    version: Optional[str] = None,
    transport: Optional[BaseTransport] = None
) -> YandexGeocoder:
    """
    Get a geocoder instance, falling back to settings for key and version.

    Args:
        api_key: Yandex API key (uses settings if not provided)
        version: API version (uses settings if not provided)
        transport: Transport override, mostly for tests

    Returns:
        YandexGeocoder instance

    Raises:
        ConfigurationError: If no API key is available
    """
    config = ApiConfig.from_settings(settings, api_key=api_key, version=version)
    if not config.api_key:
        raise ConfigurationError(
            "YANDEX_GEOCODER_API_KEY not configured"
        )

    return YandexGeocoder.from_config(config, transport=transport)


def geocode(
    query: str,
    limit: int = 10,
    lang: Optional[str] = None,
    geocoder: Optional[YandexGeocoder] = None,
    **transport_options
) -> GeocoderResponse:
    """
    Forward geocoding of a free-form address.

    Args:
        query: Address or place name
        limit: Maximum number of results
        lang: Response language (default: ru-RU)
        geocoder: Client to use (default: get_geocoder())
        **transport_options: Passed to the transport (timeout, headers, ...)

    Returns:
        GeocoderResponse

    Example:
        response = geocode("Moscow, Tverskaya 7", limit=1)
        print(response.get_first().address)
    """
    geocoder = (geocoder or get_geocoder()).clear()
    geocoder.set_query(query).set_limit(limit)
    if lang:
        geocoder.set_lang(lang)

    return geocoder.load(**transport_options).get_response()


def reverse_geocode(
    longitude: float,
    latitude: float,
    kind: Optional[str] = None,
    limit: int = 10,
    lang: Optional[str] = None,
    geocoder: Optional[YandexGeocoder] = None,
    **transport_options
) -> GeocoderResponse:
    """
    Reverse geocoding of a point.

    Args:
        longitude: Longitude in degrees
        latitude: Latitude in degrees
        kind: Toponym kind to look for (house, street, metro, district, locality)
        limit: Maximum number of results
        lang: Response language (default: ru-RU)
        geocoder: Client to use (default: get_geocoder())
        **transport_options: Passed to the transport (timeout, headers, ...)

    Returns:
        GeocoderResponse
    """
    geocoder = (geocoder or get_geocoder()).clear()
    geocoder.set_point(longitude, latitude).set_limit(limit)
    if kind:
        geocoder.set_kind(kind)
    if lang:
        geocoder.set_lang(lang)

    logger.debug(f"Reverse geocoding {longitude}, {latitude} (kind={kind})")
    return geocoder.load(**transport_options).get_response()
