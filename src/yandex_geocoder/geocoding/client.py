"""
Yandex HTTP Geocoder client.

https://yandex.ru/dev/maps/geocoder/
"""

import json
import logging
from typing import Optional, Any

from yandex_geocoder.core.config import ApiConfig
from yandex_geocoder.geocoding.base import (
    EmptyPayloadError,
    ServiceError,
    TransportError,
)
from yandex_geocoder.geocoding.filters import GeocoderFilters
from yandex_geocoder.geocoding.response import GeocoderResponse
from yandex_geocoder.geocoding.transport import BaseTransport, RequestsTransport

logger = logging.getLogger(__name__)


class YandexGeocoder(GeocoderFilters):
    """
    Yandex geocoder client.

    Filters are set through the fluent setters inherited from
    GeocoderFilters, then load() issues one GET request and keeps the parsed
    response until the next successful load() or clear().

    Usage:
        geocoder = YandexGeocoder("my-api-key")
        geocoder.set_query("Moscow, Tverskaya 7").set_limit(5).load()
        first = geocoder.get_response().get_first()

    Errors:
        load() raises TransportError, EmptyPayloadError or ServiceError,
        checked in that order. Nothing is retried.
    """

    def __init__(
        self,
        api_key: str,
        version: Optional[str] = None,
        transport: Optional[BaseTransport] = None,
        base_url: Optional[str] = None
    ):
        """
        Initialize the client.

        Args:
            api_key: Yandex Maps API key
            version: API version (default: "1.x")
            transport: Transport to use (default: RequestsTransport)
            base_url: URL template with a {version} placeholder
        """
        self.config = ApiConfig.create(api_key, version, base_url)
        self.transport = transport or RequestsTransport()
        self._response: Optional[GeocoderResponse] = None
        super().__init__(self.config.api_key)

    @classmethod
    def from_config(
        cls,
        config: ApiConfig,
        transport: Optional[BaseTransport] = None
    ) -> "YandexGeocoder":
        """Build a client from an existing ApiConfig."""
        return cls(
            config.api_key,
            version=config.version,
            transport=transport,
            base_url=config.base_url,
        )

    @property
    def response(self) -> Optional[GeocoderResponse]:
        return self._response

    def get_response(self) -> Optional[GeocoderResponse]:
        """Response of the last successful load(), or None."""
        return self._response

    def clear(self) -> "YandexGeocoder":
        """Reset filters to defaults and drop the held response."""
        super().clear()
        self._response = None
        return self

    def generate_uri(self) -> str:
        """Endpoint URL for the configured API version."""
        return self.config.endpoint()

    def load(self, **transport_options) -> "YandexGeocoder":
        """
        Request the geocoder with the current filters.

        Args:
            **transport_options: Passed to the transport as is (timeout, headers, ...)

        Returns:
            self, with the parsed response available through get_response()

        Raises:
            TransportError: Connection failure, timeout or other protocol error
            EmptyPayloadError: Body was empty or could not be decoded
            ServiceError: The service returned an error object
        """
        uri = self.generate_uri()
        params = self.filters

        logger.debug(f"Yandex: GET {uri} geocode={params.get('geocode', '')!r}")
        result = self.transport.get(uri, params, **transport_options)

        if result.error:
            raise TransportError(
                f"Request to {uri} failed: {result.error_message}",
                url=result.url or uri,
                status_code=result.status_code,
                details=result.error_message,
            ) from result.exception

        data = self._decode(result.body)
        if not data:
            msg = f"Can't load data by url: {uri}"
            logger.warning(f"Yandex: {msg} (HTTP {result.status_code})")
            raise EmptyPayloadError(msg, uri=uri)

        if isinstance(data, dict) and data.get("error"):
            logger.warning(
                f"Yandex: Service error {data.get('statusCode')}: {data.get('message')}"
            )
            raise ServiceError(data.get("message"), data.get("statusCode"))

        self._response = GeocoderResponse(data)
        logger.debug(f"Yandex: Loaded response from {uri}")
        return self

    @staticmethod
    def _decode(body: Optional[str]) -> Any:
        """Decode a JSON body, returning None when it is not valid JSON."""
        if not body:
            return None
        try:
            return json.loads(body)
        except ValueError:
            return None
