"""
HTTP transport used by the geocoder client.

The transport only moves bytes: it issues the GET, follows redirects and
reports whether a low-level failure happened. Interpreting the body is the
client's job.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Dict, Any

import requests

from yandex_geocoder.core import settings

logger = logging.getLogger(__name__)


@dataclass
class TransportResult:
    """Raw outcome of one HTTP round-trip."""

    url: str
    body: str = ""
    error: bool = False
    status_code: Optional[int] = None
    error_message: Optional[str] = None
    exception: Optional[BaseException] = None


class BaseTransport(ABC):
    """
    Abstract base class for transports.

    Subclasses must implement:
    - get(): Perform a GET request and return a TransportResult
    """

    @abstractmethod
    def get(
        self,
        url: str,
        params: Dict[str, Any],
        **options
    ) -> TransportResult:
        """
        Perform an HTTP GET request, following redirects.

        Args:
            url: Request URL without query string
            params: Flat query parameters
            **options: Transport-specific options (timeout, headers, ...)

        Returns:
            TransportResult, with error=True on a low-level failure
        """
        pass


class RequestsTransport(BaseTransport):
    """
    Transport backed by a requests.Session.

    HTTP error statuses that carry a body are not transport errors: the
    geocoder reports an invalid key or an exceeded quota as a JSON body.

    Usage:
        transport = RequestsTransport(timeout=5)
        result = transport.get("https://geocode-maps.yandex.ru/1.x/", {"geocode": "Moscow"})
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None
    ):
        """
        Initialize the transport.

        Args:
            session: Session to reuse (a new one is created if not provided)
            timeout: Default timeout in seconds (uses settings if not provided)
            user_agent: User-Agent header (uses settings if not provided)
        """
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.TIMEOUT
        self.user_agent = user_agent or settings.USER_AGENT

    def get(
        self,
        url: str,
        params: Dict[str, Any],
        **options
    ) -> TransportResult:
        headers = {"User-Agent": self.user_agent}
        headers.update(options.pop("headers", None) or {})
        options.setdefault("timeout", self.timeout)
        options["allow_redirects"] = True

        try:
            response = self.session.get(url, params=params, headers=headers, **options)
        except requests.Timeout as e:
            logger.warning(f"Yandex: Timeout requesting {url}")
            return TransportResult(
                url=url,
                error=True,
                error_message=f"Timeout: {e}",
                exception=e,
            )
        except requests.RequestException as e:
            logger.error(f"Yandex: Error requesting {url}: {e}")
            return TransportResult(
                url=url,
                error=True,
                error_message=str(e),
                exception=e,
            )

        if response.status_code != 200:
            logger.debug(f"Yandex: HTTP {response.status_code} for {url}")

        return TransportResult(
            url=response.url,
            body=response.text,
            status_code=response.status_code,
        )

    def close(self):
        """Close the underlying session."""
        self.session.close()
