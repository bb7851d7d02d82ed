"""
Base classes for the Yandex geocoding client: result objects and errors.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from yandex_geocoder.core.utils.formatting import parse_position

PROVIDER_NAME = "yandex"


def get_node(data: Any, *keys: str) -> dict:
    """
    Walk nested mappings, returning {} as soon as a level is missing or not a dict.

    Example:
        >>> get_node({"a": {"b": {"c": 1}}}, "a", "b")
        {"c": 1}
        >>> get_node({"a": None}, "a", "b")
        {}
    """
    node = data
    for key in keys:
        if not isinstance(node, dict):
            return {}
        node = node.get(key)
    return node if isinstance(node, dict) else {}


def get_items(data: Any, key: str) -> List[dict]:
    """List under `key`, keeping only dict entries."""
    items = data.get(key) if isinstance(data, dict) else None
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


@dataclass
class GeoObject:
    """Single toponym from a geocoder response (one featureMember entry)."""

    name: str = ""
    description: str = ""
    kind: str = ""  # house, street, metro, district, locality, ...
    precision: str = ""  # exact, number, near, range, street, other
    address: str = ""
    country: str = ""
    country_code: str = ""
    locality: str = ""
    street: str = ""
    house: str = ""
    components: List[Dict[str, str]] = field(default_factory=list)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    lower_corner: Optional[tuple] = None  # (lon, lat)
    upper_corner: Optional[tuple] = None  # (lon, lat)
    raw: Optional[Dict[str, Any]] = None

    @classmethod
    def from_feature(cls, feature: Dict[str, Any]) -> "GeoObject":
        """
        Build a GeoObject from a featureMember entry.

        Args:
            feature: Dict with a "GeoObject" key, or the GeoObject itself

        Returns:
            GeoObject with every field that was present in the payload
        """
        if not isinstance(feature, dict):
            feature = {}
        geo = get_node(feature, "GeoObject") if "GeoObject" in feature else feature
        meta = get_node(geo, "metaDataProperty", "GeocoderMetaData")
        address = get_node(meta, "Address")
        components = [
            {"kind": c.get("kind", ""), "name": c.get("name", "")}
            for c in get_items(address, "Components")
        ]

        # Last component of a kind wins, e.g. nested localities
        by_kind = {c["kind"]: c["name"] for c in components}

        point = parse_position(get_node(geo, "Point").get("pos"))
        envelope = get_node(geo, "boundedBy", "Envelope")

        return cls(
            name=geo.get("name", ""),
            description=geo.get("description", ""),
            kind=meta.get("kind", ""),
            precision=meta.get("precision", ""),
            address=address.get("formatted", meta.get("text", "")),
            country=by_kind.get("country", ""),
            country_code=address.get("country_code", ""),
            locality=by_kind.get("locality", ""),
            street=by_kind.get("street", ""),
            house=by_kind.get("house", ""),
            components=components,
            longitude=point[0] if point else None,
            latitude=point[1] if point else None,
            lower_corner=parse_position(envelope.get("lowerCorner")),
            upper_corner=parse_position(envelope.get("upperCorner")),
            raw=geo,
        )

    @property
    def as_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "kind": self.kind,
            "precision": self.precision,
            "address": self.address,
            "country": self.country,
            "country_code": self.country_code,
            "locality": self.locality,
            "street": self.street,
            "house": self.house,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


class GeocodingError(Exception):
    """Exception raised when geocoding fails."""

    def __init__(self, message: str, provider: str = PROVIDER_NAME):
        self.message = message
        self.provider = provider
        super().__init__(f"[{provider}] {message}" if provider else message)


class ConfigurationError(GeocodingError):
    """Raised when the client cannot be built, e.g. no API key is configured."""
    pass


class TransportError(GeocodingError):
    """
    Low-level failure before a usable payload was obtained.

    Connection errors, timeouts, too many redirects and other protocol
    errors reported by the transport.
    """

    def __init__(
        self,
        message: str,
        url: str = "",
        status_code: Optional[int] = None,
        details: Optional[str] = None
    ):
        self.url = url
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class EmptyPayloadError(GeocodingError):
    """The request went through but the body decoded to nothing."""

    def __init__(self, message: str, uri: str = ""):
        self.uri = uri
        super().__init__(message)


class ServiceError(GeocodingError):
    """The geocoder reported an error (bad key, quota exceeded, bad query)."""

    def __init__(self, message: str, status_code: Any = None):
        self.status_code = status_code
        super().__init__(message)
