"""
Parsed geocoder response.

Wraps the decoded JSON payload of a successful request:

    {"response": {"GeoObjectCollection": {
        "metaDataProperty": {"GeocoderResponseMetaData": {
            "request": "...", "found": "12", "results": "10",
            "Point": {"pos": "37.61 55.75"}}},
        "featureMember": [{"GeoObject": {...}}, ...]}}}
"""

from typing import Optional, List, Dict, Any, Iterator

from yandex_geocoder.core.utils.formatting import to_int, parse_position
from yandex_geocoder.geocoding.base import GeoObject, get_node, get_items


class GeocoderResponse:
    """Read-only view over one geocoder payload."""

    def __init__(self, data: Dict[str, Any]):
        self.data = data
        self._list: Optional[List[GeoObject]] = None

    @property
    def _collection(self) -> dict:
        return get_node(self.data, "response", "GeoObjectCollection")

    @property
    def _metadata(self) -> dict:
        return get_node(self._collection, "metaDataProperty", "GeocoderResponseMetaData")

    def get_list(self) -> List[GeoObject]:
        """All found objects, in the order returned by the service."""
        if self._list is None:
            self._list = [
                GeoObject.from_feature(feature)
                for feature in get_items(self._collection, "featureMember")
            ]
        return self._list

    def get_first(self) -> Optional[GeoObject]:
        """First found object, or None if nothing was found."""
        objects = self.get_list()
        return objects[0] if objects else None

    def get_query(self) -> str:
        """Request text as understood by the service."""
        return self._metadata.get("request", "")

    def get_found_count(self) -> int:
        """Total number of matches, which may exceed the returned page."""
        return to_int(self._metadata.get("found", 0))

    def _request_point(self):
        return parse_position(get_node(self._metadata, "Point").get("pos"))

    def get_latitude(self) -> Optional[float]:
        """Latitude of the requested point (reverse geocoding only)."""
        point = self._request_point()
        return point[1] if point else None

    def get_longitude(self) -> Optional[float]:
        """Longitude of the requested point (reverse geocoding only)."""
        point = self._request_point()
        return point[0] if point else None

    def __len__(self) -> int:
        return len(self.get_list())

    def __iter__(self) -> Iterator[GeoObject]:
        return iter(self.get_list())

    def __repr__(self) -> str:
        return (
            f"GeocoderResponse(query={self.get_query()!r}, "
            f"found={self.get_found_count()}, returned={len(self)})"
        )
