"""
Filter builder for Yandex geocoder requests.

Collects the query parameters of one geocoding request behind a fluent
interface. Every setter returns the builder so calls can be chained:

    filters = GeocoderFilters("my-api-key")
    filters.set_query("Moscow, Tverskaya 7").set_limit(5).set_lang(LANG_US)

See https://yandex.ru/dev/maps/geocoder/doc/desc/concepts/input_params.html
"""

from typing import Optional, Dict, Union

from yandex_geocoder.core import settings
from yandex_geocoder.core.utils.formatting import to_int, format_pair


FilterValue = Union[str, int]

# Toponym kinds (reverse geocoding only)
KIND_HOUSE = "house"
KIND_STREET = "street"
KIND_METRO = "metro"
KIND_DISTRICT = "district"
KIND_LOCALITY = "locality"  # city, town, village, ...

# Response languages. Not enforced, any string is forwarded as is.
LANG_RU = "ru-RU"  # default
LANG_UA = "uk-UA"
LANG_BY = "be-BY"
LANG_US = "en-US"
LANG_BR = "en-BR"
LANG_TR = "tr-TR"  # Turkey map only


class GeocoderFilters:
    """
    Mutable set of geocoding query parameters.

    apikey, lang, format, skip and results are always present. geocode, spn,
    ll, rspn and kind appear only once set, and only clear() removes them.
    """

    def __init__(self, api_key: str):
        self._api_key = api_key
        self._filters: Dict[str, FilterValue] = {}
        self.clear()

    @property
    def filters(self) -> Dict[str, FilterValue]:
        """Copy of the current query parameters."""
        return dict(self._filters)

    def clear(self) -> "GeocoderFilters":
        """Reset every filter to its default value."""
        self._filters = {}
        (
            self.set_api_key(self._api_key)
            .set_lang(LANG_RU)
            .set_format()
            .set_offset(0)
            .set_limit(settings.DEFAULT_LIMIT)
        )
        return self

    def set_api_key(self, api_key: str) -> "GeocoderFilters":
        """Yandex Maps API key."""
        self._filters["apikey"] = str(api_key)
        return self

    def set_lang(self, lang: str) -> "GeocoderFilters":
        """Preferred language of the object descriptions."""
        self._filters["lang"] = str(lang)
        return self

    def set_format(self, xml: bool = False) -> "GeocoderFilters":
        """Response format: "xml" when xml is true, otherwise "json"."""
        self._filters["format"] = "xml" if xml else "json"
        return self

    def set_offset(self, offset: int) -> "GeocoderFilters":
        """Number of objects to skip, counting from the first one."""
        self._filters["skip"] = to_int(offset)
        return self

    def set_limit(self, limit: int) -> "GeocoderFilters":
        """Maximum number of objects returned (default 10)."""
        self._filters["results"] = to_int(limit)
        return self

    def set_point(self, longitude: float, latitude: float) -> "GeocoderFilters":
        """
        Geocode by coordinates.

        Replaces any geocode value set earlier, including a text query.

        Args:
            longitude: Longitude in degrees
            latitude: Latitude in degrees
        """
        self._filters["geocode"] = format_pair(longitude, latitude)
        return self

    def set_query(self, query: str) -> "GeocoderFilters":
        """
        Geocode by free-form text: an address or a coordinate string.

        Replaces any geocode value set earlier, including a point.
        """
        self._filters["geocode"] = str(query)
        return self

    def set_area(
        self,
        length_lng: float,
        length_lat: float,
        longitude: Optional[float] = None,
        latitude: Optional[float] = None
    ) -> "GeocoderFilters":
        """
        Search area for the object.

        The center is only set when both longitude and latitude are given;
        otherwise a previously set center is left as is. 0.0 is a valid
        coordinate here.

        Args:
            length_lng: Difference between max and min longitude, in degrees
            length_lat: Difference between max and min latitude, in degrees
            longitude: Longitude of the area center, in degrees
            latitude: Latitude of the area center, in degrees
        """
        self._filters["spn"] = format_pair(length_lng, length_lat)
        if longitude is not None and latitude is not None:
            self._filters["ll"] = format_pair(longitude, latitude)
        return self

    def use_area_limit(self, restrict: bool) -> "GeocoderFilters":
        """Restrict results to the area given by set_area()."""
        self._filters["rspn"] = 1 if restrict else 0
        return self

    def set_kind(self, kind: str) -> "GeocoderFilters":
        """Toponym kind, reverse geocoding only (see KIND_* constants)."""
        self._filters["kind"] = str(kind)
        return self
