"""
Shared utility functions for the Yandex Geocoder client.

Usage:
    from yandex_geocoder.core.utils import to_int, format_pair, parse_position
"""

from yandex_geocoder.core.utils.formatting import (
    to_int,
    to_float,
    format_pair,
    parse_position,
)

__all__ = [
    "to_int",
    "to_float",
    "format_pair",
    "parse_position",
]
