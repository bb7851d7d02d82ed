"""
Value coercion and number formatting utilities.

Geocoder filters accept loosely typed input (numbers, numeric strings, None)
and never reject it. These helpers do the coercion in one place.

Usage:
    from yandex_geocoder.core.utils.formatting import to_int, to_float, format_pair

    to_int("5")                 # 5
    to_int("abc")               # 0
    format_pair(30.5, 50.4)     # "30.500000,50.400000"
"""

import logging
from typing import Any, Optional, Tuple

logger = logging.getLogger(__name__)


def to_int(value: Any, default: int = 0) -> int:
    """
    Coerce a value to an integer, truncating floats and numeric strings.

    Args:
        value: Value to coerce
        default: Returned when the value cannot be interpreted as a number

    Returns:
        Integer value

    Example:
        >>> to_int(5.9)
        5
        >>> to_int(" 12 ")
        12
        >>> to_int(None)
        0
    """
    try:
        return int(value)
    except (ValueError, TypeError, OverflowError):
        pass

    try:
        return int(float(value))
    except (ValueError, TypeError, OverflowError):
        logger.debug(f"Cannot coerce {value!r} to int, using {default}")
        return default


def to_float(value: Any, default: float = 0.0) -> float:
    """
    Coerce a value to a float.

    Args:
        value: Value to coerce
        default: Returned when the value cannot be interpreted as a number

    Returns:
        Float value
    """
    try:
        return float(value)
    except (ValueError, TypeError):
        logger.debug(f"Cannot coerce {value!r} to float, using {default}")
        return default


def format_pair(first: Any, second: Any) -> str:
    """
    Format two numbers as a comma-separated pair in fixed notation.

    Both values are rendered with six decimal places, the format the
    geocoder expects for "lon,lat" points and "lng,lat" spans.

    Example:
        >>> format_pair(37.6, 55.75)
        "37.600000,55.750000"
    """
    return f"{to_float(first):f},{to_float(second):f}"


def parse_position(pos: Optional[str]) -> Optional[Tuple[float, float]]:
    """
    Parse a space-separated "lon lat" position string.

    Args:
        pos: Position string as returned in Point.pos / Envelope corners

    Returns:
        Tuple of (longitude, latitude), or None if the string is malformed
    """
    if not pos:
        return None

    parts = str(pos).split()
    if len(parts) != 2:
        return None

    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None
