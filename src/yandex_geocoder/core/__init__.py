"""
Core module providing shared configuration and utilities.

This module consolidates common functionality used across the codebase:
- Configuration management (settings, environment variables)
- Utility functions (value coercion, coordinate formatting)

Usage:
    from yandex_geocoder.core import settings, ApiConfig
    from yandex_geocoder.core.utils import to_int, format_pair
"""

from yandex_geocoder.core.config import settings, Settings, ApiConfig

__all__ = [
    "settings",
    "Settings",
    "ApiConfig",
]
