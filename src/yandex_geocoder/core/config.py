"""
Centralized configuration management for the Yandex Geocoder client.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from yandex_geocoder.core.config import settings

    # Access configuration
    print(settings.API_KEY)
    print(settings.TIMEOUT)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

from yandex_geocoder.version import __version__

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path(__file__).parent.parent.parent.parent / ".env",  # project root
    Path.cwd() / ".env",  # Current working directory
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break

DEFAULT_VERSION = "1.x"
DEFAULT_BASE_URL = "https://geocode-maps.yandex.ru/{version}/"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # API Access
    # ==========================================================================
    API_KEY: str = field(
        default_factory=lambda: os.getenv("YANDEX_GEOCODER_API_KEY", "")
    )
    API_VERSION: str = field(
        default_factory=lambda: os.getenv("YANDEX_GEOCODER_VERSION", DEFAULT_VERSION)
    )
    BASE_URL: str = field(
        default_factory=lambda: os.getenv("YANDEX_GEOCODER_BASE_URL", DEFAULT_BASE_URL)
    )

    # ==========================================================================
    # Request Defaults
    # ==========================================================================
    DEFAULT_LIMIT: int = 10

    # ==========================================================================
    # Transport Settings
    # ==========================================================================
    TIMEOUT: float = field(
        default_factory=lambda: float(os.getenv("YANDEX_GEOCODER_TIMEOUT", "10.0"))
    )
    USER_AGENT: str = field(
        default_factory=lambda: os.getenv(
            "YANDEX_GEOCODER_USER_AGENT",
            f"yandex-geocoder/{__version__}"
        )
    )

    def validate_api_key(self) -> bool:
        """Check if the Yandex Geocoder API key is configured."""
        return bool(self.API_KEY)


@dataclass(frozen=True)
class ApiConfig:
    """
    Immutable per-client configuration.

    The API key is re-applied to the filter set on every clear(), the
    version is substituted into the base URL template on every request.
    """

    api_key: str
    version: str = DEFAULT_VERSION
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    def create(
        cls,
        api_key: Optional[str],
        version: Optional[str] = None,
        base_url: Optional[str] = None
    ) -> "ApiConfig":
        """
        Build a config, treating an empty version or base URL as "use default".

        Args:
            api_key: Yandex API key
            version: API version string (default: "1.x")
            base_url: URL template with a {version} placeholder

        Returns:
            ApiConfig instance
        """
        return cls(
            api_key="" if api_key is None else str(api_key),
            version=str(version) if version else DEFAULT_VERSION,
            base_url=base_url or DEFAULT_BASE_URL,
        )

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        api_key: Optional[str] = None,
        version: Optional[str] = None
    ) -> "ApiConfig":
        """Build a config from the environment-driven settings, with optional overrides."""
        return cls.create(
            api_key or settings.API_KEY,
            version or settings.API_VERSION,
            settings.BASE_URL,
        )

    def endpoint(self) -> str:
        """Base URL with the version substituted."""
        return self.base_url.format(version=self.version)


# Singleton settings instance
settings = Settings()
