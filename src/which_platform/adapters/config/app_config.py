"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from which_platform.domain.models.client_settings import (
    DEFAULT_DESTINATION_ID,
    DEFAULT_DESTINATION_NAME,
    DEFAULT_ORIGIN_ID,
    DEFAULT_ORIGIN_NAME,
)

# Sections of the TOML file that may override fields, and the fields they may set
_TOML_OVERRIDES: dict[str, tuple[str, ...]] = {
    "defaults": (
        "default_origin_id",
        "default_origin_name",
        "default_destination_id",
        "default_destination_name",
        "default_trip_count",
    ),
    "api": ("tfnsw_base_url", "tfnsw_api_timeout"),
    "display": (
        "timezone",
        "catchable_threshold_minutes",
        "refresh_interval_seconds",
        "search_debounce_ms",
    ),
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")

    # TfNSW trip planner configuration
    tfnsw_api_key: str = Field(default="", description="API key sent to the TfNSW Open Data API")
    tfnsw_base_url: str = Field(
        default="https://api.transport.nsw.gov.au/v1/tp",
        description="Base URL of the TfNSW trip planner API",
    )
    tfnsw_api_timeout: float = Field(
        default=10, description="Timeout for trip planner requests in seconds"
    )

    # Default route
    default_origin_id: str = Field(default=DEFAULT_ORIGIN_ID, description="Default origin stop")
    default_origin_name: str = Field(default=DEFAULT_ORIGIN_NAME)
    default_destination_id: str = Field(
        default=DEFAULT_DESTINATION_ID, description="Default destination stop"
    )
    default_destination_name: str = Field(default=DEFAULT_DESTINATION_NAME)
    default_trip_count: int = Field(
        default=10, description="Number of trips requested when the caller gives no count"
    )
    max_trip_count: int = Field(default=50, description="Largest accepted trip count")

    # Display configuration
    timezone: str = Field(
        default="Australia/Sydney",
        description="Operating timezone for upstream queries and HH:MM display (IANA name)",
    )
    catchable_threshold_minutes: int = Field(
        default=5, description="Departures more than this many minutes away are catchable"
    )
    refresh_interval_seconds: int = Field(
        default=30, description="Interval between board refreshes in seconds"
    )
    search_debounce_ms: int = Field(
        default=300, description="Quiet period before a stop search is sent"
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )

    # Client settings storage
    settings_file: str = Field(
        default=str(Path.home() / ".config" / "which-platform" / "settings.json"),
        description="JSON file holding the board's saved route and places",
    )

    # Optional TOML file overriding defaults, api and display settings
    config_file: str | None = Field(default=None, description="Path to TOML configuration file")

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Create a config that does not read the .env file."""
        return cls(_env_file=None, **overrides)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be an IANA timezone name, got {v!r}") from e
        return v

    @field_validator("default_trip_count", "max_trip_count")
    @classmethod
    def validate_trip_count(cls, v: int) -> int:
        """Validate trip counts are positive."""
        if v < 1:
            raise ValueError("trip counts must be at least 1")
        return v

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def load_toml_overrides(self) -> dict[str, Any]:
        """Apply [defaults], [api] and [display] sections of the TOML file.

        Returns the parsed TOML data. Does nothing when no config file is set.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section, fields in _TOML_OVERRIDES.items():
            values = toml_data.get(section, {})
            if not isinstance(values, dict):
                raise ValueError(f"TOML config '{section}' must be a table")
            for name in fields:
                if name in values:
                    setattr(self, name, values[name])

        # Re-validate what the file set
        self.validate_timezone(self.timezone)
        self.validate_trip_count(self.default_trip_count)
        return toml_data
