"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from datetime import timedelta
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resrobot_departures.domain.models import DEFAULT_ICON_TABLE, RefreshSettings, TransportType

DEFAULT_API_BASE = "https://api.resrobot.se/v2/trip"


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Values come from ``RESROBOT_*`` environment variables or a ``.env``
    file, then from the TOML file named by ``config_file`` once
    ``load_toml_data()`` (or ``get_routes_config()``) is called.
    """

    model_config = SettingsConfigDict(
        env_prefix="RESROBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # ResRobot API configuration
    api_base: str = Field(default=DEFAULT_API_BASE, description="Journey search endpoint")
    api_key: str = Field(default="", description="ResRobot API key")
    api_timeout: int = Field(default=10, description="Timeout for API requests in seconds")
    min_request_delay_seconds: float = Field(
        default=0.0,
        description="Minimum delay between two API requests in seconds (0 disables)",
    )
    transport_types: list[str] = Field(
        default_factory=TransportType.config_names,
        description="Transport types to include, e.g. ['subway', 'bus']",
    )

    # Refresh schedule
    update_interval_seconds: int = Field(
        default=5 * 60, description="Shortest delay between two refresh cycles in seconds"
    )
    skip_minutes: int = Field(
        default=0, description="Departures sooner than this many minutes are not shown"
    )
    maximum_entries: int = Field(
        default=6, description="Maximum departures on screen; also the cache-reuse threshold"
    )

    # Display configuration
    truncate_after: int = Field(
        default=0,
        description="Truncate destination at the first space after this many characters (0 = off)",
    )
    fade: bool = Field(default=True, description="Fade out the lower part of the board")
    fade_point: float = Field(
        default=0.25, description="Fraction of the board after which rows start fading"
    )
    language: str = Field(default="sv", description="Language for board messages")
    timezone: str = Field(
        default="Europe/Stockholm",
        description="Timezone for departure times (IANA timezone name)",
    )
    icon_table: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_ICON_TABLE),
        description="Icon class per first character of the transport category",
    )

    # TOML config file path
    config_file: str | None = Field(
        default="config.toml",
        description="Path to TOML configuration file with routes and settings",
    )

    @field_validator("transport_types")
    @classmethod
    def validate_transport_types(cls, v: list[str]) -> list[str]:
        """Validate every transport type name is known."""
        for name in v:
            TransportType.from_config_name(name)
        return [name.strip().lower() for name in v]

    @field_validator("update_interval_seconds")
    @classmethod
    def validate_update_interval(cls, v: int) -> int:
        """Validate update interval is positive."""
        if v <= 0:
            raise ValueError("update_interval_seconds must be positive")
        return v

    @field_validator("skip_minutes", "maximum_entries", "truncate_after", "api_timeout")
    @classmethod
    def validate_not_negative(cls, v: int) -> int:
        """Validate counts and offsets are not negative."""
        if v < 0:
            raise ValueError("value must not be negative")
        return v

    @field_validator("min_request_delay_seconds")
    @classmethod
    def validate_request_delay(cls, v: float) -> float:
        """Validate request delay is not negative."""
        if v < 0:
            raise ValueError("min_request_delay_seconds must not be negative")
        return v

    @field_validator("fade_point")
    @classmethod
    def validate_fade_point(cls, v: float) -> float:
        """Clamp negative fade points to 0; values of 1 or more disable fading."""
        return max(0.0, v)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {v!r}") from None
        return v

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Normalize language codes like 'sv-SE' to 'sv'."""
        return v.split("-")[0].split("_")[0].lower() or "en"

    def load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating settings from its sections."""
        if not self.config_file:
            raise ValueError("config_file must be set to load routes configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api = toml_data.get("api", {})
        self._apply_section(
            api,
            {
                "base": "api_base",
                "key": "api_key",
                "timeout": "api_timeout",
                "min_request_delay_seconds": "min_request_delay_seconds",
            },
        )

        schedule = toml_data.get("schedule", {})
        self._apply_section(
            schedule,
            {
                "update_interval_seconds": "update_interval_seconds",
                "skip_minutes": "skip_minutes",
                "maximum_entries": "maximum_entries",
            },
        )

        display = toml_data.get("display", {})
        self._apply_section(
            display,
            {
                "truncate_after": "truncate_after",
                "fade": "fade",
                "fade_point": "fade_point",
                "language": "language",
                "timezone": "timezone",
            },
        )
        if "icon_table" in display:
            self.icon_table = {**self.icon_table, **display["icon_table"]}

        if "transport_types" in toml_data:
            self.transport_types = toml_data["transport_types"]

        return toml_data

    def _apply_section(self, section: dict[str, Any], keys: dict[str, str]) -> None:
        """Copy the given TOML keys onto config attributes (validated on assignment)."""
        if not isinstance(section, dict):
            return
        for toml_key, attribute in keys.items():
            if toml_key in section:
                setattr(self, attribute, section[toml_key])

    def get_routes_config(self) -> list[dict[str, Any]]:
        """Parse and return the ``[[routes]]`` entries from the TOML file.

        Raises ValueError if ``routes`` is not a list of tables.
        """
        toml_data = self.load_toml_data()

        routes = toml_data.get("routes", [])
        if not isinstance(routes, list):
            raise ValueError("TOML config 'routes' must be a list")
        return [route for route in routes if isinstance(route, dict)]

    def refresh_settings(self) -> RefreshSettings:
        """Build the immutable settings consumed by the refresh engine."""
        return RefreshSettings(
            update_interval=timedelta(seconds=self.update_interval_seconds),
            skip_minutes=self.skip_minutes,
            maximum_entries=self.maximum_entries,
            truncate_after=self.truncate_after,
            timezone=ZoneInfo(self.timezone),
        )
