"""12-factor configuration adapter using environment variables."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


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
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root log level (DEBUG, INFO, ...)")

    # Departure projection
    timezone: str = Field(
        default="America/Los_Angeles",
        description="Operating time zone of the ferry routes (IANA timezone name)",
    )
    departure_count: int = Field(
        default=4, description="Number of upcoming departures returned per request"
    )
    routes_file: str | None = Field(
        default=None,
        description="Path to a TOML route catalog. If not set, the bundled catalog is used",
    )

    # Live feeds (WSDOT Ferries API)
    live_feeds_enabled: bool = Field(
        default=True, description="Query live feeds when an access code is configured"
    )
    wsdot_api_access_code: str | None = Field(
        default=None, description="WSDOT Traveler Information API access code"
    )
    wsdot_base_url: str = Field(
        default="https://www.wsdot.wa.gov/ferries/api",
        description="Base URL of the WSDOT Ferries API",
    )
    feed_timeout_seconds: float = Field(
        default=5.0, description="Time bound for each live feed request in seconds"
    )

    # Weather (api.weather.gov)
    weather_base_url: str = Field(
        default="https://api.weather.gov", description="Base URL of the NOAA weather API"
    )
    weather_latitude: float = Field(default=47.6062, description="Latitude for weather lookups")
    weather_longitude: float = Field(
        default=-122.3321, description="Longitude for weather lookups"
    )
    weather_location_name: str = Field(
        default="Puget Sound / Seattle Area", description="Location label in weather reports"
    )
    weather_timeout_seconds: float = Field(
        default=10.0, description="Time bound for the weather lookup in seconds"
    )
    user_agent: str = Field(
        default="ferry-departures/0.1 (https://github.com/ferry-departures)",
        description="User-Agent sent to upstream APIs (api.weather.gov requires one)",
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of API requests allowed per IP address per minute",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
        return v

    @field_validator("departure_count")
    @classmethod
    def validate_departure_count(cls, v: int) -> int:
        """Validate at least one departure is requested."""
        if v < 1:
            raise ValueError("departure_count must be at least 1")
        return v

    @field_validator("feed_timeout_seconds", "weather_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeouts are positive."""
        if v <= 0:
            raise ValueError("timeouts must be greater than 0 seconds")
        return v

    @property
    def live_feeds_configured(self) -> bool:
        return self.live_feeds_enabled and bool(self.wsdot_api_access_code)

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)
