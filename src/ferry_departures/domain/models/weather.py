"""Weather domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class WeatherObservation:
    """Latest observation in SI units, as reported upstream."""

    wind_speed_ms: float | None
    wind_direction_degrees: float | None
    temperature_c: float | None
    relative_humidity: float | None
    pressure_pa: float | None
    visibility_m: float | None
    forecast: str | None


@dataclass(frozen=True)
class MarineConditions:
    """Observation converted to maritime units and display strings."""

    wind: str
    temperature: str
    visibility: str
    humidity: str
    pressure: str
    forecast: str


@dataclass(frozen=True)
class MaritimeAssessment:
    """Derived sea state and advisory flags."""

    sea_state: str
    small_craft_advisory: bool
    conditions: str


@dataclass(frozen=True)
class MarineWeather:
    """Marine weather report for the sound."""

    location: str
    timestamp: datetime
    conditions: MarineConditions
    maritime: MaritimeAssessment
