"""Use case: marine weather for the sound in maritime units."""

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime

from ferry_departures.domain.exceptions import UpstreamTimeout
from ferry_departures.domain.models.weather import (
    MarineConditions,
    MarineWeather,
    MaritimeAssessment,
    WeatherObservation,
)
from ferry_departures.domain.ports.weather_source import WeatherSource

logger = logging.getLogger(__name__)

KNOTS_PER_METER_PER_SECOND = 1.944
METERS_PER_NAUTICAL_MILE = 1852
PASCALS_PER_INCH_OF_MERCURY = 3386.39
SMALL_CRAFT_ADVISORY_KNOTS = 25
NOT_AVAILABLE = "N/A"

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)  # fmt: skip

# (below this many knots, sea state)
SEA_STATES: tuple[tuple[int, str], ...] = (
    (4, "Calm (0-1 ft)"),
    (7, "Light (1-2 ft)"),
    (11, "Moderate (2-3 ft)"),
    (17, "Choppy (3-5 ft)"),
    (22, "Rough (5-8 ft)"),
)
VERY_ROUGH = "Very Rough (8+ ft)"


def to_knots(meters_per_second: float | None) -> int | None:
    if meters_per_second is None:
        return None
    return round(meters_per_second * KNOTS_PER_METER_PER_SECOND)


def to_fahrenheit(celsius: float | None) -> int | None:
    if celsius is None:
        return None
    return round(celsius * 9 / 5 + 32)


def to_nautical_miles(meters: float | None) -> float | None:
    if meters is None:
        return None
    return round(meters / METERS_PER_NAUTICAL_MILE, 1)


def to_inches_of_mercury(pascals: float | None) -> float | None:
    if pascals is None:
        return None
    return round(pascals / PASCALS_PER_INCH_OF_MERCURY, 2)


def compass_direction(degrees: float | None) -> str:
    if degrees is None:
        return "Variable"
    return COMPASS_POINTS[round(degrees / 22.5) % 16]


def estimate_sea_state(wind_knots: int | None) -> str:
    if wind_knots is None:
        return "Unknown"
    for limit, state in SEA_STATES:
        if wind_knots < limit:
            return state
    return VERY_ROUGH


def categorize_conditions(wind_knots: int | None, visibility_nm: float | None) -> str:
    if wind_knots is None or visibility_nm is None:
        return "Unknown"
    if wind_knots > SMALL_CRAFT_ADVISORY_KNOTS or visibility_nm < 2:
        return "Poor - Small craft advisory"
    if wind_knots > 15 or visibility_nm < 5:
        return "Fair - Use caution"
    return "Good - Favorable conditions"


def _or_na(value: object) -> str:
    return NOT_AVAILABLE if value is None else str(value)


def format_marine_weather(
    observation: WeatherObservation, location: str, timestamp: datetime
) -> MarineWeather:
    """Convert an SI observation to the maritime report."""
    wind_knots = to_knots(observation.wind_speed_ms)
    visibility_nm = to_nautical_miles(observation.visibility_m)
    humidity = None if observation.relative_humidity is None else round(observation.relative_humidity)

    return MarineWeather(
        location=location,
        timestamp=timestamp,
        conditions=MarineConditions(
            wind=f"{compass_direction(observation.wind_direction_degrees)} {_or_na(wind_knots)} knots",
            temperature=f"{_or_na(to_fahrenheit(observation.temperature_c))}°F",
            visibility=f"{_or_na(visibility_nm)} nautical miles",
            humidity=f"{_or_na(humidity)}%",
            pressure=f'{_or_na(to_inches_of_mercury(observation.pressure_pa))}" Hg',
            forecast=observation.forecast or NOT_AVAILABLE,
        ),
        maritime=MaritimeAssessment(
            sea_state=estimate_sea_state(wind_knots),
            small_craft_advisory=wind_knots is not None and wind_knots > SMALL_CRAFT_ADVISORY_KNOTS,
            conditions=categorize_conditions(wind_knots, visibility_nm),
        ),
    )


class WeatherService:
    """Fetches the latest observation and formats it for mariners."""

    def __init__(
        self,
        weather_source: WeatherSource,
        latitude: float,
        longitude: float,
        location_name: str,
        timeout_seconds: float = 10.0,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._weather_source = weather_source
        self._latitude = latitude
        self._longitude = longitude
        self._location_name = location_name
        self._timeout_seconds = timeout_seconds
        self._clock = clock

    async def get_marine_weather(self, now: datetime | None = None) -> MarineWeather:
        """Get the marine weather report stamped with now, or the current instant.

        Raises:
            UpstreamError: If the weather source fails or exceeds the time bound.
        """
        try:
            observation = await asyncio.wait_for(
                self._weather_source.fetch_observation(self._latitude, self._longitude),
                timeout=self._timeout_seconds,
            )
        except TimeoutError as e:
            raise UpstreamTimeout(
                f"Weather service did not answer within {self._timeout_seconds}s"
            ) from e

        return format_marine_weather(observation, self._location_name, now or self._clock())
