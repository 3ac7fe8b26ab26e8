"""Weather source port."""

from typing import Protocol

from ferry_departures.domain.models.weather import WeatherObservation


class WeatherSource(Protocol):
    """Port for retrieving the latest weather observation near a point."""

    async def fetch_observation(self, latitude: float, longitude: float) -> WeatherObservation:
        """Get the latest observation and forecast text for a coordinate."""
        ...
