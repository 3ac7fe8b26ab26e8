"""Weather source adapter for the National Weather Service API (api.weather.gov)."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from ferry_departures.adapters.api_request_logger import log_api_request
from ferry_departures.domain.exceptions import UpstreamMalformed, UpstreamUnavailable
from ferry_departures.domain.models.weather import WeatherObservation
from ferry_departures.domain.ports.weather_source import WeatherSource

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def first_value(properties: dict[str, Any], layer: str) -> float | None:
    """Return the first value of a gridpoint layer, or None when it is missing."""
    layer_data = properties.get(layer)
    if not isinstance(layer_data, dict):
        return None
    values = layer_data.get("values") or []
    if not values or not isinstance(values[0], dict):
        return None
    value = values[0].get("value")
    return float(value) if isinstance(value, int | float) else None


class NoaaWeatherSource(WeatherSource):
    """Reads the gridpoint observation and forecast for a coordinate."""

    def __init__(self, session: "ClientSession", base_url: str, user_agent: str) -> None:
        self._session = session
        self._base_url = base_url.rstrip("/")
        # api.weather.gov rejects requests without a User-Agent
        self._headers = {"User-Agent": user_agent, "Accept": "application/geo+json"}

    async def _get_json(self, url: str) -> dict[str, Any]:
        log_api_request("GET", url, headers=self._headers)
        try:
            async with self._session.get(url, headers=self._headers) as response:
                if response.status != 200:
                    raise UpstreamUnavailable(
                        f"Weather API returned status {response.status} for {url}"
                    )
                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise UpstreamMalformed(f"Weather API returned invalid JSON: {e}") from e
        except aiohttp.ClientError as e:
            raise UpstreamUnavailable(f"Error contacting weather API at {url}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("properties"), dict):
            raise UpstreamMalformed(f"Weather API response from {url} has no properties")
        return data["properties"]

    async def fetch_observation(self, latitude: float, longitude: float) -> WeatherObservation:
        point = await self._get_json(f"{self._base_url}/points/{latitude},{longitude}")

        grid_id = point.get("gridId")
        grid_x = point.get("gridX")
        grid_y = point.get("gridY")
        forecast_url = point.get("forecast")
        if grid_id is None or grid_x is None or grid_y is None or not forecast_url:
            raise UpstreamMalformed("Weather point response is missing grid information")

        current = await self._get_json(f"{self._base_url}/gridpoints/{grid_id}/{grid_x},{grid_y}")
        forecast = await self._get_json(str(forecast_url))

        periods = forecast.get("periods") or []
        forecast_text = periods[0].get("detailedForecast") if periods else None
        if not periods:
            logger.warning(f"No forecast periods for {grid_id}/{grid_x},{grid_y}")

        return WeatherObservation(
            wind_speed_ms=first_value(current, "windSpeed"),
            wind_direction_degrees=first_value(current, "windDirection"),
            temperature_c=first_value(current, "temperature"),
            relative_humidity=first_value(current, "relativeHumidity"),
            pressure_pa=first_value(current, "barometricPressure"),
            visibility_m=first_value(current, "visibility"),
            forecast=forecast_text,
        )
