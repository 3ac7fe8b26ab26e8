"""National Weather Service adapters."""

from ferry_departures.adapters.weather_gov.noaa_weather_source import NoaaWeatherSource

__all__ = ["NoaaWeatherSource"]
