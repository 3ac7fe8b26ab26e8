"""Application layer - use cases built on the domain."""

from ferry_departures.application.ferry_info_service import FerryInfoService
from ferry_departures.application.weather_service import WeatherService

__all__ = ["FerryInfoService", "WeatherService"]
