"""Adapters layer - external system integrations."""

from ferry_departures.adapters.config import AppConfig, RouteCatalogLoader
from ferry_departures.adapters.timetable import StaticTimetableStore
from ferry_departures.adapters.weather_gov import NoaaWeatherSource
from ferry_departures.adapters.wsdot_api import WsdotLiveFeedSource

__all__ = [
    "AppConfig",
    "NoaaWeatherSource",
    "RouteCatalogLoader",
    "StaticTimetableStore",
    "WsdotLiveFeedSource",
]
