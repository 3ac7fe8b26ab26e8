"""Ports (interfaces) for the ports-and-adapters architecture."""

from ferry_departures.domain.ports.ferry_info_query import FerryInfoQuery, MarineWeatherQuery
from ferry_departures.domain.ports.live_feed_source import LiveFeedSource
from ferry_departures.domain.ports.timetable_store import TimetableStore
from ferry_departures.domain.ports.weather_source import WeatherSource

__all__ = [
    "FerryInfoQuery",
    "LiveFeedSource",
    "MarineWeatherQuery",
    "TimetableStore",
    "WeatherSource",
]
