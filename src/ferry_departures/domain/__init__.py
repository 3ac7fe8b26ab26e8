"""Domain layer - core models, exceptions and ports."""

from ferry_departures.domain.exceptions import (
    FerryError,
    InvalidDirectionError,
    NotFoundError,
    UpstreamError,
    UpstreamMalformed,
    UpstreamTimeout,
    UpstreamUnavailable,
)
from ferry_departures.domain.models import Departure, Direction, Route, RouteCatalog
from ferry_departures.domain.ports import (
    FerryInfoQuery,
    LiveFeedSource,
    MarineWeatherQuery,
    TimetableStore,
    WeatherSource,
)

__all__ = [
    "Departure",
    "Direction",
    "FerryError",
    "FerryInfoQuery",
    "InvalidDirectionError",
    "LiveFeedSource",
    "MarineWeatherQuery",
    "NotFoundError",
    "Route",
    "RouteCatalog",
    "TimetableStore",
    "UpstreamError",
    "UpstreamMalformed",
    "UpstreamTimeout",
    "UpstreamUnavailable",
    "WeatherSource",
]
