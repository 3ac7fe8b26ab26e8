"""Domain models for ferry departures."""

from ferry_departures.domain.models.departure import Departure
from ferry_departures.domain.models.feed_result import FeedResult, FeedSet, FeedStatus
from ferry_departures.domain.models.ferry_info import (
    DataSource,
    MergedFerryInfo,
    ServiceInfo,
    StaticProjection,
)
from ferry_departures.domain.models.live_feeds import (
    ScheduledSailing,
    TerminalSpace,
    VesselLocation,
)
from ferry_departures.domain.models.route import Direction, Route, RouteCategory
from ferry_departures.domain.models.route_catalog import RouteCatalog
from ferry_departures.domain.models.schedule_rules import HourWindow, ScheduleRules
from ferry_departures.domain.models.terminal_snapshot import (
    ARRIVAL_TERMINAL_SPACES,
    UNKNOWN_SPACES,
    TerminalSnapshot,
)
from ferry_departures.domain.models.timetable import DirectionalTimetable, TimeSlot
from ferry_departures.domain.models.vessel_status import VesselState, VesselStatus
from ferry_departures.domain.models.weather import (
    MarineConditions,
    MarineWeather,
    MaritimeAssessment,
    WeatherObservation,
)

__all__ = [
    "ARRIVAL_TERMINAL_SPACES",
    "UNKNOWN_SPACES",
    "DataSource",
    "Departure",
    "Direction",
    "DirectionalTimetable",
    "FeedResult",
    "FeedSet",
    "FeedStatus",
    "HourWindow",
    "MarineConditions",
    "MarineWeather",
    "MaritimeAssessment",
    "MergedFerryInfo",
    "Route",
    "RouteCatalog",
    "RouteCategory",
    "ScheduleRules",
    "ScheduledSailing",
    "ServiceInfo",
    "StaticProjection",
    "TerminalSnapshot",
    "TerminalSpace",
    "TimeSlot",
    "VesselLocation",
    "VesselState",
    "VesselStatus",
    "WeatherObservation",
]
