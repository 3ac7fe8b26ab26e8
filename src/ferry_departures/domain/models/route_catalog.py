"""Immutable catalog of routes and their timetables."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from .route import Route
from .schedule_rules import ScheduleRules
from .timetable import DirectionalTimetable


@dataclass(frozen=True)
class RouteCatalog:
    """All routes known to the process, built once at startup."""

    routes: tuple[Route, ...]
    timetables: Mapping[tuple[str, str], DirectionalTimetable]  # (route_id, direction_key)
    rules: ScheduleRules = field(default_factory=ScheduleRules)
