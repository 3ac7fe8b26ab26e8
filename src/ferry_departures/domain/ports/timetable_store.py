"""Timetable store port."""

from collections.abc import Sequence
from typing import Protocol

from ferry_departures.domain.models.route import Route
from ferry_departures.domain.models.schedule_rules import ScheduleRules
from ferry_departures.domain.models.timetable import DirectionalTimetable


class TimetableStore(Protocol):
    """Port for read-only access to routes and their static timetables."""

    @property
    def rules(self) -> ScheduleRules:
        """Heuristic constants that ship with the timetable."""
        ...

    def lookup(self, route_id: str, direction_key: str) -> DirectionalTimetable:
        """Get the timetable of one direction. Raises NotFoundError when unknown."""
        ...

    def list_routes(self) -> Sequence[Route]:
        """Get all routes in declaration order."""
        ...

    def get_route(self, route_id: str) -> Route:
        """Get a route by id. Raises NotFoundError when unknown."""
        ...

    def default_route(self) -> Route:
        """Get the route used when a query matches nothing."""
        ...
