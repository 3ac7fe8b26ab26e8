"""In-memory timetable store over a loaded route catalog."""

from collections.abc import Sequence

from ferry_departures.domain.exceptions import NotFoundError
from ferry_departures.domain.models.route import Route, RouteCategory
from ferry_departures.domain.models.route_catalog import RouteCatalog
from ferry_departures.domain.models.schedule_rules import ScheduleRules
from ferry_departures.domain.models.timetable import DirectionalTimetable
from ferry_departures.domain.ports.timetable_store import TimetableStore


class StaticTimetableStore(TimetableStore):
    """Read-only store backed by an immutable RouteCatalog."""

    def __init__(self, catalog: RouteCatalog) -> None:
        self._catalog = catalog
        self._routes = {route.id: route for route in catalog.routes}

    @property
    def rules(self) -> ScheduleRules:
        return self._catalog.rules

    def lookup(self, route_id: str, direction_key: str) -> DirectionalTimetable:
        route = self.get_route(route_id)
        timetable = self._catalog.timetables.get((route.id, direction_key))
        if timetable is None:
            raise NotFoundError(
                f"Route '{route_id}' has no direction '{direction_key}'. "
                f"Known directions: {', '.join(route.direction_keys)}"
            )
        return timetable

    def list_routes(self) -> Sequence[Route]:
        return self._catalog.routes

    def get_route(self, route_id: str) -> Route:
        route = self._routes.get(route_id)
        if route is None:
            raise NotFoundError(f"Unknown route '{route_id}'")
        return route

    def default_route(self) -> Route:
        """The commuter route with the highest priority (first declared wins ties)."""
        commuters = [r for r in self._catalog.routes if r.category is RouteCategory.COMMUTER]
        if not commuters:
            raise NotFoundError("Route catalog has no commuter route to use as default")
        return max(commuters, key=lambda route: route.priority)
