"""Loads the route catalog (routes, timetables, heuristics) from TOML."""

import logging
import tomllib
from datetime import time
from pathlib import Path
from types import MappingProxyType
from typing import Any

from ferry_departures.domain.models.route import Direction, Route, RouteCategory
from ferry_departures.domain.models.route_catalog import RouteCatalog
from ferry_departures.domain.models.schedule_rules import HourWindow, ScheduleRules
from ferry_departures.domain.models.timetable import DirectionalTimetable, TimeSlot

logger = logging.getLogger(__name__)

BUNDLED_CATALOG = Path(__file__).resolve().parent.parent.parent / "data" / "routes.toml"

REQUIRED_ROUTE_FIELDS = (
    "id",
    "name",
    "short_name",
    "terminals",
    "crossing_time_minutes",
    "frequency",
    "category",
    "vessels",
    "service_start",
    "service_end",
    "directions",
)


class RouteCatalogLoader:
    """Builds an immutable RouteCatalog from a TOML document."""

    @staticmethod
    def load(path: str | Path | None = None) -> RouteCatalog:
        """Load the catalog from a file, or the bundled catalog when no path is given.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the document is not a valid catalog.
        """
        catalog_path = Path(path) if path else BUNDLED_CATALOG
        if not catalog_path.exists():
            raise FileNotFoundError(f"Route catalog not found: {catalog_path}")

        with open(catalog_path, "rb") as f:
            data = tomllib.load(f)

        catalog = RouteCatalogLoader.from_dict(data)
        logger.info(f"Loaded {len(catalog.routes)} route(s) from {catalog_path}")
        return catalog

    @staticmethod
    def loads(text: str) -> RouteCatalog:
        """Load the catalog from TOML text."""
        return RouteCatalogLoader.from_dict(tomllib.loads(text))

    @staticmethod
    def from_dict(data: dict[str, Any]) -> RouteCatalog:
        routes_data = data.get("routes", [])
        if not isinstance(routes_data, list) or not routes_data:
            raise ValueError("Route catalog must define at least one [[routes]] entry")

        routes: list[Route] = []
        timetables: dict[tuple[str, str], DirectionalTimetable] = {}
        for route_data in routes_data:
            if not isinstance(route_data, dict):
                raise ValueError("Each [[routes]] entry must be a table")
            route, route_timetables = RouteCatalogLoader._parse_route(route_data)
            if any(existing.id == route.id for existing in routes):
                raise ValueError(f"Route ids must be unique. Duplicate id: '{route.id}'")
            routes.append(route)
            timetables.update(route_timetables)

        if not any(route.category is RouteCategory.COMMUTER for route in routes):
            raise ValueError("Route catalog must contain at least one commuter route")

        return RouteCatalog(
            routes=tuple(routes),
            timetables=MappingProxyType(timetables),
            rules=RouteCatalogLoader._parse_rules(data.get("rules", {})),
        )

    @staticmethod
    def _parse_route(
        data: dict[str, Any],
    ) -> tuple[Route, dict[tuple[str, str], DirectionalTimetable]]:
        missing = [name for name in REQUIRED_ROUTE_FIELDS if name not in data]
        route_id = str(data.get("id", "<unnamed>"))
        if missing:
            raise ValueError(f"Route '{route_id}' is missing field(s): {', '.join(missing)}")

        terminals = tuple(str(t) for t in data["terminals"])
        if len(terminals) < 2:
            raise ValueError(f"Route '{route_id}' must have at least two terminals")

        vessels = tuple(str(v) for v in data["vessels"])
        if not vessels:
            raise ValueError(f"Route '{route_id}' must list at least one vessel")

        try:
            category = RouteCategory(data["category"])
        except ValueError as e:
            valid = ", ".join(c.value for c in RouteCategory)
            raise ValueError(
                f"Route '{route_id}' has unknown category '{data['category']}' (valid: {valid})"
            ) from e

        directions: list[Direction] = []
        timetables: dict[tuple[str, str], DirectionalTimetable] = {}
        for direction_data in data["directions"]:
            if not isinstance(direction_data, dict) or not all(
                name in direction_data for name in ("key", "from", "to")
            ):
                raise ValueError(
                    f"Each direction of route '{route_id}' needs 'key', 'from' and 'to'"
                )
            direction = Direction(
                key=str(direction_data["key"]),
                origin=str(direction_data["from"]),
                destination=str(direction_data["to"]),
            )
            for terminal in (direction.origin, direction.destination):
                if terminal not in terminals:
                    raise ValueError(
                        f"Direction '{direction.key}' of route '{route_id}' uses terminal "
                        f"'{terminal}' which is not on the route"
                    )
            if any(existing.key == direction.key for existing in directions):
                raise ValueError(f"Route '{route_id}' has duplicate direction '{direction.key}'")

            slots = tuple(TimeSlot.parse(str(s)) for s in direction_data.get("departures", []))
            timetables[(route_id, direction.key)] = DirectionalTimetable(
                route_id=route_id, direction_key=direction.key, slots=slots
            )
            directions.append(direction)

        if not directions:
            raise ValueError(f"Route '{route_id}' must define at least one direction")
        if directions[0].origin != terminals[0]:
            raise ValueError(
                f"First direction of route '{route_id}' must depart '{terminals[0]}'"
            )

        route = Route(
            id=route_id,
            name=str(data["name"]),
            short_name=str(data["short_name"]),
            terminals=terminals,
            crossing_time_minutes=int(data["crossing_time_minutes"]),
            frequency=str(data["frequency"]),
            reservation_required=bool(data.get("reservation_required", False)),
            category=category,
            vessels=vessels,
            directions=tuple(directions),
            service_start=RouteCatalogLoader._parse_time(data["service_start"], route_id),
            service_end=RouteCatalogLoader._parse_time(data["service_end"], route_id),
            priority=int(data.get("priority", 0)),
            match_pairs=tuple(tuple(str(w) for w in pair) for pair in data.get("match_pairs", [])),
            keywords=tuple(str(k) for k in data.get("keywords", [])),
            keyword_exclusions=tuple(str(k) for k in data.get("keyword_exclusions", [])),
        )
        return route, timetables

    @staticmethod
    def _parse_time(value: Any, route_id: str) -> time:
        try:
            return TimeSlot.parse(str(value)).as_time()
        except ValueError as e:
            raise ValueError(f"Route '{route_id}': {e}") from e

    @staticmethod
    def _parse_window(value: Any, name: str, inclusive: bool = False) -> HourWindow:
        if not isinstance(value, list) or len(value) != 2:
            raise ValueError(f"rules.{name} must be a [start, end] pair of hours")
        start, end = int(value[0]), int(value[1])
        if not (0 <= start <= 24 and 0 <= end <= 24 and start <= end):
            raise ValueError(f"rules.{name} must satisfy 0 <= start <= end <= 24")
        return HourWindow(start, end, inclusive=inclusive)

    @staticmethod
    def _parse_rules(data: dict[str, Any]) -> ScheduleRules:
        defaults = ScheduleRules()
        if not data:
            return defaults

        peak_windows = defaults.peak_windows
        if "peak_windows" in data:
            peak_windows = tuple(
                RouteCatalogLoader._parse_window(window, "peak_windows", inclusive=True)
                for window in data["peak_windows"]
            )

        return ScheduleRules(
            morning_commute=(
                RouteCatalogLoader._parse_window(data["morning_commute"], "morning_commute")
                if "morning_commute" in data
                else defaults.morning_commute
            ),
            evening_commute=(
                RouteCatalogLoader._parse_window(data["evening_commute"], "evening_commute")
                if "evening_commute" in data
                else defaults.evening_commute
            ),
            peak_windows=peak_windows,
            late_night_start_hour=int(
                data.get("late_night_start_hour", defaults.late_night_start_hour)
            ),
            early_morning_end_hour=int(
                data.get("early_morning_end_hour", defaults.early_morning_end_hour)
            ),
        )
