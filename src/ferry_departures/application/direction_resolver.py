"""Resolves a requested direction to one of a route's direction keys."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ferry_departures.domain.exceptions import InvalidDirectionError
from ferry_departures.domain.models.route import Direction, Route, RouteCategory
from ferry_departures.domain.models.schedule_rules import HourWindow, ScheduleRules

logger = logging.getLogger(__name__)

AUTO_DIRECTION = "auto"


def _toward_major_terminal(route: Route) -> Direction | None:
    return next((d for d in route.directions if d.destination == route.major_terminal), None)


def _away_from_major_terminal(route: Route) -> Direction | None:
    return next((d for d in route.directions if d.origin == route.major_terminal), None)


@dataclass(frozen=True)
class CommuteRule:
    """Pick a direction when the local hour falls inside a window."""

    name: str
    window: HourWindow
    pick: Callable[[Route], Direction | None]


class DirectionResolver:
    """Maps 'auto' or an explicit key to a direction key of a route."""

    def __init__(self, rules: ScheduleRules | None = None) -> None:
        rules = rules or ScheduleRules()
        self._commute_rules: tuple[CommuteRule, ...] = (
            CommuteRule("morning inbound", rules.morning_commute, _toward_major_terminal),
            CommuteRule("evening outbound", rules.evening_commute, _away_from_major_terminal),
        )

    def resolve(self, route: Route, requested: str | None, reference: datetime) -> str:
        """Resolve the requested direction.

        Args:
            route: The route the direction belongs to.
            requested: A direction key, 'auto', or None (treated as 'auto').
            reference: Reference instant, already in the route's local time zone.

        Returns:
            One of the route's direction keys.

        Raises:
            InvalidDirectionError: If an explicit direction is not defined for the route.
        """
        normalized = (requested or "").strip().lower()
        if normalized and normalized != AUTO_DIRECTION:
            for key in route.direction_keys:
                if key.lower() == normalized:
                    return key
            raise InvalidDirectionError(route.id, requested or "", route.direction_keys)

        return self._detect(route, reference.hour)

    def _detect(self, route: Route, hour: int) -> str:
        default_key = route.directions[0].key
        if route.category is not RouteCategory.COMMUTER:
            return default_key

        for rule in self._commute_rules:
            if rule.window.contains(hour):
                direction = rule.pick(route)
                if direction is not None:
                    logger.debug(f"Direction for {route.id} at {hour}h chosen by {rule.name} rule")
                    return direction.key

        return default_key
