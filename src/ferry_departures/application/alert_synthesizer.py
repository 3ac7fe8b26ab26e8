"""Derives service status and advisory strings from time and route metadata."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ferry_departures.application.clock_projector import format_display_time
from ferry_departures.domain.models.ferry_info import ServiceInfo
from ferry_departures.domain.models.route import Route, RouteCategory
from ferry_departures.domain.models.schedule_rules import ScheduleRules

NORMAL_OPERATIONS_ALERT = "Normal operations"

STATUS_NORMAL = "Normal Operations"
STATUS_WEEKEND = "Weekend Service"
STATUS_SUSPENDED = "Service Suspended/Limited"

SATURDAY = 5


@dataclass(frozen=True)
class AlertRule:
    """Append ``message`` when ``applies`` holds for the route at a local time."""

    name: str
    applies: Callable[[Route, datetime, ScheduleRules], bool]
    message: str


def _is_weekend(moment: datetime) -> bool:
    return moment.weekday() >= SATURDAY


ALERT_RULES: tuple[AlertRule, ...] = (
    AlertRule(
        "weekend",
        lambda _route, moment, _rules: _is_weekend(moment),
        "Weekend service - expect higher vehicle volumes",
    ),
    AlertRule(
        "reservations",
        lambda route, _moment, _rules: route.reservation_required,
        "Vehicle reservations required - book ahead to guarantee boarding",
    ),
    AlertRule(
        "peak",
        lambda _route, moment, rules: rules.is_peak(moment.hour),
        "Peak commute hours - expect heavier traffic and longer waits",
    ),
    AlertRule(
        "multi-stop",
        lambda route, _moment, _rules: route.category is RouteCategory.ISLAND_HOPPING,
        "Multi-stop route - travel times vary by destination",
    ),
    AlertRule(
        "reduced-frequency",
        lambda _route, moment, rules: rules.is_reduced_frequency(moment.hour),
        "Late night/early morning - reduced sailing frequency",
    ),
)


class AlertSynthesizer:
    """Evaluates the alert rule table and the service status."""

    def __init__(
        self,
        rules: ScheduleRules | None = None,
        alert_rules: tuple[AlertRule, ...] = ALERT_RULES,
    ) -> None:
        self._rules = rules or ScheduleRules()
        self._alert_rules = alert_rules

    def synthesize(self, route: Route, reference: datetime) -> list[str]:
        """Return every applicable alert in rule order, never empty."""
        alerts = [
            rule.message
            for rule in self._alert_rules
            if rule.applies(route, reference, self._rules)
        ]
        return alerts or [NORMAL_OPERATIONS_ALERT]

    def service_status(self, route: Route, reference: datetime) -> str:
        if not route.is_operating(reference.time()):
            return STATUS_SUSPENDED
        if _is_weekend(reference):
            return STATUS_WEEKEND
        return STATUS_NORMAL

    def service_info(self, route: Route, reference: datetime) -> ServiceInfo:
        return ServiceInfo(
            status=self.service_status(route, reference),
            frequency=route.frequency,
            crossing_time=f"{route.crossing_time_minutes} minutes",
            operating_hours=(
                f"{format_display_time(route.service_start)} - "
                f"{format_display_time(route.service_end)}"
            ),
            reservations="Required" if route.reservation_required else None,
        )
