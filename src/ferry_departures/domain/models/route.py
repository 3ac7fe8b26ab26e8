"""Route domain model."""

from dataclasses import dataclass, field
from datetime import time
from enum import StrEnum

from ferry_departures.domain.exceptions import NotFoundError


class RouteCategory(StrEnum):
    """Service category of a route."""

    COMMUTER = "commuter"
    FREQUENT = "frequent"
    LONG_HAUL = "long-haul"
    ISLAND_HOPPING = "island-hopping"


@dataclass(frozen=True)
class Direction:
    """One travel direction on a route."""

    key: str
    origin: str
    destination: str

    @property
    def label(self) -> str:
        return f"{self.origin} → {self.destination}"


@dataclass(frozen=True)
class Route:
    """A named ferry crossing between two or more terminals."""

    id: str
    name: str
    short_name: str
    terminals: tuple[str, ...]  # First terminal is the urban (major) endpoint
    crossing_time_minutes: int
    frequency: str
    reservation_required: bool
    category: RouteCategory
    vessels: tuple[str, ...]
    directions: tuple[Direction, ...]
    service_start: time
    service_end: time  # May be earlier than service_start when service runs past midnight
    priority: int = 0
    match_pairs: tuple[tuple[str, ...], ...] = field(default_factory=tuple)
    keywords: tuple[str, ...] = field(default_factory=tuple)
    keyword_exclusions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def major_terminal(self) -> str:
        return self.terminals[0]

    @property
    def direction_keys(self) -> list[str]:
        return [direction.key for direction in self.directions]

    def direction(self, key: str) -> Direction:
        """Return the direction with the given key.

        Raises:
            NotFoundError: If the route has no such direction.
        """
        for direction in self.directions:
            if direction.key == key:
                return direction
        raise NotFoundError(f"Route '{self.id}' has no direction '{key}'")

    def is_operating(self, local_time: time) -> bool:
        """Check whether the given local time of day falls in the operating window."""
        clock = local_time.replace(second=0, microsecond=0, tzinfo=None)
        if self.service_start <= self.service_end:
            return self.service_start <= clock < self.service_end
        return clock >= self.service_start or clock < self.service_end
