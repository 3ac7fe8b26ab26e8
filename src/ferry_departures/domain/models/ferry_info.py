"""Models describing the answer to a ferry info request."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from .departure import Departure
from .route import Direction, Route
from .terminal_snapshot import TerminalSnapshot
from .vessel_status import VesselStatus


class DataSource(StrEnum):
    """Where a response group was drawn from."""

    LIVE = "live"
    FALLBACK = "fallback"
    STATIC = "static"


@dataclass(frozen=True)
class ServiceInfo:
    """Service summary for a route."""

    status: str
    frequency: str
    crossing_time: str
    operating_hours: str
    reservations: str | None = None


@dataclass(frozen=True)
class StaticProjection:
    """Everything that can be answered from the static timetable alone."""

    route: Route
    direction: Direction
    reference_time: datetime  # Local to the operating time zone
    departure_count: int
    service: ServiceInfo
    departures: tuple[Departure, ...]
    alerts: tuple[str, ...]


@dataclass(frozen=True)
class MergedFerryInfo:
    """Reconciled ferry information for one request."""

    route: Route
    direction: Direction
    reference_time: datetime
    service: ServiceInfo
    vessels: tuple[VesselStatus, ...]
    departures: tuple[Departure, ...]
    departure_terminal: TerminalSnapshot
    arrival_terminal: TerminalSnapshot
    alerts: tuple[str, ...]
    sources: Mapping[str, DataSource]

    @property
    def has_live_data(self) -> bool:
        return DataSource.LIVE in self.sources.values()
