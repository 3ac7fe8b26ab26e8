"""Records produced by live feed adapters."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class VesselLocation:
    """A vessel position entry from the vessel feed."""

    vessel_name: str
    departing_terminal: str | None
    arriving_terminal: str | None
    at_dock: bool
    in_service: bool = True


@dataclass(frozen=True)
class ScheduledSailing:
    """A sailing from the live schedule feed."""

    departing_terminal: str
    arriving_terminal: str | None
    departure_time: datetime
    vessel_name: str | None = None


@dataclass(frozen=True)
class TerminalSpace:
    """Vehicle space reported for a terminal."""

    terminal_name: str
    space_for_autos: int | None
