"""Terminal snapshot domain model."""

from dataclasses import dataclass

UNKNOWN_SPACES = "unknown"
ARRIVAL_TERMINAL_SPACES = "N/A (arrival terminal)"


@dataclass(frozen=True)
class TerminalSnapshot:
    """Congestion estimate for a terminal."""

    name: str
    vehicle_spaces: int | str  # Count, UNKNOWN_SPACES or ARRIVAL_TERMINAL_SPACES
    walk_on_wait: str
    vehicle_wait: str
