"""Live feed source port."""

from typing import Protocol

from ferry_departures.domain.models.live_feeds import (
    ScheduledSailing,
    TerminalSpace,
    VesselLocation,
)


class LiveFeedSource(Protocol):
    """Port for fetching real-time vessel, schedule and terminal data.

    Implementations raise UpstreamUnavailable or UpstreamMalformed. Time bounds
    are enforced by the caller.
    """

    async def fetch_vessel_locations(self) -> list[VesselLocation]:
        """Get the current position of every vessel in the fleet."""
        ...

    async def fetch_schedule(self, origin: str, destination: str) -> list[ScheduledSailing]:
        """Get today's sailings between two terminals."""
        ...

    async def fetch_terminal_space(self) -> list[TerminalSpace]:
        """Get the vehicle space currently reported per terminal."""
        ...
