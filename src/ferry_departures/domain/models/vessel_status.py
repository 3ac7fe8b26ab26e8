"""Vessel status domain model."""

from dataclasses import dataclass
from enum import StrEnum


class VesselState(StrEnum):
    """Operational state of a vessel."""

    LOADING = "loading"
    IN_TRANSIT = "in-transit"
    DOCKED = "docked"
    OUT_OF_SERVICE = "out-of-service"
    SUSPENDED = "suspended"


STATE_DESCRIPTIONS = {
    VesselState.LOADING: "Loading passengers",
    VesselState.IN_TRANSIT: "In transit",
    VesselState.DOCKED: "Docked",
    VesselState.OUT_OF_SERVICE: "Out of service",
    VesselState.SUSPENDED: "Service suspended",
}


@dataclass(frozen=True)
class VesselStatus:
    """Where a vessel is and what it is doing."""

    name: str
    location: str
    state: VesselState

    @property
    def description(self) -> str:
        return STATE_DESCRIPTIONS[self.state]
