"""Tagged result of fetching one live feed."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from .live_feeds import ScheduledSailing, TerminalSpace, VesselLocation

T = TypeVar("T")


class FeedStatus(StrEnum):
    """Outcome of a live feed fetch."""

    PRESENT = "present"
    ABSENT = "absent"
    TIMED_OUT = "timed-out"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class FeedResult(Generic[T]):
    """Either live data or the reason there is none."""

    status: FeedStatus
    data: T | None = None
    reason: str | None = None

    @classmethod
    def live(cls, data: T) -> "FeedResult[T]":
        return cls(status=FeedStatus.PRESENT, data=data)

    @classmethod
    def absent(cls, reason: str = "not requested") -> "FeedResult[T]":
        return cls(status=FeedStatus.ABSENT, reason=reason)

    @classmethod
    def timed_out(cls, reason: str = "timed out") -> "FeedResult[T]":
        return cls(status=FeedStatus.TIMED_OUT, reason=reason)

    @classmethod
    def malformed(cls, reason: str) -> "FeedResult[T]":
        return cls(status=FeedStatus.MALFORMED, reason=reason)

    @property
    def is_usable(self) -> bool:
        return self.status is FeedStatus.PRESENT and self.data is not None


@dataclass(frozen=True)
class FeedSet:
    """The three live feeds of one request."""

    vessels: FeedResult[list[VesselLocation]]
    schedule: FeedResult[list[ScheduledSailing]]
    terminals: FeedResult[list[TerminalSpace]]

    @classmethod
    def all_absent(cls, reason: str = "live feeds disabled") -> "FeedSet":
        return cls(
            vessels=FeedResult.absent(reason),
            schedule=FeedResult.absent(reason),
            terminals=FeedResult.absent(reason),
        )
