"""Departure domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Departure:
    """A projected or live departure of a ferry."""

    time: datetime
    display_time: str  # e.g. "2:10 PM"
    vessel: str
    wait_minutes: int | None  # None once the departure falls on a following day
    day_offset: int = 0  # 0 = today, 1 = tomorrow
    is_live: bool = False

    @property
    def is_next_day(self) -> bool:
        return self.day_offset > 0
