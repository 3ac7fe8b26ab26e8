"""Static timetable domain models."""

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True, order=True)
class TimeSlot:
    """A scheduled time-of-day departure."""

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be between 0 and 23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be between 0 and 59, got {self.minute}")

    @classmethod
    def parse(cls, value: str) -> "TimeSlot":
        """Parse an 'HH:MM' string."""
        hour_text, sep, minute_text = value.strip().partition(":")
        if not sep or not hour_text.isdigit() or not minute_text.isdigit():
            raise ValueError(f"Invalid time slot '{value}', expected HH:MM")
        return cls(hour=int(hour_text), minute=int(minute_text))

    def as_time(self) -> time:
        return time(self.hour, self.minute)


@dataclass(frozen=True)
class DirectionalTimetable:
    """Ordered departure slots for one direction of one route."""

    route_id: str
    direction_key: str
    slots: tuple[TimeSlot, ...]

    def __post_init__(self) -> None:
        for previous, current in zip(self.slots, self.slots[1:]):
            if current <= previous:
                raise ValueError(
                    f"Timetable {self.route_id}/{self.direction_key} slots must be strictly "
                    f"increasing: {previous.hour:02d}:{previous.minute:02d} is followed by "
                    f"{current.hour:02d}:{current.minute:02d}"
                )

    def __len__(self) -> int:
        return len(self.slots)
