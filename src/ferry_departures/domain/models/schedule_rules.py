"""Heuristic constants for direction detection and alerts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HourWindow:
    """A window of local hours.

    ``end`` is exclusive unless ``inclusive`` is set.
    """

    start: int
    end: int
    inclusive: bool = False

    def contains(self, hour: int) -> bool:
        if self.inclusive:
            return self.start <= hour <= self.end
        return self.start <= hour < self.end


@dataclass(frozen=True)
class ScheduleRules:
    """Commute, peak and night-service hour boundaries."""

    morning_commute: HourWindow = HourWindow(6, 9)
    evening_commute: HourWindow = HourWindow(16, 19)
    peak_windows: tuple[HourWindow, ...] = (
        HourWindow(7, 9, inclusive=True),
        HourWindow(16, 18, inclusive=True),
    )
    late_night_start_hour: int = 22
    early_morning_end_hour: int = 5

    def is_peak(self, hour: int) -> bool:
        return any(window.contains(hour) for window in self.peak_windows)

    def is_reduced_frequency(self, hour: int) -> bool:
        return hour >= self.late_night_start_hour or hour <= self.early_morning_end_hour
