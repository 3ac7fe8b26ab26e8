"""Static timetable adapters."""

from ferry_departures.adapters.timetable.static_timetable_store import StaticTimetableStore

__all__ = ["StaticTimetableStore"]
