"""Shared helpers for ferry departures tests."""

from datetime import datetime
from zoneinfo import ZoneInfo

PACIFIC = ZoneInfo("America/Los_Angeles")


def pacific(year: int, month: int, day: int, hour: int, minute: int = 0) -> datetime:
    """Build an aware local instant in the operating time zone."""
    return datetime(year, month, day, hour, minute, tzinfo=PACIFIC)


def wednesday(hour: int, minute: int = 0) -> datetime:
    """2025-06-11 is a Wednesday."""
    return pacific(2025, 6, 11, hour, minute)


def saturday(hour: int, minute: int = 0) -> datetime:
    """2025-06-14 is a Saturday."""
    return pacific(2025, 6, 14, hour, minute)
