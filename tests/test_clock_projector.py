"""Behavior-focused tests for projecting timetables onto departures."""

from datetime import UTC, datetime, time

import pytest

from ferry_departures.adapters.timetable import StaticTimetableStore
from ferry_departures.application.clock_projector import (
    assign_vessel,
    format_display_time,
    project,
)
from ferry_departures.domain.models import DirectionalTimetable, TimeSlot

from tests.support import PACIFIC, pacific, wednesday

BAINBRIDGE_VESSELS = ("WENATCHEE", "SPOKANE", "WALLA WALLA", "PUYALLUP")


def make_timetable(*slots: str) -> DirectionalTimetable:
    return DirectionalTimetable(
        route_id="test-route",
        direction_key="a-to-b",
        slots=tuple(TimeSlot.parse(s) for s in slots),
    )


class TestFormatDisplayTime:
    """Tests for 12-hour display formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (time(0, 5), "12:05 AM"),
            (time(5, 20), "5:20 AM"),
            (time(12, 0), "12:00 PM"),
            (time(14, 10), "2:10 PM"),
            (time(23, 59), "11:59 PM"),
        ],
    )
    def test_when_formatting_then_uses_12_hour_clock_without_leading_zero(
        self, value: time, expected: str
    ) -> None:
        """Given a time of day, when formatting, then returns 'H:MM AM/PM'."""
        assert format_display_time(value) == expected


class TestAssignVessel:
    """Tests for round-robin vessel assignment."""

    def test_when_position_exceeds_fleet_then_wraps_around(self) -> None:
        """Given four vessels, when assigning position 5, then picks the second vessel."""
        assert assign_vessel(BAINBRIDGE_VESSELS, 5) == "SPOKANE"

    def test_when_no_vessels_then_returns_empty_name(self) -> None:
        """Given no vessels, when assigning, then returns an empty string."""
        assert assign_vessel((), 0) == ""


class TestProject:
    """Tests for the next-departure projection."""

    def test_when_afternoon_then_returns_next_sailings_with_waits(
        self, store: StaticTimetableStore
    ) -> None:
        """Given 14:00 on a weekday, when projecting Seattle to Bainbridge, then 2:10 PM is next."""
        timetable = store.lookup("seattle-bainbridge", "seattle-to-bainbridge")

        departures = project(timetable, wednesday(14, 0), 4, BAINBRIDGE_VESSELS, PACIFIC)

        assert [d.display_time for d in departures] == [
            "2:10 PM",
            "3:25 PM",
            "4:40 PM",
            "5:55 PM",
        ]
        assert [d.wait_minutes for d in departures] == [10, 85, 160, 235]
        assert [d.vessel for d in departures] == list(BAINBRIDGE_VESSELS)
        assert all(d.day_offset == 0 for d in departures)

    def test_when_after_last_sailing_then_rolls_over_to_next_day(
        self, store: StaticTimetableStore
    ) -> None:
        """Given 23:30, when projecting Seattle to Bainbridge, then tomorrow's first sailings follow."""
        timetable = store.lookup("seattle-bainbridge", "seattle-to-bainbridge")

        departures = project(timetable, wednesday(23, 30), 4, BAINBRIDGE_VESSELS, PACIFIC)

        assert [d.display_time for d in departures] == ["5:20 AM", "6:25 AM", "7:55 AM", "9:10 AM"]
        assert all(d.is_next_day for d in departures)
        assert all(d.wait_minutes is None for d in departures)
        assert departures[0].time == datetime(2025, 6, 12, 5, 20, tzinfo=PACIFIC)

    def test_when_reference_equals_slot_then_slot_is_not_returned(self) -> None:
        """Given a reference exactly at a slot, when projecting, then that slot is skipped."""
        timetable = make_timetable("08:00", "09:00")

        departures = project(timetable, wednesday(8, 0), 1, ("A",), PACIFIC)

        assert departures[0].display_time == "9:00 AM"
        assert departures[0].wait_minutes == 60

    def test_when_reference_is_utc_then_projects_in_operating_zone(self) -> None:
        """Given a UTC reference, when projecting, then slots are read as Pacific local time."""
        timetable = make_timetable("08:00", "09:00")
        reference = datetime(2025, 6, 11, 15, 30, tzinfo=UTC)  # 08:30 PDT

        departures = project(timetable, reference, 1, ("A",), PACIFIC)

        assert departures[0].display_time == "9:00 AM"
        assert departures[0].wait_minutes == 30

    def test_when_count_exceeds_twice_timetable_then_output_is_capped(self) -> None:
        """Given two slots and count 10, when projecting, then at most four departures return."""
        timetable = make_timetable("08:00", "20:00")

        departures = project(timetable, wednesday(7, 0), 10, ("A", "B"), PACIFIC)

        assert len(departures) == 4
        assert [d.day_offset for d in departures] == [0, 0, 1, 1]

    def test_when_timetable_is_empty_then_returns_no_departures(self) -> None:
        """Given an empty timetable, when projecting, then returns an empty list."""
        assert project(make_timetable(), wednesday(7, 0), 4, ("A",), PACIFIC) == []

    @pytest.mark.parametrize("hour", [0, 4, 9, 14, 22, 23])
    def test_when_projecting_then_output_is_strictly_increasing_and_after_reference(
        self, store: StaticTimetableStore, hour: int
    ) -> None:
        """Given any reference hour, when projecting, then departures are ordered and in the future."""
        timetable = store.lookup("edmonds-kingston", "kingston-to-edmonds")
        reference = wednesday(hour, 17)

        departures = project(timetable, reference, 6, ("KENNEWICK", "TACOMA"), PACIFIC)

        assert len(departures) == min(6, 2 * len(timetable))
        assert all(d.time > reference for d in departures)
        assert all(a.time < b.time for a, b in zip(departures, departures[1:]))

    def test_when_projecting_twice_then_results_are_identical(
        self, store: StaticTimetableStore
    ) -> None:
        """Given the same inputs, when projecting twice, then the results are equal."""
        timetable = store.lookup("mukilteo-clinton", "mukilteo-to-clinton")

        first = project(timetable, wednesday(12, 7), 4, ("SUQUAMISH", "TOKITAE"), PACIFIC)
        second = project(timetable, wednesday(12, 7), 4, ("SUQUAMISH", "TOKITAE"), PACIFIC)

        assert first == second

    def test_when_reference_is_naive_then_raises_value_error(self) -> None:
        """Given a naive reference, when projecting, then raises ValueError."""
        with pytest.raises(ValueError, match="timezone-aware"):
            project(make_timetable("08:00"), datetime(2025, 6, 11, 7, 0), 1, ("A",), PACIFIC)


class TestProjectAcrossClockChanges:
    """Tests for wait times on days when daylight saving time starts or ends."""

    def test_when_clocks_spring_forward_then_wait_is_elapsed_time(
        self, store: StaticTimetableStore
    ) -> None:
        """Given 00:30 on the spring-forward night, when projecting, then the lost hour is skipped."""
        timetable = store.lookup("seattle-bainbridge", "bainbridge-to-seattle")

        departures = project(timetable, pacific(2025, 3, 9, 0, 30), 2, BAINBRIDGE_VESSELS, PACIFIC)

        assert [d.display_time for d in departures] == ["4:45 AM", "5:45 AM"]
        assert [d.wait_minutes for d in departures] == [195, 255]

    def test_when_clocks_fall_back_then_wait_includes_repeated_hour(
        self, store: StaticTimetableStore
    ) -> None:
        """Given 00:30 on the fall-back night, when projecting, then the repeated hour is counted."""
        timetable = store.lookup("seattle-bainbridge", "bainbridge-to-seattle")

        departures = project(timetable, pacific(2025, 11, 2, 0, 30), 2, BAINBRIDGE_VESSELS, PACIFIC)

        assert [d.display_time for d in departures] == ["4:45 AM", "5:45 AM"]
        assert [d.wait_minutes for d in departures] == [315, 375]

    def test_when_reference_is_utc_on_clock_change_day_then_wait_is_unchanged(
        self, store: StaticTimetableStore
    ) -> None:
        """Given the same instant in UTC, when projecting, then waits match the local reference."""
        timetable = store.lookup("seattle-bainbridge", "bainbridge-to-seattle")
        local = pacific(2025, 3, 9, 0, 30)

        from_local = project(timetable, local, 3, BAINBRIDGE_VESSELS, PACIFIC)
        from_utc = project(timetable, local.astimezone(UTC), 3, BAINBRIDGE_VESSELS, PACIFIC)

        assert [d.wait_minutes for d in from_utc] == [d.wait_minutes for d in from_local]
