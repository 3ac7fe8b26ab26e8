"""Projects a static timetable onto wall-clock departures."""

from collections.abc import Sequence
from datetime import UTC, datetime, time, timedelta
from zoneinfo import ZoneInfo

from ferry_departures.domain.models.departure import Departure
from ferry_departures.domain.models.timetable import DirectionalTimetable

# Today's remaining slots plus up to two following days of full scans
MAX_DAY_OFFSET = 2


def format_display_time(moment: datetime | time) -> str:
    """Format a time as 12-hour clock text without a leading zero (e.g. '2:10 PM')."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {meridiem}"


def assign_vessel(vessels: Sequence[str], position: int) -> str:
    """Pick a vessel round-robin by output position."""
    if not vessels:
        return ""
    return vessels[position % len(vessels)]


def minutes_until(candidate: datetime, reference: datetime) -> int:
    """Elapsed minutes between two aware instants, correct across DST changes."""
    return round((candidate.astimezone(UTC) - reference.astimezone(UTC)).total_seconds() / 60)


def project(
    timetable: DirectionalTimetable,
    reference: datetime,
    count: int,
    vessels: Sequence[str],
    timezone: ZoneInfo,
) -> list[Departure]:
    """Compute the next departures after a reference instant.

    Slots are combined with the reference's calendar date in ``timezone``. A slot
    is a future departure only if it is strictly after ``reference``. When today
    runs out, the following days are scanned in full and flagged with their day
    offset. At most twice the number of slots is ever returned, so an empty
    timetable yields an empty list.

    Args:
        timetable: Slots of one route direction.
        reference: The aware instant to project from.
        count: Maximum number of departures to return.
        vessels: Vessel names assigned round-robin by output position.
        timezone: Operating time zone of the route.

    Returns:
        Departures ordered by time, each strictly after ``reference``.
    """
    if reference.tzinfo is None:
        raise ValueError("reference must be timezone-aware")

    local_reference = reference.astimezone(timezone)
    limit = min(count, 2 * len(timetable))
    departures: list[Departure] = []

    for day_offset in range(MAX_DAY_OFFSET + 1):
        service_date = local_reference.date() + timedelta(days=day_offset)
        for slot in timetable.slots:
            if len(departures) >= limit:
                return departures

            candidate = datetime.combine(service_date, slot.as_time(), tzinfo=timezone)
            if candidate <= local_reference:
                continue

            wait_minutes = None
            if day_offset == 0:
                wait_minutes = minutes_until(candidate, local_reference)

            departures.append(
                Departure(
                    time=candidate,
                    display_time=format_display_time(candidate),
                    vessel=assign_vessel(vessels, len(departures)),
                    wait_minutes=wait_minutes,
                    day_offset=day_offset,
                )
            )

    return departures
