"""Merges live feed data with the static projection, one category at a time."""

import logging
from collections.abc import Sequence

from ferry_departures.application.clock_projector import (
    assign_vessel,
    format_display_time,
    minutes_until,
)
from ferry_departures.domain.models.departure import Departure
from ferry_departures.domain.models.feed_result import FeedResult, FeedSet
from ferry_departures.domain.models.ferry_info import (
    DataSource,
    MergedFerryInfo,
    StaticProjection,
)
from ferry_departures.domain.models.live_feeds import (
    ScheduledSailing,
    TerminalSpace,
    VesselLocation,
)
from ferry_departures.domain.models.route import Direction, Route
from ferry_departures.domain.models.terminal_snapshot import (
    ARRIVAL_TERMINAL_SPACES,
    UNKNOWN_SPACES,
    TerminalSnapshot,
)
from ferry_departures.domain.models.vessel_status import VesselState, VesselStatus

logger = logging.getLogger(__name__)

# (more than this many spaces, vehicle wait), checked top to bottom
VEHICLE_WAIT_BANDS: tuple[tuple[int, str], ...] = (
    (50, "5-15 minutes"),
    (20, "15-30 minutes"),
    (5, "30-60 minutes"),
)
NEXT_SAILING_RECOMMENDED = "Next sailing recommended"
GENERIC_VEHICLE_WAIT = "Estimated 15-30 minutes"
WALK_ON_WAIT = "Minimal"
NOT_APPLICABLE = "N/A"


def names_match(left: str | None, right: str | None) -> bool:
    """Case-insensitive substring match in either direction."""
    if not left or not right:
        return False
    left_lower, right_lower = left.lower(), right.lower()
    return left_lower in right_lower or right_lower in left_lower


def vehicle_wait_for(spaces: int) -> str:
    for threshold, estimate in VEHICLE_WAIT_BANDS:
        if spaces > threshold:
            return estimate
    return NEXT_SAILING_RECOMMENDED


def vessel_display_name(name: str) -> str:
    """Turn a feed vessel name like 'WALLA WALLA' into 'M/V Walla Walla'."""
    return f"M/V {name.strip().title()}"


class LiveFeedReconciler:
    """Total function from (static projection, tagged feeds) to a merged answer."""

    def reconcile(self, projection: StaticProjection, feeds: FeedSet) -> MergedFerryInfo:
        vessels, vessel_source = self._reconcile_vessels(projection, feeds.vessels)
        departures, schedule_source = self._reconcile_departures(projection, feeds.schedule)
        departure_terminal, terminal_source = self._reconcile_terminal(
            projection, feeds.terminals
        )

        return MergedFerryInfo(
            route=projection.route,
            direction=projection.direction,
            reference_time=projection.reference_time,
            service=projection.service,
            vessels=vessels,
            departures=departures,
            departure_terminal=departure_terminal,
            arrival_terminal=TerminalSnapshot(
                name=projection.direction.destination,
                vehicle_spaces=ARRIVAL_TERMINAL_SPACES,
                walk_on_wait=NOT_APPLICABLE,
                vehicle_wait=NOT_APPLICABLE,
            ),
            alerts=projection.alerts,
            sources={
                "service": DataSource.STATIC,
                "vessels": vessel_source,
                "departures": schedule_source,
                "terminals": terminal_source,
                "alerts": DataSource.STATIC,
            },
        )

    # Vessels

    def _reconcile_vessels(
        self, projection: StaticProjection, feed: FeedResult[list[VesselLocation]]
    ) -> tuple[tuple[VesselStatus, ...], DataSource]:
        if feed.is_usable and feed.data is not None:
            matching = self._route_vessels(projection.route, projection.direction, feed.data)
            if matching:
                return tuple(
                    self._to_vessel_status(entry, projection.direction) for entry in matching
                ), DataSource.LIVE
            logger.info(f"Vessel feed had no entries for route {projection.route.id}")

        return self._synthesize_vessels(projection), DataSource.FALLBACK

    @staticmethod
    def _route_vessels(
        route: Route, direction: Direction, entries: Sequence[VesselLocation]
    ) -> list[VesselLocation]:
        route_vessels = {name.lower() for name in route.vessels}
        endpoints = (direction.origin, direction.destination)
        matching = []
        for entry in entries:
            if entry.vessel_name.strip().lower() not in route_vessels:
                continue
            if entry.departing_terminal and not any(
                names_match(entry.departing_terminal, endpoint) for endpoint in endpoints
            ):
                continue
            matching.append(entry)
        return matching

    @staticmethod
    def _to_vessel_status(entry: VesselLocation, direction: Direction) -> VesselStatus:
        name = vessel_display_name(entry.vessel_name)
        departing = entry.departing_terminal or direction.origin

        if not entry.in_service:
            return VesselStatus(name, f"{departing} Terminal", VesselState.OUT_OF_SERVICE)
        if entry.at_dock:
            state = (
                VesselState.LOADING
                if names_match(departing, direction.origin)
                else VesselState.DOCKED
            )
            return VesselStatus(name, f"{departing} Terminal", state)

        arriving = entry.arriving_terminal or direction.destination
        return VesselStatus(name, f"En route to {arriving}", VesselState.IN_TRANSIT)

    @staticmethod
    def _synthesize_vessels(projection: StaticProjection) -> tuple[VesselStatus, ...]:
        route, direction = projection.route, projection.direction
        if not route.is_operating(projection.reference_time.time()):
            return (
                VesselStatus(
                    vessel_display_name(route.vessels[0]),
                    f"{direction.origin} Terminal",
                    VesselState.SUSPENDED,
                ),
            )

        vessels = [
            VesselStatus(
                vessel_display_name(route.vessels[0]),
                f"{direction.origin} Terminal",
                VesselState.LOADING,
            )
        ]
        if len(route.vessels) > 1:
            vessels.append(
                VesselStatus(
                    vessel_display_name(route.vessels[1]),
                    f"En route to {direction.destination}",
                    VesselState.IN_TRANSIT,
                )
            )
        return tuple(vessels)

    # Departures

    def _reconcile_departures(
        self, projection: StaticProjection, feed: FeedResult[list[ScheduledSailing]]
    ) -> tuple[tuple[Departure, ...], DataSource]:
        if feed.is_usable and feed.data is not None:
            departures = self._live_departures(projection, feed.data)
            if departures:
                return departures, DataSource.LIVE
            logger.info(
                f"Schedule feed had no future sailings for {projection.direction.key}, "
                "using static timetable"
            )

        return projection.departures, DataSource.FALLBACK

    @staticmethod
    def _live_departures(
        projection: StaticProjection, sailings: Sequence[ScheduledSailing]
    ) -> tuple[Departure, ...]:
        direction = projection.direction
        reference = projection.reference_time
        timezone = reference.tzinfo

        upcoming = sorted(
            (
                sailing
                for sailing in sailings
                if names_match(sailing.departing_terminal, direction.origin)
                and (
                    not sailing.arriving_terminal
                    or names_match(sailing.arriving_terminal, direction.destination)
                )
                and sailing.departure_time > reference
            ),
            key=lambda sailing: sailing.departure_time,
        )[: projection.departure_count]

        departures = []
        for position, sailing in enumerate(upcoming):
            local_time = sailing.departure_time.astimezone(timezone)
            day_offset = (local_time.date() - reference.date()).days
            wait_minutes = None
            if day_offset == 0:
                wait_minutes = minutes_until(local_time, reference)
            departures.append(
                Departure(
                    time=local_time,
                    display_time=format_display_time(local_time),
                    vessel=(sailing.vessel_name or "").upper()
                    or assign_vessel(projection.route.vessels, position),
                    wait_minutes=wait_minutes,
                    day_offset=day_offset,
                    is_live=True,
                )
            )
        return tuple(departures)

    # Terminals

    def _reconcile_terminal(
        self, projection: StaticProjection, feed: FeedResult[list[TerminalSpace]]
    ) -> tuple[TerminalSnapshot, DataSource]:
        origin = projection.direction.origin
        if feed.is_usable and feed.data is not None:
            entry = next(
                (
                    space
                    for space in feed.data
                    if names_match(space.terminal_name, origin) and space.space_for_autos is not None
                ),
                None,
            )
            if entry is not None and entry.space_for_autos is not None:
                return TerminalSnapshot(
                    name=origin,
                    vehicle_spaces=entry.space_for_autos,
                    walk_on_wait=WALK_ON_WAIT,
                    vehicle_wait=vehicle_wait_for(entry.space_for_autos),
                ), DataSource.LIVE

        return TerminalSnapshot(
            name=origin,
            vehicle_spaces=UNKNOWN_SPACES,
            walk_on_wait=WALK_ON_WAIT,
            vehicle_wait=GENERIC_VEHICLE_WAIT,
        ), DataSource.FALLBACK
