"""Parser for WSDOT Ferries API responses.

Field names are owned by the upstream API; everything that knows about them
lives here.
"""

import logging
import re
from datetime import UTC, datetime
from typing import Any

from ferry_departures.domain.exceptions import UpstreamMalformed
from ferry_departures.domain.models.live_feeds import (
    ScheduledSailing,
    TerminalSpace,
    VesselLocation,
)

logger = logging.getLogger(__name__)

# WCF JSON dates, e.g. "/Date(1718139000000-0700)/"
WCF_DATE_PATTERN = re.compile(r"/Date\((-?\d+)([+-]\d{4})?\)/")


class WsdotFeedParser:
    """Parses WSDOT JSON payloads into live feed records."""

    @staticmethod
    def parse_date(value: Any) -> datetime | None:
        """Parse a WCF '/Date(ms)/' string or ISO 8601 string to an aware UTC datetime."""
        if not isinstance(value, str) or not value:
            return None

        match = WCF_DATE_PATTERN.fullmatch(value.strip())
        if match:
            return datetime.fromtimestamp(int(match.group(1)) / 1000, tz=UTC)

        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)

    @staticmethod
    def _text(value: Any) -> str | None:
        """Return a non-empty string field, or None for anything else."""
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    @staticmethod
    def _require_list(data: Any, feed: str) -> list[Any]:
        if not isinstance(data, list):
            raise UpstreamMalformed(
                f"{feed} response must be a JSON array, got {type(data).__name__}"
            )
        return data

    @staticmethod
    def parse_vessel_locations(data: Any) -> list[VesselLocation]:
        entries = WsdotFeedParser._require_list(data, "Vessel locations")
        results = []
        for entry in entries:
            vessel_name = (
                WsdotFeedParser._text(entry.get("VesselName")) if isinstance(entry, dict) else None
            )
            if vessel_name is None:
                logger.warning("Skipping vessel location entry without VesselName")
                continue
            results.append(
                VesselLocation(
                    vessel_name=vessel_name,
                    departing_terminal=WsdotFeedParser._text(entry.get("DepartingTerminalName")),
                    arriving_terminal=WsdotFeedParser._text(entry.get("ArrivingTerminalName")),
                    at_dock=bool(entry.get("AtDock", False)),
                    in_service=bool(entry.get("InService", True)),
                )
            )
        return results

    @staticmethod
    def _space_count(entry: dict[str, Any]) -> int | None:
        """Read SpaceForAutos, or the drive-up count of the next departure."""
        if entry.get("SpaceForAutos") is not None:
            try:
                return int(entry["SpaceForAutos"])
            except (TypeError, ValueError):
                return None

        departing_spaces = entry.get("DepartingSpaces") or []
        if not isinstance(departing_spaces, list) or not departing_spaces:
            return None
        if not isinstance(departing_spaces[0], dict):
            return None
        arrival_spaces = departing_spaces[0].get("SpaceForArrivalTerminals") or []
        if not isinstance(arrival_spaces, list) or not arrival_spaces:
            return None
        if not isinstance(arrival_spaces[0], dict):
            return None
        count = arrival_spaces[0].get("DriveUpSpaceCount")
        return int(count) if isinstance(count, int | float) else None

    @staticmethod
    def parse_terminal_space(data: Any) -> list[TerminalSpace]:
        entries = WsdotFeedParser._require_list(data, "Terminal space")
        results = []
        for entry in entries:
            terminal_name = (
                WsdotFeedParser._text(entry.get("TerminalName")) if isinstance(entry, dict) else None
            )
            if terminal_name is None:
                logger.warning("Skipping terminal space entry without TerminalName")
                continue
            results.append(
                TerminalSpace(
                    terminal_name=terminal_name,
                    space_for_autos=WsdotFeedParser._space_count(entry),
                )
            )
        return results

    @staticmethod
    def parse_schedule(data: Any) -> list[ScheduledSailing]:
        if not isinstance(data, dict) or not isinstance(data.get("TerminalCombos"), list):
            raise UpstreamMalformed("Schedule response must contain a TerminalCombos array")

        sailings = []
        for combo in data["TerminalCombos"]:
            if not isinstance(combo, dict):
                continue
            departing = WsdotFeedParser._text(combo.get("DepartingTerminalName"))
            arriving = WsdotFeedParser._text(combo.get("ArrivingTerminalName"))
            times = combo.get("Times") or []
            if not isinstance(times, list):
                raise UpstreamMalformed("Schedule TerminalCombos Times must be a JSON array")
            if departing is None:
                logger.warning("Skipping terminal combo without DepartingTerminalName")
                continue
            for entry in times:
                departure_time = WsdotFeedParser.parse_date(
                    entry.get("DepartingTime") if isinstance(entry, dict) else None
                )
                if departure_time is None:
                    logger.warning(f"Skipping sailing {departing} -> {arriving} without a time")
                    continue
                sailings.append(
                    ScheduledSailing(
                        departing_terminal=departing,
                        arriving_terminal=arriving,
                        departure_time=departure_time,
                        vessel_name=WsdotFeedParser._text(entry.get("VesselName")),
                    )
                )
        return sailings
