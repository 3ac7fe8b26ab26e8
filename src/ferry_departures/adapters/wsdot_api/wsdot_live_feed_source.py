"""Live feed source adapter for the WSDOT Ferries API."""

import logging
from typing import TYPE_CHECKING

from ferry_departures.adapters.wsdot_api.constants import (
    SCHEDULE_TODAY_PATH,
    TERMINAL_IDS,
    TERMINAL_SAILING_SPACE_PATH,
    VESSEL_LOCATIONS_PATH,
)
from ferry_departures.adapters.wsdot_api.feed_parser import WsdotFeedParser
from ferry_departures.adapters.wsdot_api.http_client import WsdotHttpClient
from ferry_departures.domain.models.live_feeds import (
    ScheduledSailing,
    TerminalSpace,
    VesselLocation,
)
from ferry_departures.domain.ports.live_feed_source import LiveFeedSource

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class WsdotLiveFeedSource(LiveFeedSource):
    """Adapter fetching vessel, schedule and terminal feeds from WSDOT."""

    def __init__(self, session: "ClientSession", base_url: str, access_code: str) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: Shared aiohttp ClientSession.
            base_url: Base URL of the Ferries API.
            access_code: WSDOT API access code.
        """
        self._http_client = WsdotHttpClient(session, base_url, access_code)

    async def fetch_vessel_locations(self) -> list[VesselLocation]:
        data = await self._http_client.get_json(VESSEL_LOCATIONS_PATH)
        return WsdotFeedParser.parse_vessel_locations(data)

    async def fetch_schedule(self, origin: str, destination: str) -> list[ScheduledSailing]:
        origin_id = TERMINAL_IDS.get(origin.lower())
        destination_id = TERMINAL_IDS.get(destination.lower())
        if origin_id is None or destination_id is None:
            logger.debug(f"No WSDOT terminal id for {origin} -> {destination}")
            return []

        path = SCHEDULE_TODAY_PATH.format(origin_id=origin_id, destination_id=destination_id)
        data = await self._http_client.get_json(path)
        return WsdotFeedParser.parse_schedule(data)

    async def fetch_terminal_space(self) -> list[TerminalSpace]:
        data = await self._http_client.get_json(TERMINAL_SAILING_SPACE_PATH)
        return WsdotFeedParser.parse_terminal_space(data)
