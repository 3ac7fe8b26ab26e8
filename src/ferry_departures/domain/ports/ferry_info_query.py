"""Ferry info query port."""

from datetime import datetime
from typing import Protocol

from ferry_departures.domain.models.ferry_info import MergedFerryInfo
from ferry_departures.domain.models.route import Route
from ferry_departures.domain.models.weather import MarineWeather


class FerryInfoQuery(Protocol):
    """Port for answering ferry info requests."""

    def list_routes(self) -> list[Route]:
        """Get all routes in the catalog."""
        ...

    async def get_ferry_info(
        self, route_query: str | None, direction: str | None, now: datetime | None = None
    ) -> MergedFerryInfo:
        """Get the reconciled ferry information for a route and direction.

        Args:
            route_query: Free text or route slug. None selects the default route.
            direction: Direction key, or None / "auto" for automatic detection.
            now: Reference instant. Defaults to the current time.

        Raises:
            InvalidDirectionError: If an explicit direction is unknown for the route.
        """
        ...

    def build_fallback(
        self, route_query: str | None = None, now: datetime | None = None
    ) -> MergedFerryInfo:
        """Get a static-only answer that never touches live feeds."""
        ...


class MarineWeatherQuery(Protocol):
    """Port for producing marine weather reports."""

    async def get_marine_weather(self, now: datetime | None = None) -> MarineWeather:
        ...
