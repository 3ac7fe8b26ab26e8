"""Use case: answer 'when is the next ferry' for a route and direction."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import TypeVar
from zoneinfo import ZoneInfo

from ferry_departures.application.alert_synthesizer import AlertSynthesizer
from ferry_departures.application.clock_projector import project
from ferry_departures.application.direction_resolver import DirectionResolver
from ferry_departures.application.live_feed_reconciler import LiveFeedReconciler
from ferry_departures.application.route_resolver import RouteResolver
from ferry_departures.domain.exceptions import UpstreamMalformed, UpstreamUnavailable
from ferry_departures.domain.models.feed_result import FeedResult, FeedSet
from ferry_departures.domain.models.ferry_info import MergedFerryInfo, StaticProjection
from ferry_departures.domain.models.route import Direction, Route
from ferry_departures.domain.ports.live_feed_source import LiveFeedSource
from ferry_departures.domain.ports.timetable_store import TimetableStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def utc_now() -> datetime:
    return datetime.now(UTC)


class FerryInfoService:
    """Resolves a request, projects the timetable and merges live feeds."""

    def __init__(
        self,
        timetable_store: TimetableStore,
        live_feed_source: LiveFeedSource | None = None,
        timezone: ZoneInfo | None = None,
        departure_count: int = 4,
        feed_timeout_seconds: float = 5.0,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the service.

        Args:
            timetable_store: Static routes and timetables.
            live_feed_source: Optional real-time feeds. Without one every feed is absent.
            timezone: Operating time zone of the routes.
            departure_count: Number of upcoming departures to return.
            feed_timeout_seconds: Time bound applied to each live feed separately.
            clock: Source of the current instant.
        """
        self._store = timetable_store
        self._live_feed_source = live_feed_source
        self._timezone = timezone or ZoneInfo("America/Los_Angeles")
        self._departure_count = departure_count
        self._feed_timeout_seconds = feed_timeout_seconds
        self._clock = clock

        self._route_resolver = RouteResolver(
            timetable_store.list_routes(), timetable_store.default_route().id
        )
        self._direction_resolver = DirectionResolver(timetable_store.rules)
        self._alert_synthesizer = AlertSynthesizer(timetable_store.rules)
        self._reconciler = LiveFeedReconciler()

    @property
    def timezone(self) -> ZoneInfo:
        return self._timezone

    def list_routes(self) -> list[Route]:
        return list(self._store.list_routes())

    def local_now(self, now: datetime | None = None) -> datetime:
        return (now or self._clock()).astimezone(self._timezone)

    def build_static_projection(
        self,
        route_query: str | None,
        direction: str | None,
        now: datetime | None = None,
        count: int | None = None,
    ) -> StaticProjection:
        """Resolve the request and compute everything the static timetable can answer.

        Raises:
            InvalidDirectionError: If an explicit direction is unknown for the route.
        """
        reference = self.local_now(now)
        route = self._store.get_route(self._route_resolver.resolve(route_query))
        direction_key = self._direction_resolver.resolve(route, direction, reference)
        timetable = self._store.lookup(route.id, direction_key)
        departure_count = count or self._departure_count

        return StaticProjection(
            route=route,
            direction=route.direction(direction_key),
            reference_time=reference,
            departure_count=departure_count,
            service=self._alert_synthesizer.service_info(route, reference),
            departures=tuple(
                project(timetable, reference, departure_count, route.vessels, self._timezone)
            ),
            alerts=tuple(self._alert_synthesizer.synthesize(route, reference)),
        )

    async def get_ferry_info(
        self,
        route_query: str | None,
        direction: str | None,
        now: datetime | None = None,
    ) -> MergedFerryInfo:
        """Answer a ferry info request, preferring live data per category."""
        projection = self.build_static_projection(route_query, direction, now)
        feeds = await self._fetch_feeds(projection.direction)
        info = self._reconciler.reconcile(projection, feeds)
        sources = ", ".join(f"{group}={source}" for group, source in info.sources.items())
        logger.debug(f"Ferry info for {info.route.id}/{info.direction.key}: {sources}")
        return info

    def build_fallback(
        self, route_query: str | None = None, now: datetime | None = None
    ) -> MergedFerryInfo:
        """Static-only answer for the automatically detected direction."""
        projection = self.build_static_projection(route_query, None, now)
        return self._reconciler.reconcile(projection, FeedSet.all_absent())

    async def _fetch_feeds(self, direction: Direction) -> FeedSet:
        source = self._live_feed_source
        if source is None:
            return FeedSet.all_absent()

        vessels, schedule, terminals = await asyncio.gather(
            self._fetch_feed("vessel", source.fetch_vessel_locations),
            self._fetch_feed(
                "schedule", lambda: source.fetch_schedule(direction.origin, direction.destination)
            ),
            self._fetch_feed("terminal", source.fetch_terminal_space),
        )
        return FeedSet(vessels=vessels, schedule=schedule, terminals=terminals)

    async def _fetch_feed(
        self, feed_name: str, fetch: Callable[[], Awaitable[T]]
    ) -> FeedResult[T]:
        """Fetch one feed within its own time bound. Never raises."""
        try:
            data = await asyncio.wait_for(fetch(), timeout=self._feed_timeout_seconds)
        except TimeoutError:
            logger.warning(
                f"{feed_name} feed timed out after {self._feed_timeout_seconds}s, using fallback"
            )
            return FeedResult.timed_out(f"no answer within {self._feed_timeout_seconds}s")
        except UpstreamMalformed as e:
            logger.warning(f"{feed_name} feed returned malformed data: {e}")
            return FeedResult.malformed(str(e))
        except UpstreamUnavailable as e:
            logger.warning(f"{feed_name} feed unavailable: {e}")
            return FeedResult.absent(str(e))
        except Exception as e:
            logger.error(f"Unexpected error fetching {feed_name} feed: {e}", exc_info=True)
            return FeedResult.absent(f"unexpected error: {e}")

        return FeedResult.live(data)
