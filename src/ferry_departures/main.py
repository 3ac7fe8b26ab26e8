"""Main entry point for the ferry departures application."""

import asyncio
import logging
import sys

import aiohttp

from ferry_departures.adapters.config import AppConfig, RouteCatalogLoader
from ferry_departures.adapters.timetable import StaticTimetableStore
from ferry_departures.adapters.weather_gov import NoaaWeatherSource
from ferry_departures.adapters.web import HttpApiAdapter
from ferry_departures.adapters.wsdot_api import WsdotLiveFeedSource
from ferry_departures.application import FerryInfoService, WeatherService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    logging.getLogger().setLevel(config.log_level.upper())

    try:
        catalog = RouteCatalogLoader.load(config.routes_file)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid route catalog: {e}")
        sys.exit(1)

    for route in catalog.routes:
        logger.info(f"  - {route.id}: {', '.join(route.direction_keys)}")

    timetable_store = StaticTimetableStore(catalog)

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        live_feed_source = None
        if config.live_feeds_configured:
            live_feed_source = WsdotLiveFeedSource(
                session,
                base_url=config.wsdot_base_url,
                access_code=config.wsdot_api_access_code or "",
            )
            logger.info("Live WSDOT feeds enabled")
        else:
            logger.info("Live WSDOT feeds disabled, answering from the static timetable only")

        ferry_info_service = FerryInfoService(
            timetable_store,
            live_feed_source=live_feed_source,
            timezone=config.zone,
            departure_count=config.departure_count,
            feed_timeout_seconds=config.feed_timeout_seconds,
        )
        weather_service = WeatherService(
            NoaaWeatherSource(session, config.weather_base_url, config.user_agent),
            latitude=config.weather_latitude,
            longitude=config.weather_longitude,
            location_name=config.weather_location_name,
            timeout_seconds=config.weather_timeout_seconds,
        )

        http_adapter = HttpApiAdapter(ferry_info_service, weather_service, config)

        try:
            await http_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await http_adapter.stop()


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
