"""Starlette HTTP API adapter serving ferry, route and weather information."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from ferry_departures.adapters.config import AppConfig
from ferry_departures.domain.exceptions import InvalidDirectionError
from ferry_departures.domain.ports import FerryInfoQuery, MarineWeatherQuery

from .cors import CORS_HEADERS
from .rate_limit_middleware import RateLimitMiddleware
from .schemas import ErrorBody, FerryInfoBody, MarineWeatherBody, RouteBody

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from starlette.types import ASGIApp


def json_response(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content, status_code=status_code, headers=dict(CORS_HEADERS))


def preflight_response() -> Response:
    return Response(status_code=200, headers=dict(CORS_HEADERS))


class HttpApiAdapter:
    """Serves the JSON API with uvicorn."""

    def __init__(
        self,
        ferry_info_service: FerryInfoQuery,
        weather_service: MarineWeatherQuery,
        config: AppConfig,
    ) -> None:
        """Initialize the HTTP adapter.

        Args:
            ferry_info_service: Service answering ferry info requests.
            weather_service: Service producing marine weather reports.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")

        self.ferry_info_service = ferry_info_service
        self.weather_service = weather_service
        self.config = config
        self._server: Any | None = None

    async def ferries(self, request: Request) -> Response:
        """Next departures and conditions for a route and direction."""
        if request.method == "OPTIONS":
            return preflight_response()

        route_query = request.query_params.get("route")
        direction = request.query_params.get("direction")
        try:
            info = await self.ferry_info_service.get_ferry_info(route_query, direction)
        except InvalidDirectionError as e:
            body = ErrorBody(
                error="Invalid direction",
                message=str(e),
                valid_directions=e.valid_directions,
            )
            return json_response(body.to_json(), status_code=400)
        except Exception as e:
            logger.error(f"Failed to assemble ferry info for route={route_query!r}: {e}", exc_info=True)
            return self._error_fallback(route_query, e)

        return json_response(FerryInfoBody.from_domain(info).to_json())

    def _error_fallback(self, route_query: str | None, error: Exception) -> Response:
        """Static answer for the requested route, else the default route."""
        queries = [route_query, None] if route_query else [None]
        for query in queries:
            try:
                fallback = self.ferry_info_service.build_fallback(query)
            except Exception as e:
                logger.error(f"Fallback for route={query!r} failed: {e}", exc_info=True)
                continue
            return json_response(FerryInfoBody.from_domain(fallback, error=str(error)).to_json())

        body = ErrorBody(error="Unable to fetch ferry information", message=str(error))
        return json_response(body.to_json(), status_code=500)

    async def routes(self, request: Request) -> Response:
        """The embedded routes and their direction keys."""
        if request.method == "OPTIONS":
            return preflight_response()

        routes = self.ferry_info_service.list_routes()
        return json_response({"routes": [RouteBody.from_domain(r).to_json() for r in routes]})

    async def weather(self, request: Request) -> Response:
        """Marine weather for the configured location."""
        if request.method == "OPTIONS":
            return preflight_response()

        try:
            weather = await self.weather_service.get_marine_weather()
        except Exception as e:
            logger.error(f"Weather API error: {e}", exc_info=True)
            body = ErrorBody(error="Unable to fetch weather data", message=str(e))
            return json_response(body.to_json(), status_code=500)

        return json_response(MarineWeatherBody.from_domain(weather).to_json())

    async def healthz(self, _request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return Response(content="Ok", media_type="text/plain")

    def build_app(self) -> ASGIApp:
        """Build the Starlette application wrapped with rate limiting."""
        app = Starlette(
            routes=[
                Route("/api/ferries", self.ferries, methods=["GET", "OPTIONS"]),
                Route("/api/routes", self.routes, methods=["GET", "OPTIONS"]),
                Route("/api/weather", self.weather, methods=["GET", "OPTIONS"]),
                Route("/healthz", self.healthz, methods=["GET"]),
            ]
        )
        return RateLimitMiddleware(app, requests_per_minute=self.config.rate_limit_per_minute)

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        config = uvicorn.Config(
            self.build_app(),
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(config)
        logger.info(f"Serving ferry API on http://{self.config.host}:{self.config.port}")

        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
