"""Behavior-focused tests for the HTTP API."""

import os
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from starlette.testclient import TestClient

from ferry_departures.adapters.config import AppConfig
from ferry_departures.adapters.timetable import StaticTimetableStore
from ferry_departures.adapters.web import HttpApiAdapter
from ferry_departures.application import FerryInfoService
from ferry_departures.application.weather_service import format_marine_weather
from ferry_departures.domain.exceptions import UpstreamTimeout
from ferry_departures.domain.models import WeatherObservation

# 14:00 on Wednesday 2025-06-11 in Seattle
NOW = datetime(2025, 6, 11, 21, 0, tzinfo=UTC)

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def make_config(**overrides: object) -> AppConfig:
    with patch.dict(os.environ, {}, clear=True):
        return AppConfig(_env_file=None, **overrides)  # type: ignore[call-arg]


@pytest.fixture
def ferry_service(store: StaticTimetableStore) -> FerryInfoService:
    return FerryInfoService(store, clock=lambda: NOW)


@pytest.fixture
def weather_service() -> MagicMock:
    observation = WeatherObservation(5.0, 200.0, 15.0, 72.0, 101325.0, 16093.0, "Sunny.")
    service = MagicMock()
    service.get_marine_weather = AsyncMock(
        return_value=format_marine_weather(observation, "Puget Sound / Seattle Area", NOW)
    )
    return service


@pytest.fixture
def client(ferry_service: FerryInfoService, weather_service: MagicMock) -> TestClient:
    adapter = HttpApiAdapter(ferry_service, weather_service, make_config())
    return TestClient(adapter.build_app())


class TestFerriesEndpoint:
    """Tests for GET /api/ferries."""

    def test_when_route_and_direction_given_then_returns_payload(self, client: TestClient) -> None:
        """Given a route and direction, when requesting, then returns the camelCase payload."""
        response = client.get(
            "/api/ferries", params={"route": "bainbridge", "direction": "seattle-to-bainbridge"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["route"] == "Seattle / Bainbridge Island"
        assert body["routeId"] == "seattle-bainbridge"
        assert body["directionLabel"] == "Seattle → Bainbridge Island"
        assert body["dataSource"] == "Static Schedule"
        assert body["service"] == {
            "status": "Normal Operations",
            "frequency": "35-50 minutes",
            "crossingTime": "35 minutes",
            "operatingHours": "5:20 AM - 1:00 AM",
        }
        assert body["vessels"]["nextDepartures"][0]["time"] == "2:10 PM"
        assert body["vessels"]["nextDepartures"][0]["waitMinutes"] == 10
        assert body["vessels"]["active"][0]["status"] == "Loading passengers"
        assert body["terminals"]["arrival"]["vehicleSpaces"] == "N/A (arrival terminal)"
        assert body["alerts"] == ["Normal operations"]
        assert body["debug"] == {"currentHour": 14, "currentMinute": 0, "totalDeparturesFound": 4}

    def test_when_no_parameters_then_uses_default_route_and_auto_direction(
        self, client: TestClient
    ) -> None:
        """Given no parameters, when requesting, then the default route is answered."""
        body = client.get("/api/ferries").json()

        assert body["routeId"] == "seattle-bainbridge"
        assert body["direction"] == "seattle-to-bainbridge"

    def test_when_responding_then_cors_headers_are_present(self, client: TestClient) -> None:
        """Given any request, when responding, then permissive CORS headers are set."""
        response = client.get("/api/ferries")

        for header, value in CORS.items():
            assert response.headers[header] == value

    def test_when_options_then_returns_empty_ok(self, client: TestClient) -> None:
        """Given an OPTIONS request, when responding, then 200 with an empty body."""
        response = client.options("/api/ferries")

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"

    def test_when_direction_unknown_then_returns_400_with_valid_directions(
        self, client: TestClient
    ) -> None:
        """Given an unknown direction, when requesting, then 400 lists the valid keys."""
        response = client.get("/api/ferries", params={"route": "kingston", "direction": "north"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid direction"
        assert body["validDirections"] == ["edmonds-to-kingston", "kingston-to-edmonds"]

    def test_when_assembly_fails_then_returns_fallback_with_debug_error(
        self, ferry_service: FerryInfoService, weather_service: MagicMock
    ) -> None:
        """Given an unexpected failure, when requesting, then 200 with the error fallback payload."""
        ferry_service.get_ferry_info = AsyncMock(side_effect=RuntimeError("boom"))  # type: ignore[method-assign]
        client = TestClient(HttpApiAdapter(ferry_service, weather_service, make_config()).build_app())

        response = client.get("/api/ferries", params={"route": "bremerton"})

        assert response.status_code == 200
        body = response.json()
        assert body["dataSource"] == "Error Fallback"
        assert body["debug"]["error"] == "boom"
        assert body["routeId"] == "seattle-bremerton"
        assert len(body["vessels"]["nextDepartures"]) == 4

    def test_when_route_fallback_fails_then_uses_default_route(
        self, ferry_service: FerryInfoService, weather_service: MagicMock
    ) -> None:
        """Given the requested route cannot be projected, when failing, then default route answers."""
        build_fallback = ferry_service.build_fallback

        def fallback_only_for_default(route_query: str | None = None, now: datetime | None = None):
            if route_query is not None:
                raise RuntimeError("route unavailable")
            return build_fallback(route_query, now)

        ferry_service.get_ferry_info = AsyncMock(side_effect=RuntimeError("boom"))  # type: ignore[method-assign]
        ferry_service.build_fallback = fallback_only_for_default  # type: ignore[method-assign]
        client = TestClient(HttpApiAdapter(ferry_service, weather_service, make_config()).build_app())

        response = client.get("/api/ferries", params={"route": "kingston"})

        assert response.status_code == 200
        body = response.json()
        assert body["dataSource"] == "Error Fallback"
        assert body["routeId"] == "seattle-bainbridge"

    def test_when_every_fallback_fails_then_returns_500_json_with_cors(
        self, ferry_service: FerryInfoService, weather_service: MagicMock
    ) -> None:
        """Given fallbacks also fail, when requesting, then a JSON 500 with CORS headers."""
        ferry_service.get_ferry_info = AsyncMock(side_effect=RuntimeError("boom"))  # type: ignore[method-assign]
        ferry_service.build_fallback = MagicMock(side_effect=RuntimeError("no catalog"))  # type: ignore[method-assign]
        client = TestClient(HttpApiAdapter(ferry_service, weather_service, make_config()).build_app())

        response = client.get("/api/ferries", params={"route": "kingston"})

        assert response.status_code == 500
        assert response.json() == {"error": "Unable to fetch ferry information", "message": "boom"}
        assert response.headers["access-control-allow-origin"] == "*"
        assert ferry_service.build_fallback.call_count == 2


class TestRoutesEndpoint:
    """Tests for GET /api/routes."""

    def test_when_listing_then_returns_routes_with_directions(self, client: TestClient) -> None:
        """Given the catalog, when listing routes, then each route carries its direction keys."""
        response = client.get("/api/routes")

        assert response.status_code == 200
        routes = response.json()["routes"]
        assert len(routes) == 5
        assert routes[4]["id"] == "anacortes-san-juans"
        assert routes[4]["reservationRequired"] is True
        assert [d["key"] for d in routes[0]["directions"]] == [
            "seattle-to-bainbridge",
            "bainbridge-to-seattle",
        ]


class TestWeatherEndpoint:
    """Tests for GET /api/weather."""

    def test_when_weather_available_then_returns_report(self, client: TestClient) -> None:
        """Given an observation, when requesting weather, then returns maritime fields."""
        response = client.get("/api/weather")

        assert response.status_code == 200
        body = response.json()
        assert body["location"] == "Puget Sound / Seattle Area"
        assert body["conditions"]["wind"] == "SSW 10 knots"
        assert body["maritime"]["seaState"] == "Moderate (2-3 ft)"
        assert body["maritime"]["smallCraftAdvisory"] is False

    def test_when_weather_fails_then_returns_500(
        self, ferry_service: FerryInfoService, weather_service: MagicMock
    ) -> None:
        """Given a failing weather source, when requesting weather, then 500 with an error body."""
        weather_service.get_marine_weather = AsyncMock(side_effect=UpstreamTimeout("slow"))
        client = TestClient(HttpApiAdapter(ferry_service, weather_service, make_config()).build_app())

        response = client.get("/api/weather")

        assert response.status_code == 500
        assert response.json() == {"error": "Unable to fetch weather data", "message": "slow"}
        assert response.headers["access-control-allow-origin"] == "*"


class TestRateLimiting:
    """Tests for the rate limit applied to the API."""

    def test_when_limit_exceeded_then_returns_429(
        self, ferry_service: FerryInfoService, weather_service: MagicMock
    ) -> None:
        """Given a limit of two per minute, when requesting three times, then the third is 429."""
        config = make_config(rate_limit_per_minute=2)
        client = TestClient(HttpApiAdapter(ferry_service, weather_service, config).build_app())

        statuses = [client.get("/api/routes").status_code for _ in range(3)]

        assert statuses == [200, 200, 429]
        limited = client.get("/api/routes")
        assert "retry-after" in limited.headers
        assert limited.json()["error"] == "Rate limit exceeded"

    def test_when_health_checked_then_not_rate_limited(
        self, ferry_service: FerryInfoService, weather_service: MagicMock
    ) -> None:
        """Given a limit of one per minute, when checking health repeatedly, then always 200."""
        config = make_config(rate_limit_per_minute=1)
        client = TestClient(HttpApiAdapter(ferry_service, weather_service, config).build_app())

        assert all(client.get("/healthz").status_code == 200 for _ in range(3))


class TestAdapterConstruction:
    """Tests for adapter wiring."""

    def test_when_config_is_not_app_config_then_raises_type_error(
        self, ferry_service: FerryInfoService, weather_service: MagicMock
    ) -> None:
        """Given a plain dict config, when constructing, then TypeError is raised."""
        with pytest.raises(TypeError, match="AppConfig"):
            HttpApiAdapter(ferry_service, weather_service, {"port": 8000})  # type: ignore[arg-type]
