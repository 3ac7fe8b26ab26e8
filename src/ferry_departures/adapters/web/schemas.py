"""JSON response bodies of the HTTP API."""

from datetime import UTC

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ferry_departures.domain.models.departure import Departure
from ferry_departures.domain.models.ferry_info import MergedFerryInfo, ServiceInfo
from ferry_departures.domain.models.route import Route
from ferry_departures.domain.models.terminal_snapshot import TerminalSnapshot
from ferry_departures.domain.models.vessel_status import VesselStatus
from ferry_departures.domain.models.weather import MarineWeather

LIVE_DATA_SOURCE = "WSDOT Live + Static Schedule"
STATIC_DATA_SOURCE = "Static Schedule"
ERROR_FALLBACK_DATA_SOURCE = "Error Fallback"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class ServiceBody(CamelModel):
    status: str
    frequency: str
    crossing_time: str
    operating_hours: str
    reservations: str | None = None

    @classmethod
    def from_domain(cls, service: ServiceInfo) -> "ServiceBody":
        return cls(
            status=service.status,
            frequency=service.frequency,
            crossing_time=service.crossing_time,
            operating_hours=service.operating_hours,
            reservations=service.reservations,
        )


class VesselBody(CamelModel):
    name: str
    location: str
    status: str
    state: str

    @classmethod
    def from_domain(cls, vessel: VesselStatus) -> "VesselBody":
        return cls(
            name=vessel.name,
            location=vessel.location,
            status=vessel.description,
            state=vessel.state.value,
        )


class DepartureBody(CamelModel):
    time: str
    departure_time: str
    vessel: str
    wait_minutes: int | None = None
    next_day: bool = False
    live: bool = False

    @classmethod
    def from_domain(cls, departure: Departure) -> "DepartureBody":
        return cls(
            time=departure.display_time,
            departure_time=departure.time.isoformat(),
            vessel=departure.vessel,
            wait_minutes=departure.wait_minutes,
            next_day=departure.is_next_day,
            live=departure.is_live,
        )


class VesselsBody(CamelModel):
    active: list[VesselBody]
    next_departures: list[DepartureBody]


class TerminalBody(CamelModel):
    name: str
    vehicle_spaces: int | str
    walk_on_wait: str
    vehicle_wait: str

    @classmethod
    def from_domain(cls, terminal: TerminalSnapshot) -> "TerminalBody":
        return cls(
            name=terminal.name,
            vehicle_spaces=terminal.vehicle_spaces,
            walk_on_wait=terminal.walk_on_wait,
            vehicle_wait=terminal.vehicle_wait,
        )


class TerminalsBody(CamelModel):
    departure: TerminalBody
    arrival: TerminalBody


class DebugBody(CamelModel):
    current_hour: int
    current_minute: int
    total_departures_found: int
    error: str | None = None


class FerryInfoBody(CamelModel):
    route: str
    route_id: str
    direction: str
    direction_label: str
    timestamp: str
    current_pacific_time: str
    data_source: str
    sources: dict[str, str]
    service: ServiceBody
    vessels: VesselsBody
    terminals: TerminalsBody
    alerts: list[str]
    debug: DebugBody

    @classmethod
    def from_domain(cls, info: MergedFerryInfo, error: str | None = None) -> "FerryInfoBody":
        """Build the response body. Passing an error marks the body as an error fallback."""
        if error is not None:
            data_source = ERROR_FALLBACK_DATA_SOURCE
        elif info.has_live_data:
            data_source = LIVE_DATA_SOURCE
        else:
            data_source = STATIC_DATA_SOURCE

        return cls(
            route=info.route.name,
            route_id=info.route.id,
            direction=info.direction.key,
            direction_label=info.direction.label,
            timestamp=info.reference_time.astimezone(UTC).isoformat(),
            current_pacific_time=info.reference_time.isoformat(),
            data_source=data_source,
            sources={group: source.value for group, source in info.sources.items()},
            service=ServiceBody.from_domain(info.service),
            vessels=VesselsBody(
                active=[VesselBody.from_domain(v) for v in info.vessels],
                next_departures=[DepartureBody.from_domain(d) for d in info.departures],
            ),
            terminals=TerminalsBody(
                departure=TerminalBody.from_domain(info.departure_terminal),
                arrival=TerminalBody.from_domain(info.arrival_terminal),
            ),
            alerts=list(info.alerts),
            debug=DebugBody(
                current_hour=info.reference_time.hour,
                current_minute=info.reference_time.minute,
                total_departures_found=len(info.departures),
                error=error,
            ),
        )


class DirectionBody(CamelModel):
    key: str
    label: str


class RouteBody(CamelModel):
    id: str
    name: str
    short_name: str
    category: str
    terminals: list[str]
    crossing_time: str
    frequency: str
    reservation_required: bool
    directions: list[DirectionBody]

    @classmethod
    def from_domain(cls, route: Route) -> "RouteBody":
        return cls(
            id=route.id,
            name=route.name,
            short_name=route.short_name,
            category=route.category.value,
            terminals=list(route.terminals),
            crossing_time=f"{route.crossing_time_minutes} minutes",
            frequency=route.frequency,
            reservation_required=route.reservation_required,
            directions=[DirectionBody(key=d.key, label=d.label) for d in route.directions],
        )


class MarineConditionsBody(CamelModel):
    wind: str
    temperature: str
    visibility: str
    humidity: str
    pressure: str
    forecast: str


class MaritimeBody(CamelModel):
    sea_state: str
    small_craft_advisory: bool
    conditions: str


class MarineWeatherBody(CamelModel):
    location: str
    timestamp: str
    conditions: MarineConditionsBody
    maritime: MaritimeBody

    @classmethod
    def from_domain(cls, weather: MarineWeather) -> "MarineWeatherBody":
        c = weather.conditions
        return cls(
            location=weather.location,
            timestamp=weather.timestamp.isoformat(),
            conditions=MarineConditionsBody(
                wind=c.wind,
                temperature=c.temperature,
                visibility=c.visibility,
                humidity=c.humidity,
                pressure=c.pressure,
                forecast=c.forecast,
            ),
            maritime=MaritimeBody(
                sea_state=weather.maritime.sea_state,
                small_craft_advisory=weather.maritime.small_craft_advisory,
                conditions=weather.maritime.conditions,
            ),
        )


class ErrorBody(CamelModel):
    error: str
    message: str
    valid_directions: list[str] | None = None
