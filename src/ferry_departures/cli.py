"""Offline command line helper: list routes and project departures from the timetable."""

import argparse
import json
import sys
from datetime import datetime
from typing import Any

from ferry_departures.adapters.config import AppConfig, RouteCatalogLoader
from ferry_departures.adapters.timetable import StaticTimetableStore
from ferry_departures.application import FerryInfoService
from ferry_departures.domain.exceptions import InvalidDirectionError
from ferry_departures.domain.models import Route, StaticProjection


def route_to_dict(route: Route) -> dict[str, Any]:
    return {
        "id": route.id,
        "name": route.name,
        "category": route.category.value,
        "terminals": list(route.terminals),
        "directions": [{"key": d.key, "label": d.label} for d in route.directions],
    }


def projection_to_dict(projection: StaticProjection) -> dict[str, Any]:
    return {
        "route": projection.route.id,
        "direction": projection.direction.key,
        "directionLabel": projection.direction.label,
        "referenceTime": projection.reference_time.isoformat(),
        "service": {
            "status": projection.service.status,
            "frequency": projection.service.frequency,
            "crossingTime": projection.service.crossing_time,
            "operatingHours": projection.service.operating_hours,
        },
        "departures": [
            {
                "time": d.display_time,
                "departureTime": d.time.isoformat(),
                "vessel": d.vessel,
                "waitMinutes": d.wait_minutes,
                "nextDay": d.is_next_day,
            }
            for d in projection.departures
        ],
        "alerts": list(projection.alerts),
    }


def parse_reference(value: str | None, service: FerryInfoService) -> datetime | None:
    """Parse an ISO timestamp; naive values are taken as local operating time."""
    if value is None:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=service.timezone)
    return parsed


def build_service(config: AppConfig) -> FerryInfoService:
    catalog = RouteCatalogLoader.load(config.routes_file)
    return FerryInfoService(
        StaticTimetableStore(catalog),
        timezone=config.zone,
        departure_count=config.departure_count,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Ferry departures helper (static timetable, no network)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List routes and their directions
  ferry-departures-cli routes

  # Next departures for the morning commute
  ferry-departures-cli next bainbridge --at 2025-06-11T07:30

  # Next five sailings from Kingston
  ferry-departures-cli next kingston --direction kingston-to-edmonds --count 5
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("routes", help="List embedded routes")

    next_parser = subparsers.add_parser("next", help="Show the next departures for a route")
    next_parser.add_argument("route", nargs="?", default=None, help="Route slug or free text")
    next_parser.add_argument("--direction", default=None, help="Direction key or 'auto'")
    next_parser.add_argument("--count", type=int, default=None, help="Number of departures")
    next_parser.add_argument(
        "--at", default=None, help="Reference time (ISO 8601, local time when naive)"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        service = build_service(AppConfig())
        if args.command == "routes":
            output: Any = [route_to_dict(r) for r in service.list_routes()]
        else:
            if args.count is not None and args.count < 1:
                print("Error: --count must be at least 1", file=sys.stderr)
                return 1
            projection = service.build_static_projection(
                args.route,
                args.direction,
                now=parse_reference(args.at, service),
                count=args.count,
            )
            output = projection_to_dict(projection)
    except InvalidDirectionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
