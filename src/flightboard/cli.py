"""Search the synthetic flight board and inspect one flight from the terminal."""

from __future__ import annotations

import argparse
import logging
from datetime import date, datetime
from typing import List, Optional, Sequence

from numpy.random import default_rng
from rich.console import Console, Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table

from flightboard.export import write_flights_csv
from flightboard.reference.registry import AIRLINES, CITIES
from flightboard.reference.route_durations import RouteDurationTable
from flightboard.schedule.domain_types import Flight
from flightboard.schedule.flight_generator import FlightGenerator
from flightboard.schedule.generator_config import GeneratorConfig
from flightboard.schedule.search_criteria import InvalidSearchError, SearchCriteria
from flightboard.status.display import (
    derive_arrival,
    derive_departure,
    describe_duration,
    format_day,
    status_badge,
    status_text,
)
from flightboard.status.progress import derive_progress, derive_remaining_time

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--origin", default=None, help="Origin city id, e.g. ktm.")
    parser.add_argument("--destination", default=None, help="Destination city id, e.g. pkr.")
    parser.add_argument("--airline", default=None, help="Airline id, e.g. buddha.")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Travel date (YYYY-MM-DD). Defaults to today.",
    )
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Override the current instant (ISO timestamp) used for status and progress.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible batches.")
    parser.add_argument("--config", default=None, help="Optional generator config YAML.")
    parser.add_argument("--output-csv", default=None, help="Write the batch to this CSV file.")
    parser.add_argument(
        "--track",
        type=int,
        default=None,
        help="1-based row of the results to show in detail.",
    )
    parser.add_argument(
        "--list-reference",
        action="store_true",
        help="Print the known cities, airlines and route durations and exit.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    run(args, Console())


def run(args: argparse.Namespace, console: Console) -> List[Flight]:
    config = GeneratorConfig.from_yaml(args.config) if args.config else GeneratorConfig()
    if args.list_reference:
        console.print(render_reference(config.route_table))
        return []

    now = args.now or datetime.now()
    criteria = SearchCriteria(
        origin_id=args.origin,
        destination_id=args.destination,
        date=args.date or now.date(),
        airline_id=args.airline,
    )
    try:
        criteria.validate()
    except InvalidSearchError as exc:
        raise SystemExit(str(exc)) from exc

    generator = FlightGenerator(config=config, rng=default_rng(args.seed))
    flights = generator.search(
        criteria.origin_id,
        criteria.destination_id,
        criteria.date,
        criteria.airline_id,
        now=now,
    )
    logger.info(
        "Found %d flights %s->%s on %s",
        len(flights),
        criteria.origin_id,
        criteria.destination_id,
        criteria.date.isoformat(),
    )
    console.print(render_flight_list(flights))

    if args.output_csv:
        write_flights_csv(args.output_csv, flights)
    if args.track is not None:
        if not flights:
            raise SystemExit("No flights found; nothing to track")
        if not 1 <= args.track <= len(flights):
            raise SystemExit(f"--track must be between 1 and {len(flights)}")
        console.print(render_flight_detail(flights[args.track - 1], now))
    return flights


def render_flight_list(flights: Sequence[Flight]):
    if not flights:
        return Panel("Try changing your search criteria", title="No flights found")
    table = Table(title=f"{flights[0].origin.name} to {flights[0].destination.name}")
    table.add_column("#", justify="right")
    table.add_column("Flight")
    table.add_column("Airline")
    table.add_column("Departs")
    table.add_column("Arrives")
    table.add_column("Status")
    for row, flight in enumerate(flights, start=1):
        departure = flight.scheduled_departure
        table.add_row(
            str(row),
            flight.flight_number,
            flight.airline.name if flight.airline else "",
            f"{departure:%H:%M} {departure:%d %b}",
            f"{flight.scheduled_arrival:%H:%M}",
            status_badge(flight),
        )
    return table


def render_flight_detail(flight: Flight, now: datetime):
    departure = derive_departure(flight)
    arrival = derive_arrival(flight)
    times = Table.grid(padding=(0, 4))
    times.add_column()
    times.add_column()
    times.add_row(f"{flight.origin.name} ({flight.origin.id})", f"{flight.destination.name} ({flight.destination.id})")
    times.add_row(departure.label, arrival.label)
    times.add_row(departure.clock, arrival.clock)
    times.add_row(departure.subtitle, arrival.subtitle)

    parts: List[object] = [f"Status: {status_text(flight)}", times]
    progress = derive_progress(flight, now)
    if progress is not None:
        parts.append(ProgressBar(total=100, completed=progress))
        parts.append(f"{progress}% complete")
    remaining: Optional[str] = derive_remaining_time(flight, now)
    if remaining is not None:
        parts.append(f"Arriving {remaining}" if remaining.startswith("in ") else remaining)
    parts.append(f"{format_day(flight.scheduled_departure)} | {describe_duration(flight)}")

    airline = flight.airline.name if flight.airline else "Unknown airline"
    return Panel(Group(*parts), title=f"Flight {flight.flight_number}", subtitle=airline)


def render_reference(route_table: RouteDurationTable):
    places = Table(title="Cities and airlines")
    places.add_column("Kind")
    places.add_column("Id")
    places.add_column("Name")
    for city in CITIES.values():
        places.add_row("city", city.id, city.name)
    for airline in AIRLINES.values():
        places.add_row("airline", airline.id, airline.name)

    routes = Table(title="Route durations")
    routes.add_column("From")
    routes.add_column("To")
    routes.add_column("Minutes", justify="right")
    for origin, destination, minutes in route_table.known_pairs():
        routes.add_row(origin, destination, str(minutes))
    return Group(places, routes, f"Unlisted city pairs: default {route_table.default_minutes} min")


if __name__ == "__main__":
    main()
