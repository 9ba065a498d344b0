from __future__ import annotations

import argparse
import logging
import time
from datetime import datetime, timedelta

from numpy.random import default_rng
from rich.console import Console
from rich.live import Live

from flightboard.cli import render_flight_detail, render_flight_list
from flightboard.schedule import FlightGenerator, FlightStatus


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay a flight's progress on an accelerated clock.")
    parser.add_argument("--origin", default="ktm")
    parser.add_argument("--destination", default="nepj")
    parser.add_argument("--airline", default="buddha")
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("--step-minutes", type=int, default=5, help="Simulated minutes per refresh")
    parser.add_argument("--refresh-seconds", type=float, default=0.5)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)

    console = Console()
    generator = FlightGenerator(rng=default_rng(args.seed))
    flights = generator.search(args.origin, args.destination, datetime.now().date(), args.airline)
    console.print(render_flight_list(flights))
    airborne = [flight for flight in flights if flight.status is FlightStatus.DEPARTED]
    if not airborne:
        logging.info("No departed flight in this batch; try another --seed")
        return

    flight = airborne[0]
    now = flight.effective_departure - timedelta(minutes=args.step_minutes)
    end = flight.scheduled_arrival + timedelta(minutes=args.step_minutes)
    with Live(render_flight_detail(flight, now), console=console) as live:
        while now <= end:
            live.update(render_flight_detail(flight, now))
            time.sleep(args.refresh_seconds)
            now += timedelta(minutes=args.step_minutes)


if __name__ == "__main__":
    main()
