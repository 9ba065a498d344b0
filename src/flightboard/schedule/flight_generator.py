"""Synthetic flight batches for a route, date and airline."""

from __future__ import annotations

import logging
from datetime import date as date_type
from datetime import datetime, time, timedelta
from typing import Callable, List, Optional

from numpy.random import Generator, default_rng

from flightboard.reference.registry import Place, flight_number_prefix, get_airline, get_city
from flightboard.schedule.domain_types import Flight, FlightStatus
from flightboard.schedule.generator_config import GeneratorConfig

logger = logging.getLogger(__name__)


def _start_of_day(value: date_type) -> datetime:
    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime.combine(value, time())


class FlightGenerator:
    """Builds batches of synthetic flights.

    Status draws use the hour of the search instant (``now``), not the
    requested travel date, so the board looks busier in the daytime.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[Generator] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config or GeneratorConfig()
        self._rng = rng or default_rng()
        self._clock = clock

    # -------------------------------------------------------------------------
    def search(
        self,
        origin_id: str,
        destination_id: str,
        date: date_type,
        airline_id: str,
        *,
        now: Optional[datetime] = None,
    ) -> List[Flight]:
        origin = get_city(origin_id)
        destination = get_city(destination_id)
        if origin is None or destination is None:
            logger.debug("Unknown route %s->%s; returning no flights", origin_id, destination_id)
            return []
        if origin.id == destination.id:
            logger.debug("Origin and destination are both %s; returning no flights", origin.id)
            return []
        airline = get_airline(airline_id)
        if airline is None:
            logger.warning("Airline %r is not registered; flight numbers fall back to %s",
                           airline_id, flight_number_prefix(airline_id))

        search_time = now or self._clock()
        duration = self.config.route_table.duration_minutes(origin.id, destination.id)
        day_start = _start_of_day(date)
        count = self._randint(self.config.batch_size_min, self.config.batch_size_max)

        flights = [
            self._build_flight(
                index,
                airline_id=airline_id,
                airline=airline,
                origin=origin,
                destination=destination,
                day_start=day_start,
                duration=duration,
                hour=search_time.hour,
            )
            for index in range(count)
        ]
        flights.sort(key=lambda flight: flight.scheduled_departure)
        logger.debug(
            "Generated %d flights for %s %s->%s on %s",
            len(flights),
            airline_id,
            origin.id,
            destination.id,
            day_start.date().isoformat(),
        )
        return flights

    # -------------------------------------------------------------------------
    def _build_flight(
        self,
        index: int,
        *,
        airline_id: str,
        airline: Optional[Place],
        origin: Place,
        destination: Place,
        day_start: datetime,
        duration: int,
        hour: int,
    ) -> Flight:
        status = self.config.status_weights.draw(hour, self._rng)

        offset = self._randint(self.config.departure_window_start, self.config.departure_window_end - 1)
        scheduled_departure = day_start + timedelta(minutes=offset)
        scheduled_arrival = scheduled_departure + timedelta(minutes=duration)

        delay = 0
        if status is FlightStatus.DELAYED:
            delay = self._randint(self.config.delay_minutes_min, self.config.delay_minutes_max)

        actual_departure = None
        actual_arrival = None
        if status in (FlightStatus.DEPARTED, FlightStatus.LANDED):
            actual_departure = scheduled_departure + timedelta(minutes=delay)
            if status is FlightStatus.LANDED:
                actual_arrival = actual_departure + timedelta(minutes=duration)

        return Flight(
            id=f"{airline_id}-{origin.id}-{destination.id}-{index}",
            flight_number=self._flight_number(airline_id),
            airline=airline,
            origin=origin,
            destination=destination,
            scheduled_departure=scheduled_departure,
            scheduled_arrival=scheduled_arrival,
            status=status,
            delay_minutes=delay,
            actual_departure=actual_departure,
            actual_arrival=actual_arrival,
        )

    def _flight_number(self, airline_id: str) -> str:
        number = self._randint(self.config.flight_number_min, self.config.flight_number_max)
        return f"{flight_number_prefix(airline_id)} {number}"

    def _randint(self, low: int, high: int) -> int:
        """Uniform integer in [low, high]."""
        return int(self._rng.integers(low, high + 1))


def search_flights(
    origin_id: str,
    destination_id: str,
    date: date_type,
    airline_id: str,
    *,
    rng: Optional[Generator] = None,
    now: Optional[datetime] = None,
    config: Optional[GeneratorConfig] = None,
) -> List[Flight]:
    """Generate 2-6 flights for the route, sorted by scheduled departure.

    Unknown cities yield an empty list rather than an error.
    """
    return FlightGenerator(config=config, rng=rng).search(
        origin_id, destination_id, date, airline_id, now=now
    )


__all__ = ["FlightGenerator", "search_flights"]
