"""Synthetic flight-status board for a domestic network."""

from .reference import CITIES, AIRLINES, RouteDurationTable, duration_minutes
from .schedule import Flight, FlightGenerator, FlightStatus, GeneratorConfig, search_flights
from .status import (
    DisplayTime,
    derive_arrival,
    derive_departure,
    derive_progress,
    derive_remaining_time,
)

__all__ = [
    "AIRLINES",
    "CITIES",
    "DisplayTime",
    "Flight",
    "FlightGenerator",
    "FlightStatus",
    "GeneratorConfig",
    "RouteDurationTable",
    "derive_arrival",
    "derive_departure",
    "derive_progress",
    "derive_remaining_time",
    "duration_minutes",
    "search_flights",
]
