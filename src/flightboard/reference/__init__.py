"""
Static reference data: cities, airlines and route block times.
"""

from .registry import (
    AIRLINES,
    CITIES,
    DEFAULT_FLIGHT_NUMBER_PREFIX,
    FLIGHT_NUMBER_PREFIXES,
    Place,
    flight_number_prefix,
    get_airline,
    get_city,
)
from .route_durations import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_ROUTE_TABLE,
    RouteDurationTable,
    duration_minutes,
)

__all__ = [
    "AIRLINES",
    "CITIES",
    "DEFAULT_DURATION_MINUTES",
    "DEFAULT_FLIGHT_NUMBER_PREFIX",
    "DEFAULT_ROUTE_TABLE",
    "FLIGHT_NUMBER_PREFIXES",
    "Place",
    "RouteDurationTable",
    "duration_minutes",
    "flight_number_prefix",
    "get_airline",
    "get_city",
]
