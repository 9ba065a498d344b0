"""
Flight records and the synthetic schedule generator.
"""

from .domain_types import Flight, FlightStatus
from .flight_generator import FlightGenerator, search_flights
from .generator_config import GeneratorConfig
from .search_criteria import InvalidSearchError, SearchCriteria
from .status_weights import DEFAULT_STATUS_WEIGHTS, StatusWeights, StatusWeightTable

__all__ = [
    "DEFAULT_STATUS_WEIGHTS",
    "Flight",
    "FlightGenerator",
    "FlightStatus",
    "GeneratorConfig",
    "InvalidSearchError",
    "SearchCriteria",
    "StatusWeightTable",
    "StatusWeights",
    "search_flights",
]
