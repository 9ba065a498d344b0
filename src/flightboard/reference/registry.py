"""Read-only city and airline registries for the domestic network."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional


@dataclass(frozen=True)
class Place:
    """Registry entry for a city or an airline."""

    id: str
    name: str


def _freeze(entries: Dict[str, str]) -> Mapping[str, Place]:
    return MappingProxyType({key: Place(id=key, name=name) for key, name in entries.items()})


CITIES: Mapping[str, Place] = _freeze(
    {
        "ktm": "Kathmandu",
        "pkr": "Pokhara",
        "bhr": "Bharatpur",
        "bht": "Biratnagar",
        "jkp": "Janakpur",
        "nepj": "Nepalgunj",
        "bwa": "Bhairahawa",
        "luk": "Lukla",
        "sim": "Simara",
        "tum": "Tumlingtar",
    }
)

AIRLINES: Mapping[str, Place] = _freeze(
    {
        "buddha": "Buddha Air",
        "yeti": "Yeti Airlines",
        "shree": "Shree Airlines",
        "simrik": "Simrik Air",
        "saurya": "Saurya Airlines",
        "summit": "Summit Air",
        "tara": "Tara Air",
    }
)

FLIGHT_NUMBER_PREFIXES: Mapping[str, str] = MappingProxyType(
    {
        "buddha": "BHA",
        "yeti": "YTA",
        "shree": "SHA",
        "simrik": "SMK",
        "saurya": "SAU",
        "summit": "SUM",
        "tara": "TAR",
    }
)

# Used when an airline id is missing from the registry.
DEFAULT_FLIGHT_NUMBER_PREFIX = "NEP"


def get_city(city_id: Optional[str]) -> Optional[Place]:
    return CITIES.get(city_id or "")


def get_airline(airline_id: Optional[str]) -> Optional[Place]:
    return AIRLINES.get(airline_id or "")


def flight_number_prefix(airline_id: Optional[str]) -> str:
    return FLIGHT_NUMBER_PREFIXES.get(airline_id or "", DEFAULT_FLIGHT_NUMBER_PREFIX)


__all__ = [
    "AIRLINES",
    "CITIES",
    "DEFAULT_FLIGHT_NUMBER_PREFIX",
    "FLIGHT_NUMBER_PREFIXES",
    "Place",
    "flight_number_prefix",
    "get_airline",
    "get_city",
]
