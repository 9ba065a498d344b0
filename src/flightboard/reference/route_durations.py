"""Symmetric city-pair lookup of scheduled block times."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MINUTES = 30

_BUILTIN_DURATIONS: Dict[str, Dict[str, int]] = {
    "ktm": {
        "pkr": 25,
        "bhr": 20,
        "bht": 45,
        "jkp": 35,
        "nepj": 55,
        "bwa": 30,
        "luk": 30,
        "sim": 15,
        "tum": 35,
    },
    "pkr": {"ktm": 25, "jkp": 45, "bht": 60},
    "bhr": {"ktm": 20},
    "bht": {"ktm": 45, "pkr": 60},
    "jkp": {"ktm": 35, "pkr": 45},
    "nepj": {"ktm": 55},
    "bwa": {"ktm": 30},
    "luk": {"ktm": 30},
    "sim": {"ktm": 15},
    "tum": {"ktm": 35},
}


def _normalize_minutes(origin: str, destination: str, value: object) -> int:
    try:
        minutes = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid duration for {origin}->{destination}: {value!r}") from exc
    if minutes <= 0:
        raise ValueError(f"Duration for {origin}->{destination} must be positive")
    return minutes


@dataclass(frozen=True)
class RouteDurationTable:
    """Immutable origin -> destination -> minutes table.

    Lookups try the forward pair first, then the reverse pair, and finally
    fall back to ``default_minutes``. A lookup never fails.
    """

    durations: Mapping[str, Mapping[str, int]]
    default_minutes: int = DEFAULT_DURATION_MINUTES

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Mapping[str, object]],
        default_minutes: int = DEFAULT_DURATION_MINUTES,
    ) -> "RouteDurationTable":
        if not isinstance(mapping, Mapping):
            raise TypeError("Route durations must be a mapping of origin ids")
        if int(default_minutes) <= 0:
            raise ValueError("Default route duration must be positive")
        frozen: Dict[str, Mapping[str, int]] = {}
        for origin, row in mapping.items():
            if not isinstance(row, Mapping):
                raise TypeError(f"Durations for {origin!r} must map destination ids to minutes")
            origin_key = str(origin).strip().lower()
            frozen[origin_key] = MappingProxyType(
                {
                    str(dest).strip().lower(): _normalize_minutes(origin_key, str(dest), minutes)
                    for dest, minutes in row.items()
                }
            )
        return cls(durations=MappingProxyType(frozen), default_minutes=int(default_minutes))

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RouteDurationTable":
        table_path = Path(path)
        if not table_path.exists():
            raise FileNotFoundError(f"Route duration YAML not found at {table_path}")
        with table_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        if not isinstance(data, Mapping):
            raise TypeError("Route duration YAML must contain a mapping at the top level")
        default = data.get("default_minutes", DEFAULT_DURATION_MINUTES)
        return cls.from_mapping(data.get("durations") or {}, default_minutes=default)

    def duration_minutes(self, origin_id: str, destination_id: str) -> int:
        forward = self.durations.get(origin_id, {}).get(destination_id)
        if forward:
            return forward
        reverse = self.durations.get(destination_id, {}).get(origin_id)
        if reverse:
            return reverse
        logger.debug(
            "No duration for %s<->%s; using default of %d minutes",
            origin_id,
            destination_id,
            self.default_minutes,
        )
        return self.default_minutes

    def known_pairs(self) -> List[Tuple[str, str, int]]:
        """Return every explicit (origin, destination, minutes) entry, sorted."""
        return sorted(
            (origin, dest, minutes)
            for origin, row in self.durations.items()
            for dest, minutes in row.items()
        )


DEFAULT_ROUTE_TABLE = RouteDurationTable.from_mapping(_BUILTIN_DURATIONS)


def duration_minutes(origin_id: str, destination_id: str) -> int:
    """Block time in minutes between two cities of the built-in network."""
    return DEFAULT_ROUTE_TABLE.duration_minutes(origin_id, destination_id)


__all__ = [
    "DEFAULT_DURATION_MINUTES",
    "DEFAULT_ROUTE_TABLE",
    "RouteDurationTable",
    "duration_minutes",
]
