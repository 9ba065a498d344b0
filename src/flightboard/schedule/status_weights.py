from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Protocol, Tuple

import yaml

from flightboard.schedule.domain_types import FlightStatus

logger = logging.getLogger(__name__)

_SUM_TOLERANCE = 1e-6


class UniformSource(Protocol):
    def random(self) -> float: ...


def _parse_hour(token: object, label: str) -> int:
    """Parse an ``HH`` or ``HH:00`` token into an hour of day (0-24)."""
    text = str(token if token is not None else "").strip()
    if not text:
        raise ValueError(f"Status weight window {label} cannot be empty")
    hour_str, _, minute_str = text.partition(":")
    if not hour_str.isdigit() or (minute_str and minute_str != "00"):
        raise ValueError(f"Status weight window {label} must be a whole hour: {text!r}")
    hour = int(hour_str)
    if hour > 24:
        raise ValueError(f"Status weight window {label} out of range: {text!r}")
    return hour


def _normalize_weight(status: FlightStatus, value: object) -> float:
    try:
        weight = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid weight for {status.value}: {value!r}") from exc
    if weight < 0:
        raise ValueError(f"Weight for {status.value} cannot be negative")
    return weight


@dataclass(frozen=True)
class StatusWeights:
    """Draw weights for a single hour bucket."""

    scheduled: float
    delayed: float
    departed: float
    landed: float

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "StatusWeights":
        if not isinstance(data, Mapping):
            raise TypeError("Status weight block must be a mapping")
        unknown = set(data) - {status.value for status in FlightStatus}
        if unknown:
            raise ValueError(f"Unknown statuses in weight block: {sorted(unknown)}")
        values = {
            status.value: _normalize_weight(status, data.get(status.value, 0.0))
            for status in FlightStatus
        }
        return cls(**values)

    def ordered(self) -> Tuple[Tuple[FlightStatus, float], ...]:
        """(status, weight) pairs in the fixed draw order."""
        return tuple((status, getattr(self, status.value)) for status in FlightStatus)

    @property
    def total(self) -> float:
        return sum(weight for _status, weight in self.ordered())

    def draw(self, sample: float) -> FlightStatus:
        """Pick a status for a uniform ``sample`` in [0, 1) by cumulative weight.

        Weights are used as given; if they sum to less than one and the sample
        lands past the cumulative total, the flight is ``scheduled``.
        """
        cumulative = 0.0
        for status, weight in self.ordered():
            cumulative += weight
            if sample <= cumulative:
                return status
        return FlightStatus.SCHEDULED


@dataclass(frozen=True)
class _HourWindowRule:
    start_hour: int
    end_hour: int
    weights: StatusWeights

    def matches(self, hour: int) -> bool:
        hour = hour % 24
        if self.start_hour == self.end_hour:
            return True  # Catch-all bucket.
        if self.start_hour < self.end_hour:
            return self.start_hour <= hour < self.end_hour
        return hour >= self.start_hour or hour < self.end_hour


DEFAULT_STATUS_WEIGHTS: Dict[str, Dict[str, float]] = {
    # Early morning: most flights still on the ground.
    "00-08": {"scheduled": 0.7, "delayed": 0.1, "departed": 0.2, "landed": 0.0},
    "08-19": {"scheduled": 0.2, "delayed": 0.1, "departed": 0.6, "landed": 0.1},
    "19-24": {"scheduled": 0.4, "delayed": 0.1, "departed": 0.3, "landed": 0.2},
}


class StatusWeightTable:
    """Time-of-day specific status weights."""

    def __init__(self, rules: List[_HourWindowRule]):
        if not rules:
            raise ValueError("StatusWeightTable requires at least one hour window")
        self._rules = sorted(rules, key=lambda rule: (rule.start_hour, rule.end_hour))

    @classmethod
    def default(cls) -> "StatusWeightTable":
        return cls.from_mapping(DEFAULT_STATUS_WEIGHTS)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Mapping[str, object]]) -> "StatusWeightTable":
        if not isinstance(mapping, Mapping):
            raise TypeError("StatusWeightTable expects a mapping of hour windows")
        rules: List[_HourWindowRule] = []
        for window_spec, block in mapping.items():
            start_str, sep, end_str = str(window_spec).partition("-")
            if not sep:
                raise ValueError(f"Invalid hour window specification {window_spec!r}")
            weights = StatusWeights.from_mapping(block)
            if abs(weights.total - 1.0) > _SUM_TOLERANCE:
                logger.warning(
                    "Status weights for window %s sum to %.3f; draws past the total fall back to scheduled",
                    window_spec,
                    weights.total,
                )
            rules.append(
                _HourWindowRule(
                    start_hour=_parse_hour(start_str, "start"),
                    end_hour=_parse_hour(end_str, "end"),
                    weights=weights,
                )
            )
        return cls(rules)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "StatusWeightTable":
        weights_path = Path(path)
        if not weights_path.exists():
            raise FileNotFoundError(f"Status weight YAML not found at {weights_path}")
        with weights_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        return cls.from_mapping(data)

    def weights_for_hour(self, hour: int) -> StatusWeights:
        for rule in self._rules:
            if rule.matches(hour):
                return rule.weights
        logger.debug("No status weights cover hour %d; using first window", hour)
        return self._rules[0].weights

    def draw(self, hour: int, rng: UniformSource) -> FlightStatus:
        return self.weights_for_hour(hour).draw(float(rng.random()))

    @property
    def windows(self) -> List[Tuple[int, int]]:
        return [(rule.start_hour, rule.end_hour) for rule in self._rules]


__all__ = ["DEFAULT_STATUS_WEIGHTS", "StatusWeightTable", "StatusWeights", "UniformSource"]
