from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Tuple

import yaml

from flightboard.reference.route_durations import DEFAULT_ROUTE_TABLE, RouteDurationTable
from flightboard.schedule.status_weights import StatusWeightTable

logger = logging.getLogger(__name__)


def _parse_hhmm(token: object, label: str) -> int:
    """
    Parse an HH:MM string into minutes since midnight.

    Args:
        token: Raw value from the configuration.
        label: Human-readable label for error messages.
    Returns:
        Minutes since midnight (0-1440). 24:00 is accepted as end-of-day.
    """
    if not isinstance(token, str) or not token.strip():
        raise ValueError(f"Departure window requires a non-empty {label} string")
    text = token.strip()
    parts = text.split(":")
    if len(parts) != 2:
        raise ValueError(f"Departure window {label} must be in HH:MM format: {text!r}")
    hour_str, minute_str = parts
    if not hour_str.isdigit() or not minute_str.isdigit():
        raise ValueError(f"Departure window {label} must be numeric HH:MM: {text!r}")
    hour = int(hour_str)
    minute = int(minute_str)
    if hour > 24 or minute > 59 or (hour == 24 and minute != 0):
        raise ValueError(f"Departure window {label} out of range: {text!r}")
    return hour * 60 + minute


def _format_hhmm(minutes: int) -> str:
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"


def _parse_range(block: object, label: str, default: Tuple[int, int]) -> Tuple[int, int]:
    if block is None:
        return default
    if not isinstance(block, Mapping):
        raise TypeError(f"'{label}' must be a mapping with 'min' and 'max'")
    low = int(block.get("min", default[0]))
    high = int(block.get("max", default[1]))
    return low, high


@dataclass(frozen=True)
class GeneratorConfig:
    """Tunables for synthetic flight batches.

    Ranges are inclusive on both ends except the departure window, whose end
    minute is excluded.
    """

    departure_window_start: int = 6 * 60
    departure_window_end: int = 18 * 60
    batch_size_min: int = 2
    batch_size_max: int = 6
    delay_minutes_min: int = 10
    delay_minutes_max: int = 60
    flight_number_min: int = 100
    flight_number_max: int = 999
    status_weights: StatusWeightTable = field(default_factory=StatusWeightTable.default)
    route_table: RouteDurationTable = field(default_factory=lambda: DEFAULT_ROUTE_TABLE)

    def __post_init__(self) -> None:
        if not 0 <= self.departure_window_start < self.departure_window_end <= 1440:
            raise ValueError("Departure window must satisfy 00:00 <= start < end <= 24:00")
        if not 0 < self.batch_size_min <= self.batch_size_max:
            raise ValueError("Batch size bounds must be positive with min <= max")
        if not 0 <= self.delay_minutes_min <= self.delay_minutes_max:
            raise ValueError("Delay bounds must be non-negative with min <= max")
        if not 0 <= self.flight_number_min <= self.flight_number_max:
            raise ValueError("Flight number bounds must be non-negative with min <= max")

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "GeneratorConfig":
        if not isinstance(data, Mapping):
            raise TypeError("Generator config must be a mapping at the top level")
        defaults = cls()
        window = data.get("departure_window") or {}
        if not isinstance(window, Mapping):
            raise TypeError("'departure_window' must be a mapping with 'start' and 'end'")
        start = _parse_hhmm(window.get("start", _format_hhmm(defaults.departure_window_start)), "start")
        end = _parse_hhmm(window.get("end", _format_hhmm(defaults.departure_window_end)), "end")
        batch = _parse_range(
            data.get("batch_size"), "batch_size", (defaults.batch_size_min, defaults.batch_size_max)
        )
        delay = _parse_range(
            data.get("delay_minutes"),
            "delay_minutes",
            (defaults.delay_minutes_min, defaults.delay_minutes_max),
        )
        number = _parse_range(
            data.get("flight_number"),
            "flight_number",
            (defaults.flight_number_min, defaults.flight_number_max),
        )
        weights_block = data.get("status_weights")
        weights = (
            StatusWeightTable.from_mapping(weights_block)
            if weights_block is not None
            else defaults.status_weights
        )
        durations_block = data.get("durations")
        default_duration = data.get("default_duration_minutes")
        if durations_block is None and default_duration is None:
            route_table = DEFAULT_ROUTE_TABLE
        else:
            # A bare default keeps the built-in pairs and only changes the fallback.
            route_table = RouteDurationTable.from_mapping(
                durations_block if durations_block is not None else DEFAULT_ROUTE_TABLE.durations,
                default_minutes=int(
                    default_duration if default_duration is not None else DEFAULT_ROUTE_TABLE.default_minutes
                ),
            )
        return cls(
            departure_window_start=start,
            departure_window_end=end,
            batch_size_min=batch[0],
            batch_size_max=batch[1],
            delay_minutes_min=delay[0],
            delay_minutes_max=delay[1],
            flight_number_min=number[0],
            flight_number_max=number[1],
            status_weights=weights,
            route_table=route_table,
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "GeneratorConfig":
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Generator config YAML not found at {config_path}")
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        config = cls.from_mapping(data)
        logger.debug(
            "Loaded generator config from %s (window %s-%s, batch %d-%d)",
            config_path,
            config.window_start_str,
            config.window_end_str,
            config.batch_size_min,
            config.batch_size_max,
        )
        return config

    @property
    def window_start_str(self) -> str:
        return _format_hhmm(self.departure_window_start)

    @property
    def window_end_str(self) -> str:
        return _format_hhmm(self.departure_window_end)


__all__ = ["GeneratorConfig"]
