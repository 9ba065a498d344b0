"""Tabular export of a flight batch."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from flightboard.schedule.domain_types import Flight

logger = logging.getLogger(__name__)

FLIGHT_COLUMNS = [
    "id",
    "flight_number",
    "airline_id",
    "airline_name",
    "origin_id",
    "origin_name",
    "destination_id",
    "destination_name",
    "status",
    "delay_minutes",
    "scheduled_departure",
    "scheduled_arrival",
    "actual_departure",
    "actual_arrival",
]


def flights_to_frame(flights: Sequence[Flight]) -> pd.DataFrame:
    """One row per flight, in batch order."""
    return pd.DataFrame([flight.as_dict() for flight in flights], columns=FLIGHT_COLUMNS)


def write_flights_csv(path: str | Path, flights: Sequence[Flight]) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    flights_to_frame(flights).to_csv(output_path, index=False)
    logger.info("Wrote %d flights to %s", len(flights), output_path)
    return output_path


__all__ = ["FLIGHT_COLUMNS", "flights_to_frame", "write_flights_csv"]
