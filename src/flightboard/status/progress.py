"""Live in-flight fields recomputed against a caller-supplied ``now``."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Optional

from flightboard.schedule.domain_types import Flight, FlightStatus
from flightboard.status.relative_time import format_distance

LANDING_SOON = "Landing soon"

_MIN_WINDOW_SECONDS = 60.0


def derive_remaining_time(flight: Flight, now: datetime) -> Optional[str]:
    """Relative time to the scheduled arrival; only airborne flights have one."""
    if flight.status is not FlightStatus.DEPARTED:
        return None
    if now > flight.scheduled_arrival:
        return LANDING_SOON
    return format_distance(flight.scheduled_arrival, now, add_suffix=True)


def derive_progress(flight: Flight, now: datetime) -> Optional[int]:
    """Percent of the flight window elapsed, clamped to [0, 100].

    ``None`` while the flight is still on the ground. The window runs from
    the effective departure to the scheduled arrival and is never shorter
    than one minute.
    """
    if flight.status is FlightStatus.LANDED:
        return 100
    if flight.status is not FlightStatus.DEPARTED:
        return None
    departed_at = flight.effective_departure
    window = (flight.scheduled_arrival - departed_at).total_seconds()
    elapsed = (now - departed_at).total_seconds()
    percent = math.floor(elapsed / max(window, _MIN_WINDOW_SECONDS) * 100)
    return min(max(percent, 0), 100)


__all__ = ["LANDING_SOON", "derive_progress", "derive_remaining_time"]
