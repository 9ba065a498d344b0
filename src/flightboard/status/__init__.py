"""
Pure presentation helpers derived from a flight and the current instant.
"""

from .display import (
    DisplayTime,
    derive_arrival,
    derive_departure,
    describe_duration,
    format_clock,
    format_day,
    status_badge,
    status_text,
)
from .progress import LANDING_SOON, derive_progress, derive_remaining_time
from .relative_time import format_distance

__all__ = [
    "DisplayTime",
    "LANDING_SOON",
    "derive_arrival",
    "derive_departure",
    "derive_progress",
    "derive_remaining_time",
    "describe_duration",
    "format_clock",
    "format_day",
    "format_distance",
    "status_badge",
    "status_text",
]
