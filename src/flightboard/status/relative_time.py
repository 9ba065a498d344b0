"""Human wording for the distance between two instants."""

from __future__ import annotations

import math
from datetime import datetime

_MINUTES_IN_DAY = 1440
_MINUTES_IN_MONTH = 43200


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _describe_minutes(minutes: int) -> str:
    if minutes == 0:
        return "less than a minute"
    if minutes < 45:
        return _plural(minutes, "minute")
    if minutes < 90:
        return "about 1 hour"
    if minutes < _MINUTES_IN_DAY:
        return f"about {_plural(_round_half_up(minutes / 60), 'hour')}"
    if minutes < 2520:
        return "1 day"
    if minutes < _MINUTES_IN_MONTH:
        return _plural(_round_half_up(minutes / _MINUTES_IN_DAY), "day")
    if minutes < 2 * _MINUTES_IN_MONTH:
        return f"about {_plural(_round_half_up(minutes / _MINUTES_IN_MONTH), 'month')}"
    months = minutes // _MINUTES_IN_MONTH
    if months < 12:
        return _plural(_round_half_up(minutes / _MINUTES_IN_MONTH), "month")
    years, remainder = divmod(months, 12)
    if remainder < 3:
        return f"about {_plural(years, 'year')}"
    if remainder < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"


def format_distance(moment: datetime, base: datetime, *, add_suffix: bool = False) -> str:
    """Describe how far ``moment`` is from ``base``.

    With ``add_suffix`` the text reads ``"in 15 minutes"`` when ``moment`` is
    later than ``base`` and ``"15 minutes ago"`` otherwise.
    """
    delta_seconds = (moment - base).total_seconds()
    text = _describe_minutes(_round_half_up(abs(delta_seconds) / 60))
    if not add_suffix:
        return text
    if delta_seconds > 0:
        return f"in {text}"
    return f"{text} ago"


__all__ = ["format_distance"]
