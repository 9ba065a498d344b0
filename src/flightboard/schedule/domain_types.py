"""Core dataclasses shared across the schedule and status packages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from flightboard.reference.registry import Place


class FlightStatus(str, Enum):
    """Status a flight is frozen at for the session. Declaration order is draw order."""

    SCHEDULED = "scheduled"
    DELAYED = "delayed"
    DEPARTED = "departed"
    LANDED = "landed"


@dataclass(frozen=True)
class Flight:
    """Synthetic flight record produced by one search."""

    id: str
    flight_number: str
    airline: Optional[Place]
    origin: Place
    destination: Place
    scheduled_departure: datetime
    scheduled_arrival: datetime
    status: FlightStatus
    delay_minutes: int = 0
    actual_departure: Optional[datetime] = None
    actual_arrival: Optional[datetime] = None

    @property
    def effective_departure(self) -> datetime:
        """Actual departure when known, else the scheduled one."""
        return self.actual_departure or self.scheduled_departure

    def as_dict(self) -> Dict[str, object]:
        def _iso(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat() if value is not None else None

        return {
            "id": self.id,
            "flight_number": self.flight_number,
            "airline_id": self.airline.id if self.airline else None,
            "airline_name": self.airline.name if self.airline else None,
            "origin_id": self.origin.id,
            "origin_name": self.origin.name,
            "destination_id": self.destination.id,
            "destination_name": self.destination.name,
            "status": self.status.value,
            "delay_minutes": self.delay_minutes,
            "scheduled_departure": _iso(self.scheduled_departure),
            "scheduled_arrival": _iso(self.scheduled_arrival),
            "actual_departure": _iso(self.actual_departure),
            "actual_arrival": _iso(self.actual_arrival),
        }
