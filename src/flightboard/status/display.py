from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from flightboard.schedule.domain_types import Flight, FlightStatus
from flightboard.status.relative_time import format_distance


def format_clock(moment: datetime) -> str:
    return moment.strftime("%H:%M")


def format_day(moment: datetime) -> str:
    return moment.strftime("%d %b, %Y")


@dataclass(frozen=True)
class DisplayTime:
    """Label, instant and secondary line for a departure or arrival card."""

    label: str
    time: datetime
    subtitle: str

    @property
    def clock(self) -> str:
        return format_clock(self.time)


def derive_departure(flight: Flight) -> DisplayTime:
    if flight.status is FlightStatus.SCHEDULED:
        return DisplayTime(
            label="Scheduled Departure",
            time=flight.scheduled_departure,
            subtitle=format_day(flight.scheduled_departure),
        )
    if flight.status is FlightStatus.DELAYED:
        return DisplayTime(
            label="Delayed Departure",
            time=flight.scheduled_departure + timedelta(minutes=flight.delay_minutes),
            subtitle=f"Originally {format_clock(flight.scheduled_departure)}",
        )
    departed_at = flight.effective_departure
    return DisplayTime(label="Departed", time=departed_at, subtitle=format_day(departed_at))


def derive_arrival(flight: Flight) -> DisplayTime:
    if flight.status is FlightStatus.LANDED:
        landed_at = flight.actual_arrival or flight.scheduled_arrival
        return DisplayTime(label="Landed", time=landed_at, subtitle=format_day(landed_at))
    estimated = flight.scheduled_arrival
    if flight.status is FlightStatus.DELAYED:
        estimated = estimated + timedelta(minutes=flight.delay_minutes)
    return DisplayTime(label="Estimated Arrival", time=estimated, subtitle=format_day(estimated))


def status_badge(flight: Flight) -> str:
    """Short status text shown next to a flight in the results list."""
    if flight.status is FlightStatus.SCHEDULED:
        return "On Time"
    if flight.status is FlightStatus.DELAYED:
        return f"Delayed {flight.delay_minutes}m"
    if flight.status is FlightStatus.DEPARTED:
        return "Departed"
    return "Landed"


def status_text(flight: Flight) -> str:
    """Longer status wording for the flight detail view."""
    if flight.status is FlightStatus.SCHEDULED:
        return "Scheduled"
    if flight.status is FlightStatus.DELAYED:
        return f"Delayed by {flight.delay_minutes} minutes"
    if flight.status is FlightStatus.DEPARTED:
        return "In Flight"
    return "Landed"


def describe_duration(flight: Flight) -> str:
    return f"{format_distance(flight.scheduled_arrival, flight.scheduled_departure)} duration"


__all__ = [
    "DisplayTime",
    "derive_arrival",
    "derive_departure",
    "describe_duration",
    "format_clock",
    "format_day",
    "status_badge",
    "status_text",
]
