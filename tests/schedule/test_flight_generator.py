from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List

import pytest
from numpy.random import default_rng

from flightboard.reference.route_durations import duration_minutes
from flightboard.schedule.domain_types import FlightStatus
from flightboard.schedule.flight_generator import FlightGenerator, search_flights
from flightboard.schedule.generator_config import GeneratorConfig

NOON = datetime(2024, 5, 1, 12, 0)
TRAVEL_DATE = date(2024, 5, 1)


class ScriptedRng:
    """Replays fixed uniform samples and integer draws, checking numpy's bounds."""

    def __init__(self, samples: List[float], integers: List[int]):
        self._samples = list(samples)
        self._integers = list(integers)
        self.integer_bounds: List[tuple[int, int]] = []

    def random(self) -> float:
        return self._samples.pop(0)

    def integers(self, low: int, high: int) -> int:
        value = self._integers.pop(0)
        assert low <= value < high
        self.integer_bounds.append((low, high))
        return value


def test_scripted_batch_is_sorted_and_consistent():
    # Batch of two: a delayed flight at 12:00 and a landed one at 08:00.
    rng = ScriptedRng(samples=[0.25, 0.95], integers=[2, 720, 30, 482, 480, 123])
    flights = FlightGenerator(rng=rng).search("ktm", "pkr", TRAVEL_DATE, "buddha", now=NOON)

    assert [flight.id for flight in flights] == ["buddha-ktm-pkr-1", "buddha-ktm-pkr-0"]

    landed, delayed = flights
    assert landed.status is FlightStatus.LANDED
    assert landed.flight_number == "BHA 123"
    assert landed.scheduled_departure == datetime(2024, 5, 1, 8, 0)
    assert landed.scheduled_arrival == datetime(2024, 5, 1, 8, 25)
    assert landed.actual_departure == datetime(2024, 5, 1, 8, 0)
    assert landed.actual_arrival == datetime(2024, 5, 1, 8, 25)
    assert landed.delay_minutes == 0

    assert delayed.status is FlightStatus.DELAYED
    assert delayed.flight_number == "BHA 482"
    assert delayed.delay_minutes == 30
    assert delayed.actual_departure is None
    assert delayed.actual_arrival is None
    assert delayed.airline.name == "Buddha Air"
    assert delayed.origin.name == "Kathmandu"
    assert delayed.destination.name == "Pokhara"

    assert rng.integer_bounds == [(2, 7), (360, 1080), (10, 61), (100, 1000), (360, 1080), (100, 1000)]


def test_departed_flight_has_departure_only():
    rng = ScriptedRng(samples=[0.5, 0.5], integers=[2, 400, 555, 401, 556])
    flights = FlightGenerator(rng=rng).search("ktm", "luk", TRAVEL_DATE, "tara", now=NOON)
    for flight in flights:
        assert flight.status is FlightStatus.DEPARTED
        assert flight.actual_departure == flight.scheduled_departure
        assert flight.actual_arrival is None


def test_ties_keep_insertion_order():
    rng = ScriptedRng(samples=[0.1, 0.1, 0.1], integers=[3, 600, 111, 600, 222, 600, 333])
    flights = FlightGenerator(rng=rng).search("ktm", "sim", TRAVEL_DATE, "yeti", now=NOON)
    assert [flight.flight_number for flight in flights] == ["YTA 111", "YTA 222", "YTA 333"]


def test_status_uses_hour_of_search_instant():
    early = datetime(2024, 5, 1, 5, 30)
    rng = ScriptedRng(samples=[0.1, 0.1], integers=[2, 400, 101, 500, 102])
    flights = FlightGenerator(rng=rng).search("ktm", "pkr", TRAVEL_DATE, "yeti", now=early)
    assert {flight.status for flight in flights} == {FlightStatus.SCHEDULED}


def test_clock_used_when_now_not_given():
    rng = ScriptedRng(samples=[0.95, 0.95], integers=[2, 400, 101, 500, 102])
    generator = FlightGenerator(rng=rng, clock=lambda: datetime(2024, 5, 1, 21, 0))
    flights = generator.search("ktm", "pkr", TRAVEL_DATE, "yeti")
    assert {flight.status for flight in flights} == {FlightStatus.LANDED}


@pytest.mark.parametrize("origin, destination", [("xyz", "pkr"), ("ktm", "xyz"), ("ktm", "ktm")])
def test_unknown_or_degenerate_route_returns_empty(origin, destination):
    assert search_flights(origin, destination, TRAVEL_DATE, "buddha", now=NOON) == []


def test_unknown_airline_uses_placeholder_prefix(caplog):
    flights = search_flights("ktm", "pkr", TRAVEL_DATE, "ghost", rng=default_rng(3), now=NOON)
    assert flights
    for flight in flights:
        assert flight.airline is None
        assert flight.flight_number.startswith("NEP ")
    assert "ghost" in caplog.text


def test_accepts_datetime_travel_date():
    flights = search_flights(
        "ktm", "pkr", datetime(2024, 5, 1, 23, 45), "buddha", rng=default_rng(11), now=NOON
    )
    for flight in flights:
        assert flight.scheduled_departure.date() == TRAVEL_DATE


@pytest.mark.parametrize("seed", range(40))
@pytest.mark.parametrize(
    "origin, destination, now",
    [
        ("ktm", "pkr", datetime(2024, 5, 1, 6, 0)),
        ("bht", "pkr", datetime(2024, 5, 1, 13, 0)),
        ("tum", "luk", datetime(2024, 5, 1, 20, 0)),
    ],
)
def test_generated_batches_hold_invariants(seed, origin, destination, now):
    flights = search_flights(origin, destination, TRAVEL_DATE, "buddha", rng=default_rng(seed), now=now)
    expected = duration_minutes(origin, destination)

    assert 2 <= len(flights) <= 6
    departures = [flight.scheduled_departure for flight in flights]
    assert departures == sorted(departures)
    assert len({flight.id for flight in flights}) == len(flights)

    window_start = datetime(2024, 5, 1, 6, 0)
    window_end = datetime(2024, 5, 1, 18, 0)
    for flight in flights:
        assert window_start <= flight.scheduled_departure < window_end
        assert flight.scheduled_arrival - flight.scheduled_departure == timedelta(minutes=expected)
        assert 100 <= int(flight.flight_number.split()[1]) <= 999
        if flight.status is FlightStatus.DELAYED:
            assert 10 <= flight.delay_minutes <= 60
        else:
            assert flight.delay_minutes == 0
        if flight.status in (FlightStatus.DEPARTED, FlightStatus.LANDED):
            assert flight.actual_departure - flight.scheduled_departure == timedelta(
                minutes=flight.delay_minutes
            )
        else:
            assert flight.actual_departure is None
        if flight.status is FlightStatus.LANDED:
            assert flight.actual_arrival - flight.actual_departure == timedelta(minutes=expected)
        else:
            assert flight.actual_arrival is None


def test_config_bounds_are_respected():
    config = GeneratorConfig.from_mapping(
        {
            "departure_window": {"start": "09:00", "end": "09:30"},
            "batch_size": {"min": 4, "max": 4},
            "status_weights": {"00-24": {"delayed": 1.0}},
            "delay_minutes": {"min": 15, "max": 15},
        }
    )
    flights = search_flights("ktm", "pkr", TRAVEL_DATE, "buddha", rng=default_rng(5), now=NOON, config=config)
    assert len(flights) == 4
    for flight in flights:
        assert flight.status is FlightStatus.DELAYED
        assert flight.delay_minutes == 15
        assert datetime(2024, 5, 1, 9, 0) <= flight.scheduled_departure < datetime(2024, 5, 1, 9, 30)


def test_as_dict_exports_iso_times():
    rng = ScriptedRng(samples=[0.95, 0.95], integers=[2, 480, 123, 490, 124])
    flight = FlightGenerator(rng=rng).search("ktm", "pkr", TRAVEL_DATE, "buddha", now=NOON)[0]
    exported = flight.as_dict()
    assert exported["status"] == "landed"
    assert exported["scheduled_departure"] == "2024-05-01T08:00:00"
    assert exported["actual_arrival"] == "2024-05-01T08:25:00"
    assert exported["airline_name"] == "Buddha Air"
