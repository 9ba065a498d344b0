from __future__ import annotations

import textwrap

import pytest

from flightboard.reference.registry import (
    AIRLINES,
    CITIES,
    DEFAULT_FLIGHT_NUMBER_PREFIX,
    flight_number_prefix,
    get_airline,
    get_city,
)
from flightboard.reference.route_durations import (
    DEFAULT_ROUTE_TABLE,
    RouteDurationTable,
    duration_minutes,
)


def test_forward_and_reverse_lookup_agree():
    assert duration_minutes("ktm", "pkr") == 25
    assert duration_minutes("pkr", "ktm") == 25


def test_reverse_pair_used_when_forward_missing():
    table = RouteDurationTable.from_mapping({"ktm": {"luk": 30}})
    assert table.duration_minutes("luk", "ktm") == 30


def test_unknown_pair_falls_back_to_default():
    assert duration_minutes("foo", "bar") == 30
    assert duration_minutes("pkr", "bhr") == 30


def test_custom_default_minutes():
    table = RouteDurationTable.from_mapping({}, default_minutes=42)
    assert table.duration_minutes("ktm", "pkr") == 42


def test_from_mapping_rejects_non_positive_minutes():
    with pytest.raises(ValueError):
        RouteDurationTable.from_mapping({"ktm": {"pkr": 0}})
    with pytest.raises(ValueError):
        RouteDurationTable.from_mapping({"ktm": {"pkr": "soon"}})
    with pytest.raises(TypeError):
        RouteDurationTable.from_mapping({"ktm": 25})


def test_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_ROUTE_TABLE.durations["ktm"]["pkr"] = 99  # type: ignore[index]


def test_known_pairs_sorted():
    pairs = DEFAULT_ROUTE_TABLE.known_pairs()
    assert pairs == sorted(pairs)
    assert ("pkr", "bht", 60) in pairs


def test_from_yaml(tmp_path):
    yaml_text = textwrap.dedent(
        """
        default_minutes: 40
        durations:
          KTM:
            pkr: 28
        """
    ).strip()
    path = tmp_path / "durations.yaml"
    path.write_text(yaml_text, encoding="utf-8")
    table = RouteDurationTable.from_yaml(path)
    assert table.duration_minutes("pkr", "ktm") == 28
    assert table.duration_minutes("ktm", "luk") == 40


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        RouteDurationTable.from_yaml(tmp_path / "missing.yaml")


def test_registries_resolve_ids():
    assert get_city("ktm").name == "Kathmandu"
    assert get_city("xyz") is None
    assert get_airline("yeti").name == "Yeti Airlines"
    assert get_airline(None) is None
    assert len(CITIES) == 10
    assert len(AIRLINES) == 7


def test_flight_number_prefixes():
    assert flight_number_prefix("buddha") == "BHA"
    assert flight_number_prefix("tara") == "TAR"
    assert flight_number_prefix("nowhere") == DEFAULT_FLIGHT_NUMBER_PREFIX == "NEP"
