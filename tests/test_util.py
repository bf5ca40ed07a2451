"""Tests for duration unit constants and converters."""

import math
from dataclasses import FrozenInstanceError

import pytest

from timely import (
    DAY,
    HOUR,
    MICROSECOND,
    MINUTE,
    SECOND,
    UNITS,
    WEEK,
    Duration,
    duration_to,
)


def test_units_derive_from_millisecond():
    """Test that each unit is a multiple of the one below it."""
    assert MICROSECOND == 0.001
    assert SECOND == 1000
    assert MINUTE == 60_000
    assert HOUR == 3_600_000
    assert DAY == 86_400_000
    assert WEEK == 604_800_000


def test_converters_between_units():
    """Test conversions between neighbouring units."""
    assert duration_to.millisecond(SECOND) == 1000
    assert duration_to.second(MINUTE) == 60
    assert duration_to.minute(HOUR) == 60
    assert duration_to.hour(DAY) == 24
    assert duration_to.day(WEEK) == 7
    assert duration_to.week(DAY) == 1 / 7
    assert duration_to.microsecond(1) == 1000


def test_converters_do_not_round():
    """Test that fractional results are returned unchanged."""
    assert duration_to.second(1500) == 1.5
    assert duration_to.minute(90_000) == 1.5


def test_converters_pass_through_unusual_inputs():
    """Test that negative and non-finite inputs follow float division."""
    assert duration_to.second(-2000) == -2
    assert duration_to.hour(math.inf) == math.inf
    assert math.isnan(duration_to.day(math.nan))


def test_unit_lookup_by_name():
    """Test looking a converter up by unit name."""
    assert duration_to.unit("minute")(90_000) == 1.5
    assert duration_to.unit("Week") is duration_to.week


def test_unit_lookup_rejects_unknown_names():
    """Test that unknown unit names raise with the valid choices."""
    with pytest.raises(ValueError, match="Invalid unit 'fortnight'"):
        duration_to.unit("fortnight")


def test_tables_are_read_only():
    """Test that the unit table and converter namespace cannot be changed."""
    with pytest.raises(TypeError):
        UNITS["second"] = 1  # type: ignore[index]

    with pytest.raises(FrozenInstanceError):
        duration_to.second = duration_to.minute  # type: ignore[misc]

    assert list(UNITS) == [
        "microsecond",
        "millisecond",
        "second",
        "minute",
        "hour",
        "day",
        "week",
    ]


def test_duration_enumeration_mirrors_constants():
    """Test that Duration members carry the same millisecond lengths."""
    assert Duration.Second == SECOND
    assert Duration.Microsecond == MICROSECOND
    assert duration_to.millisecond(Duration.Second) == 1000
    assert duration_to.second(Duration.Minute) == 60
    assert duration_to.week(Duration.Day) == 1 / 7
    assert [member.name for member in Duration] == [
        "Microsecond",
        "Millisecond",
        "Second",
        "Minute",
        "Hour",
        "Day",
        "Week",
    ]
