"""Utility constants and converters for timely.

Time unit constants represent durations in milliseconds.
These are used throughout the API for consistent time representation.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
MICROSECOND = MILLISECOND / 1000
SECOND = MILLISECOND * 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7


class Duration(float, Enum):
    """The unit constants as an enumeration, e.g. ``Duration.Second == 1000``."""

    Microsecond = MICROSECOND
    Millisecond = MILLISECOND
    Second = SECOND
    Minute = MINUTE
    Hour = HOUR
    Day = DAY
    Week = WEEK


UNITS = MappingProxyType(
    {
        "microsecond": MICROSECOND,
        "millisecond": MILLISECOND,
        "second": SECOND,
        "minute": MINUTE,
        "hour": HOUR,
        "day": DAY,
        "week": WEEK,
    }
)


class Converter:
    """Convert a duration in milliseconds into a target unit."""

    def __init__(self, unit: float):
        self.unit: float = unit

    def __call__(self, duration: float) -> float:
        return duration / self.unit

    def __repr__(self) -> str:
        return f"Converter({self.unit!r})"


@dataclass(frozen=True)
class _Converters:
    microsecond: Converter
    millisecond: Converter
    second: Converter
    minute: Converter
    hour: Converter
    day: Converter
    week: Converter

    def unit(self, name: str) -> Converter:
        """Return the converter for a unit name (case-insensitive).

        Example:
            >>> duration_to.unit("minute")(90_000)
            1.5
        """
        key = name.lower()
        if key not in UNITS:
            valid = ", ".join(UNITS.keys())
            raise ValueError(f"Invalid unit '{name}'. Valid units: {valid}")
        return getattr(self, key)


duration_to = _Converters(**{name: Converter(ms) for name, ms in UNITS.items()})
