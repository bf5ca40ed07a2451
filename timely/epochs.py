"""Semantic epochs: bucket a timestamp into Today, Yesterday, This Week,
This Month or Older relative to a reference instant.

Timestamps are Unix milliseconds. Bucket boundaries are derived from the
wall-clock fields of the reference instant: the milliseconds elapsed since
local midnight, plus whole days back to the start of the week or month.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Any
from zoneinfo import ZoneInfo

from dateutil.tz import tzlocal
from typing_extensions import override

from timely.util import DAY, HOUR, MILLISECOND, MINUTE, SECOND

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

# Mapping from day names to Python weekday integers
_DAY_MAP = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}


class FutureTimestampError(ValueError):
    """Raised when asked to classify a timestamp later than the reference."""

    def __init__(self, timestamp: float, reference: int):
        super().__init__("cannot match SemanticEpoch from the future")
        self.timestamp: float = timestamp
        self.reference: int = reference


def reference_instant(now: datetime | None = None, tz: str | None = None) -> datetime:
    """Return a timezone-aware reference instant.

    - None: the current instant in the host's local zone (or ``tz``)
    - naive datetime: interpreted as host local time
    - aware datetime: used as-is

    When ``tz`` is given, the result is converted into that IANA zone so its
    wall-clock fields are read there.
    """
    zone = ZoneInfo(tz) if tz is not None else None
    if now is None:
        return datetime.now(zone or tzlocal())
    if now.tzinfo is None:
        now = now.replace(tzinfo=tzlocal())
    if zone is not None:
        now = now.astimezone(zone)
    return now


def _coerce_timestamp(timestamp: Any) -> float:
    """Convert a timestamp to Unix milliseconds.

    Accepts:
    - int/float: Passed through as-is (Unix milliseconds)
    - datetime: Must be timezone-aware, converted to milliseconds

    Raises:
        TypeError: If timestamp is an unsupported type or naive datetime
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            raise TypeError(
                f"Epoch timestamp must be a timezone-aware datetime.\n"
                f"Got naive datetime: {timestamp!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))"
            )
        return _reference_ms(timestamp)
    if isinstance(timestamp, (int, float)) and not isinstance(timestamp, bool):
        return timestamp
    raise TypeError(
        f"Epoch timestamp must be int, float, or datetime.\n"
        f"Got {type(timestamp).__name__!r}: {timestamp!r}\n"
        f"Examples:\n"
        f"  which_epoch(1736949600000)  # int (Unix milliseconds)\n"
        f"  which_epoch(datetime(2025,1,15,tzinfo=timezone.utc))"
    )


def _reference_ms(reference: datetime) -> int:
    return (reference - _UNIX_EPOCH) // _ONE_MS


def _since_midnight(reference: datetime) -> int:
    """Milliseconds elapsed on the reference's wall clock since midnight."""
    elapsed = 0
    elapsed += MILLISECOND * (reference.microsecond // 1000)
    elapsed += SECOND * reference.second
    elapsed += MINUTE * reference.minute
    elapsed += HOUR * reference.hour
    return elapsed


def _boundary(reference: datetime, days: int = 0) -> int:
    """Unix milliseconds of local midnight ``days`` before the reference day."""
    return _reference_ms(reference) - (_since_midnight(reference) + DAY * days)


class SemanticEpoch(ABC):
    """A named calendar-relative bucket."""

    label: str

    def matches(self, timestamp: Any, now: datetime | None = None) -> bool:
        """Return True if ``timestamp`` falls in this bucket relative to ``now``.

        ``now`` defaults to the current instant, resolved on every call.
        """
        return self._matches(_coerce_timestamp(timestamp), reference_instant(now))

    @abstractmethod
    def _matches(self, timestamp: float, reference: datetime) -> bool:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(label={self.label!r})"


class Today(SemanticEpoch):
    label = "Today"

    @override
    def _matches(self, timestamp: float, reference: datetime) -> bool:
        return timestamp >= _boundary(reference)


class Yesterday(SemanticEpoch):
    label = "Yesterday"

    @override
    def _matches(self, timestamp: float, reference: datetime) -> bool:
        # Ensure not today
        if timestamp >= _boundary(reference):
            return False
        return timestamp >= _boundary(reference, days=1)


class ThisWeek(SemanticEpoch):
    """Everything since local midnight on the first day of the current week."""

    label = "This Week"

    def __init__(self, week_start: str = "sunday"):
        """
        Args:
            week_start: Day name the week begins on (case-insensitive)
        """
        day_lower = week_start.lower()
        if day_lower not in _DAY_MAP:
            valid = ", ".join(_DAY_MAP.keys())
            raise ValueError(f"Invalid day '{week_start}'. Valid days: {valid}")
        self.first_weekday: int = _DAY_MAP[day_lower]

    @override
    def _matches(self, timestamp: float, reference: datetime) -> bool:
        days_into_week = (reference.weekday() - self.first_weekday) % 7
        return timestamp >= _boundary(reference, days=days_into_week)


class ThisMonth(SemanticEpoch):
    label = "This Month"

    @override
    def _matches(self, timestamp: float, reference: datetime) -> bool:
        return timestamp >= _boundary(reference, days=reference.day - 1)


class Older(SemanticEpoch):
    """Catch-all label. Its predicate is only true for future timestamps and
    is never consulted by which_epoch."""

    label = "Older"

    @override
    def _matches(self, timestamp: float, reference: datetime) -> bool:
        return timestamp > _reference_ms(reference)


today: Today = Today()
yesterday: Yesterday = Yesterday()
this_week: ThisWeek = ThisWeek()
this_month: ThisMonth = ThisMonth()
older: Older = Older()

EPOCHS = MappingProxyType(
    {
        epoch.label: epoch
        for epoch in (today, yesterday, this_week, this_month, older)
    }
)

# Evaluation order decides overlapping buckets
_PRECEDENCE: tuple[SemanticEpoch, ...] = (today, yesterday, this_week, this_month)


def which_epoch(
    timestamp: Any, now: datetime | None = None, *, tz: str | None = None
) -> str:
    """
    Return the label of the first epoch that ``timestamp`` falls in.

    Args:
        timestamp: Unix milliseconds or a timezone-aware datetime
        now: Reference instant (default: current instant)
        tz: IANA timezone whose wall clock defines the boundaries
            (default: the reference's own zone, or the host local zone)

    Returns:
        One of "Today", "Yesterday", "This Week", "This Month", "Older"

    Raises:
        FutureTimestampError: If timestamp is later than the reference

    Example:
        >>> from zoneinfo import ZoneInfo
        >>> now = datetime(2025, 1, 15, 14, 0, tzinfo=ZoneInfo("UTC"))
        >>> which_epoch(now - timedelta(days=1), now)
        'Yesterday'
    """
    ms = _coerce_timestamp(timestamp)
    reference = reference_instant(now, tz)
    reference_ms = _reference_ms(reference)
    if ms > reference_ms:
        raise FutureTimestampError(ms, reference_ms)

    for epoch in _PRECEDENCE:
        if epoch._matches(ms, reference):
            return epoch.label
    return older.label
