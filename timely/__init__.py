from .epochs import (
    EPOCHS,
    FutureTimestampError,
    Older,
    SemanticEpoch,
    ThisMonth,
    ThisWeek,
    Today,
    Yesterday,
    older,
    reference_instant,
    this_month,
    this_week,
    today,
    which_epoch,
    yesterday,
)
from .timeouts import (
    TimeoutExceededError,
    resolve_with_timeout,
    time_after,
    time_after_with_cancel,
)
from .util import (
    DAY,
    Duration,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    SECOND,
    UNITS,
    WEEK,
    Converter,
    duration_to,
)

__all__ = [
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "Duration",
    "UNITS",
    "Converter",
    "duration_to",
    "resolve_with_timeout",
    "time_after",
    "time_after_with_cancel",
    "TimeoutExceededError",
    "SemanticEpoch",
    "Today",
    "Yesterday",
    "ThisWeek",
    "ThisMonth",
    "Older",
    "today",
    "yesterday",
    "this_week",
    "this_month",
    "older",
    "EPOCHS",
    "which_epoch",
    "reference_instant",
    "FutureTimestampError",
]
