"""Calendar-day and hour-coverage helpers for availability queries.

All helpers take an optional ``tz``. ``None`` means host local time, which is
what ``datetime.fromtimestamp`` and naive ``datetime.timestamp`` already use.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date, datetime, time, timedelta, tzinfo
import math

from wxcompare.models.weather import PreferredTime, TimeRange


def local_datetime(timestamp: int, tz: tzinfo | None = None) -> datetime:
    return datetime.fromtimestamp(timestamp, tz)


def calendar_day(value: date, tz: tzinfo | None = None) -> date:
    """Local calendar day of a ``date`` or ``datetime``.

    Aware datetimes are shifted into ``tz`` first; naive ones keep their own
    date portion.
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(tz).date()
        return value.date()
    return value


def calendar_day_key(value: date, tz: tzinfo | None = None) -> str:
    """Canonical ``YYYY-MM-DD`` string used to compare selected dates."""
    return calendar_day(value, tz).isoformat()


def iter_calendar_days(span: TimeRange, tz: tzinfo | None = None) -> Iterator[date]:
    """Each local day from the one containing ``span.start`` through ``span.end``."""

    current = local_datetime(span.start, tz).date()
    last = local_datetime(span.end, tz).date()
    while current <= last:
        yield current
        current += timedelta(days=1)


def preferred_window(
    day: date, preferred_time: PreferredTime, tz: tzinfo | None = None
) -> TimeRange:
    """``start_hour:00:00.000`` to ``end_hour:59:59.999`` on ``day``.

    Both ends sit on the same calendar day, so a window that wraps midnight
    produces ``start > end``.
    """

    day_start = datetime.combine(day, time(preferred_time.start_hour), tzinfo=tz)
    day_end = datetime.combine(
        day, time(preferred_time.end_hour, 59, 59, 999000), tzinfo=tz
    )
    return TimeRange(
        start=math.floor(day_start.timestamp()),
        end=math.floor(day_end.timestamp()),
    )


def required_hours(preferred_time: PreferredTime) -> list[int]:
    if preferred_time.wraps_midnight:
        return list(range(preferred_time.start_hour, 24)) + list(
            range(0, preferred_time.end_hour + 1)
        )
    return list(range(preferred_time.start_hour, preferred_time.end_hour + 1))


def has_full_coverage(hours_present: Iterable[int], preferred_time: PreferredTime) -> bool:
    """True when every hour of the preferred window has at least one reading."""

    present = set(hours_present)
    return all(hour in present for hour in required_hours(preferred_time))


__all__ = [
    "calendar_day",
    "calendar_day_key",
    "has_full_coverage",
    "iter_calendar_days",
    "local_datetime",
    "preferred_window",
    "required_hours",
]
