"""Utility functions."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional

from dateutil import tz as dttz


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def local_tz(tz: Optional[tzinfo] = None) -> tzinfo:
    return tz if tz is not None else dttz.tzlocal()


def local_day(moment: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Truncate to midnight of the calendar day in `tz`; naive values are wall-clock time in `tz`."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=local_tz(tz))
    local = moment.astimezone(local_tz(tz))
    return local.replace(hour=0, minute=0, second=0, microsecond=0)


def from_timestamp(ts: int, tz: Optional[tzinfo] = None) -> datetime:
    return datetime.fromtimestamp(ts, tz=local_tz(tz))


def format_local(ts: int, tz: Optional[tzinfo] = None) -> str:
    # e.g. 1/20/2026, 3:04:05 PM
    dt = from_timestamp(ts, tz)
    hour12 = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt.month}/{dt.day}/{dt.year}, {hour12}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
