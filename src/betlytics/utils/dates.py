"""Date and timestamp utility functions."""

from __future__ import annotations

from datetime import date, datetime, timezone

SECONDS_PER_DAY = 24 * 60 * 60

WEEKDAY_NAMES = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
]


def fractional_days_between(t1: datetime, t2: datetime) -> float:
    """Absolute span between two timestamps in (fractional) days.

    Naive timestamps are treated as UTC so that a naive and an aware value
    can still be compared.
    """
    return abs((_as_utc(t2) - _as_utc(t1)).total_seconds()) / SECONDS_PER_DAY


def in_range(d: date, start: date | None, end: date | None) -> bool:
    """Inclusive range check; a missing bound is open.

    A range with only ``start`` covers that single day, matching how a
    date-range picker with one selected day behaves.
    """
    if start is None:
        return end is None or d <= end
    if end is None:
        end = start
    return start <= d <= end


def _as_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)
