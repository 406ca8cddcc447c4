from __future__ import annotations

from datetime import date, datetime
from typing import TypeVar

D = TypeVar("D", bound=date)

SATURDAY = 5
SUNDAY = 6


def strip_time_of_day(day: D | None) -> D | None:
    """Return ``day`` at midnight; plain dates and None pass through."""
    if isinstance(day, datetime):
        return day.replace(hour=0, minute=0, second=0, microsecond=0)
    return day


def as_date(day: date) -> date:
    # datetime is a date subclass; numpy wants the calendar date only
    return day.date() if isinstance(day, datetime) else day


def is_saturday(day: date | None) -> bool:
    return day is not None and day.weekday() == SATURDAY


def is_sunday(day: date | None) -> bool:
    return day is not None and day.weekday() == SUNDAY


def is_weekend(day: date | None) -> bool:
    return is_saturday(day) or is_sunday(day)
