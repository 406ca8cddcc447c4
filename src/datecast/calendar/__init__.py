"""
datecast.calendar
~~~~~~~~~~~~~~~~~

Holiday calendars consulted by the forecast engine.  A HolidayCalendar
answers "is this date a holiday" for a single year and hands out copies
scoped to other years.  ObservedHolidays is the bundled implementation,
covering US federal holidays with weekend observance rules.

Basic usage::

    from datetime import date
    from datecast.calendar import ObservedHolidays, CORPORATE_HOLIDAYS

    federal = ObservedHolidays(2099)
    federal.init()
    federal.is_holiday(date(2099, 7, 3))            # → True (4 July is a Saturday)

    corporate = ObservedHolidays(2099, CORPORATE_HOLIDAYS).clone(2100)

Public API
----------
HolidayCalendar     Abstract query contract.
ObservedHolidays    Table of observed holiday dates for one year.
Holiday             Names of the supported holidays.
CalendarError       Base exception for all calendar-related errors.
"""

from __future__ import annotations

from datecast.calendar._dates import is_saturday, is_sunday, is_weekend, strip_time_of_day
from datecast.calendar._exceptions import CalendarError
from datecast.calendar.holidays import (
    CORPORATE_HOLIDAYS,
    FEDERAL_HOLIDAYS,
    Holiday,
    HolidayCalendar,
    HolidayRule,
    ObservedHolidays,
)

__all__ = [
    "CORPORATE_HOLIDAYS",
    "FEDERAL_HOLIDAYS",
    "CalendarError",
    "Holiday",
    "HolidayCalendar",
    "HolidayRule",
    "ObservedHolidays",
    "is_saturday",
    "is_sunday",
    "is_weekend",
    "strip_time_of_day",
]
