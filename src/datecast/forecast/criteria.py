from __future__ import annotations

from enum import Enum, IntFlag
from typing import Optional, Union

from datecast.calendar._dates import is_saturday, is_sunday, is_weekend, strip_time_of_day


class ForecastCriteria(IntFlag):
    """
    Categories of day a forecast date must avoid.

    Values are bit positions: bit 0 is the holiday bit, bits 1-2 select
    Saturday and/or Sunday.  Composite masks such as
    ``HOLIDAY | SATURDAY`` (3) are valid criteria.
    """

    HOLIDAY = 1
    SATURDAY = 2
    SUNDAY = 4
    WEEKEND = 6
    ALL = 7


class ForecastDirection(Enum):
    """Whether a forecast searches earlier or later days."""

    BEFORE = "before"
    AFTER = "after"


Mask = Union[ForecastCriteria, int, None]

_WEEKEND_SUBCRITERIA: dict[int, ForecastCriteria] = {
    2: ForecastCriteria.SATURDAY,
    3: ForecastCriteria.SATURDAY,
    4: ForecastCriteria.SUNDAY,
    5: ForecastCriteria.SUNDAY,
    6: ForecastCriteria.WEEKEND,
    7: ForecastCriteria.WEEKEND,
}


def is_criteria_unset(mask: Mask) -> bool:
    return mask is None or int(mask) <= 0


def avoids_holiday(mask: Mask) -> bool:
    return not is_criteria_unset(mask) and int(mask) % 2 == 1


def avoids_weekend(mask: Mask) -> bool:
    if is_criteria_unset(mask):
        return False
    remainder = int(mask) & ~int(ForecastCriteria.HOLIDAY)
    return remainder > 0 and remainder % 2 == 0


def weekend_subcriterion(mask: Mask) -> Optional[ForecastCriteria]:
    """
    The single weekend category a mask selects: SATURDAY, SUNDAY or
    WEEKEND (both days), or None when the mask avoids no weekend day.
    """
    if not avoids_weekend(mask):
        return None
    return _WEEKEND_SUBCRITERIA.get(int(mask))


__all__ = [
    "ForecastCriteria",
    "ForecastDirection",
    "Mask",
    "avoids_holiday",
    "avoids_weekend",
    "is_criteria_unset",
    "is_saturday",
    "is_sunday",
    "is_weekend",
    "strip_time_of_day",
    "weekend_subcriterion",
]
