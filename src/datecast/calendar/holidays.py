from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Iterable, Optional

import numpy as np

from ._dates import SATURDAY, SUNDAY, D, as_date, strip_time_of_day
from ._exceptions import CalendarError


class Holiday(str, Enum):
    """Holidays the bundled calendar knows how to observe."""

    NEW_YEARS_DAY = "new_years_day"
    MARTIN_LUTHER_KING_JR_DAY = "martin_luther_king_jr_day"
    PRESIDENTS_DAY = "presidents_day"
    MEMORIAL_DAY = "memorial_day"
    JUNETEENTH_DAY = "juneteenth_day"
    INDEPENDENCE_DAY = "independence_day"
    LABOR_DAY = "labor_day"
    COLUMBUS_DAY = "columbus_day"
    VETERANS_DAY = "veterans_day"
    THANKSGIVING_DAY = "thanksgiving_day"
    CHRISTMAS_DAY = "christmas_day"


@dataclass(frozen=True)
class HolidayRule:
    """
    Either a fixed day of the month (``day``), observed on the nearest
    weekday when it falls on a weekend, or the ``nth`` occurrence of a
    weekday within the month (``nth=-1`` for the last one).

    ``weekday`` uses numpy weekmask day names ("Mon" .. "Sun").
    """

    month: int
    day: Optional[int] = None
    weekday: Optional[str] = None
    nth: int = 1
    since: Optional[int] = None

    def applies(self, year: int) -> bool:
        return self.since is None or year >= self.since

    def observed(self, year: int) -> date:
        if self.day is not None:
            actual = date(year, self.month, self.day)
            if actual.weekday() == SATURDAY:
                return actual - timedelta(days=1)
            if actual.weekday() == SUNDAY:
                return actual + timedelta(days=1)
            return actual

        month = np.datetime64(f"{year:04d}-{self.month:02d}")
        if self.nth > 0:
            first = month.astype("datetime64[D]")
            found = np.busday_offset(first, self.nth - 1, roll="forward", weekmask=self.weekday)
        else:
            last = (month + 1).astype("datetime64[D]") - 1
            found = np.busday_offset(last, 0, roll="backward", weekmask=self.weekday)
        return found.item()


RULES: dict[Holiday, HolidayRule] = {
    Holiday.NEW_YEARS_DAY:             HolidayRule(1, day=1),
    Holiday.MARTIN_LUTHER_KING_JR_DAY: HolidayRule(1, weekday="Mon", nth=3, since=1986),
    Holiday.PRESIDENTS_DAY:            HolidayRule(2, weekday="Mon", nth=3),
    Holiday.MEMORIAL_DAY:              HolidayRule(5, weekday="Mon", nth=-1),
    Holiday.JUNETEENTH_DAY:            HolidayRule(6, day=19, since=2021),
    Holiday.INDEPENDENCE_DAY:          HolidayRule(7, day=4),
    Holiday.LABOR_DAY:                 HolidayRule(9, weekday="Mon", nth=1),
    Holiday.COLUMBUS_DAY:              HolidayRule(10, weekday="Mon", nth=2),
    Holiday.VETERANS_DAY:              HolidayRule(11, day=11),
    Holiday.THANKSGIVING_DAY:          HolidayRule(11, weekday="Thu", nth=4),
    Holiday.CHRISTMAS_DAY:             HolidayRule(12, day=25),
}

FEDERAL_HOLIDAYS: tuple[Holiday, ...] = tuple(Holiday)

CORPORATE_HOLIDAYS: tuple[Holiday, ...] = (
    Holiday.NEW_YEARS_DAY,
    Holiday.MEMORIAL_DAY,
    Holiday.INDEPENDENCE_DAY,
    Holiday.LABOR_DAY,
    Holiday.THANKSGIVING_DAY,
    Holiday.CHRISTMAS_DAY,
)


class HolidayCalendar(ABC):
    """
    Query contract the forecast engine relies on.

    An implementation answers "is this date a holiday" for one year at a
    time; ``clone(year)`` hands out an instance scoped to another year.
    ``len()`` reports the number of known dates; by default zero means
    ``init()`` has not populated the calendar yet.
    """

    @abstractmethod
    def clone(self, year: int) -> HolidayCalendar:
        raise NotImplementedError

    @abstractmethod
    def is_holiday(self, day: date) -> bool:
        raise NotImplementedError

    @abstractmethod
    def init(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    def is_initialized(self) -> bool:
        return len(self) > 0

    def strip_time_of_day(self, day: D | None) -> D | None:
        return strip_time_of_day(day)


class ObservedHolidays(HolidayCalendar):
    """
    Observed holiday dates for a single year, held as a sorted
    ``datetime64[D]`` array so lookups are a binary search.
    """

    def __init__(
        self,
        year: Optional[int] = None,
        holidays: Optional[Iterable[Holiday | str]] = None,
    ) -> None:
        year = date.today().year if year is None else int(year)
        if not 1 <= year <= 9999:
            raise CalendarError(f"Year must be within 1..9999; got {year}.")
        self._year: int = year

        selection = FEDERAL_HOLIDAYS if holidays is None else holidays
        try:
            self._selection: tuple[Holiday, ...] = tuple(Holiday(h) for h in selection)
        except ValueError as exc:
            raise CalendarError(str(exc)) from exc

        self._dates: np.ndarray = np.empty(0, dtype="datetime64[D]")
        self._names: list[Holiday] = []
        self._rule_years: list[int] = []
        self._initialized: bool = False

    # ── table management ─────────────────────────────────────────────────

    def _observed_rows(self, rule_year: int) -> list[tuple[date, Holiday, int]]:
        if not 1 <= rule_year <= 9999:
            return []
        return [
            (RULES[h].observed(rule_year), h, rule_year)
            for h in self._selection
            if RULES[h].applies(rule_year)
        ]

    def init(self) -> None:
        if self._initialized:
            return
        rows = self._observed_rows(self._year)
        # A neighbouring year's holiday can be observed in this one,
        # e.g. 1 January on a Saturday is observed on 31 December.
        for neighbour in (self._year - 1, self._year + 1):
            rows += [r for r in self._observed_rows(neighbour) if r[0].year == self._year]
        rows.sort()
        self._dates = np.array([d for d, _, _ in rows], dtype="datetime64[D]")
        self._names = [h for _, h, _ in rows]
        self._rule_years = [y for _, _, y in rows]
        self._initialized = True

    def is_initialized(self) -> bool:
        return self._initialized

    def clone(self, year: int) -> ObservedHolidays:
        other = ObservedHolidays(year, self._selection)
        other.init()
        return other

    # ── queries ──────────────────────────────────────────────────────────

    def is_holiday(self, day: date) -> bool:
        if not self._initialized:
            raise CalendarError(
                f"Holidays for {self._year} are not initialized; call init() first."
            )
        key = np.datetime64(as_date(strip_time_of_day(day)), "D")
        i = int(np.searchsorted(self._dates, key))
        return i < len(self._dates) and bool(self._dates[i] == key)

    def get(self, holiday: Holiday | str) -> Optional[date]:
        return self.holidays.get(Holiday(holiday))

    def to_holidays(self) -> np.ndarray:
        return self._dates.copy()

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def year(self) -> int:
        return self._year

    @property
    def selection(self) -> tuple[Holiday, ...]:
        return self._selection

    @property
    def holidays(self) -> dict[Holiday, date]:
        return {
            h: d.item()
            for h, d, y in zip(self._names, self._dates, self._rule_years)
            if y == self._year
        }

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return (
            f"ObservedHolidays(year={self._year}, "
            f"selected={len(self._selection)}, "
            f"known={len(self)})"
        )
