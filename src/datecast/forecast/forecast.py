from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, TypeVar

from datecast.calendar import HolidayCalendar, ObservedHolidays
from datecast.forecast.criteria import (
    ForecastCriteria,
    ForecastDirection,
    Mask,
    avoids_holiday,
    avoids_weekend,
    is_criteria_unset,
    is_saturday,
    is_sunday,
    is_weekend,
    strip_time_of_day,
    weekend_subcriterion,
)

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=date)


@dataclass(frozen=True)
class ForecastResult:
    """Forecast date plus one warning per holiday lookup that failed."""

    date: Optional[date]
    warnings: tuple[str, ...] = ()

    @property
    def degraded(self) -> bool:
        return bool(self.warnings)


def _today_for(day: date) -> date:
    if isinstance(day, datetime):
        return strip_time_of_day(datetime.now(tz=day.tzinfo))
    return date.today()


def _same_day_in_year(day: D, year: int) -> D:
    try:
        return day.replace(year=year)
    except ValueError:
        # 29 February outside a leap year rolls over to 1 March
        return day.replace(year=year, day=28) + timedelta(days=1)


class ForecastDate:
    """
    Shifts a date one day at a time, before or after, until it no longer
    falls on a day excluded by its ForecastCriteria mask.

    Only future dates are adjusted; today and earlier pass through
    unchanged, as do absent dates, criteria or directions.

    The configured period is instance state.  Share an instance across
    threads only if nobody calls ``set_period_years`` or
    ``set_holiday_calendar`` meanwhile, or pass ``years`` explicitly.
    """

    DEFAULT_PERIOD_YEARS: int = 5
    MAX_PERIOD_YEARS: int = 100

    def __init__(
        self,
        holidays: Optional[HolidayCalendar] = None,
        period_years: Optional[int] = None,
    ) -> None:
        self._period_years: int = self.DEFAULT_PERIOD_YEARS
        self._holidays: HolidayCalendar
        self.set_holiday_calendar(holidays)
        if period_years is not None:
            self.set_period_years(period_years)

    # ── configuration ────────────────────────────────────────────────────

    def _valid_period(self, years: Optional[int]) -> bool:
        return years is not None and 0 < years <= self.MAX_PERIOD_YEARS

    def set_period_years(self, years: int) -> None:
        self._period_years = years if self._valid_period(years) else self.DEFAULT_PERIOD_YEARS

    def set_holiday_calendar(self, holidays: Optional[HolidayCalendar]) -> None:
        if holidays is None:
            holidays = ObservedHolidays()
        if not holidays.is_initialized():
            holidays.init()
        self._holidays = holidays

    # ── single date ──────────────────────────────────────────────────────

    def forecast(
        self,
        day: Optional[D],
        criteria: Mask = ForecastCriteria.ALL,
        direction: Optional[ForecastDirection] = ForecastDirection.BEFORE,
    ) -> ForecastResult:
        if day is None or criteria is None or direction is None or not day > _today_for(day):
            return ForecastResult(day)
        return self._adjust(day, criteria, direction)

    def forecast_date(
        self,
        day: Optional[D],
        criteria: Mask = ForecastCriteria.ALL,
        direction: Optional[ForecastDirection] = ForecastDirection.BEFORE,
    ) -> Optional[D]:
        return self.forecast(day, criteria, direction).date

    def _adjust(self, day: D, criteria: Mask, direction: ForecastDirection) -> ForecastResult:
        holidays = self._holidays.clone(day.year)
        current = holidays.strip_time_of_day(day)
        step = timedelta(days=-1 if direction is ForecastDirection.BEFORE else 1)
        warnings: list[str] = []

        while self._is_criteria_met(holidays, current, criteria, warnings):
            current += step

        logger.debug("forecast %s -> %s (criteria=%r, direction=%s)",
                     day, current, criteria, direction.value)
        return ForecastResult(current, tuple(warnings))

    def _is_criteria_met(
        self,
        holidays: HolidayCalendar,
        day: date,
        criteria: Mask,
        warnings: list[str],
    ) -> bool:
        if is_criteria_unset(criteria):
            return False

        met = False
        if avoids_holiday(criteria):
            try:
                met = holidays.is_holiday(day)
            except Exception as exc:
                logger.warning("Holiday lookup failed for %s; treating it as a working day.",
                               day, exc_info=True)
                warnings.append(f"holiday lookup failed for {day.isoformat()}: {exc}")

        if not met and avoids_weekend(criteria):
            weekend = weekend_subcriterion(criteria)
            if weekend is ForecastCriteria.SATURDAY:
                met = is_saturday(day)
            elif weekend is ForecastCriteria.SUNDAY:
                met = is_sunday(day)
            elif weekend is ForecastCriteria.WEEKEND:
                met = is_weekend(day)
        return met

    # ── projection ───────────────────────────────────────────────────────

    def forecast_date_over_period(
        self,
        day: Optional[D],
        criteria: Mask = ForecastCriteria.ALL,
        direction: Optional[ForecastDirection] = ForecastDirection.BEFORE,
        years: Optional[int] = None,
    ) -> Optional[list[D]]:
        """
        Forecast the same month and day for ``years`` consecutive years
        starting with the year of ``day``, sorted ascending.

        ``years`` outside ``(0, max_period_years]`` falls back to the
        configured period.  Returns None for an absent date and an empty
        list for absent criteria or direction.
        """
        if day is None:
            return None
        if not self._valid_period(years):
            years = self._period_years
        if criteria is None or direction is None:
            return []

        dates: list[D] = []
        for index in range(years):
            candidate = _same_day_in_year(day, day.year + index)
            if int(criteria) > 0:
                dates.append(self.forecast_date(candidate, criteria, direction))
            else:
                dates.append(candidate)
        return sorted(dates)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def period_years(self) -> int:
        return self._period_years

    @property
    def default_period_years(self) -> int:
        return self.DEFAULT_PERIOD_YEARS

    @property
    def max_period_years(self) -> int:
        return self.MAX_PERIOD_YEARS

    @property
    def holiday_calendar(self) -> HolidayCalendar:
        return self._holidays

    def __repr__(self) -> str:
        return (
            f"ForecastDate(period_years={self._period_years}, "
            f"holidays={self._holidays!r})"
        )
