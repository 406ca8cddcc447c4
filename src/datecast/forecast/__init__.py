"""
datecast.forecast
~~~~~~~~~~~~~~~~~

Forecasts the date an event actually falls on when it must avoid
holidays, Saturdays, Sundays or any combination of them.  A future date
that lands on an excluded day is walked one day at a time, backwards or
forwards, until it no longer does.

Basic usage::

    from datetime import date
    from datecast.forecast import ForecastCriteria, ForecastDate, ForecastDirection

    fd = ForecastDate()                                   # federal holidays
    fd.forecast_date(date(2099, 12, 25))                  # → date(2099, 12, 24)
    fd.forecast_date(date(2099, 7, 4), ForecastCriteria.WEEKEND,
                     ForecastDirection.AFTER)             # → date(2099, 7, 6)

Projection across consecutive years, sorted ascending::

    fd.forecast_date_over_period(date(2099, 12, 25), years=3)

Public API
----------
ForecastDate        The forecast engine.
ForecastResult      Forecast date plus warnings about failed holiday lookups.
ForecastCriteria    Bitmask of day categories to avoid.
ForecastDirection   BEFORE or AFTER.
"""

from __future__ import annotations

from datecast.forecast.criteria import (
    ForecastCriteria,
    ForecastDirection,
    avoids_holiday,
    avoids_weekend,
    is_criteria_unset,
    weekend_subcriterion,
)
from datecast.forecast.forecast import ForecastDate, ForecastResult

__all__ = [
    "ForecastCriteria",
    "ForecastDate",
    "ForecastDirection",
    "ForecastResult",
    "avoids_holiday",
    "avoids_weekend",
    "is_criteria_unset",
    "weekend_subcriterion",
]
