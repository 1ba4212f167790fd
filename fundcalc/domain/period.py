"""
Payment period arithmetic.

Uses date only (no timezone).

Periods:
- REGULAR: every N days
- WEEKLY: every N weeks (N * 7 days)
- FORTNIGHTLY: every N fortnights (N * 14 days)
- MONTHLY: every N calendar months, day clipped to the last day of the month
- ANNUALLY: every N calendar years, Feb 29 clipped to Feb 28
"""
import calendar
import logging
from datetime import date, timedelta


logger = logging.getLogger(__name__)

PERIOD_REGULAR = "REGULAR"
PERIOD_WEEKLY = "WEEKLY"
PERIOD_FORTNIGHTLY = "FORTNIGHTLY"
PERIOD_MONTHLY = "MONTHLY"
PERIOD_ANNUALLY = "ANNUALLY"

VALID_PERIODS = frozenset({
    PERIOD_REGULAR, PERIOD_WEEKLY, PERIOD_FORTNIGHTLY, PERIOD_MONTHLY, PERIOD_ANNUALLY,
})

# Day-based periods and their length in days per unit of frequency
PERIOD_DAYS = {
    PERIOD_REGULAR: 1,
    PERIOD_WEEKLY: 7,
    PERIOD_FORTNIGHTLY: 14,
}


class PeriodValidationError(ValueError):
    pass


class PeriodOverflowError(PeriodValidationError):
    """Result falls outside date.min..date.max"""
    pass


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(d: date, n: int) -> date:
    month = d.month - 1 + n
    year = d.year + month // 12
    month = month % 12 + 1
    if not date.min.year <= year <= date.max.year:
        raise PeriodOverflowError(f"{d.isoformat()} + {n} months is out of range")
    day = min(d.day, last_day_of_month(year, month))
    return date(year, month, day)


def add_years(d: date, n: int) -> date:
    year = d.year + n
    if not date.min.year <= year <= date.max.year:
        raise PeriodOverflowError(f"{d.isoformat()} + {n} years is out of range")
    day = min(d.day, last_day_of_month(year, d.month))
    return date(year, d.month, day)


def add_days(d: date, n: int) -> date:
    try:
        return d + timedelta(days=n)
    except OverflowError as e:
        raise PeriodOverflowError(f"{d.isoformat()} + {n} days is out of range") from e


def add_period(d: date, frequency: int, period: str) -> date:
    """Shift d by `frequency` periods. Negative frequency steps backwards."""
    if period not in VALID_PERIODS:
        raise PeriodValidationError(f"invalid period: {period}")
    try:
        if period in PERIOD_DAYS:
            return add_days(d, frequency * PERIOD_DAYS[period])
        if period == PERIOD_MONTHLY:
            return add_months(d, frequency)
        return add_years(d, frequency)
    except PeriodOverflowError:
        logger.warning("Period overflow: %s %+d x %s", d.isoformat(), frequency, period)
        raise
