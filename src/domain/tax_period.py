"""BTW reporting periods

Dutch BTW is declared per month, quarter or year. Ranges are inclusive
calendar dates.
"""

import calendar
from datetime import date
from enum import Enum
from typing import NamedTuple, Optional

MIN_YEAR = 2000
MAX_YEAR = 2100


class PeriodType(str, Enum):
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


class PeriodRange(NamedTuple):
    start_date: date
    end_date: date


def _month_range(year: int, first_month: int, last_month: int) -> PeriodRange:
    last_day = calendar.monthrange(year, last_month)[1]
    return PeriodRange(date(year, first_month, 1), date(year, last_month, last_day))


def tax_period_range(period: str, year: int, value: Optional[int] = None) -> PeriodRange:
    """
    Inclusive date range of a BTW period

    Args:
        period: month, quarter or year
        year: Calendar year, 2000-2100
        value: Month 1-12 or quarter 1-4; ignored for a year

    Raises:
        ValueError: unknown period, year out of range or bad value
    """
    try:
        kind = PeriodType(period)
    except ValueError:
        raise ValueError(f"Unknown period {period!r}; expected month, quarter or year") from None

    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"Year {year} outside {MIN_YEAR}-{MAX_YEAR}")

    if kind == PeriodType.YEAR:
        return _month_range(year, 1, 12)

    if kind == PeriodType.QUARTER:
        if value is None or not 1 <= value <= 4:
            raise ValueError(f"Quarter must be 1-4, got {value}")
        return _month_range(year, (value - 1) * 3 + 1, value * 3)

    if value is None or not 1 <= value <= 12:
        raise ValueError(f"Month must be 1-12, got {value}")
    return _month_range(year, value, value)
