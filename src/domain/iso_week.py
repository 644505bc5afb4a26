"""ISO-8601 week calendar helper

Week 1 is the week containing the year's first Thursday (equivalently,
January 4th). Weeks start on Monday. Only calendar dates are handled;
"today" is taken in UTC.
"""

from datetime import date, datetime, timedelta, timezone
from typing import NamedTuple, Optional


class WeekInfo(NamedTuple):
    year: int
    week_number: int


class WeekRange(NamedTuple):
    start_date: date  # Monday
    end_date: date    # Sunday


def week_info(day: date) -> WeekInfo:
    """ISO year and week owning the given date"""
    iso = day.isocalendar()
    return WeekInfo(year=iso[0], week_number=iso[1])


def week_date_range(year: int, week_number: int) -> WeekRange:
    """
    Monday-Sunday range of an ISO week

    Raises:
        ValueError: if the week does not exist in that ISO year
    """
    try:
        monday = date.fromisocalendar(year, week_number, 1)
    except ValueError as e:
        raise ValueError(f"Invalid ISO week {year}-W{week_number}: {e}") from e
    return WeekRange(start_date=monday, end_date=monday + timedelta(days=6))


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def current_week_info(today: Optional[date] = None) -> WeekInfo:
    return week_info(today or today_utc())
