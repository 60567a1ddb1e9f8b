"""
Reporting Periods

A period is a window of days ending no later than today. Days of the
nominal window that are still in the future are never part of it.
"""

from datetime import date, timedelta
from enum import Enum
from typing import Optional

from dateutil.relativedelta import relativedelta


EPOCH = date(1970, 1, 1)


class Period(str, Enum):
    """Reporting window, resolved relative to the current local date."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"

    @classmethod
    def default(cls) -> "Period":
        return cls.ALL

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def bounds(self, today: Optional[date] = None) -> tuple[date, date]:
        """
        Resolve the period to an inclusive (start, end) date range.

        `today` defaults to the local date and is read once, so both
        bounds always agree on what today is.
        """
        today = today or date.today()

        if self is Period.DAY:
            return today, today

        if self is Period.WEEK:
            week_start = today - timedelta(days=today.weekday())
            week_end = week_start + timedelta(days=6)
            return week_start, min(week_end, today)

        if self is Period.MONTH:
            month_start = today.replace(day=1)
            month_end = month_start + relativedelta(months=1, days=-1)
            return month_start, min(month_end, today)

        if self is Period.YEAR:
            year_start = date(today.year, 1, 1)
            year_end = date(today.year, 12, 31)
            return year_start, min(year_end, today)

        return EPOCH, today

    def contains(self, day: date, today: Optional[date] = None) -> bool:
        start, end = self.bounds(today)
        return start <= day <= end
