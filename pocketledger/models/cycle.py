"""
Repeat Cycles

A cycle says how often a transaction happens again after its start date.

MONTH OVERFLOW: Monthly and yearly steps use dateutil's relativedelta,
which clamps the day to the last day of the target month. Each step starts
from the previous occurrence, so a clamped day carries forward:
Jan 31 -> Feb 29 (2024) -> Mar 29 -> Apr 29.
"""

from datetime import date, timedelta
from enum import Enum
from typing import Optional

from dateutil.relativedelta import relativedelta


class Cycle(str, Enum):
    """How often a transaction repeats."""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    ONE_TIME = "onetime"  # Terminal - happens once

    @classmethod
    def default(cls) -> "Cycle":
        return cls.ONE_TIME

    @property
    def label(self) -> str:
        return _CYCLE_LABELS[self]

    @property
    def is_repeating(self) -> bool:
        return self is not Cycle.ONE_TIME

    def next(self, current: date) -> Optional[date]:
        """
        Date of the occurrence after `current`.

        Returns None for one-time transactions.
        """
        if self is Cycle.DAILY:
            return current + timedelta(days=1)
        if self is Cycle.WEEKLY:
            return current + timedelta(days=7)
        if self is Cycle.MONTHLY:
            return current + relativedelta(months=1)
        if self is Cycle.YEARLY:
            return current + relativedelta(months=12)
        return None


_CYCLE_LABELS: dict[Cycle, str] = {
    Cycle.DAILY: "Daily",
    Cycle.WEEKLY: "Weekly",
    Cycle.MONTHLY: "Monthly",
    Cycle.YEARLY: "Yearly",
    Cycle.ONE_TIME: "One Time",
}
