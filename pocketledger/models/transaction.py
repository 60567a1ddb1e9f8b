"""
Transaction Model

A transaction is a single movement of money that either happens once or
repeats on a cycle. The sign of the amount says which way it goes:
zero or more is income, below zero is an expense.

DESIGN DECISION: Construction never rejects a transaction on business
grounds. A draft with an empty name or a zero amount is a perfectly good
value while the user is still editing it. is_valid() is the gate callers
check before persisting.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pocketledger.models.cycle import Cycle
from pocketledger.models.identity import DRAFT_ID, IdGenerator
from pocketledger.models.period import Period


NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


def is_valid_name(name: str) -> bool:
    return bool(name.strip()) and len(name) <= NAME_MAX_LENGTH


def is_valid_description(description: Optional[str]) -> bool:
    return description is None or len(description) <= DESCRIPTION_MAX_LENGTH


class Transaction(BaseModel):
    """
    A one-off or recurring income/expense.

    Without an end date a repeating transaction keeps going up to today.
    A one-time transaction ignores a valid end date. An end date before
    the start date leaves it with no occurrences at all.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        default=DRAFT_ID,
        ge=0,
        description="Process-scoped id, 0 while the transaction is a draft"
    )
    name: str = Field(
        default="",
        description="Short label shown in lists"
    )
    description: Optional[str] = Field(
        default=None,
        description="Optional free-text note"
    )
    amount: float = Field(
        default=0.0,
        description="Signed amount per occurrence (>= 0 income, < 0 expense)"
    )
    cycle: Cycle = Field(
        default_factory=Cycle.default,
        description="How often the transaction repeats"
    )
    start_date: date = Field(
        default_factory=date.today,
        description="Date of the first occurrence"
    )
    end_date: Optional[date] = Field(
        default=None,
        description="Last date an occurrence may fall on"
    )

    # =========================================================================
    # Identity
    # =========================================================================

    def is_created(self) -> bool:
        return self.id != DRAFT_ID

    def assign_global_id(self, ids: IdGenerator) -> "Transaction":
        """Promote a draft to a stored entity. No-op if it already has an id."""
        if self.is_created():
            return self
        return self.model_copy(update={"id": ids.next_id()})

    # =========================================================================
    # Validation
    # =========================================================================

    def is_income(self) -> bool:
        return self.amount >= 0.0

    def is_expense(self) -> bool:
        return self.amount < 0.0

    def is_valid(self) -> bool:
        """Check whether this transaction may be persisted."""
        if not is_valid_name(self.name):
            return False
        if not is_valid_description(self.description):
            return False
        if self.amount == 0.0:
            return False
        if self.end_date is not None and self.end_date < self.start_date:
            return False
        return True

    def is_different(self, other: "Transaction") -> bool:
        """Compare every user-editable field, ignoring the id."""
        return (
            self.name != other.name
            or self.description != other.description
            or self.amount != other.amount
            or self.cycle != other.cycle
            or self.start_date != other.start_date
            or self.end_date != other.end_date
        )

    # =========================================================================
    # Occurrence expansion
    # =========================================================================

    def occurrences_in_period(
        self,
        period: Period,
        today: Optional[date] = None,
    ) -> Optional[list[date]]:
        """
        List the dates this transaction occurs on within `period`.

        Returns None when the transaction has not started yet, which is
        different from an empty list (started, but nothing in range).
        """
        today = today or date.today()
        if self.start_date > today:
            return None

        period_start, period_end = period.bounds(today)
        last_allowed = self.end_date or today
        occurrences: list[date] = []

        current: Optional[date] = self.start_date
        while current is not None:
            if current > last_allowed or current > period_end:
                # Occurrences only move forward, nothing later can match
                break
            if current >= period_start:
                occurrences.append(current)
            current = self.cycle.next(current)

        return occurrences

    def count_occurrences_in_period(
        self,
        period: Period,
        today: Optional[date] = None,
    ) -> Optional[int]:
        occurrences = self.occurrences_in_period(period, today)
        if occurrences is None:
            return None
        return len(occurrences)

    def for_period(
        self,
        period: Period,
        today: Optional[date] = None,
    ) -> "Transaction":
        """
        Project this transaction onto a period.

        The copy's amount is the total over every occurrence in the period
        (0.0 if there is none). Only used for reporting, never persisted.
        """
        count = self.count_occurrences_in_period(period, today) or 0
        return self.model_copy(update={"amount": self.amount * count})

    def with_amount(self, amount: float) -> "Transaction":
        return self.model_copy(update={"amount": amount})
