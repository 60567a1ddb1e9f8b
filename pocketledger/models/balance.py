"""
Balance Model

Income and expense are kept as two separate non-negative totals.
Expenses are stored as magnitudes, so net = income - expense.
"""

import math
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from pocketledger.models.transaction import Transaction


class Balance(BaseModel):
    """Income/expense totals. Joining balances is plain addition."""
    model_config = ConfigDict(frozen=True)

    income: float = Field(default=0.0, description="Sum of incoming amounts")
    expense: float = Field(default=0.0, description="Sum of outgoing magnitudes")

    @classmethod
    def zero(cls) -> "Balance":
        return cls()

    @classmethod
    def from_transactions(cls, transactions: Iterable[Transaction]) -> "Balance":
        """
        Fold transactions into a balance.

        Amounts >= 0 count as income, negative amounts add their
        magnitude to expense. Each transaction lands in exactly one bucket.
        """
        income = 0.0
        expense = 0.0
        for transaction in transactions:
            if transaction.amount >= 0.0:
                income += transaction.amount
            else:
                expense += abs(transaction.amount)
        return cls(income=income, expense=expense)

    @property
    def net_balance(self) -> float:
        return self.income - self.expense

    def join(self, other: "Balance") -> "Balance":
        return Balance(
            income=self.income + other.income,
            expense=self.expense + other.expense,
        )

    def __add__(self, other: "Balance") -> "Balance":
        if not isinstance(other, Balance):
            return NotImplemented
        return self.join(other)

    @staticmethod
    def format_value(value: float, prefix_sign: bool) -> str:
        """
        Two-decimal rendering without a currency symbol.

        With prefix_sign, non-negative values get "+" and negative ones
        "-"; without it the sign is dropped entirely.
        """
        if not math.isfinite(value):
            return "N/A"
        if prefix_sign:
            prefix = "+" if value >= 0.0 else "-"
        else:
            prefix = ""
        whole, _, fraction = f"{abs(value):.2f}".partition(".")
        grouped = f"{int(whole):,}".replace(",", " ")
        return f"{prefix}{grouped}.{fraction}"

    def formatted_balance(self) -> str:
        return self.format_value(self.net_balance, prefix_sign=True)

    def __str__(self) -> str:
        return self.formatted_balance()
