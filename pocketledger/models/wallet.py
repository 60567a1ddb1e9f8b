"""
Wallet Model

A wallet is a named list of transactions in one currency. It owns its
transactions: a transaction belongs to exactly one wallet.

The list order is the order the user added things in. Balances do not
depend on it, but display does, so every operation preserves it.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pocketledger.models.balance import Balance
from pocketledger.models.currency import Currency, ExchangeRates
from pocketledger.models.identity import DRAFT_ID, IdGenerator
from pocketledger.models.period import Period
from pocketledger.models.transaction import (
    Transaction,
    is_valid_description,
    is_valid_name,
)


class Wallet(BaseModel):
    """A named collection of transactions sharing one currency."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        default=DRAFT_ID,
        ge=0,
        description="Process-scoped id, 0 while the wallet is a draft"
    )
    name: str = Field(default="", description="Wallet name")
    description: Optional[str] = Field(default=None, description="Optional note")
    currency: Currency = Field(
        default_factory=Currency.default,
        description="Currency every amount in this wallet is expressed in"
    )
    transactions: list[Transaction] = Field(default_factory=list)

    def is_created(self) -> bool:
        return self.id != DRAFT_ID

    def assign_global_id(self, ids: IdGenerator) -> "Wallet":
        """Promote a draft to a stored entity. No-op if it already has an id."""
        if self.is_created():
            return self
        return self.model_copy(update={"id": ids.next_id()})

    def is_valid(self) -> bool:
        return (
            is_valid_name(self.name)
            and is_valid_description(self.description)
            and all(t.is_valid() for t in self.transactions)
        )

    def is_different(self, other: "Wallet") -> bool:
        """Compare user-editable fields and transactions, ignoring ids."""
        if (
            self.name != other.name
            or self.description != other.description
            or self.currency != other.currency
            or len(self.transactions) != len(other.transactions)
        ):
            return True
        return any(
            mine.is_different(theirs)
            for mine, theirs in zip(self.transactions, other.transactions)
        )

    # =========================================================================
    # Transaction management (copy-on-write)
    # =========================================================================

    def find_transaction_by_id(self, transaction_id: int) -> Optional[Transaction]:
        for transaction in self.transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    def with_transaction(self, transaction: Transaction) -> "Wallet":
        """Replace the transaction with the same id, or append it."""
        transactions = list(self.transactions)
        for index, existing in enumerate(transactions):
            if existing.id == transaction.id:
                transactions[index] = transaction
                break
        else:
            transactions.append(transaction)
        return self.model_copy(update={"transactions": transactions})

    def without_transaction(self, transaction_id: int) -> "Wallet":
        transactions = [t for t in self.transactions if t.id != transaction_id]
        return self.model_copy(update={"transactions": transactions})

    # =========================================================================
    # Aggregation
    # =========================================================================

    def balance(self) -> Balance:
        """Raw ledger total over every transaction, not filtered by period."""
        return Balance.from_transactions(self.transactions)

    def for_period(self, period: Period, today: Optional[date] = None) -> "Wallet":
        """Copy with every transaction projected onto `period`."""
        today = today or date.today()
        projected = [t.for_period(period, today) for t in self.transactions]
        return self.model_copy(update={"transactions": projected})

    def convert_to_currency(self, target: Currency, rates: ExchangeRates) -> "Wallet":
        """Copy with every amount converted to `target`."""
        converted = [
            t.with_amount(rates.convert_amount(t.amount, self.currency, target))
            for t in self.transactions
        ]
        return self.model_copy(update={"currency": target, "transactions": converted})

    def __str__(self) -> str:
        return self.name
