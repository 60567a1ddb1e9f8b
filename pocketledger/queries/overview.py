"""
Ledger Overview

Builds the numbers the overview screen shows: one row per wallet in the
wallet's own currency, plus a grand total in the reporting currency.

DESIGN DECISION: The overview is computed from the same Data value the
session holds, deterministically. Rows are sorted by name for display,
but the ledger's stored wallet order is never touched.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from pocketledger.models.balance import Balance
from pocketledger.models.currency import Currency, ExchangeRates
from pocketledger.models.data import Data
from pocketledger.models.period import Period
from pocketledger.models.wallet import Wallet


class WalletSummary(BaseModel):
    """One overview row."""

    wallet_id: int
    name: str
    currency: Currency
    income: float = Field(..., description="Income in the wallet currency")
    expense: float = Field(..., description="Expense magnitude in the wallet currency")
    net: float
    formatted_net: str = Field(..., description="Net, formatted in the wallet currency")

    @classmethod
    def from_wallet(cls, wallet: Wallet, period: Period, today: date) -> "WalletSummary":
        balance = wallet.for_period(period, today).balance()
        return cls(
            wallet_id=wallet.id,
            name=wallet.name,
            currency=wallet.currency,
            income=balance.income,
            expense=balance.expense,
            net=balance.net_balance,
            formatted_net=wallet.currency.format_amount(balance.net_balance),
        )


class Overview(BaseModel):
    """Per-wallet rows plus the reporting-currency total."""

    currency: Currency
    period: Period
    period_start: date
    period_end: date
    wallets: list[WalletSummary] = Field(default_factory=list)
    total: Balance
    formatted_total: str

    @property
    def wallet_count(self) -> int:
        return len(self.wallets)


def build_overview(
    data: Data,
    rates: ExchangeRates,
    today: Optional[date] = None,
) -> Overview:
    """Summarize `data` over its reporting period."""
    today = today or date.today()
    period_start, period_end = data.period.bounds(today)

    rows = [
        WalletSummary.from_wallet(wallet, data.period, today)
        for wallet in data.wallets_by_name()
    ]
    total = data.total_balance_for_period(rates, today)

    return Overview(
        currency=data.currency,
        period=data.period,
        period_start=period_start,
        period_end=period_end,
        wallets=rows,
        total=total,
        formatted_total=data.currency.format_amount(total.net_balance),
    )
