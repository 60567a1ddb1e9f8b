"""
Ledger Data

The root aggregate: every wallet plus the reporting currency and period
the user picked.

DESIGN DECISION: Data is replaced, never edited in place. Each change
produces a new value which the session then either persists or drops.
An empty Data (no wallets) is not invalid, it is just never written, so a
blank start-up can't overwrite a good file.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pocketledger.models.balance import Balance
from pocketledger.models.currency import Currency, ExchangeRates
from pocketledger.models.period import Period
from pocketledger.models.wallet import Wallet


class Data(BaseModel):
    """All wallets plus reporting preferences."""
    model_config = ConfigDict(frozen=True)

    wallets: list[Wallet] = Field(default_factory=list)
    currency: Currency = Field(
        default_factory=Currency.default,
        description="Currency totals are reported in"
    )
    period: Period = Field(
        default_factory=Period.default,
        description="Window totals are reported over"
    )

    def is_valid(self) -> bool:
        """Safe to persist: at least one wallet and all of them valid."""
        return bool(self.wallets) and all(w.is_valid() for w in self.wallets)

    def is_empty(self) -> bool:
        return not self.wallets

    # =========================================================================
    # Wallet management (copy-on-write)
    # =========================================================================

    def find_wallet_by_id(self, wallet_id: int) -> Optional[Wallet]:
        for wallet in self.wallets:
            if wallet.id == wallet_id:
                return wallet
        return None

    def with_wallet(self, wallet: Wallet) -> "Data":
        """Replace the wallet with the same id, or append it."""
        wallets = list(self.wallets)
        for index, existing in enumerate(wallets):
            if existing.id == wallet.id:
                wallets[index] = wallet
                break
        else:
            wallets.append(wallet)
        return self.model_copy(update={"wallets": wallets})

    def without_wallet(self, wallet_id: int) -> "Data":
        wallets = [w for w in self.wallets if w.id != wallet_id]
        return self.model_copy(update={"wallets": wallets})

    def with_currency(self, currency: Currency) -> "Data":
        return self.model_copy(update={"currency": currency})

    def with_period(self, period: Period) -> "Data":
        return self.model_copy(update={"period": period})

    def wallets_by_name(self) -> list[Wallet]:
        """Wallets in display order. The stored order is left alone."""
        return sorted(self.wallets, key=lambda w: w.name.casefold())

    # =========================================================================
    # Aggregation
    # =========================================================================

    def wallets_for_period(self, today: Optional[date] = None) -> list[Wallet]:
        today = today or date.today()
        return [w.for_period(self.period, today) for w in self.wallets]

    def total_balance_for_period(
        self,
        rates: ExchangeRates,
        today: Optional[date] = None,
    ) -> Balance:
        """
        Total over every wallet, in the reporting currency and period.

        Each wallet is projected onto the period, converted, and reduced
        to a balance; the balances are then joined.
        """
        total = Balance.zero()
        for wallet in self.wallets_for_period(today):
            converted = wallet.convert_to_currency(self.currency, rates)
            total = total.join(converted.balance())
        return total
