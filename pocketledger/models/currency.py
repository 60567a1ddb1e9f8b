"""
Currencies and Exchange Rates

Every wallet holds its amounts in exactly one currency. Reports convert
them into the reporting currency using a table of rates relative to EUR.

DESIGN DECISION: The rate table is a plain immutable value handed around
explicitly. Nothing in this module talks to the network; fetching rates is
the job of the rate service (see pocketledger.services.rates).

ROUNDING POLICY: amounts are rounded half away from zero on the shortest
decimal representation of the float. So 2.675 becomes 2.68 (not the 2.67
that binary rounding would give) and -0.125 becomes -0.13. JPY rounds to
whole yen, every other currency to the cent.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Wide enough to quantize any finite float to the cent.
_ROUNDING_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)

_CENT = Decimal("0.01")
_UNIT = Decimal("1")


class Currency(str, Enum):
    """
    Supported currencies.

    The value is the ISO code, which is also what the persisted
    document stores.
    """
    USD = "USD"
    EUR = "EUR"
    CAD = "CAD"
    GBP = "GBP"
    JPY = "JPY"

    @classmethod
    def default(cls) -> "Currency":
        return cls.USD

    @classmethod
    def parse(cls, text: str) -> "Currency":
        """Parse a currency code, ignoring case and surrounding whitespace."""
        return cls(text.strip().upper())

    @property
    def symbol(self) -> str:
        return _CURRENCY_INFO[self][0]

    @property
    def short_name(self) -> str:
        return self.value

    @property
    def long_name(self) -> str:
        return _CURRENCY_INFO[self][1]

    @property
    def has_fraction(self) -> bool:
        """Whether amounts in this currency carry cents."""
        return self is not Currency.JPY

    def _quantum(self) -> Decimal:
        return _CENT if self.has_fraction else _UNIT

    def normalize_amount(self, amount: float) -> float:
        """
        Round an amount to this currency's smallest unit.

        Non-finite input normalizes to 0.0.
        """
        if not math.isfinite(amount):
            return 0.0
        return float(_round_half_away(amount, self._quantum()))

    def format_amount(self, value: float) -> str:
        """
        Render an amount for display.

        Examples: USD 1234.5 -> "$1 234.50", EUR -70 -> "-€70.00",
        JPY 1234567.5 -> "1 234 568". Non-finite values render as "N/A".
        """
        if not math.isfinite(value):
            return "N/A"

        sign = "-" if value < 0 else ""
        magnitude = _round_half_away(abs(value), self._quantum())
        whole, _, fraction = f"{magnitude:f}".partition(".")
        grouped = _group_thousands(whole)

        if not self.has_fraction:
            return f"{sign}{grouped}"
        return f"{sign}{self.symbol}{grouped}.{fraction}"


_CURRENCY_INFO: dict[Currency, tuple[str, str]] = {
    Currency.USD: ("$", "US Dollar"),
    Currency.EUR: ("€", "Euro"),
    Currency.CAD: ("$", "Canadian Dollar"),
    Currency.GBP: ("£", "Pound Sterling"),
    Currency.JPY: ("¥", "Japanese Yen"),
}


def _round_half_away(value: float, quantum: Decimal) -> Decimal:
    return Decimal(repr(value)).quantize(quantum, context=_ROUNDING_CONTEXT)


def _group_thousands(digits: str) -> str:
    return f"{int(digits):,}".replace(",", " ")


class ExchangeRates(BaseModel):
    """
    Immutable table of exchange rates relative to EUR.

    rate(X) is how many units of X one euro buys. EUR is always 1.0,
    whatever the source said.
    """
    model_config = ConfigDict(frozen=True)

    rates: dict[Currency, float] = Field(
        ...,
        description="Units of each currency per one EUR"
    )

    @field_validator("rates")
    @classmethod
    def validate_rates(cls, v: dict[Currency, float]) -> dict[Currency, float]:
        """Every currency needs a usable rate; EUR is pinned to 1.0."""
        rates = dict(v)
        rates[Currency.EUR] = 1.0
        for currency in Currency:
            rate = rates.get(currency)
            if rate is None:
                raise ValueError(f"Missing exchange rate for {currency.value}")
            if not math.isfinite(rate) or rate <= 0:
                raise ValueError(f"Invalid exchange rate for {currency.value}: {rate}")
        return rates

    @classmethod
    def from_mapping(cls, raw: Mapping[str, float]) -> "ExchangeRates":
        """Build a table from code -> rate pairs, ignoring unknown codes."""
        known = {currency.value for currency in Currency}
        rates = {
            Currency(code): float(rate)
            for code, rate in raw.items()
            if code in known
        }
        return cls(rates=rates)

    def rate(self, currency: Currency) -> float:
        if currency is Currency.EUR:
            return 1.0
        return self.rates[currency]

    def convert_amount(
        self,
        amount: float,
        source: Currency,
        target: Currency,
    ) -> float:
        """
        Convert an amount between currencies.

        Same-currency conversions and non-finite amounts pass through
        untouched. Anything else is rounded to the target's smallest unit.
        """
        if source == target or not math.isfinite(amount):
            return amount
        converted = amount * (self.rate(target) / self.rate(source))
        return target.normalize_amount(converted)
