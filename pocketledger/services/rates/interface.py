"""
Abstract Exchange Rate Provider

DESIGN DECISION: Rates come from a provider behind a small interface.
This allows us to:
1. Use the live Frankfurter service in the application
2. Use fixed rates in tests and offline runs
3. Swap the upstream service without touching conversion code
"""

from abc import ABC, abstractmethod
from typing import Mapping

from pocketledger.models.currency import ExchangeRates


class RateFetchError(Exception):
    """
    Exchange rates could not be obtained.

    Conversion is impossible without rates, so this is fatal at startup.
    """
    pass


class ExchangeRateProvider(ABC):
    """Source of a full exchange rate table relative to EUR."""

    @property
    @abstractmethod
    def source(self) -> str:
        """Short description of where the rates come from (for logs)."""
        pass

    @abstractmethod
    def fetch_rates(self) -> ExchangeRates:
        """
        Fetch the current rate table.

        Raises:
            RateFetchError: If the rates can't be obtained or are incomplete
        """
        pass


class StaticRateProvider(ExchangeRateProvider):
    """Serves a fixed table. Used for tests and offline runs."""

    def __init__(self, rates: Mapping[str, float]):
        self._raw = dict(rates)

    @property
    def source(self) -> str:
        return "static"

    def fetch_rates(self) -> ExchangeRates:
        try:
            return ExchangeRates.from_mapping(self._raw)
        except ValueError as e:
            raise RateFetchError(f"Static rate table is incomplete: {e}") from e
