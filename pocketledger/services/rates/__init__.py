"""Exchange rate services package."""

from pocketledger.services.rates.interface import (
    ExchangeRateProvider,
    RateFetchError,
    StaticRateProvider,
)
from pocketledger.services.rates.frankfurter import FrankfurterRateProvider
from pocketledger.services.rates.service import ExchangeRateService

__all__ = [
    "ExchangeRateProvider",
    "ExchangeRateService",
    "FrankfurterRateProvider",
    "RateFetchError",
    "StaticRateProvider",
]
