"""Services package."""

from pocketledger.services.rates import (
    ExchangeRateProvider,
    ExchangeRateService,
    FrankfurterRateProvider,
    RateFetchError,
    StaticRateProvider,
)
from pocketledger.services.storage import (
    DataDirectory,
    DataFile,
    DataStorageInterface,
    InvalidDocumentError,
    NotFoundError,
    StorageError,
)

__all__ = [
    # Rate services
    "ExchangeRateProvider",
    "ExchangeRateService",
    "FrankfurterRateProvider",
    "RateFetchError",
    "StaticRateProvider",
    # Storage services
    "DataDirectory",
    "DataFile",
    "DataStorageInterface",
    "InvalidDocumentError",
    "NotFoundError",
    "StorageError",
]
