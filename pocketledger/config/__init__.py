"""Configuration package."""

from pocketledger.config.settings import (
    AppSettings,
    RatesSettings,
    Settings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "RatesSettings",
    "Settings",
    "StorageSettings",
    "get_settings",
    "validate_all_settings",
]
