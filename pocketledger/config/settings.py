"""
Configuration Management for PocketLedger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
This makes it easy to see what external dependencies exist (the rate
service, the data directory) and ensures configuration is validated at
startup.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pocketledger.models.currency import Currency
from pocketledger.models.period import Period


def _default_data_dir() -> Path:
    return Path.home() / ".local" / "share" / "pocketledger"


class RatesSettings(BaseSettings):
    """Exchange rate service configuration."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETLEDGER_RATES_",
        extra="ignore"
    )

    url: str = Field(
        default="https://api.frankfurter.app/latest",
        description="Endpoint returning {'rates': {CODE: rate}} with EUR as base"
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Timeout for a single request"
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts before the fetch is considered failed"
    )
    backoff_min_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Minimum wait between attempts"
    )
    backoff_max_seconds: float = Field(
        default=8.0,
        ge=0,
        description="Maximum wait between attempts"
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Only plain HTTP(S) endpoints make sense here."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Rate service URL must be http(s): {v}")
        return v


class StorageSettings(BaseSettings):
    """Local ledger file storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETLEDGER_STORAGE_",
        extra="ignore"
    )

    data_dir: Path = Field(
        default_factory=_default_data_dir,
        description="Directory holding the ledger JSON files"
    )
    app_name: str = Field(
        default="pocketledger",
        min_length=1,
        pattern=r"^[A-Za-z0-9_\-]+$",
        description="Name embedded in ledger file names (data.<app_name>.json)"
    )

    @field_validator("data_dir")
    @classmethod
    def expand_data_dir(cls, v: Path) -> Path:
        return v.expanduser()


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POCKETLEDGER_",
        extra="ignore"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Minimum level for local logs"
    )

    # Defaults for a brand new ledger
    default_currency: Currency = Field(
        default=Currency.USD,
        description="Reporting currency of a new ledger"
    )
    default_period: Period = Field(
        default=Period.ALL,
        description="Reporting period of a new ledger"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Sub-settings are loaded lazily to allow partial configuration

    @property
    def rates(self) -> RatesSettings:
        return RatesSettings()

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    "<setting_name>_error" entry for each failure.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    for name in ("rates", "storage", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
