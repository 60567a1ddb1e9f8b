"""
Main Orchestrator for PocketLedger

This module ties together storage, validation, exchange rates and audit
logging, and defines the two flows around the pure ledger core:
1. Startup (settings -> rates -> most recent ledger file -> session)
2. Commit (changed Data -> validate -> save, skip, or refuse)

DESIGN DECISION: The session enforces the persistence rules:
- Nothing is written unless the data actually changed
- An empty ledger is never written, so it can't erase a good file
- An invalid ledger is never written; the stored file is re-checked and
  removed if it turns out to be unreadable
- Every outcome is audited
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from pocketledger.audit import AuditLogger, configure_logging, create_correlation_id
from pocketledger.config import Settings, get_settings
from pocketledger.models.data import Data
from pocketledger.models.identity import LedgerIds
from pocketledger.models.validation import ValidationResult
from pocketledger.services.rates import (
    ExchangeRateProvider,
    ExchangeRateService,
    FrankfurterRateProvider,
)
from pocketledger.services.storage import (
    DataDirectory,
    DataStorageInterface,
    StorageError,
)
from pocketledger.validation import LedgerValidator


class CommitOutcome(str, Enum):
    """What commit() did with the session's data."""
    UNCHANGED = "unchanged"          # Nothing to do
    SKIPPED_EMPTY = "skipped_empty"  # Empty ledgers are never written
    SAVED = "saved"
    REJECTED = "rejected"            # Invalid data, nothing written
    FAILED = "failed"                # Storage error while writing


class CommitResult(BaseModel):
    """Result of committing a session."""

    outcome: CommitOutcome
    validation: Optional[ValidationResult] = None
    removed_invalid_file: bool = False
    error_message: Optional[str] = None

    @property
    def saved(self) -> bool:
        return self.outcome == CommitOutcome.SAVED


class LedgerSession:
    """
    Holds the current ledger and decides whether it gets persisted.

    Flow:
    1. Start with data loaded from storage (or a fresh Data)
    2. Replace the data as the user edits (whole-value replacement)
    3. commit() - validate and either save, skip or refuse
    """

    def __init__(
        self,
        storage: DataStorageInterface,
        ids: LedgerIds,
        data: Optional[Data] = None,
        validator: Optional[LedgerValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage
        self._ids = ids
        self._data = data if data is not None else Data()
        self._validator = validator or LedgerValidator()
        self._audit_logger = audit_logger or AuditLogger()
        self._changed = False

    @property
    def data(self) -> Data:
        return self._data

    @property
    def ids(self) -> LedgerIds:
        return self._ids

    @property
    def storage(self) -> DataStorageInterface:
        return self._storage

    @property
    def has_changes(self) -> bool:
        return self._changed

    def replace_data(self, data: Data) -> None:
        """Swap in a new ledger value and mark the session as changed."""
        self._data = data
        self._changed = True

    def commit(self) -> CommitResult:
        """
        Persist the current data if it changed and is saveable.

        Returns a CommitResult; storage failures are reported in it
        rather than raised.
        """
        location = self._storage.location

        if not self._changed:
            return CommitResult(outcome=CommitOutcome.UNCHANGED)

        if self._data.is_empty():
            self._audit_logger.log_save_skipped(path=location, reason="empty ledger")
            return CommitResult(outcome=CommitOutcome.SKIPPED_EMPTY)

        validation = self._validator.validate_data(self._data)
        if not validation.is_valid:
            self._audit_logger.log_save_rejected(
                path=location,
                issues=[issue.model_dump() for issue in validation.issues],
            )
            removed = self._discard_unreadable_file()
            return CommitResult(
                outcome=CommitOutcome.REJECTED,
                validation=validation,
                removed_invalid_file=removed,
            )

        try:
            self._storage.save(self._data)
        except StorageError as e:
            self._audit_logger.log_save_failed(path=location, error_message=str(e))
            return CommitResult(
                outcome=CommitOutcome.FAILED,
                validation=validation,
                error_message=str(e),
            )

        self._audit_logger.log_data_saved(path=location, wallet_count=len(self._data.wallets))
        self._changed = False
        return CommitResult(outcome=CommitOutcome.SAVED, validation=validation)

    def _discard_unreadable_file(self) -> bool:
        """
        Re-read the stored document after a refused save.

        If it can't be decoded either, remove it. Returns True if a file
        was removed.
        """
        location = self._storage.location
        if not self._storage.exists():
            return False

        try:
            self._storage.load(LedgerIds())
            return False
        except StorageError as load_error:
            self._audit_logger.log_data_load_failed(path=location, error_message=str(load_error))

        try:
            self._storage.remove()
        except StorageError as e:
            self._audit_logger.log_invalid_file_remove_failed(path=location, error_message=str(e))
            return False

        self._audit_logger.log_invalid_file_removed(path=location)
        return True


def open_session(
    settings: Optional[Settings] = None,
    ids: Optional[LedgerIds] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> LedgerSession:
    """
    Open the most recent valid ledger in the configured data directory.

    Without one, a new file name is reserved and the session starts from
    an empty ledger with the configured default currency and period.
    """
    settings = settings or get_settings()
    ids = ids or LedgerIds()
    audit_logger = audit_logger or AuditLogger()

    storage_settings = settings.storage
    app_settings = settings.app

    directory = DataDirectory(storage_settings.data_dir, storage_settings.app_name)
    directory.ensure_exists()

    data_file = directory.find_most_recent_data_file()
    if data_file is not None:
        data = data_file.load(ids)
        audit_logger.log_data_loaded(path=data_file.location, wallet_count=len(data.wallets))
    else:
        data_file = directory.create_new_data_file()
        data = Data(
            currency=app_settings.default_currency,
            period=app_settings.default_period,
        )
        audit_logger.log_data_file_created(path=data_file.location)

    return LedgerSession(
        storage=data_file,
        ids=ids,
        data=data,
        audit_logger=audit_logger,
    )


def create_app_components(
    settings: Optional[Settings] = None,
    rate_provider: Optional[ExchangeRateProvider] = None,
    ids: Optional[LedgerIds] = None,
) -> tuple[LedgerSession, ExchangeRateService]:
    """
    Factory function to create all application components.

    Rates are fetched right here, so an unreachable rate service fails
    startup instead of a later conversion.

    Args:
        settings: Application settings. Defaults to the cached global settings.
        rate_provider: Where rates come from. Defaults to the Frankfurter API.
        ids: Id generators for wallets and transactions.

    Returns:
        (session, rate_service)

    Raises:
        RateFetchError: If exchange rates can't be loaded
        StorageError: If the data directory can't be prepared or read
    """
    settings = settings or get_settings()
    configure_logging(settings.app.log_level)

    audit_logger = AuditLogger(correlation_id=create_correlation_id())

    provider = rate_provider or FrankfurterRateProvider(settings.rates)
    rate_service = ExchangeRateService(provider, audit_logger=audit_logger)
    rate_service.get_rates()

    session = open_session(settings=settings, ids=ids, audit_logger=audit_logger)
    return session, rate_service
