"""
Audit Models for PocketLedger

Significant things that happen outside the pure core (rates fetched, the
ledger file loaded, saved or refused) are recorded as audit events.
This provides:
1. A trail of what was written to disk and when
2. Debugging information when a load or save goes wrong
3. Visibility into why a save was refused

DESIGN DECISION: Events are emitted through structured logging only.
They are not written into the ledger document.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Exchange rates
    RATES_FETCHED = "rates_fetched"
    RATE_FETCH_FAILED = "rate_fetch_failed"

    # Loading
    DATA_FILE_CREATED = "data_file_created"
    DATA_LOADED = "data_loaded"
    DATA_LOAD_FAILED = "data_load_failed"

    # Saving
    DATA_SAVED = "data_saved"
    SAVE_SKIPPED = "save_skipped"
    SAVE_REJECTED = "save_rejected"
    SAVE_FAILED = "save_failed"

    # Cleanup
    INVALID_FILE_REMOVED = "invalid_file_removed"
    INVALID_FILE_REMOVE_FAILED = "invalid_file_remove_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEvent(BaseModel):
    """A single audit event."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # What the event is about, e.g. "ledger_file" + its path
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'ledger_file', 'rates')"
    )
    entity_ref: Optional[str] = Field(
        default=None,
        description="Reference to the entity (file path, provider URL)"
    )

    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., one session)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_ref": self.entity_ref,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.data_saved(path, wallet_count, correlation_id)
    """

    @staticmethod
    def rates_fetched(
        source: str,
        currencies: list[str],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RATES_FETCHED,
            entity_type="rates",
            entity_ref=source,
            correlation_id=correlation_id,
            description=f"Exchange rates loaded for {len(currencies)} currencies",
            details={"currencies": currencies},
        )

    @staticmethod
    def rate_fetch_failed(
        source: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RATE_FETCH_FAILED,
            severity=AuditSeverity.CRITICAL,
            entity_type="rates",
            entity_ref=source,
            correlation_id=correlation_id,
            description="Exchange rates could not be loaded",
            error_message=error_message,
        )

    @staticmethod
    def data_file_created(path: str, correlation_id: Optional[UUID] = None) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DATA_FILE_CREATED,
            entity_type="ledger_file",
            entity_ref=path,
            correlation_id=correlation_id,
            description="Starting a new ledger file",
        )

    @staticmethod
    def data_loaded(
        path: str,
        wallet_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DATA_LOADED,
            entity_type="ledger_file",
            entity_ref=path,
            correlation_id=correlation_id,
            description=f"Ledger loaded with {wallet_count} wallet(s)",
            details={"wallet_count": wallet_count},
        )

    @staticmethod
    def data_load_failed(
        path: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DATA_LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="ledger_file",
            entity_ref=path,
            correlation_id=correlation_id,
            description="Ledger file could not be read",
            error_message=error_message,
        )

    @staticmethod
    def data_saved(
        path: str,
        wallet_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DATA_SAVED,
            entity_type="ledger_file",
            entity_ref=path,
            correlation_id=correlation_id,
            description=f"Ledger saved with {wallet_count} wallet(s)",
            details={"wallet_count": wallet_count},
        )

    @staticmethod
    def save_skipped(
        path: str,
        reason: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_SKIPPED,
            severity=AuditSeverity.DEBUG,
            entity_type="ledger_file",
            entity_ref=path,
            correlation_id=correlation_id,
            description=f"Save skipped: {reason}",
            details={"reason": reason},
        )

    @staticmethod
    def save_rejected(
        path: str,
        issues: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="ledger_file",
            entity_ref=path,
            correlation_id=correlation_id,
            description=f"Save rejected: {len(issues)} validation issue(s)",
            details={"issues": issues},
        )

    @staticmethod
    def save_failed(
        path: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="ledger_file",
            entity_ref=path,
            correlation_id=correlation_id,
            description="Failed to save data",
            error_message=error_message,
        )

    @staticmethod
    def invalid_file_removed(path: str, correlation_id: Optional[UUID] = None) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_FILE_REMOVED,
            severity=AuditSeverity.WARNING,
            entity_type="ledger_file",
            entity_ref=path,
            correlation_id=correlation_id,
            description="Removed invalid file",
        )

    @staticmethod
    def invalid_file_remove_failed(
        path: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_FILE_REMOVE_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="ledger_file",
            entity_ref=path,
            correlation_id=correlation_id,
            description="Failed to remove invalid file",
            error_message=error_message,
        )
