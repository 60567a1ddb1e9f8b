"""
Audit Logger

DESIGN DECISION: Every significant action outside the pure core is logged.
This provides:
1. Traceability of what was written to the ledger file
2. Debugging capability when a load or save goes wrong
3. A clear record of why a save was refused

The audit logger:
- Is synchronous, like everything else in the ledger core
- Only logs locally (structured JSON through the stdlib logging tree)
- Supports correlation IDs to trace related events
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

import structlog

from pocketledger.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """Route structlog output to stderr at the given stdlib level."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))
    logging.getLogger("pocketledger").setLevel(level.upper())


def get_logger(name: str = "pocketledger"):
    return structlog.get_logger(name)


class AuditLogger:
    """Central audit logging service."""

    def __init__(self, correlation_id: Optional[UUID] = None):
        """
        Initialize audit logger.

        Args:
            correlation_id: Attached to every event logged through this
                    instance unless the event carries its own.
        """
        self._correlation_id = correlation_id
        self._logger = get_logger("pocketledger.audit")

    @property
    def correlation_id(self) -> Optional[UUID]:
        return self._correlation_id

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at the level matching its severity."""
        if event.correlation_id is None and self._correlation_id is not None:
            event = event.model_copy(update={"correlation_id": self._correlation_id})

        log_dict = event.to_log_dict()

        if event.severity in (AuditSeverity.ERROR, AuditSeverity.CRITICAL):
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_rates_fetched(self, source: str, currencies: list[str]) -> None:
        self.log(AuditEventBuilder.rates_fetched(source=source, currencies=currencies))

    def log_rate_fetch_failed(self, source: str, error_message: str) -> None:
        self.log(AuditEventBuilder.rate_fetch_failed(
            source=source,
            error_message=error_message,
        ))

    def log_data_file_created(self, path: str) -> None:
        self.log(AuditEventBuilder.data_file_created(path=path))

    def log_data_loaded(self, path: str, wallet_count: int) -> None:
        self.log(AuditEventBuilder.data_loaded(path=path, wallet_count=wallet_count))

    def log_data_load_failed(self, path: str, error_message: str) -> None:
        self.log(AuditEventBuilder.data_load_failed(
            path=path,
            error_message=error_message,
        ))

    def log_data_saved(self, path: str, wallet_count: int) -> None:
        self.log(AuditEventBuilder.data_saved(path=path, wallet_count=wallet_count))

    def log_save_skipped(self, path: str, reason: str) -> None:
        self.log(AuditEventBuilder.save_skipped(path=path, reason=reason))

    def log_save_rejected(self, path: str, issues: list[dict]) -> None:
        self.log(AuditEventBuilder.save_rejected(path=path, issues=issues))

    def log_save_failed(self, path: str, error_message: str) -> None:
        self.log(AuditEventBuilder.save_failed(path=path, error_message=error_message))

    def log_invalid_file_removed(self, path: str) -> None:
        self.log(AuditEventBuilder.invalid_file_removed(path=path))

    def log_invalid_file_remove_failed(self, path: str, error_message: str) -> None:
        self.log(AuditEventBuilder.invalid_file_remove_failed(
            path=path,
            error_message=error_message,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a session and pass it to the AuditLogger.
    """
    return uuid4()
