"""
Data Models Package

This package contains the ledger entities (currencies, cycles, periods,
transactions, wallets and the root Data aggregate) plus the audit and
validation models built around them.
"""

from pocketledger.models.currency import Currency, ExchangeRates
from pocketledger.models.cycle import Cycle
from pocketledger.models.period import EPOCH, Period
from pocketledger.models.identity import (
    DRAFT_ID,
    CounterIdGenerator,
    IdGenerator,
    LedgerIds,
)
from pocketledger.models.transaction import (
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    Transaction,
)
from pocketledger.models.balance import Balance
from pocketledger.models.wallet import Wallet
from pocketledger.models.data import Data
from pocketledger.models.validation import ValidationIssue, ValidationResult
from pocketledger.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "Balance",
    "Currency",
    "Cycle",
    "Data",
    "EPOCH",
    "ExchangeRates",
    "Period",
    "Transaction",
    "Wallet",
    # Identity
    "CounterIdGenerator",
    "DRAFT_ID",
    "IdGenerator",
    "LedgerIds",
    # Limits
    "DESCRIPTION_MAX_LENGTH",
    "NAME_MAX_LENGTH",
    # Validation models
    "ValidationIssue",
    "ValidationResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
