"""
Ledger Document Codec

Translates between the in-memory Data aggregate and the persisted JSON
document:

    {"wallets": [...], "currency": "USD", "period": "all"}
    wallet:      {"name", "description"?, "currency", "transactions": [...]}
    transaction: {"name", "description"?, "amount", "cycle",
                  "start_date": "YYYY-MM-DD", "end_date"?: "YYYY-MM-DD"}

Ids are not part of the document. Loading draws a fresh id for every
wallet and transaction, so ids only mean something within one process run.

Absent optional fields are omitted when writing; null is accepted when
reading. Amounts must be finite JSON numbers both ways.
"""

import math
import re
from datetime import date, datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from pocketledger.models.currency import Currency
from pocketledger.models.cycle import Cycle
from pocketledger.models.data import Data
from pocketledger.models.identity import LedgerIds
from pocketledger.models.period import Period
from pocketledger.models.transaction import Transaction
from pocketledger.models.wallet import Wallet
from pocketledger.services.storage.interface import InvalidDocumentError


DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class TransactionRecord(BaseModel):
    """A transaction as stored on disk."""
    model_config = ConfigDict(extra="ignore")

    name: str
    description: Optional[str] = None
    amount: float = Field(strict=True)
    cycle: Cycle
    start_date: date
    end_date: Optional[date] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_iso_date(cls, v):
        """Only strict YYYY-MM-DD strings are accepted."""
        if v is None:
            return v
        if not isinstance(v, str) or not _DATE_PATTERN.fullmatch(v):
            raise ValueError(f"Date must be a YYYY-MM-DD string, got {v!r}")
        return datetime.strptime(v, DATE_FORMAT).date()

    @model_validator(mode="after")
    def validate_date_range(self) -> "TransactionRecord":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("End date cannot be before start date")
        return self

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionRecord":
        # Values are already typed; the string-only date parser must not run
        return cls.model_construct(
            name=transaction.name,
            description=transaction.description,
            amount=transaction.amount,
            cycle=transaction.cycle,
            start_date=transaction.start_date,
            end_date=transaction.end_date,
        )

    def to_transaction(self, ids: LedgerIds) -> Transaction:
        return Transaction(
            id=ids.transactions.next_id(),
            name=self.name,
            description=self.description,
            amount=self.amount,
            cycle=self.cycle,
            start_date=self.start_date,
            end_date=self.end_date,
        )


class WalletRecord(BaseModel):
    """A wallet as stored on disk."""
    model_config = ConfigDict(extra="ignore")

    name: str
    description: Optional[str] = None
    currency: Currency
    transactions: list[TransactionRecord]

    @classmethod
    def from_wallet(cls, wallet: Wallet) -> "WalletRecord":
        return cls.model_construct(
            name=wallet.name,
            description=wallet.description,
            currency=wallet.currency,
            transactions=[TransactionRecord.from_transaction(t) for t in wallet.transactions],
        )

    def to_wallet(self, ids: LedgerIds) -> Wallet:
        transactions = [record.to_transaction(ids) for record in self.transactions]
        return Wallet(
            id=ids.wallets.next_id(),
            name=self.name,
            description=self.description,
            currency=self.currency,
            transactions=transactions,
        )


class LedgerDocument(BaseModel):
    """The whole persisted document."""
    model_config = ConfigDict(extra="ignore")

    wallets: list[WalletRecord]
    currency: Currency
    period: Period

    @classmethod
    def from_data(cls, data: Data) -> "LedgerDocument":
        return cls.model_construct(
            wallets=[WalletRecord.from_wallet(w) for w in data.wallets],
            currency=data.currency,
            period=data.period,
        )

    def to_data(self, ids: LedgerIds) -> Data:
        return Data(
            wallets=[record.to_wallet(ids) for record in self.wallets],
            currency=self.currency,
            period=self.period,
        )


def load_data(raw: Union[bytes, str], ids: LedgerIds) -> Data:
    """
    Decode a persisted document.

    Raises:
        InvalidDocumentError: On malformed JSON, unknown currency/cycle/period
            values, missing fields, bad dates, or an end date before the
            start date
    """
    try:
        document = LedgerDocument.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidDocumentError(f"Invalid ledger document: {e}") from e
    return document.to_data(ids)


def dump_data(data: Data) -> bytes:
    """
    Encode a Data value as a UTF-8 JSON document.

    Raises:
        InvalidDocumentError: If an amount is NaN or infinite, since JSON
            has no way to store it and the written file would not load
    """
    for wallet in data.wallets:
        for transaction in wallet.transactions:
            if not math.isfinite(transaction.amount):
                raise InvalidDocumentError(
                    f"Transaction {transaction.name!r} in wallet {wallet.name!r} "
                    f"has a non-finite amount: {transaction.amount}"
                )
    document = LedgerDocument.from_data(data)
    return document.model_dump_json(exclude_none=True).encode("utf-8")
