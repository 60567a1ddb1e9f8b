"""
Storage Services Package

Provides the abstract storage interface, the JSON document codec and the
local file implementation.
"""

from pocketledger.services.storage.interface import (
    DataStorageInterface,
    InvalidDocumentError,
    NotFoundError,
    StorageError,
)
from pocketledger.services.storage.codec import (
    LedgerDocument,
    TransactionRecord,
    WalletRecord,
    dump_data,
    load_data,
)
from pocketledger.services.storage.local_file import DataDirectory, DataFile

__all__ = [
    # Interfaces
    "DataStorageInterface",
    # Exceptions
    "InvalidDocumentError",
    "NotFoundError",
    "StorageError",
    # Codec
    "LedgerDocument",
    "TransactionRecord",
    "WalletRecord",
    "dump_data",
    "load_data",
    # Local file implementation
    "DataDirectory",
    "DataFile",
]
