"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for ledger persistence.
This allows us to:
1. Keep the JSON file store separate from the session logic
2. Swap in another backend later
3. Keep business logic decoupled from storage implementation

The interface is intentionally small: a ledger is always loaded and saved
as one whole document.
"""

from abc import ABC, abstractmethod

from pocketledger.models.data import Data
from pocketledger.models.identity import LedgerIds


class DataStorageInterface(ABC):
    """Where one ledger document lives."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location of the document (for logs)."""
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Check whether a document is currently stored."""
        pass

    @abstractmethod
    def load(self, ids: LedgerIds) -> Data:
        """
        Load the stored document.

        Every wallet and transaction receives a fresh id from `ids`.

        Raises:
            NotFoundError: If nothing is stored
            InvalidDocumentError: If the document can't be decoded
            StorageError: If reading fails
        """
        pass

    @abstractmethod
    def save(self, data: Data) -> bool:
        """
        Store a document, replacing the previous one.

        Returns:
            False without writing anything if `data` is empty,
            True once written

        Raises:
            StorageError: If writing fails
        """
        pass

    @abstractmethod
    def remove(self) -> None:
        """
        Delete the stored document.

        Raises:
            StorageError: If deleting fails
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """No document at the expected location."""
    pass


class InvalidDocumentError(StorageError):
    """The stored bytes are not a valid ledger document."""
    pass
