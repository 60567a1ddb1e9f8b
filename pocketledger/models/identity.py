"""
Entity Identity

Wallets and transactions get an integer id when they stop being drafts.
Id 0 means "draft, not stored yet".

DESIGN DECISION: Ids are handed out by an injected generator rather than
a hidden global counter. Tests pass a fresh generator and get predictable
ids; the application keeps one generator per kind for the whole process.

Ids are never written to the persisted document. Every load draws fresh
ids, so an id is only meaningful within one process run.
"""

import itertools
import threading
from abc import ABC, abstractmethod
from typing import Optional


DRAFT_ID = 0


class IdGenerator(ABC):
    """Source of process-unique, strictly increasing ids."""

    @abstractmethod
    def next_id(self) -> int:
        """Return an id greater than zero that was never returned before."""
        pass


class CounterIdGenerator(IdGenerator):
    """Thread-safe counter starting at `start`."""

    def __init__(self, start: int = 1):
        if start <= DRAFT_ID:
            raise ValueError("Id counter must start above zero")
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


class LedgerIds:
    """The pair of id generators a ledger needs: one per entity kind."""

    def __init__(
        self,
        wallets: Optional[IdGenerator] = None,
        transactions: Optional[IdGenerator] = None,
    ):
        self.wallets = wallets or CounterIdGenerator()
        self.transactions = transactions or CounterIdGenerator()
