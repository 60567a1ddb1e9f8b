"""
PocketLedger - Personal Finance Tracker

Tracks wallets of one-off and recurring transactions, and reports
income, expense and net balance over a chosen period in a chosen
currency.

DESIGN PRINCIPLES:
1. The ledger core is pure: immutable values in, immutable values out
2. Fail early, fail visibly (missing exchange rates stop startup)
3. No silent corrections: invalid data is refused, never repaired
4. Every load and save is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "PocketLedger Team"
