"""Ledger queries package."""

from pocketledger.queries.overview import Overview, WalletSummary, build_overview

__all__ = ["Overview", "WalletSummary", "build_overview"]
