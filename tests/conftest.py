"""
Shared fixtures for PocketLedger tests.

Test strategy:
1. Unit tests for the pure ledger core (fixed dates, fixed rates)
2. Storage and session tests against tmp_path
3. No real network calls (the rate provider's opener is injected)
"""

from datetime import date

import pytest

from pocketledger.models import (
    Currency,
    Cycle,
    Data,
    ExchangeRates,
    LedgerIds,
    Period,
    Transaction,
    Wallet,
)


# 2024-04-01 is a Monday
TODAY = date(2024, 4, 1)

RAW_RATES = {"USD": 1.08, "CAD": 1.47, "GBP": 0.85, "JPY": 160.0}


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def rates() -> ExchangeRates:
    """Fixed EUR-based rates."""
    return ExchangeRates.from_mapping(RAW_RATES)


@pytest.fixture
def ids() -> LedgerIds:
    """Fresh, deterministic id generators (both start at 1)."""
    return LedgerIds()


@pytest.fixture
def salary() -> Transaction:
    return Transaction(
        id=1,
        name="Salary",
        amount=2500.0,
        cycle=Cycle.MONTHLY,
        start_date=date(2024, 1, 31),
    )


@pytest.fixture
def rent() -> Transaction:
    return Transaction(
        id=2,
        name="Rent",
        description="Flat 4B",
        amount=-1200.0,
        cycle=Cycle.MONTHLY,
        start_date=date(2024, 1, 1),
    )


@pytest.fixture
def sample_data(salary, rent) -> Data:
    """
    Two wallets in different currencies, reported in EUR over all time.

    As of TODAY: Salary occurs Jan 31, Feb 29, Mar 29 (7500 USD),
    Rent occurs Jan 1 through Apr 1 (-4800 USD), Train once (-85 GBP).
    """
    checking = Wallet(
        id=1,
        name="Checking",
        currency=Currency.USD,
        transactions=[salary, rent],
    )
    travel = Wallet(
        id=2,
        name="travel",
        description="Spring trip",
        currency=Currency.GBP,
        transactions=[
            Transaction(
                id=3,
                name="Train",
                amount=-85.0,
                start_date=date(2024, 3, 10),
                end_date=date(2024, 3, 10),
            ),
        ],
    )
    return Data(wallets=[checking, travel], currency=Currency.EUR, period=Period.ALL)
