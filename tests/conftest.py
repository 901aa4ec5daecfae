"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from loan_ledger.store.ledger import LedgerStore
from loan_ledger.tracker import LoanTracker


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed evaluation date; its freeze date is 2024-10-01."""
    return date(2024, 10, 19)


@pytest.fixture
def store(today: date) -> LedgerStore:
    """Create a fresh ledger pinned to ``today``."""
    return LedgerStore(today=lambda: today)


@pytest.fixture
def tracker(today: date) -> LoanTracker:
    """Create a tracker whose clock always reads ``today``."""
    return LoanTracker(clock=lambda: today)
