"""Pytest configuration and shared fixtures for BudgetView tests.

Provides record factories, CSV writers and a seeded random source so service
tests stay deterministic and never touch a real data directory.
"""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from budgetview.models import CategoryRecord, TransactionRecord

# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep BUDGETVIEW_* settings from the developer's shell or .env out of tests."""

    for name in (
        "BUDGETVIEW_DEV_MODE",
        "BUDGETVIEW_PAGE_SIZE",
        "BUDGETVIEW_BUCKET_COUNT",
        "BUDGETVIEW_VARIANCE",
        "BUDGETVIEW_WEDGE_GAP",
        "BUDGETVIEW_OUTER_RADIUS",
        "BUDGETVIEW_INNER_RADIUS",
        "BUDGETVIEW_RANDOM_SEED",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BUDGETVIEW_DATA_DIR", str(tmp_path / "instance"))


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def category_factory():
    """Factory for category totals.

    Returns:
        Callable: Function that builds CategoryRecord instances
    """

    def _create_category(name: str = "Groceries", amount: float = 100.0) -> CategoryRecord:
        return CategoryRecord(category=name, total_amount=amount)

    return _create_category


@pytest.fixture
def transaction_factory():
    """Factory for ledger rows.

    Returns:
        Callable: Function that builds TransactionRecord instances
    """

    counter = {"next": 1}

    def _create_transaction(
        name: str = "Test Transaction",
        amount: float = -25.0,
        date: str = "2024-03-01",
        time: str | None = None,
        status: str = "completed",
        type: str | None = None,
        account: str | None = "Checking",
        category: str | None = None,
        description: str | None = None,
        id: str | None = None,
    ) -> TransactionRecord:
        """Create a transaction with sensible defaults.

        Args:
            name: Payee or label
            amount: Signed amount (negative = outflow)
            date: ISO date string
            type: 'income' or 'expense'; inferred from the sign when omitted

        Returns:
            TransactionRecord: Frozen record
        """
        if id is None:
            id = f"TX-{counter['next']:03d}"
            counter["next"] += 1
        if type is None:
            type = "income" if amount >= 0 else "expense"
        return TransactionRecord(
            id=id,
            name=name,
            date=date,
            time=time,
            amount=amount,
            status=status,  # type: ignore[arg-type]
            type=type,  # type: ignore[arg-type]
            account=account,
            category=category,
            description=description,
        )

    return _create_transaction


@pytest.fixture
def sample_ledger(transaction_factory) -> list[TransactionRecord]:
    """Seven rows spread over two accounts and three statuses."""

    return [
        transaction_factory("Salary", 3000.0, "2024-03-01", account="Checking", category="Income", id="TX-001"),
        transaction_factory("Rent", -1200.0, "2024-03-02", account="Checking", category="Housing", id="TX-002"),
        transaction_factory("Coffee Shop", -4.5, "2024-03-03", "08:15:00", account="Card", category="Dining", id="TX-003"),
        transaction_factory("Grocery Store", -86.2, "2024-03-03", "18:40:00", status="pending", account="Card", category="Food", id="TX-004"),
        transaction_factory("Refund", 20.0, "2024-03-05", status="failed", account="Card", category="Shopping", id="TX-005"),
        transaction_factory("Gym", -45.0, "2024-03-06", account="Checking", category="Health", id="TX-006"),
        transaction_factory("Bookstore", -32.0, "2024-03-07", status="pending", account="Card", category="Shopping", id="TX-007"),
    ]


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temporary file and return its path."""

    def _write(text: str, name: str = "data.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# =============================================================================
# Random Sources
# =============================================================================


class FixedSource:
    """Random source returning a fixed offset for every draw."""

    def __init__(self, value: float = 0.0):
        self.value = value
        self.calls = 0

    def uniform(self, a: float, b: float) -> float:
        self.calls += 1
        return min(max(self.value, a), b)


@pytest.fixture
def fixed_rng():
    return FixedSource()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


# =============================================================================
# Assertion Helpers
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
