"""Pytest configuration and shared fixtures for DebtSage tests.

All engine calls receive an explicit ``today`` so date-boundary behavior is
deterministic; rate schedules are described as day offsets from that date.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

import pytest

from debtsage.models import ChangeKind, Debt, RateChange

TODAY = date(2026, 1, 1)


@pytest.fixture
def today() -> date:
    """Fixed planning date shared by every test."""

    return TODAY


@pytest.fixture
def debt_factory():
    """Factory for debt snapshots.

    Returns:
        Callable: Function that builds ``Debt`` instances with sensible defaults
    """

    def _create_debt(
        id: int | str = 1,
        name: str = "Test Card",
        balance: float = 1000.00,
        minimum_payment: float = 50.00,
        rate: float = 0.0,
        changes: Iterable[tuple[int, float]] = (),
        debt_type: str = "Other",
        kind: ChangeKind = ChangeKind.RATE_CHANGE,
    ) -> Debt:
        """Create a debt whose ``changes`` are ``(days_from_today, new_rate)`` pairs."""

        schedule = tuple(
            RateChange(TODAY + timedelta(days=offset), new_rate, kind)
            for offset, new_rate in changes
        )
        return Debt(
            id=id,
            name=name,
            current_balance=balance,
            monthly_repayment=minimum_payment,
            interest_rate=rate,
            rate_schedule=schedule,
            debt_type=debt_type,
        )

    return _create_debt


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point configuration at a temporary data directory with quiet console logs."""

    monkeypatch.setenv("DEBTSAGE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("DEBTSAGE_DEV_MODE", "false")
    for name in (
        "DEBTSAGE_HORIZON_DAYS",
        "DEBTSAGE_WARNING_WINDOW_DAYS",
        "DEBTSAGE_HIGH_COST_APR",
        "DEBTSAGE_WEIGHT_RATE",
        "DEBTSAGE_WEIGHT_TIME",
    ):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


# =============================================================================
# Helper Functions
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
    assert abs(actual - expected) <= tolerance, (
        f"Expected {expected}, got {actual} (difference: {abs(actual - expected)})"
    )
