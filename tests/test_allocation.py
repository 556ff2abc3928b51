"""Tests for greedy surplus allocation and payoff ordering."""

from __future__ import annotations

import logging
import math

import pytest

from debtsage.services.allocation import (
    PayoffStrategy,
    compare_plans,
    order_debts,
    plan_allocation,
)


@pytest.fixture
def two_debts(debt_factory):
    return [
        debt_factory(id="B", name="Car Loan", balance=2000.0, rate=8.0, minimum_payment=80.0),
        debt_factory(id="A", name="Visa", balance=5000.0, rate=20.0, minimum_payment=150.0),
    ]


class TestPlanAllocation:
    def test_entire_surplus_goes_to_top_priority(self, two_debts, today):
        results = plan_allocation(two_debts, 300.0, today=today)

        top, other = results
        assert top.debt.id == "A"
        assert top.allocation.extra_pay == 300.0
        assert top.allocation.total_pay == 450.0
        assert other.debt.id == "B"
        assert other.allocation.extra_pay == 0.0
        assert other.allocation.total_pay == 80.0

    def test_impact_is_reported_for_target_only(self, two_debts, today):
        top, other = plan_allocation(two_debts, 300.0, today=today)

        assert top.allocation.impact.interest_saved > 0
        assert top.allocation.impact.time_saved > 0
        assert other.allocation.impact.interest_saved == 0.0
        assert other.allocation.impact.time_saved == 0

    def test_idempotent(self, two_debts, today):
        assert plan_allocation(two_debts, 300.0, today=today) == plan_allocation(
            two_debts, 300.0, today=today
        )

    def test_more_surplus_only_helps_the_target(self, two_debts, today):
        small = {r.debt.id: r.allocation for r in plan_allocation(two_debts, 100.0, today=today)}
        large = {r.debt.id: r.allocation for r in plan_allocation(two_debts, 300.0, today=today)}

        assert large["A"].months_to_payoff <= small["A"].months_to_payoff
        assert large["A"].projected_interest <= small["A"].projected_interest
        assert large["B"] == small["B"]

    def test_zero_surplus_is_the_baseline(self, two_debts, today):
        for result in plan_allocation(two_debts, 0.0, today=today):
            assert result.allocation.extra_pay == 0.0
            assert result.allocation.impact.interest_saved == 0.0

    def test_retired_debt_is_not_a_target(self, debt_factory, today):
        paid_off = debt_factory(
            id="paid", balance=0.0, rate=29.99, minimum_payment=0.0, debt_type="Credit Card"
        )
        active = debt_factory(id="active", balance=1500.0, rate=9.0, minimum_payment=60.0)

        results = plan_allocation([active, paid_off], 200.0, today=today)

        assert results[0].debt.id == "paid"
        assert results[0].allocation.extra_pay == 0.0
        assert results[0].allocation.months_to_payoff == 0
        assert results[1].allocation.extra_pay == 200.0

    def test_log_names_the_funded_debt(self, debt_factory, today, caplog):
        paid_off = debt_factory(id="paid", balance=0.0, rate=29.99, debt_type="Credit Card")
        active = debt_factory(id="active", balance=1500.0, rate=9.0, minimum_payment=60.0)
        caplog.set_level(logging.DEBUG, logger="debtsage.services.allocation")

        plan_allocation([active, paid_off], 200.0, today=today)

        [record] = [r for r in caplog.records if r.getMessage() == "Allocation planned"]
        assert record.target == "active"
        assert record.debts == 2

    def test_surplus_rescues_never_payoff_debt(self, debt_factory, today):
        debt = debt_factory(id="deep", balance=10000.0, rate=24.0, minimum_payment=50.0)

        [result] = plan_allocation([debt], 300.0, today=today)

        assert math.isinf(result.allocation.impact.interest_saved)
        assert result.allocation.impact.time_saved == 999 - result.allocation.months_to_payoff
        assert math.isfinite(result.allocation.projected_interest)

    def test_both_runs_never_pay_off(self, debt_factory, today):
        debt = debt_factory(id="deep", balance=10000.0, rate=24.0, minimum_payment=50.0)

        [result] = plan_allocation([debt], 10.0, today=today)

        assert result.never_pays_off
        assert result.allocation.months_to_payoff == 999
        assert result.allocation.impact.interest_saved == 0.0
        assert result.allocation.impact.time_saved == 0

    def test_no_debts(self, today):
        assert plan_allocation([], 500.0, today=today) == []


def test_compare_plans(two_debts, today):
    comparison = compare_plans(two_debts, 300.0, today=today)

    assert comparison.surplus_cash == 300.0
    assert all(r.allocation.extra_pay == 0.0 for r in comparison.baseline)
    assert comparison.plan[0].allocation.extra_pay == 300.0
    assert (
        comparison.plan[0].allocation.months_to_payoff
        < comparison.baseline[0].allocation.months_to_payoff
    )


class TestOrderDebts:
    def test_avalanche_orders_by_current_rate(self, debt_factory, today):
        debts = [
            debt_factory(id=1, balance=500.0, rate=10.0),
            debt_factory(id=2, balance=5000.0, rate=0.0, changes=[(-3, 25.0)]),
            debt_factory(id=3, balance=2000.0, rate=15.0),
        ]

        ordered = order_debts(debts, PayoffStrategy.AVALANCHE, today=today)

        assert [d.id for d in ordered] == [2, 3, 1]

    def test_snowball_orders_by_balance(self, debt_factory, today):
        debts = [
            debt_factory(id=1, balance=5000.0, rate=10.0),
            debt_factory(id=2, balance=1000.0, rate=20.0),
            debt_factory(id=3, balance=3000.0, rate=15.0),
        ]

        ordered = order_debts(debts, "SNOWBALL", today=today)

        assert [d.id for d in ordered] == [2, 3, 1]

    def test_invalid_strategy_raises_error(self, debt_factory, today):
        with pytest.raises(ValueError, match="Invalid debt payoff strategy"):
            order_debts([debt_factory()], "invalid", today=today)
