"""Greedy surplus allocation and payoff ordering strategies."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Iterable

from ..constants.scoring import DEFAULT_HORIZON_DAYS, DEFAULT_WEIGHTS, ScoringWeights
from ..logging_config import get_logger
from ..models.debt import Debt
from ..models.results import (
    Allocation,
    AllocationResult,
    PayoffImpact,
    PayoffOutcome,
    PlanComparison,
)
from .amortization import simulate_payoff
from .rates import resolve_current_rate
from .scoring import rank_debts

logger = get_logger(__name__)


class PayoffStrategy(str, Enum):
    AVALANCHE = "avalanche"  # highest current rate first
    SNOWBALL = "snowball"  # smallest balance first


def order_debts(
    debts: Iterable[Debt], strategy: PayoffStrategy | str, *, today: date | datetime
) -> list[Debt]:
    """Return debts in payoff order for a plain avalanche or snowball strategy."""

    if not isinstance(strategy, PayoffStrategy):
        try:
            strategy = PayoffStrategy(str(strategy).lower())
        except ValueError:
            raise ValueError("Invalid debt payoff strategy.") from None

    if strategy is PayoffStrategy.AVALANCHE:
        return sorted(debts, key=lambda d: resolve_current_rate(d, today=today), reverse=True)
    return sorted(debts, key=lambda d: d.current_balance)


def _impact(baseline: PayoffOutcome, optimized: PayoffOutcome) -> PayoffImpact:
    if baseline.never_pays_off and optimized.never_pays_off:
        return PayoffImpact(interest_saved=0.0, time_saved=0)
    return PayoffImpact(
        interest_saved=max(baseline.total_interest - optimized.total_interest, 0.0),
        time_saved=max(baseline.months - optimized.months, 0),
    )


def plan_allocation(
    debts: Iterable[Debt],
    surplus_cash: float,
    *,
    today: date | datetime,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[AllocationResult]:
    """Rank debts and route the whole surplus to the most urgent one.

    Surplus is never split: the highest-priority debt that still carries a
    balance receives all of it (avalanche-style concentration). Every debt is
    simulated at its minimum payment and at minimum plus extra, and the
    difference is reported as the impact. Results come back in priority order.
    """

    remaining = max(float(surplus_cash or 0.0), 0.0)
    results: list[AllocationResult] = []
    for debt, score in rank_debts(debts, today=today, horizon_days=horizon_days, weights=weights):
        min_pay = max(float(debt.monthly_repayment or 0.0), 0.0)
        extra_pay = 0.0
        if remaining > 0 and not debt.is_retired:
            extra_pay, remaining = remaining, 0.0
        total_pay = min_pay + extra_pay

        baseline = simulate_payoff(debt, min_pay, today=today)
        optimized = simulate_payoff(debt, total_pay, today=today) if extra_pay else baseline

        results.append(
            AllocationResult(
                debt=debt,
                score=score,
                allocation=Allocation(
                    min_pay=min_pay,
                    extra_pay=extra_pay,
                    total_pay=total_pay,
                    months_to_payoff=optimized.months,
                    projected_interest=optimized.total_interest,
                    impact=_impact(baseline, optimized),
                ),
            )
        )

    if results:
        target = next((r.debt.id for r in results if r.allocation.extra_pay > 0), None)
        logger.debug(
            "Allocation planned",
            extra={"debts": len(results), "target": target, "surplus": surplus_cash},
        )
    return results


def compare_plans(
    debts: Iterable[Debt],
    surplus_cash: float,
    *,
    today: date | datetime,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> PlanComparison:
    """Run the planner without and with surplus cash for a side-by-side view."""

    debts = list(debts)
    return PlanComparison(
        surplus_cash=max(float(surplus_cash or 0.0), 0.0),
        baseline=plan_allocation(
            debts, 0.0, today=today, horizon_days=horizon_days, weights=weights
        ),
        plan=plan_allocation(
            debts, surplus_cash, today=today, horizon_days=horizon_days, weights=weights
        ),
    )


__all__ = ["PayoffStrategy", "compare_plans", "order_debts", "plan_allocation"]
