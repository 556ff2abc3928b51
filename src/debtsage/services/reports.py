"""Aggregated payoff report consumed by the presentation layer."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Iterable, Optional

from ..config import BaseConfig
from ..constants.scoring import (
    DEFAULT_HORIZON_DAYS,
    DEFAULT_WEIGHTS,
    HIGH_COST_APR,
    WARNING_WINDOW_DAYS,
)
from ..dates import as_date
from ..logging_config import get_logger
from ..models.debt import Debt
from ..models.results import AllocationResult, PayoffReport
from .alerts import get_debt_risk_banners, get_rate_warnings
from .allocation import compare_plans
from .amortization import estimate_debt_free
from .projections import calculate_interest_projections

logger = get_logger(__name__)


def total_interest_saved(results: Iterable[AllocationResult]) -> float:
    """Sum interest saved across debts, skipping unbounded (never-payoff) values."""

    return sum(
        result.allocation.impact.interest_saved
        for result in results
        if math.isfinite(result.allocation.impact.interest_saved)
    )


def build_payoff_report(
    debts: Iterable[Debt],
    surplus_cash: float,
    *,
    today: date | datetime,
    horizon_days: Optional[int] = None,
    config: Optional[BaseConfig] = None,
) -> PayoffReport:
    """Run every engine component for one planning pass.

    ``config`` supplies the horizon, warning window, high-cost threshold and
    scoring weights; without it the built-in defaults apply. An explicit
    ``horizon_days`` wins over the configured one.
    """

    debts = list(debts)
    day = as_date(today)
    if config is not None:
        horizon = horizon_days if horizon_days is not None else config.HORIZON_DAYS
        window_days = config.WARNING_WINDOW_DAYS
        high_cost_apr = config.HIGH_COST_APR
        weights = config.scoring_weights()
    else:
        horizon = horizon_days if horizon_days is not None else DEFAULT_HORIZON_DAYS
        window_days = WARNING_WINDOW_DAYS
        high_cost_apr = HIGH_COST_APR
        weights = DEFAULT_WEIGHTS

    comparison = compare_plans(
        debts, surplus_cash, today=day, horizon_days=horizon, weights=weights
    )
    report = PayoffReport(
        generated_for=day,
        surplus_cash=comparison.surplus_cash,
        horizon_days=horizon,
        comparison=comparison,
        projections=calculate_interest_projections(debts, today=day),
        alerts=get_rate_warnings(
            debts, today=day, window_days=window_days, high_cost_apr=high_cost_apr
        ),
        banners=get_debt_risk_banners(debts, today=day, high_cost_apr=high_cost_apr),
        baseline_debt_free=estimate_debt_free(debts, today=day),
        plan_debt_free=estimate_debt_free(debts, today=day, extra_payment=comparison.surplus_cash),
        total_interest_saved=total_interest_saved(comparison.plan),
        never_payoff_ids=[
            result.debt.id for result in comparison.baseline if result.never_pays_off
        ],
    )

    logger.info(
        "Payoff report built",
        extra={
            "debts": len(debts),
            "alerts": len(report.alerts),
            "banners": len(report.banners),
            "never_payoff": len(report.never_payoff_ids),
        },
    )
    return report


__all__ = ["build_payoff_report", "total_interest_saved"]
