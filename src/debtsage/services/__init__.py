"""Payoff engine services."""

from . import alerts, allocation, amortization, projections, rates, reports, scoring, status
from .alerts import get_debt_risk_banners, get_rate_warnings
from .allocation import PayoffStrategy, compare_plans, order_debts, plan_allocation
from .amortization import estimate_debt_free, payment_schedule, simulate_payoff
from .projections import calculate_interest_projections, project_interest
from .rates import resolve_current_rate, resolve_effective_rate_state
from .reports import build_payoff_report
from .scoring import rank_debts, score_priority
from .status import classify_status

__all__ = [
    "alerts",
    "allocation",
    "amortization",
    "projections",
    "rates",
    "reports",
    "scoring",
    "status",
    "PayoffStrategy",
    "build_payoff_report",
    "calculate_interest_projections",
    "classify_status",
    "compare_plans",
    "estimate_debt_free",
    "get_debt_risk_banners",
    "get_rate_warnings",
    "order_debts",
    "payment_schedule",
    "plan_allocation",
    "project_interest",
    "rank_debts",
    "resolve_current_rate",
    "resolve_effective_rate_state",
    "score_priority",
    "simulate_payoff",
]
