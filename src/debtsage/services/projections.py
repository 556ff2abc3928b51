"""Interest-only cost projections and the findings built on top of them.

Projections hold each balance constant: they answer "what would I pay if I only
ever paid interest", which is used to communicate risk, not to plan payoff.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from ..constants.scoring import (
    DAYS_PER_MONTH,
    OPPORTUNITY_WINDOW_MONTHS,
    PROJECTION_HORIZONS,
    TOP_OPPORTUNITIES,
)
from ..dates import add_months, as_date, days_between
from ..models.debt import Debt
from ..models.results import InterestProjection, SavingsOpportunity, WorstOffender
from .rates import pending_change, resolve_current_rate


def _monthly_interest(balance: float, rate: float) -> float:
    return balance * (rate / 100.0) / 12.0


def _balance(debt: Debt) -> float:
    return max(float(debt.current_balance or 0.0), 0.0)


def rate_segments(
    debt: Debt, horizon_months: int, *, today: date | datetime
) -> list[tuple[float, float]]:
    """Split the projection window into ``(share, rate)`` pieces.

    Breakpoints strictly after *today* and on or before the window end cut the
    window; each share is the piece's day count over ``horizon_months * 30``.
    Shares always sum to 1.
    """

    day = as_date(today)
    window_end = add_months(day, horizon_months)
    total_days = horizon_months * DAYS_PER_MONTH
    rate = resolve_current_rate(debt, today=day)

    segments: list[tuple[float, float]] = []
    elapsed = 0
    for change in debt.rate_schedule:
        if not day < change.effective_on <= window_end:
            continue
        offset = min(days_between(day, change.effective_on), total_days)
        segments.append(((offset - elapsed) / total_days, rate))
        elapsed = offset
        rate = change.rate
    segments.append(((total_days - elapsed) / total_days, rate))
    return segments


def project_interest(debt: Debt, horizon_months: int, *, today: date | datetime) -> float:
    """Estimate interest accrued on *debt* over the next ``horizon_months``."""

    if horizon_months <= 0:
        return 0.0
    balance = _balance(debt)
    return sum(
        _monthly_interest(balance, rate) * horizon_months * share
        for share, rate in rate_segments(debt, horizon_months, today=today)
    )


def find_savings_opportunities(
    debts: Iterable[Debt],
    *,
    today: date | datetime,
    limit: int = TOP_OPPORTUNITIES,
) -> list[SavingsOpportunity]:
    """Return the debts whose upcoming rate increase is most worth beating.

    The amount is the extra interest avoided over the rest of the coming year if
    the debt were cleared before the switch date.
    """

    day = as_date(today)
    window_end = add_months(day, OPPORTUNITY_WINDOW_MONTHS)
    opportunities: list[SavingsOpportunity] = []
    for debt in debts:
        change = pending_change(debt, today=day)
        if change is None or change.effective_on >= window_end:
            continue
        increase = change.rate - resolve_current_rate(debt, today=day)
        if increase <= 0:
            continue
        monthly = _monthly_interest(_balance(debt), increase)
        months_at_new_rate = days_between(change.effective_on, window_end) / DAYS_PER_MONTH
        opportunities.append(
            SavingsOpportunity(
                id=debt.id,
                name=debt.name,
                amount=monthly * months_at_new_rate,
                monthly=monthly,
            )
        )
    opportunities.sort(key=lambda item: item.amount, reverse=True)
    return opportunities[:limit]


def find_worst_offender(
    debts: Iterable[Debt], *, today: date | datetime
) -> Optional[WorstOffender]:
    """Return the debt with the highest monthly interest cost right now.

    A change scheduled within the coming year, rise or cut, is priced at its
    pending rate.
    """

    day = as_date(today)
    window_end = add_months(day, OPPORTUNITY_WINDOW_MONTHS)
    worst: Optional[WorstOffender] = None
    for debt in debts:
        rate = resolve_current_rate(debt, today=day)
        change = pending_change(debt, today=day)
        if change is not None and change.effective_on <= window_end:
            rate = change.rate
        cost = _monthly_interest(_balance(debt), rate)
        if worst is None or cost > worst.cost:
            worst = WorstOffender(id=debt.id, name=debt.name, cost=cost)
    return worst


def calculate_interest_projections(
    debts: Iterable[Debt], *, today: date | datetime
) -> InterestProjection:
    """Total the 3/6/12-month projections and surface the headline findings."""

    debts = list(debts)
    totals = {
        months: sum(project_interest(debt, months, today=today) for debt in debts)
        for months in PROJECTION_HORIZONS
    }
    return InterestProjection(
        months3=totals[3],
        months6=totals[6],
        months12=totals[12],
        savings_opportunities=find_savings_opportunities(debts, today=today),
        worst_offender=find_worst_offender(debts, today=today),
    )


__all__ = [
    "calculate_interest_projections",
    "find_savings_opportunities",
    "find_worst_offender",
    "project_interest",
    "rate_segments",
]
