"""Effective-rate resolution over a debt's scheduled rate timeline.

Every lookup walks ``Debt.rate_schedule`` chronologically. The breakpoint that
drives status, scoring and banners (the *primary* change) is the nearest upcoming
breakpoint, or the latest one already passed when nothing is upcoming.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..constants.scoring import HIGH_COST_APR
from ..dates import as_date
from ..models.debt import Debt, RateChange
from ..models.results import EffectiveRateState, RateState


def passed_changes(debt: Debt, *, today: date | datetime) -> tuple[RateChange, ...]:
    """Return breakpoints dated on or before *today*, oldest first."""

    day = as_date(today)
    return tuple(change for change in debt.rate_schedule if change.effective_on <= day)


def pending_change(debt: Debt, *, today: date | datetime) -> Optional[RateChange]:
    """Return the nearest breakpoint strictly after *today*."""

    day = as_date(today)
    for change in debt.rate_schedule:
        if change.effective_on > day:
            return change
    return None


def primary_change(debt: Debt, *, today: date | datetime) -> Optional[RateChange]:
    """Return the authoritative change for classification and scoring."""

    upcoming = pending_change(debt, today=today)
    if upcoming is not None:
        return upcoming
    passed = passed_changes(debt, today=today)
    return passed[-1] if passed else None


def rate_before(debt: Debt, change: RateChange) -> float:
    """Return the APR in force on the day before *change* takes effect."""

    rate = debt.base_rate
    for entry in debt.rate_schedule:
        if entry.effective_on >= change.effective_on:
            break
        rate = entry.rate
    return rate


def resolve_current_rate(debt: Debt, *, today: date | datetime) -> float:
    """Return the APR in effect on *today*."""

    rate = debt.base_rate
    for change in passed_changes(debt, today=today):
        rate = change.rate
    return rate


def resolve_rate_state(debt: Debt, *, today: date | datetime) -> RateState:
    """Place the debt on the NO_SCHEDULE -> PENDING -> SWITCHED timeline."""

    change = primary_change(debt, today=today)
    if change is None:
        return RateState.NO_SCHEDULE
    if as_date(today) < change.effective_on:
        return RateState.PENDING
    return RateState.SWITCHED


def resolve_effective_rate_state(
    debt: Debt,
    *,
    today: date | datetime,
    high_cost_apr: float = HIGH_COST_APR,
) -> EffectiveRateState:
    """Resolve the current rate plus whether a scheduled switch already happened."""

    rate = resolve_current_rate(debt, today=today)
    return EffectiveRateState(
        effective_rate_pct=rate,
        rate_is_switched=bool(passed_changes(debt, today=today)),
        high_cost_debt_flag=rate >= high_cost_apr,
        state=resolve_rate_state(debt, today=today),
        primary_change=primary_change(debt, today=today),
    )


__all__ = [
    "passed_changes",
    "pending_change",
    "primary_change",
    "rate_before",
    "resolve_current_rate",
    "resolve_effective_rate_state",
    "resolve_rate_state",
]
