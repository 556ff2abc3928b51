"""Multi-factor priority scoring used to rank debts for extra payments."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from ..constants.scoring import DEFAULT_HORIZON_DAYS, DEFAULT_WEIGHTS, ScoringWeights
from ..models.debt import Debt
from ..models.results import PriorityScore, RateState, ScoreComponents
from .rates import primary_change, rate_before, resolve_current_rate, resolve_rate_state
from .status import classify_status


def _normalize(value: float, maximum: float) -> float:
    """Scale *value* against *maximum* and clamp to 0..1."""

    if maximum <= 0:
        return 0.0
    return min(max(value / maximum, 0.0), 1.0)


def score_priority(
    debt: Debt,
    *,
    today: date | datetime,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> PriorityScore:
    """Score how urgently *debt* should receive extra payments.

    The rate component uses the risk-adjusted rate: the upcoming scheduled rate
    when its change lands within ``horizon_days``, otherwise today's rate. A
    change that already happened earns full time urgency, and the jump component
    compares the primary change against the rate it replaces.
    """

    current_rate = resolve_current_rate(debt, today=today)
    state = resolve_rate_state(debt, today=today)
    change = primary_change(debt, today=today)
    days_to_change = classify_status(debt, today=today).days_to_change

    risk_adjusted_rate = current_rate
    time_score = 0.0
    if (
        state is RateState.PENDING
        and change is not None
        and days_to_change is not None
        and 0 < days_to_change <= horizon_days
    ):
        risk_adjusted_rate = change.rate
        time_score = _normalize(horizon_days - days_to_change, horizon_days) * weights.time_weight
    elif state is RateState.SWITCHED:
        time_score = weights.time_weight

    jump_score = 0.0
    if change is not None:
        jump = max(change.rate - rate_before(debt, change), 0.0)
        jump_score = _normalize(jump, weights.jump_cap_pct) * weights.jump_weight

    rate_score = _normalize(risk_adjusted_rate, weights.rate_cap_pct) * weights.rate_weight
    type_bonus = weights.type_bonus(debt.debt_type)

    return PriorityScore(
        priority_score=rate_score + time_score + jump_score + type_bonus,
        risk_adjusted_rate_pct=risk_adjusted_rate,
        components=ScoreComponents(
            rate_score=rate_score,
            time_score=time_score,
            jump_score=jump_score,
            type_bonus=type_bonus,
        ),
    )


def rank_debts(
    debts: Iterable[Debt],
    *,
    today: date | datetime,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[tuple[Debt, PriorityScore]]:
    """Return ``(debt, score)`` pairs, most urgent first; ties keep input order."""

    scored = [
        (debt, score_priority(debt, today=today, horizon_days=horizon_days, weights=weights))
        for debt in debts
    ]
    return sorted(scored, key=lambda pair: pair[1].priority_score, reverse=True)


__all__ = ["rank_debts", "score_priority"]
