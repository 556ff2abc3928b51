"""Rate-increase warnings and risk banners for the dashboard."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..constants.scoring import (
    HIGH_COST_APR,
    IMMINENT_CHANGE_DAYS,
    UPCOMING_CHANGE_DAYS,
    WARNING_WINDOW_DAYS,
)
from ..dates import as_date, days_between
from ..models.debt import ChangeKind, Debt
from ..models.results import RateAlert, RateState, RiskBanner, StatusLevel
from .rates import rate_before, resolve_effective_rate_state
from .status import classify_status

SEVERITY_RANK = {"critical": 3, "warning": 2, "info": 1}
RISKY_LEVELS = {StatusLevel.MEDIUM, StatusLevel.HIGH, StatusLevel.CRITICAL}
UNSCHEDULED_SORT_DAYS = 999


def _whole_dollars(amount: float) -> int:
    return int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _pct(rate: float) -> str:
    return f"{rate:g}%"


def _monthly_interest(debt: Debt, rate: float) -> float:
    return max(float(debt.current_balance or 0.0), 0.0) * (rate / 100.0) / 12.0


def get_rate_warnings(
    debts: Iterable[Debt],
    *,
    today: date | datetime,
    window_days: int = WARNING_WINDOW_DAYS,
    high_cost_apr: float = HIGH_COST_APR,
) -> list[RateAlert]:
    """Return alerts for upcoming rate hikes and currently expensive debts.

    Every scheduled increase inside the next ``window_days`` raises a RATE_HIKE
    alert. A debt already at or above ``high_cost_apr`` raises HIGH_INTEREST
    unless it was flagged for a hike. Alerts are ordered critical, warning, info.
    """

    day = as_date(today)
    window_end = day + timedelta(days=window_days)
    alerts: list[RateAlert] = []

    for debt in debts:
        current_rate = resolve_effective_rate_state(
            debt, today=day, high_cost_apr=high_cost_apr
        ).effective_rate_pct
        flagged_hike = False

        for change in debt.rate_schedule:
            if not day < change.effective_on <= window_end or change.rate <= current_rate:
                continue
            days = days_between(day, change.effective_on)
            imminent = days <= IMMINENT_CHANGE_DAYS
            monthly_impact = _monthly_interest(debt, change.rate - current_rate)
            alerts.append(
                RateAlert(
                    type="RATE_HIKE",
                    severity="critical" if imminent else "warning",
                    label="Rate Hike Imminent" if imminent else "Upcoming Rate Change",
                    debt_name=debt.name,
                    message=(
                        f"Interest rate jumping from {_pct(current_rate)} "
                        f"to {_pct(change.rate)}."
                    ),
                    action="Refinance / Payoff" if imminent else "Plan Payoff",
                    impact=(
                        f"+${_whole_dollars(monthly_impact)}/mo interest"
                        if monthly_impact > 0
                        else None
                    ),
                    timeframe=f"{days} days",
                )
            )
            flagged_hike = True

        if current_rate >= high_cost_apr and not flagged_hike:
            alerts.append(
                RateAlert(
                    type="HIGH_INTEREST",
                    severity="critical",
                    label="High Interest Drain",
                    debt_name=debt.name,
                    message=f"You are paying {_pct(current_rate)} interest on this balance.",
                    action="Target Priority",
                    impact=f"-${_whole_dollars(_monthly_interest(debt, current_rate))}/mo waste",
                    timeframe="Immediate",
                )
            )

    return sorted(alerts, key=lambda alert: SEVERITY_RANK[alert.severity], reverse=True)


def _alert_type(
    state: RateState, kind: ChangeKind | None, days_to_change: int | None, high_cost: bool
) -> str:
    if state is RateState.SWITCHED:
        return "High-Interest Active Debt"
    if days_to_change is not None and days_to_change <= IMMINENT_CHANGE_DAYS:
        return "Interest Rate Increase Coming"
    if (
        kind is ChangeKind.PROMO_END
        and days_to_change is not None
        and days_to_change <= UPCOMING_CHANGE_DAYS
    ):
        return "Promo Ending Soon"
    if high_cost:
        return "High Cost Debt Alert"
    return "Attention Required"


def get_debt_risk_banners(
    debts: Iterable[Debt],
    *,
    today: date | datetime,
    high_cost_apr: float = HIGH_COST_APR,
) -> list[RiskBanner]:
    """Return banners for debts with a near rate change or a high current rate.

    Banners are sorted by severity (3 = critical or high-cost, 2 = high risk,
    1 = upcoming) and then by the nearest change.
    """

    banners: list[RiskBanner] = []
    for debt in debts:
        status = classify_status(debt, today=today)
        rate_state = resolve_effective_rate_state(debt, today=today, high_cost_apr=high_cost_apr)
        high_cost = rate_state.high_cost_debt_flag
        if status.status_level not in RISKY_LEVELS and not high_cost:
            continue

        change = rate_state.primary_change
        if change is not None:
            old_rate = rate_before(debt, change)
            new_rate = change.rate
        else:
            old_rate = new_rate = rate_state.effective_rate_pct
        delta = max(new_rate - old_rate, 0.0)

        if status.status_level is StatusLevel.CRITICAL or high_cost:
            severity = 3
        elif status.status_level is StatusLevel.HIGH:
            severity = 2
        else:
            severity = 1

        banners.append(
            RiskBanner(
                id=debt.id,
                debt_name=debt.name,
                alert_type=_alert_type(
                    rate_state.state,
                    change.kind if change is not None else None,
                    status.days_to_change,
                    high_cost,
                ),
                days_to_change=status.days_to_change,
                old_rate=old_rate,
                new_rate=new_rate,
                estimated_extra_monthly_interest=(
                    _monthly_interest(debt, delta) if delta > 0 else None
                ),
                severity=severity,
            )
        )

    return sorted(
        banners,
        key=lambda banner: (
            -banner.severity,
            banner.days_to_change if banner.days_to_change is not None else UNSCHEDULED_SORT_DAYS,
        ),
    )


__all__ = ["get_debt_risk_banners", "get_rate_warnings"]
