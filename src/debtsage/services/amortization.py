"""Fixed-payment payoff simulation for individual debts and whole portfolios."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Iterable

from ..constants.scoring import MAX_SIMULATION_MONTHS, NEVER_MONTHS
from ..dates import add_months, as_date
from ..models.debt import Debt
from ..models.results import DebtFreeEstimate, PaymentRow, PayoffOutcome
from .rates import resolve_current_rate

NEVER = PayoffOutcome(total_interest=math.inf, months=NEVER_MONTHS)


def _monthly_rate(debt: Debt, *, today: date | datetime) -> float:
    return resolve_current_rate(debt, today=today) / 100.0 / 12.0


def _normalize_currency(amount: float) -> float:
    """Round to cents using bankers-friendly half-up rounding."""

    return round(amount + 1e-9, 2)


def simulate_payoff(
    debt: Debt, monthly_payment: float, *, today: date | datetime
) -> PayoffOutcome:
    """Simulate paying *debt* down at a fixed monthly payment.

    The rate in effect on *today* is held constant for the whole run; the
    simulation answers "what happens if this rate holds". A payment that does not
    cover the first month's interest returns the ``NEVER`` sentinel
    (``math.inf`` interest, ``NEVER_MONTHS`` months). Runs stop after
    ``MAX_SIMULATION_MONTHS`` iterations.
    """

    balance = max(float(debt.current_balance or 0.0), 0.0)
    if balance <= 0:
        return PayoffOutcome(total_interest=0.0, months=0)

    monthly_rate = _monthly_rate(debt, today=today)
    payment = float(monthly_payment or 0.0)
    if payment <= balance * monthly_rate:
        return NEVER

    total_interest = 0.0
    months = 0
    while balance > 0 and months < MAX_SIMULATION_MONTHS:
        interest = balance * monthly_rate
        principal = min(payment - interest, balance)
        total_interest += interest
        balance -= principal
        months += 1

    return PayoffOutcome(total_interest=total_interest, months=months)


def payment_schedule(
    debt: Debt,
    monthly_payment: float,
    *,
    today: date | datetime,
    months: int | None = None,
) -> list[PaymentRow]:
    """Return the simulation as dated, cent-rounded rows.

    When ``months`` is ``None`` the schedule runs until the balance reaches zero
    (empty when the payment never retires the debt); otherwise a preview capped
    at the requested number of rows is returned.
    """

    balance = max(float(debt.current_balance or 0.0), 0.0)
    if balance <= 0 or (months is not None and months <= 0):
        return []

    monthly_rate = _monthly_rate(debt, today=today)
    payment = float(monthly_payment or 0.0)
    if months is None and payment <= balance * monthly_rate:
        return []

    limit = MAX_SIMULATION_MONTHS if months is None else min(months, MAX_SIMULATION_MONTHS)
    start = as_date(today)
    rows: list[PaymentRow] = []
    while balance > 0 and len(rows) < limit:
        interest = balance * monthly_rate
        paid = min(payment, balance + interest)
        principal = paid - interest
        balance -= principal
        if balance < 0.005:
            balance = 0.0
        rows.append(
            PaymentRow(
                due_date=add_months(start, len(rows) + 1),
                payment=_normalize_currency(paid),
                principal=_normalize_currency(principal),
                interest=_normalize_currency(interest),
                remaining_balance=_normalize_currency(balance),
            )
        )
    return rows


def estimate_debt_free(
    debts: Iterable[Debt],
    *,
    today: date | datetime,
    extra_payment: float = 0.0,
) -> DebtFreeEstimate:
    """Estimate months until every debt is retired using an aggregate annuity.

    Balances are pooled at their balance-weighted current rate and paid with the
    sum of minimums plus ``extra_payment``. With nothing owed the result is an
    immediate "debt free" rather than an undefined ratio.
    """

    start = as_date(today)
    active = [debt for debt in debts if not debt.is_retired]
    total_balance = sum(float(debt.current_balance) for debt in active)
    if not active or total_balance <= 0:
        return DebtFreeEstimate(months=0, never_pays_off=False, debt_free=True, payoff_date=start)

    weighted_rate = (
        sum(float(debt.current_balance) * resolve_current_rate(debt, today=start) for debt in active)
        / total_balance
    )
    monthly_rate = weighted_rate / 100.0 / 12.0
    payment = sum(max(float(debt.monthly_repayment or 0.0), 0.0) for debt in active)
    payment += max(float(extra_payment or 0.0), 0.0)

    if payment <= total_balance * monthly_rate:
        return DebtFreeEstimate(
            months=NEVER_MONTHS, never_pays_off=True, debt_free=False, payoff_date=None
        )

    if monthly_rate == 0:
        months = total_balance / payment
    else:
        months = -math.log(1 - monthly_rate * total_balance / payment) / math.log(1 + monthly_rate)
    whole_months = math.ceil(months - 1e-9)
    return DebtFreeEstimate(
        months=whole_months,
        never_pays_off=False,
        debt_free=False,
        payoff_date=add_months(start, whole_months),
    )


__all__ = ["NEVER", "estimate_debt_free", "payment_schedule", "simulate_payoff"]
