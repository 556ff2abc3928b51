"""Derived, ephemeral report values produced by the payoff engine."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional, Union

from ..constants.scoring import NEVER_MONTHS
from .debt import Debt, RateChange


class RateState(str, Enum):
    """Where a debt sits on its rate timeline."""

    NO_SCHEDULE = "no_schedule"
    PENDING = "pending"
    SWITCHED = "switched"


class StatusLevel(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True, slots=True)
class EffectiveRateState:
    effective_rate_pct: float
    rate_is_switched: bool
    high_cost_debt_flag: bool
    state: RateState
    primary_change: Optional[RateChange] = None


@dataclass(frozen=True, slots=True)
class DebtStatus:
    status_label: str
    status_level: StatusLevel
    days_to_change: Optional[int]


@dataclass(frozen=True, slots=True)
class ScoreComponents:
    rate_score: float
    time_score: float
    jump_score: float
    type_bonus: float


@dataclass(frozen=True, slots=True)
class PriorityScore:
    """Composite urgency score; only meaningful relative to other debts."""

    priority_score: float
    risk_adjusted_rate_pct: float
    components: ScoreComponents


@dataclass(frozen=True, slots=True)
class PayoffOutcome:
    """Result of simulating a debt at a fixed monthly payment.

    ``total_interest == math.inf`` and ``months == NEVER_MONTHS`` mean the payment
    never retires the debt. Check ``never_pays_off`` before summing or formatting.
    """

    total_interest: float
    months: int

    @property
    def never_pays_off(self) -> bool:
        return math.isinf(self.total_interest) or self.months >= NEVER_MONTHS


@dataclass(frozen=True, slots=True)
class PaymentRow:
    """A single projected monthly payment."""

    due_date: date
    payment: float
    principal: float
    interest: float
    remaining_balance: float


@dataclass(frozen=True, slots=True)
class PayoffImpact:
    interest_saved: float
    time_saved: int


@dataclass(frozen=True, slots=True)
class Allocation:
    min_pay: float
    extra_pay: float
    total_pay: float
    months_to_payoff: int
    projected_interest: float
    impact: PayoffImpact


@dataclass(frozen=True, slots=True)
class AllocationResult:
    debt: Debt
    score: PriorityScore
    allocation: Allocation

    @property
    def never_pays_off(self) -> bool:
        return math.isinf(self.allocation.projected_interest)


@dataclass(frozen=True, slots=True)
class PlanComparison:
    """Minimum-only baseline next to the surplus-funded plan."""

    surplus_cash: float
    baseline: list[AllocationResult] = field(default_factory=list)
    plan: list[AllocationResult] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SavingsOpportunity:
    id: Union[int, str]
    name: str
    amount: float
    monthly: float


@dataclass(frozen=True, slots=True)
class WorstOffender:
    id: Union[int, str]
    name: str
    cost: float


@dataclass(frozen=True, slots=True)
class InterestProjection:
    months3: float
    months6: float
    months12: float
    savings_opportunities: list[SavingsOpportunity] = field(default_factory=list)
    worst_offender: Optional[WorstOffender] = None


@dataclass(frozen=True, slots=True)
class RateAlert:
    """Alert ready for direct rendering; ``severity`` is critical, warning or info."""

    type: str
    severity: str
    label: str
    debt_name: str
    message: str
    action: str
    impact: Optional[str]
    timeframe: str


@dataclass(frozen=True, slots=True)
class RiskBanner:
    id: Union[int, str]
    debt_name: str
    alert_type: str
    days_to_change: Optional[int]
    old_rate: float
    new_rate: float
    estimated_extra_monthly_interest: Optional[float]
    severity: int


@dataclass(frozen=True, slots=True)
class DebtFreeEstimate:
    """Aggregate time until every debt is retired."""

    months: int
    never_pays_off: bool
    debt_free: bool
    payoff_date: Optional[date]


@dataclass(frozen=True, slots=True)
class PayoffReport:
    generated_for: date
    surplus_cash: float
    horizon_days: int
    comparison: PlanComparison
    projections: InterestProjection
    alerts: list[RateAlert]
    banners: list[RiskBanner]
    baseline_debt_free: DebtFreeEstimate
    plan_debt_free: DebtFreeEstimate
    total_interest_saved: float
    never_payoff_ids: list[Union[int, str]] = field(default_factory=list)


def _plain_items(items: list[tuple[str, Any]]) -> dict[str, Any]:
    plain: dict[str, Any] = {}
    for key, value in items:
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, date):
            value = value.isoformat()
        elif isinstance(value, float) and not math.isfinite(value):
            value = None
        plain[key] = value
    return plain


def to_dict(result: Any) -> dict[str, Any]:
    """Convert a report dataclass into plain, JSON-friendly values.

    Dates become ISO strings, enums their values, and the ``math.inf``
    never-payoff sentinel becomes ``None``.
    """

    return asdict(result, dict_factory=_plain_items)
