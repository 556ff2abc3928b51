"""Engine entities and report types."""

from .debt import ChangeKind, Debt, RateChange
from .records import DebtRecord, RateChangeRecord, load_debts, parse_debt
from .results import (
    Allocation,
    AllocationResult,
    DebtFreeEstimate,
    DebtStatus,
    EffectiveRateState,
    InterestProjection,
    PaymentRow,
    PayoffImpact,
    PayoffOutcome,
    PayoffReport,
    PlanComparison,
    PriorityScore,
    RateAlert,
    RateState,
    RiskBanner,
    SavingsOpportunity,
    ScoreComponents,
    StatusLevel,
    WorstOffender,
    to_dict,
)

__all__ = [
    "Allocation",
    "AllocationResult",
    "ChangeKind",
    "Debt",
    "DebtFreeEstimate",
    "DebtRecord",
    "DebtStatus",
    "EffectiveRateState",
    "InterestProjection",
    "PaymentRow",
    "PayoffImpact",
    "PayoffOutcome",
    "PayoffReport",
    "PlanComparison",
    "PriorityScore",
    "RateAlert",
    "RateChange",
    "RateChangeRecord",
    "RateState",
    "RiskBanner",
    "SavingsOpportunity",
    "ScoreComponents",
    "StatusLevel",
    "WorstOffender",
    "load_debts",
    "parse_debt",
    "to_dict",
]
