"""Debt snapshot entities consumed by the payoff engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Union

from ..constants.scoring import DEFAULT_DEBT_TYPE
from ..dates import as_date


class ChangeKind(str, Enum):
    """Why a scheduled rate change happens."""

    RATE_CHANGE = "rate_change"
    PROMO_END = "promo_end"


@dataclass(frozen=True, slots=True)
class RateChange:
    """A breakpoint on a debt's rate timeline.

    From ``effective_on`` forward (inclusive) the debt's APR becomes ``rate``.
    """

    effective_on: date
    rate: float
    kind: ChangeKind = ChangeKind.RATE_CHANGE

    def __post_init__(self) -> None:
        object.__setattr__(self, "effective_on", as_date(self.effective_on))


@dataclass(frozen=True, slots=True)
class Debt:
    """Read-only snapshot of a revolving or installment debt.

    ``rate_schedule`` is the canonical rate timeline and is always kept in
    ascending date order. A ``current_balance`` of 0 marks a retired debt.
    """

    id: Union[int, str]
    name: str
    current_balance: float
    monthly_repayment: float = 0.0
    interest_rate: float = 0.0
    rate_schedule: tuple[RateChange, ...] = ()
    debt_type: str = DEFAULT_DEBT_TYPE

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.rate_schedule, key=lambda change: change.effective_on))
        object.__setattr__(self, "rate_schedule", ordered)

    @property
    def is_retired(self) -> bool:
        return (self.current_balance or 0.0) <= 0

    @property
    def base_rate(self) -> float:
        """APR that applies before any scheduled change."""

        return float(self.interest_rate or 0.0)
