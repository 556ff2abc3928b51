"""Validated debt records at the boundary between user settings and the engine.

The dashboard stores debts as camelCase dictionaries (``currentBalance``,
``futureRates``, ``promoEndDate`` ...). These models validate that payload and
collapse its optional date fields into the single canonical rate timeline the
engine works with. Validation errors are raised here, never inside the engine.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, List, Mapping, Optional, Union

from sqlmodel import Field, SQLModel

from ..constants.scoring import DEFAULT_DEBT_TYPE
from .debt import ChangeKind, Debt, RateChange

_DEBT_KEYS = {
    "currentBalance": "current_balance",
    "monthlyRepayment": "monthly_repayment",
    "interestRate": "interest_rate",
    "futureRates": "future_rates",
    "promoEndDate": "promo_end_date",
    "rateChangeEffectiveDate": "rate_change_effective_date",
    "debtType": "debt_type",
}
_RATE_KEYS = {"date": "effective_on", "effectiveDate": "effective_on"}


class RateChangeRecord(SQLModel):
    """A scheduled rate change as entered by the user."""

    effective_on: date
    rate: float = Field(ge=0)


class DebtRecord(SQLModel):
    """User-entered debt, validated before it reaches the engine."""

    id: Union[int, str]
    name: str = Field(default="", max_length=80)
    current_balance: float = Field(ge=0)
    monthly_repayment: float = Field(default=0.0, ge=0)
    interest_rate: float = Field(default=0.0, ge=0)
    future_rates: List[RateChangeRecord] = Field(default_factory=list)
    promo_end_date: Optional[date] = None
    rate_change_effective_date: Optional[date] = None
    debt_type: str = Field(default=DEFAULT_DEBT_TYPE, max_length=40)

    def rate_schedule(self) -> tuple[RateChange, ...]:
        """Return the canonical timeline built from all schedule fields.

        ``promo_end_date`` takes precedence over ``rate_change_effective_date``.
        Entries dated on that anchor are tagged with its kind; if no entry falls on
        the anchor, the first listed entry is moved onto it.
        """

        changes = [RateChange(entry.effective_on, entry.rate) for entry in self.future_rates]
        anchor = self.promo_end_date or self.rate_change_effective_date
        if anchor is None or not changes:
            return tuple(changes)

        kind = ChangeKind.PROMO_END if self.promo_end_date else ChangeKind.RATE_CHANGE
        if any(change.effective_on == anchor for change in changes):
            return tuple(
                RateChange(change.effective_on, change.rate, kind)
                if change.effective_on == anchor
                else change
                for change in changes
            )
        changes[0] = RateChange(anchor, changes[0].rate, kind)
        return tuple(changes)

    def to_debt(self) -> Debt:
        """Build the immutable snapshot consumed by the payoff engine."""

        return Debt(
            id=self.id,
            name=self.name or str(self.id),
            current_balance=self.current_balance,
            monthly_repayment=self.monthly_repayment,
            interest_rate=self.interest_rate,
            rate_schedule=self.rate_schedule(),
            debt_type=self.debt_type or DEFAULT_DEBT_TYPE,
        )


def _rename(row: Mapping[str, Any], keys: Mapping[str, str]) -> dict[str, Any]:
    # Null optional fields fall back to model defaults.
    return {keys.get(key, key): value for key, value in row.items() if value is not None}


def parse_debt(row: Mapping[str, Any]) -> DebtRecord:
    """Validate a single dashboard debt dictionary."""

    data = _rename(row, _DEBT_KEYS)
    data["future_rates"] = [_rename(entry, _RATE_KEYS) for entry in data.get("future_rates", [])]
    return DebtRecord.model_validate(data)


def load_debts(rows: Iterable[Mapping[str, Any]]) -> list[Debt]:
    """Validate dashboard debt dictionaries and convert them to engine snapshots."""

    return [parse_debt(row).to_debt() for row in rows]


__all__ = ["DebtRecord", "RateChangeRecord", "load_debts", "parse_debt"]
