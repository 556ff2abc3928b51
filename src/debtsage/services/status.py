"""Qualitative risk labels derived from a debt's rate timeline."""

from __future__ import annotations

from datetime import date, datetime

from ..constants.scoring import IMMINENT_CHANGE_DAYS, UPCOMING_CHANGE_DAYS
from ..dates import days_between
from ..models.debt import Debt
from ..models.results import DebtStatus, StatusLevel
from .rates import primary_change

STATUS_LABELS = {
    StatusLevel.NONE: "No Scheduled Change",
    StatusLevel.CRITICAL: "Active High Interest",
    StatusLevel.HIGH: "High Risk",
    StatusLevel.MEDIUM: "Upcoming Risk",
    StatusLevel.LOW: "On Track",
}


def _level_for(days_to_change: int | None) -> StatusLevel:
    if days_to_change is None:
        return StatusLevel.NONE
    if days_to_change <= 0:
        return StatusLevel.CRITICAL
    if days_to_change <= IMMINENT_CHANGE_DAYS:
        return StatusLevel.HIGH
    if days_to_change <= UPCOMING_CHANGE_DAYS:
        return StatusLevel.MEDIUM
    return StatusLevel.LOW


def classify_status(debt: Debt, *, today: date | datetime) -> DebtStatus:
    """Return the status label, level and day countdown for *debt*."""

    change = primary_change(debt, today=today)
    days_to_change = days_between(today, change.effective_on) if change else None
    level = _level_for(days_to_change)
    return DebtStatus(
        status_label=STATUS_LABELS[level],
        status_level=level,
        days_to_change=days_to_change,
    )


__all__ = ["STATUS_LABELS", "classify_status"]
