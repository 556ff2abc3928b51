"""DebtSage payoff engine package."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .models import Debt, RateChange, load_debts
from .services.allocation import plan_allocation
from .services.reports import build_payoff_report

__all__ = [
    "BaseConfig",
    "Debt",
    "DevConfig",
    "RateChange",
    "build_payoff_report",
    "load_debts",
    "plan_allocation",
]
