"""
Fixed domain constants for debt prioritization and interest projection.
These values match the dashboard's user-facing behavior; change them only together
with the figures shown to users.
"""

from __future__ import annotations

from dataclasses import dataclass

# Debt types that earn a tie-breaking bonus
CREDIT_CARD = "Credit Card"
PERSONAL_LOAN = "Personal Loan"
DEFAULT_DEBT_TYPE = "Other"

# APR (percent) at or above which a debt counts as high-cost revolving credit
HIGH_COST_APR = 18.0

# Priority score weights
RATE_SCORE_WEIGHT = 45.0
RATE_SCORE_CAP_PCT = 30.0
TIME_SCORE_WEIGHT = 25.0
JUMP_SCORE_WEIGHT = 20.0
JUMP_SCORE_CAP_PCT = 20.0
CREDIT_CARD_BONUS = 10.0
PERSONAL_LOAN_BONUS = 4.0

# Horizons and bands (days)
DEFAULT_HORIZON_DAYS = 90
WARNING_WINDOW_DAYS = 90
IMMINENT_CHANGE_DAYS = 30
UPCOMING_CHANGE_DAYS = 60

# Projections
PROJECTION_HORIZONS = (3, 6, 12)
OPPORTUNITY_WINDOW_MONTHS = 12
DAYS_PER_MONTH = 30
TOP_OPPORTUNITIES = 3

# Amortization
MAX_SIMULATION_MONTHS = 600  # 50 years
NEVER_MONTHS = 999


@dataclass(frozen=True, slots=True)
class ScoringWeights:
    """Weights applied to the four priority score components."""

    rate_weight: float = RATE_SCORE_WEIGHT
    rate_cap_pct: float = RATE_SCORE_CAP_PCT
    time_weight: float = TIME_SCORE_WEIGHT
    jump_weight: float = JUMP_SCORE_WEIGHT
    jump_cap_pct: float = JUMP_SCORE_CAP_PCT
    credit_card_bonus: float = CREDIT_CARD_BONUS
    personal_loan_bonus: float = PERSONAL_LOAN_BONUS

    def type_bonus(self, debt_type: str | None) -> float:
        """Return the flat bonus for ``debt_type`` (0 for unlisted types)."""

        if debt_type == CREDIT_CARD:
            return self.credit_card_bonus
        if debt_type == PERSONAL_LOAN:
            return self.personal_loan_bonus
        return 0.0


DEFAULT_WEIGHTS = ScoringWeights()
