"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from .constants.scoring import (
    CREDIT_CARD_BONUS,
    DEFAULT_HORIZON_DAYS,
    HIGH_COST_APR,
    JUMP_SCORE_CAP_PCT,
    JUMP_SCORE_WEIGHT,
    PERSONAL_LOAN_BONUS,
    RATE_SCORE_CAP_PCT,
    RATE_SCORE_WEIGHT,
    TIME_SCORE_WEIGHT,
    WARNING_WINDOW_DAYS,
    ScoringWeights,
)

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    """Read a numeric environment variable, rejecting malformed values."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}.") from exc


def _env_int(name: str, default: int) -> int:
    value = _env_float(name, float(default))
    if not value.is_integer():
        raise ValueError(f"{name} must be a whole number, got {value!r}.")
    return int(value)


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "DebtSage"
    LOG_FILENAME = "debtsage.log"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("DEBTSAGE_DEV_MODE", default=True)
        self.HORIZON_DAYS = _env_int("DEBTSAGE_HORIZON_DAYS", DEFAULT_HORIZON_DAYS)
        self.WARNING_WINDOW_DAYS = _env_int("DEBTSAGE_WARNING_WINDOW_DAYS", WARNING_WINDOW_DAYS)
        self.HIGH_COST_APR = _env_float("DEBTSAGE_HIGH_COST_APR", HIGH_COST_APR)
        if self.HORIZON_DAYS <= 0:
            raise ValueError("DEBTSAGE_HORIZON_DAYS must be positive.")
        if self.WARNING_WINDOW_DAYS < 0:
            raise ValueError("DEBTSAGE_WARNING_WINDOW_DAYS must not be negative.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("DEBTSAGE_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Protected install locations fall back to user-local storage.
            local_app_data = os.getenv("LOCALAPPDATA") or (Path.home() / "AppData" / "Local")
            fallback_path = Path(local_app_data).expanduser() / self.APP_NAME
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()

    def scoring_weights(self) -> ScoringWeights:
        """Return priority weights, honoring ``DEBTSAGE_WEIGHT_*`` overrides."""

        return ScoringWeights(
            rate_weight=_env_float("DEBTSAGE_WEIGHT_RATE", RATE_SCORE_WEIGHT),
            rate_cap_pct=_env_float("DEBTSAGE_WEIGHT_RATE_CAP", RATE_SCORE_CAP_PCT),
            time_weight=_env_float("DEBTSAGE_WEIGHT_TIME", TIME_SCORE_WEIGHT),
            jump_weight=_env_float("DEBTSAGE_WEIGHT_JUMP", JUMP_SCORE_WEIGHT),
            jump_cap_pct=_env_float("DEBTSAGE_WEIGHT_JUMP_CAP", JUMP_SCORE_CAP_PCT),
            credit_card_bonus=_env_float("DEBTSAGE_WEIGHT_CREDIT_CARD", CREDIT_CARD_BONUS),
            personal_loan_bonus=_env_float("DEBTSAGE_WEIGHT_PERSONAL_LOAN", PERSONAL_LOAN_BONUS),
        )


class DevConfig(BaseConfig):
    """Development configuration with verbose console logging."""

    DEBUG = True
    TESTING = False
