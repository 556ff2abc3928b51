"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from debtsage.config import BaseConfig, DevConfig
from debtsage.constants.scoring import DEFAULT_WEIGHTS


def test_defaults(isolated_env):
    config = BaseConfig()

    assert config.DATA_DIR == isolated_env.resolve()
    assert config.DEV_MODE is False
    assert config.HORIZON_DAYS == 90
    assert config.WARNING_WINDOW_DAYS == 90
    assert config.HIGH_COST_APR == 18.0
    assert config.scoring_weights() == DEFAULT_WEIGHTS


def test_dev_config(isolated_env, monkeypatch):
    monkeypatch.setenv("DEBTSAGE_DEV_MODE", "yes")

    config = DevConfig()

    assert config.DEV_MODE is True
    assert config.DEBUG is True


def test_numeric_overrides(isolated_env, monkeypatch):
    monkeypatch.setenv("DEBTSAGE_HORIZON_DAYS", "60")
    monkeypatch.setenv("DEBTSAGE_HIGH_COST_APR", "20.5")
    monkeypatch.setenv("DEBTSAGE_WEIGHT_RATE", "50")

    config = BaseConfig()

    assert config.HORIZON_DAYS == 60
    assert config.HIGH_COST_APR == 20.5
    assert config.scoring_weights().rate_weight == 50.0


@pytest.mark.parametrize(
    "name, value",
    [
        ("DEBTSAGE_HORIZON_DAYS", "soon"),
        ("DEBTSAGE_HORIZON_DAYS", "7.5"),
        ("DEBTSAGE_HORIZON_DAYS", "0"),
        ("DEBTSAGE_HIGH_COST_APR", "high"),
    ],
)
def test_invalid_values_raise(isolated_env, monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        BaseConfig()


def test_data_dir_is_created(tmp_path, monkeypatch):
    target = tmp_path / "nested" / "data"
    monkeypatch.setenv("DEBTSAGE_DATA_DIR", str(target))

    config = BaseConfig()

    assert config.DATA_DIR == target.resolve()
    assert target.is_dir()
