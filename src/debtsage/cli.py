"""Command-line entry points for running the payoff engine on a JSON file."""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from .config import BaseConfig
from .logging_config import setup_logging
from .models import load_debts, to_dict
from .models.debt import Debt
from .services.alerts import get_debt_risk_banners, get_rate_warnings
from .services.reports import build_payoff_report


def _read_debts(path: Path) -> list[Debt]:
    """Load dashboard debt dictionaries from *path* (a list or ``{"debts": [...]}``)."""

    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"{path} is not valid JSON: {exc}") from exc
    rows = payload.get("debts", []) if isinstance(payload, dict) else payload
    if not isinstance(rows, list):
        raise click.ClickException("Expected a list of debts.")
    try:
        return load_debts(rows)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid debt record: {exc}") from exc


def _resolve_today(value: datetime | None) -> date:
    return value.date() if value is not None else date.today()


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, default=str, allow_nan=False))


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """DebtSage payoff planning tools."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = config


@main.command("plan")
@click.argument("debts_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--surplus", type=click.FloatRange(min=0), default=0.0, show_default=True)
@click.option("--today", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
@click.option("--horizon", type=click.IntRange(min=1), default=None, help="Scoring horizon in days")
@click.pass_obj
def plan(
    config: BaseConfig,
    debts_file: Path,
    surplus: float,
    today: datetime | None,
    horizon: int | None,
) -> None:
    """Print the full payoff report for DEBTS_FILE as JSON."""

    debts = _read_debts(debts_file)
    report = build_payoff_report(
        debts, surplus, today=_resolve_today(today), horizon_days=horizon, config=config
    )
    _echo_json(to_dict(report))


@main.command("warnings")
@click.argument("debts_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--today", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
@click.pass_obj
def warnings_command(config: BaseConfig, debts_file: Path, today: datetime | None) -> None:
    """Print rate alerts and risk banners for DEBTS_FILE as JSON."""

    debts = _read_debts(debts_file)
    day = _resolve_today(today)
    alerts = get_rate_warnings(
        debts,
        today=day,
        window_days=config.WARNING_WINDOW_DAYS,
        high_cost_apr=config.HIGH_COST_APR,
    )
    banners = get_debt_risk_banners(debts, today=day, high_cost_apr=config.HIGH_COST_APR)
    _echo_json(
        {
            "alerts": [to_dict(alert) for alert in alerts],
            "banners": [to_dict(banner) for banner in banners],
        }
    )


if __name__ == "__main__":  # pragma: no cover
    main()
