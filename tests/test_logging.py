"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from debtsage.config import BaseConfig
from debtsage.logging_config import JSONFormatter, get_logger, setup_logging


def test_json_formatter():
    """JSONFormatter renders the core record fields."""
    formatter = JSONFormatter()
    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    record.module = "test_module"
    record.funcName = "test_function"

    log_data = json.loads(formatter.format(record))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception_and_extra():
    formatter = JSONFormatter()
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    record = logging.LogRecord(
        name="test.logger",
        level=logging.ERROR,
        pathname="test.py",
        lineno=42,
        msg="Error occurred",
        args=(),
        exc_info=exc_info,
    )
    record.debts = 3

    log_data = json.loads(formatter.format(record))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None
    assert log_data["extra"] == {"debts": 3}


def test_setup_logging(isolated_env):
    """Logging writes JSON lines to a rotating file under DATA_DIR/logs."""
    config = BaseConfig()

    logger = setup_logging(config)

    assert logger.name == "debtsage"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = isolated_env / "logs" / "debtsage.log"
    assert log_file.exists()

    get_logger("services.reports").info("Payoff report built", extra={"debts": 2})
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    entries = [json.loads(line) for line in lines]
    assert entries[0]["message"] == "Logging initialized"
    assert entries[-1]["logger"] == "debtsage.services.reports"
    assert entries[-1]["extra"] == {"debts": 2}


def test_get_logger():
    """get_logger namespaces loggers under the package logger."""
    assert get_logger("module1").name == "debtsage.module1"
    assert get_logger("debtsage.services.allocation").name == "debtsage.services.allocation"
    assert get_logger("module1") is not get_logger("module2")


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(isolated_env, dev_mode):
    """Console logging level adjusts based on dev mode."""
    config = BaseConfig()
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )
    expected_level = logging.INFO if dev_mode else logging.WARNING
    assert console_handler.level == expected_level
