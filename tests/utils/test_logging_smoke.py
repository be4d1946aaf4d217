"""Smoke tests covering the logging bootstrap helper."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from cli.app import setup_logging
from utils.paths import get_log_dir


def _flush_root() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


def test_setup_logging_creates_rotating_file() -> None:
    """setup_logging should prepare the log file and accept writes."""

    setup_logging()
    logger = logging.getLogger("app-icon-updater.tests")
    message = "logging smoke test"
    logger.info(message)
    _flush_root()

    log_path = get_log_dir() / "app.log"
    assert log_path.exists()
    contents = log_path.read_text(encoding="utf-8")
    assert message in contents
    assert "INFO [app-icon-updater.tests]" in contents


def test_setup_logging_without_file(monkeypatch) -> None:
    monkeypatch.setenv("AIU_LOG_LEVEL", "warning")

    setup_logging(log_file=False)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.WARNING
    assert not any(isinstance(handler, RotatingFileHandler) for handler in root_logger.handlers)
    assert not (get_log_dir() / "app.log").exists()
