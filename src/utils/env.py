"""Helpers for interrogating runtime environment flags."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_VAR = "AIU_LOG_LEVEL"
NO_LOG_FILE_VAR = "AIU_NO_LOG_FILE"


def env_flag(name: str) -> bool:
    """Return True when environment variable ``name`` holds a truthy value."""
    value = os.environ.get(name, "")
    return value.strip().lower() not in {"", "0", "false", "no"}


def resolve_log_level(value: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its numeric value.

    Unknown names and empty values fall back to ``default``.
    """

    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    return default


def log_level_from_env(default: int = logging.INFO) -> int:
    return resolve_log_level(os.environ.get(LOG_LEVEL_VAR), default)


def file_logging_disabled() -> bool:
    return env_flag(NO_LOG_FILE_VAR)


__all__ = [
    "LOG_LEVEL_VAR",
    "NO_LOG_FILE_VAR",
    "env_flag",
    "file_logging_disabled",
    "log_level_from_env",
    "resolve_log_level",
]
