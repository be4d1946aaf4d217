"""Helpers for resolving application data directories."""

from __future__ import annotations

from pathlib import Path

from core.config.paths import AppPaths

_APP_PATHS: AppPaths | None = None


def get_app_paths() -> AppPaths:
    """Return the current :class:`AppPaths` instance, creating it from the environment on first use."""

    global _APP_PATHS
    if _APP_PATHS is None:
        _APP_PATHS = AppPaths()
    return _APP_PATHS


def set_app_paths(app_paths: AppPaths | None) -> None:
    """Override the global :class:`AppPaths` instance (``None`` resets it)."""

    global _APP_PATHS
    _APP_PATHS = app_paths


def get_log_dir() -> Path:
    """Return the directory used to store application log files."""

    return get_app_paths().log_dir()


__all__ = ["get_app_paths", "get_log_dir", "set_app_paths"]
