"""Configuration domain primitives for app-icon-updater."""

from __future__ import annotations

from .paths import AppPaths
from .schema import IconConfig, RawAction, ResolvedRawAction, RunConfig
from .service import ConfigError, ConfigService, load_run_config

__all__ = [
    "AppPaths",
    "ConfigError",
    "ConfigService",
    "IconConfig",
    "RawAction",
    "ResolvedRawAction",
    "RunConfig",
    "load_run_config",
]
