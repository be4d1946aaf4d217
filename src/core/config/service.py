"""Loading and resolving the icon configuration file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import IconConfig, RunConfig

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class ConfigError(Exception):
    """Raised when the configuration file cannot be read, parsed or validated."""


class ConfigService:
    """Read, validate and resolve a configuration file into a :class:`RunConfig`."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser().resolve()

    @property
    def config_path(self) -> Path:
        """Absolute path to the configuration file."""

        return self._path

    @property
    def base_dir(self) -> Path:
        """Directory every relative path in the file is resolved against."""

        return self._path.parent

    def read(self) -> IconConfig:
        """Parse and validate the file, raising :class:`ConfigError` on any problem."""

        path = self._path
        try:
            raw_text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Unable to read config file {path}: {exc}") from exc

        raw_data = self._parse(raw_text)
        if not isinstance(raw_data, dict):
            raise ConfigError(f"Config file {path} must contain an object at the top level")

        try:
            return IconConfig.model_validate(raw_data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config file {path}: {exc}") from exc

    def _parse(self, raw_text: str) -> Any:
        path = self._path
        if path.suffix.lower() in YAML_SUFFIXES:
            try:
                return yaml.safe_load(raw_text)
            except yaml.YAMLError as exc:
                raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        try:
            return json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc

    def load(self, *, dry_run: bool = False) -> RunConfig:
        """Return the resolved :class:`RunConfig` for this file."""

        config = self.read().resolve(self.base_dir, dry_run=dry_run, config_path=self._path)
        logger.debug(
            "Loaded %s: project=%s platforms=%s raw=%d",
            self._path,
            config.project_dir,
            ", ".join(platform.value for platform in config.sources) or "-",
            len(config.raw_actions),
        )
        return config


def load_run_config(path: str | Path, *, dry_run: bool = False) -> RunConfig:
    """Load ``path`` with a throwaway :class:`ConfigService`."""

    return ConfigService(path).load(dry_run=dry_run)


__all__ = ["ConfigError", "ConfigService", "YAML_SUFFIXES", "load_run_config"]
