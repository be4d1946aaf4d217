"""Pydantic schemas for the icon configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.manifest import PlatformTarget
from utils.fs import resolve_against


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class RawAction(BaseModel):
    """A custom output outside the fixed manifest."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    icon: str = Field(min_length=1)
    out: str = Field(min_length=1)
    size: int = Field(gt=0)


class IconConfig(BaseModel):
    """Configuration file contents as written by the user."""

    model_config = ConfigDict(extra="ignore")

    project: str | None = None
    ios: str | None = None
    android: str | None = None
    web: str | None = None
    macos: str | None = None
    windows: str | None = None
    raw: list[RawAction] = Field(default_factory=list)

    @field_validator("project", "ios", "android", "web", "macos", "windows", mode="before")
    @classmethod
    def _normalise_optional(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("raw", mode="before")
    @classmethod
    def _normalise_raw(cls, value: Any) -> Any:
        if value is None:
            return []
        return value

    def source_for(self, platform: PlatformTarget) -> str | None:
        """Return the configured source icon for ``platform``, if any."""

        return getattr(self, platform.value)

    def resolve(self, base_dir: str | Path, *, dry_run: bool = False, config_path: Path | None = None) -> "RunConfig":
        """Return a :class:`RunConfig` with every path made absolute against ``base_dir``."""

        base = Path(base_dir)
        sources: dict[PlatformTarget, Path] = {}
        for platform in PlatformTarget:
            value = self.source_for(platform)
            if value:
                sources[platform] = resolve_against(base, value)
        raw_actions = [
            ResolvedRawAction(
                icon=resolve_against(base, action.icon),
                out=resolve_against(base, action.out),
                size=action.size,
            )
            for action in self.raw
        ]
        return RunConfig(
            config_path=config_path,
            project_dir=resolve_against(base, self.project) if self.project else base.resolve(),
            sources=sources,
            raw_actions=raw_actions,
            dry_run=dry_run,
        )


class ResolvedRawAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    icon: Path
    out: Path
    size: int = Field(gt=0)


class RunConfig(BaseModel):
    """Fully resolved, immutable inputs for one run."""

    model_config = ConfigDict(frozen=True)

    config_path: Path | None = None
    project_dir: Path
    sources: dict[PlatformTarget, Path] = Field(default_factory=dict)
    raw_actions: list[ResolvedRawAction] = Field(default_factory=list)
    dry_run: bool = False


__all__ = ["IconConfig", "RawAction", "ResolvedRawAction", "RunConfig"]
