from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from core.manifest import ImageTarget


class RenderOutcome(Enum):
    WRITTEN = "written"
    DRY_RUN = "dry-run"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class RenderJob:
    source: Path
    destination: Path
    target: ImageTarget
    create_if_missing: bool = False
    label: str = ""


@dataclass(frozen=True)
class RenderResult:
    job: RenderJob
    outcome: RenderOutcome
    error: str | None = None


@dataclass
class RunSummary:
    results: list[RenderResult] = field(default_factory=list)

    def extend(self, results: list[RenderResult]) -> None:
        self.results.extend(results)

    def count(self, outcome: RenderOutcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)

    def destinations(self, outcome: RenderOutcome | None = None) -> set[Path]:
        return {
            result.job.destination
            for result in self.results
            if outcome is None or result.outcome is outcome
        }

    @property
    def written(self) -> int:
        return self.count(RenderOutcome.WRITTEN)

    @property
    def skipped(self) -> int:
        return self.count(RenderOutcome.SKIPPED)

    @property
    def failed(self) -> int:
        return self.count(RenderOutcome.FAILED)

    def describe(self) -> str:
        return (
            f"{self.written} written, {self.count(RenderOutcome.DRY_RUN)} dry-run, "
            f"{self.skipped} skipped, {self.failed} failed"
        )
