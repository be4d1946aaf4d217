"""Orchestrator running the icon manifest and raw actions through the renderer."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Sequence

from core.config import RunConfig
from core.manifest import Manifest, PlatformTarget, RasterTarget, UnknownPlatformError, build_manifest, entries_for

from .renderer import render
from .types import RenderJob, RenderOutcome, RenderResult, RunSummary

logger = logging.getLogger(__name__)


class IconUpdater:
    """Fan every configured platform's manifest out to :func:`render`."""

    def __init__(self, config: RunConfig, manifest: Manifest | None = None) -> None:
        self.config = config
        self.manifest = manifest if manifest is not None else build_manifest()

    def platform_jobs(self, platform: PlatformTarget) -> list[RenderJob]:
        """Return one job per manifest entry of ``platform``."""

        source = self.config.sources[platform]
        return [
            RenderJob(
                source=source,
                destination=self.config.project_dir / entry.relative_path,
                target=entry.target,
                create_if_missing=False,
                label=platform.value,
            )
            for entry in entries_for(self.manifest, platform)
        ]

    def raw_jobs(self) -> list[RenderJob]:
        return [
            RenderJob(
                source=action.icon,
                destination=action.out,
                target=RasterTarget(action.size),
                create_if_missing=True,
                label="raw",
            )
            for action in self.config.raw_actions
        ]

    def run_batch(self, jobs: Sequence[RenderJob]) -> list[RenderResult]:
        """Render ``jobs`` concurrently and wait for all of them."""

        if not jobs:
            return []
        results: list[RenderResult] = []
        dry_run = self.config.dry_run
        with ThreadPoolExecutor(max_workers=len(jobs), thread_name_prefix="aiu-render") as ex:
            futs = {ex.submit(render, job, dry_run=dry_run): job for job in jobs}
            for fut in as_completed(futs):
                job = futs[fut]
                try:
                    results.append(fut.result())
                except Exception as exc:
                    logger.exception('Error converting file "%s"', job.destination)
                    results.append(RenderResult(job, RenderOutcome.FAILED, str(exc)))
        # as_completed order is arbitrary; report in manifest order.
        order = {job.destination: index for index, job in enumerate(jobs)}
        results.sort(key=lambda result: order[result.job.destination])
        return results

    def run(self) -> RunSummary:
        summary = RunSummary()
        if self.config.dry_run:
            logger.info("Dry run: no files will be written.")

        for platform in PlatformTarget:
            if platform not in self.config.sources:
                continue
            logger.info("== %s (source: %s)", platform.value, self.config.sources[platform])
            try:
                jobs = self.platform_jobs(platform)
            except UnknownPlatformError as exc:
                logger.error("Skipping %s: %s", platform.value, exc)
                continue
            summary.extend(self.run_batch(jobs))

        raw = self.raw_jobs()
        if raw:
            logger.info("== raw (%d)", len(raw))
            summary.extend(self.run_batch(raw))

        logger.info("Done: %s", summary.describe())
        return summary


def run_icon_update(config: RunConfig, manifest: Manifest | None = None) -> RunSummary:
    """Convenience wrapper around :class:`IconUpdater`."""

    return IconUpdater(config, manifest).run()


__all__ = ["IconUpdater", "run_icon_update"]
