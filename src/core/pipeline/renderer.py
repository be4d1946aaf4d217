"""Render one manifest or raw entry to disk."""

from __future__ import annotations

import logging

from PIL import Image

from core.manifest import ContainerTarget, RasterTarget
from utils.fs import file_exists
from utils.image_io import (
    flatten_alpha,
    open_source_image,
    resize_many,
    resize_square,
    save_icon_container,
    save_image,
)

from .types import RenderJob, RenderOutcome, RenderResult

logger = logging.getLogger(__name__)


def _prepare_parent(job: RenderJob) -> None:
    if job.create_if_missing:
        job.destination.parent.mkdir(parents=True, exist_ok=True)


def _render_raster(image: Image.Image, job: RenderJob, target: RasterTarget) -> None:
    resized = resize_square(image, target.size)
    if target.strip_alpha:
        resized = flatten_alpha(resized)
    _prepare_parent(job)
    save_image(resized, job.destination)


def _render_container(image: Image.Image, job: RenderJob, target: ContainerTarget) -> None:
    frames = resize_many(image, target.sizes)
    _prepare_parent(job)
    save_icon_container(frames, job.destination)


def render(job: RenderJob, *, dry_run: bool = False) -> RenderResult:
    """Materialise ``job`` and report what happened.

    Manifest jobs (``create_if_missing=False``) only overwrite files that are
    already there; a missing destination is a warning, not an error. Errors
    while decoding, resizing or writing are logged and returned as
    :attr:`RenderOutcome.FAILED` so sibling jobs keep going.
    """
    dest = job.destination
    if not job.create_if_missing and not file_exists(dest):
        logger.warning('Icon file missing: "%s"', dest)
        return RenderResult(job, RenderOutcome.SKIPPED)

    logger.info("%s (%s)", dest, job.target.describe())
    if dry_run:
        return RenderResult(job, RenderOutcome.DRY_RUN)

    try:
        image = open_source_image(job.source)
        target = job.target
        if isinstance(target, ContainerTarget):
            _render_container(image, job, target)
        elif isinstance(target, RasterTarget):
            _render_raster(image, job, target)
        else:
            raise TypeError(f"unsupported image target {target!r}")
    except Exception as exc:
        logger.error('Error converting file "%s": %s', dest, exc)
        return RenderResult(job, RenderOutcome.FAILED, str(exc))

    return RenderResult(job, RenderOutcome.WRITTEN)


__all__ = ["render"]
