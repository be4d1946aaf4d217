"""Filesystem helpers shared across app-icon-updater modules."""

from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

TMP_SUFFIX = ".tmp"


def resolve_against(base_dir: str | Path, value: str | Path) -> Path:
    """Resolve ``value`` relative to ``base_dir`` unless it is already absolute."""

    candidate = Path(value).expanduser()
    if not candidate.is_absolute():
        candidate = Path(base_dir) / candidate
    return candidate.resolve()


def file_exists(path: str | Path) -> bool:
    """Return True when ``path`` exists and is a regular file."""

    return Path(path).is_file()


@contextmanager
def atomic_destination(destination: Path) -> Iterator[Path]:
    """Yield a temporary sibling of ``destination`` and move it into place on success.

    The temporary file is removed when the body raises.
    """
    tmp_path = destination.with_name(destination.name + TMP_SUFFIX)
    try:
        yield tmp_path
        os.replace(tmp_path, destination)
    except BaseException:
        try:
            tmp_path.unlink()
        except FileNotFoundError:
            pass
        raise


__all__ = ["TMP_SUFFIX", "atomic_destination", "file_exists", "resolve_against"]
