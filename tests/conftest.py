"""Shared pytest fixtures."""

from __future__ import annotations

import logging
import struct
import zlib
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable

import pytest
from PIL import Image, ImageDraw

from core.manifest import PlatformTarget, build_manifest
from utils.paths import set_app_paths

SOURCE_SIZE = 256


@pytest.fixture(autouse=True)
def isolate_app_dirs(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep log files under ``tmp_path`` and restore root logging afterwards."""

    monkeypatch.setenv("AIU_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("AIU_LOG_LEVEL", raising=False)
    monkeypatch.delenv("AIU_NO_LOG_FILE", raising=False)
    set_app_paths(None)

    root_logger = logging.getLogger()
    saved_level = root_logger.level
    yield
    # Drop handlers installed by cli.app.setup_logging; pytest's own capture handlers stay.
    for handler in list(root_logger.handlers):
        if type(handler) is logging.StreamHandler or isinstance(handler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)
    set_app_paths(None)


@pytest.fixture
def source_icon(tmp_path: Path) -> Path:
    """A square RGBA icon: transparent corners around an opaque red disc."""

    path = tmp_path / "icon.png"
    image = Image.new("RGBA", (SOURCE_SIZE, SOURCE_SIZE), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    draw.ellipse((32, 32, SOURCE_SIZE - 32, SOURCE_SIZE - 32), fill=(220, 20, 60, 255))
    image.save(path, format="PNG")
    return path


def _write_placeholder(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".ico":
        path.write_bytes(b"placeholder-ico")
        return
    Image.new("RGBA", (4, 4), (0, 0, 255, 255)).save(path, format="PNG")


@pytest.fixture
def make_placeholders() -> Callable[..., list[Path]]:
    """Return a factory that pre-creates a platform's manifest outputs under a project dir."""

    manifest = build_manifest()

    def factory(project_dir: Path, platform: PlatformTarget, *, skip: tuple[str, ...] = ()) -> list[Path]:
        created: list[Path] = []
        for entry in manifest[platform]:
            if entry.relative_path in skip:
                continue
            path = project_dir / entry.relative_path
            _write_placeholder(path)
            created.append(path)
        return created

    return factory


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data) & 0xFFFFFFFF)


@pytest.fixture
def corrupt_png(tmp_path: Path) -> Path:
    """A PNG whose pixel data is split over two IDAT chunks, the second with a garbage chunk type."""

    width = height = 8
    scanlines = b"".join(b"\x00" + b"\xff\x00\x00\xff" * width for _ in range(height))
    compressed = zlib.compress(scanlines)
    half = len(compressed) // 2
    header = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    path = tmp_path / "corrupt.png"
    path.write_bytes(
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", compressed[:half])
        + _png_chunk(b"\x01\x02\x03\x04", compressed[half:])
        + _png_chunk(b"IEND", b"")
    )
    return path
