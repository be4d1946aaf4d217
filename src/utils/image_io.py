"""Image input/output utilities built atop Pillow."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Sequence

from PIL import Image, UnidentifiedImageError

from utils.fs import atomic_destination

DEFAULT_FORMAT = "PNG"
OPAQUE_BACKGROUND = (255, 255, 255)
# Formats whose encoders reject an alpha channel.
_NO_ALPHA_FORMATS = {"JPEG"}


class ImageProcessingError(Exception):
    """Raised when a source image cannot be decoded or an output cannot be encoded."""


def open_source_image(source: str | Path) -> Image.Image:
    """Decode ``source`` fully into memory as an RGBA image."""

    path = Path(source)
    try:
        with Image.open(path) as img:
            img.load()
            return img.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, SyntaxError) as exc:
        raise ImageProcessingError(f"cannot decode {path}: {exc}") from exc


def resize_square(image: Image.Image, size: int) -> Image.Image:
    """Return a ``size`` x ``size`` LANCZOS resize of ``image``.

    The aspect ratio is not preserved; sources are expected to be square.
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    return image.resize((size, size), Image.Resampling.LANCZOS)


def flatten_alpha(image: Image.Image, background: tuple[int, int, int] = OPAQUE_BACKGROUND) -> Image.Image:
    """Composite ``image`` onto an opaque ``background`` and drop the alpha channel."""

    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    canvas = Image.new("RGBA", rgba.size, (*background, 255))
    canvas.alpha_composite(rgba)
    return canvas.convert("RGB")


def format_for_path(path: str | Path) -> str:
    """Return the Pillow format name for ``path``'s suffix (PNG when unknown)."""

    suffix = Path(path).suffix.lower()
    return Image.registered_extensions().get(suffix, DEFAULT_FORMAT)


def save_image(image: Image.Image, destination: str | Path, *, format: str | None = None) -> Path:
    """Encode ``image`` to ``destination`` atomically."""

    target = Path(destination)
    fmt = format or format_for_path(target)
    if fmt in _NO_ALPHA_FORMATS and image.mode not in ("RGB", "L"):
        image = flatten_alpha(image)
    with atomic_destination(target) as tmp_path:
        try:
            image.save(tmp_path, format=fmt)
        except KeyError as exc:
            raise ImageProcessingError(f"unsupported output format {fmt!r} for {target}") from exc
    return target


def resize_many(image: Image.Image, sizes: Iterable[int]) -> list[Image.Image]:
    """Resize ``image`` independently to every size in ``sizes``, keeping order."""

    wanted = list(sizes)
    if not wanted:
        return []
    with ThreadPoolExecutor(max_workers=len(wanted), thread_name_prefix="aiu-ico") as ex:
        return list(ex.map(lambda size: resize_square(image, size), wanted))


def save_icon_container(frames: Sequence[Image.Image], destination: str | Path) -> Path:
    """Pack square ``frames`` into one multi-resolution .ico at ``destination``.

    Pillow only embeds sizes up to the base image, so the largest frame is the
    base and the others ride along as ``append_images``; every embedded frame
    is therefore the caller's own raster rather than a re-thumbnail.
    """
    if not frames:
        raise ImageProcessingError("icon container needs at least one frame")
    ordered = sorted(frames, key=lambda frame: frame.size[0], reverse=True)
    base, rest = ordered[0], ordered[1:]
    target = Path(destination)
    with atomic_destination(target) as tmp_path:
        base.save(
            tmp_path,
            format="ICO",
            sizes=[frame.size for frame in ordered],
            append_images=rest,
        )
    return target


__all__ = [
    "DEFAULT_FORMAT",
    "ImageProcessingError",
    "OPAQUE_BACKGROUND",
    "flatten_alpha",
    "format_for_path",
    "open_source_image",
    "resize_many",
    "resize_square",
    "save_icon_container",
    "save_image",
]
