"""Fixed per-platform icon manifest."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

ANDROID_DIR = "android/app/src/main/res"
IOS_DIR = "ios/Runner/Assets.xcassets/AppIcon.appiconset"
MACOS_DIR = "macos/Runner/Assets.xcassets/AppIcon.appiconset"
WEB_DIR = "web"
WINDOWS_DIR = "windows/runner/resources"

# Frames embedded in the Windows .ico, smallest first.
ICO_SIZES: tuple[int, ...] = (16, 24, 32, 48, 64, 128, 256)
ICO_MAX_SIZE = 256


class PlatformTarget(Enum):
    ANDROID = "android"
    IOS = "ios"
    MACOS = "macos"
    WEB = "web"
    WINDOWS = "windows"


class UnknownPlatformError(LookupError):
    """Raised when a platform has no entries in the manifest."""


@dataclass(frozen=True)
class RasterTarget:
    """A single square raster of ``size`` pixels."""

    size: int
    strip_alpha: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise ValueError(f"raster size must be a positive integer, got {self.size!r}")

    def describe(self) -> str:
        label = f"{self.size}x{self.size}"
        if self.strip_alpha:
            label += " no-alpha"
        return label


@dataclass(frozen=True)
class ContainerTarget:
    """A multi-resolution icon container (.ico) embedding ``sizes``."""

    sizes: tuple[int, ...] = ICO_SIZES

    def __post_init__(self) -> None:
        if not self.sizes:
            raise ValueError("icon container needs at least one embedded size")
        for size in self.sizes:
            if size <= 0 or size > ICO_MAX_SIZE:
                raise ValueError(f"icon container size out of range: {size!r}")

    def describe(self) -> str:
        return "ico[" + ",".join(str(size) for size in self.sizes) + "]"


ImageTarget = Union[RasterTarget, ContainerTarget]


@dataclass(frozen=True)
class ManifestEntry:
    relative_path: str
    target: ImageTarget


Manifest = Mapping[PlatformTarget, tuple[ManifestEntry, ...]]


def _android(density: str, size: int) -> tuple[PlatformTarget, str, ImageTarget]:
    return PlatformTarget.ANDROID, f"{ANDROID_DIR}/mipmap-{density}/ic_launcher.png", RasterTarget(size)


def _ios(slot: str, size: int) -> tuple[PlatformTarget, str, ImageTarget]:
    # App Store icons must not carry transparency.
    return PlatformTarget.IOS, f"{IOS_DIR}/Icon-App-{slot}.png", RasterTarget(size, strip_alpha=True)


def _macos(size: int) -> tuple[PlatformTarget, str, ImageTarget]:
    return PlatformTarget.MACOS, f"{MACOS_DIR}/app_icon_{size}.png", RasterTarget(size)


def _web_icon(size: int) -> tuple[PlatformTarget, str, ImageTarget]:
    return PlatformTarget.WEB, f"{WEB_DIR}/icons/Icon-{size}.png", RasterTarget(size)


MANIFEST_TABLE: tuple[tuple[PlatformTarget, str, ImageTarget], ...] = (
    _android("hdpi", 72),
    _android("mdpi", 48),
    _android("xhdpi", 96),
    _android("xxhdpi", 144),
    _android("xxxhdpi", 192),
    _ios("20x20@1x", 20),
    _ios("20x20@2x", 40),
    _ios("20x20@3x", 60),
    _ios("29x29@1x", 29),
    _ios("29x29@2x", 58),
    _ios("29x29@3x", 87),
    _ios("40x40@1x", 40),
    _ios("40x40@2x", 80),
    _ios("40x40@3x", 120),
    _ios("60x60@2x", 120),
    _ios("60x60@3x", 180),
    _ios("76x76@1x", 76),
    _ios("76x76@2x", 152),
    _ios("83.5x83.5@2x", 167),
    _ios("1024x1024@1x", 1024),
    _macos(16),
    _macos(32),
    _macos(64),
    _macos(128),
    _macos(256),
    _macos(512),
    _macos(1024),
    (PlatformTarget.WEB, f"{WEB_DIR}/favicon.png", RasterTarget(16)),
    _web_icon(192),
    _web_icon(512),
    (PlatformTarget.WINDOWS, f"{WINDOWS_DIR}/app_icon.ico", ContainerTarget()),
)


def build_manifest() -> Manifest:
    """Group :data:`MANIFEST_TABLE` rows by platform, preserving row order."""

    grouped: dict[PlatformTarget, list[ManifestEntry]] = {platform: [] for platform in PlatformTarget}
    for platform, relative_path, target in MANIFEST_TABLE:
        grouped[platform].append(ManifestEntry(relative_path, target))
    return MappingProxyType({platform: tuple(entries) for platform, entries in grouped.items()})


def entries_for(manifest: Manifest, platform: PlatformTarget) -> tuple[ManifestEntry, ...]:
    """Return the entries for ``platform`` or raise :class:`UnknownPlatformError`."""

    try:
        return manifest[platform]
    except KeyError:
        raise UnknownPlatformError(f"no manifest entries for platform {platform!r}") from None


__all__ = [
    "ContainerTarget",
    "ICO_MAX_SIZE",
    "ICO_SIZES",
    "ImageTarget",
    "MANIFEST_TABLE",
    "Manifest",
    "ManifestEntry",
    "PlatformTarget",
    "RasterTarget",
    "UnknownPlatformError",
    "build_manifest",
    "entries_for",
]
