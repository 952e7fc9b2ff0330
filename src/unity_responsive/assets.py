"""Unity payload files and their compression state.

A Unity WebGL build ships three large payloads under ``Build/``: the data
archive, the framework script and the WebAssembly code module. Each may be
present uncompressed, compressed (``<name><suffix>``), or both.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Tuple

from .config import BuildConfig
from .logging import get_logger

__all__ = [
    "BUILD_DIR",
    "AssetKind",
    "ASSET_KINDS",
    "FileExtensionState",
    "asset_filename",
    "asset_path",
    "loader_filename",
    "detect_extensions",
    "resolve_extensions",
]

BUILD_DIR = "Build"


class AssetKind(Enum):
    DATA = "data"
    FRAMEWORK = "framework"
    CODE = "code"


ASSET_KINDS: Tuple[AssetKind, ...] = (
    AssetKind.DATA,
    AssetKind.FRAMEWORK,
    AssetKind.CODE,
)

# File name stem after "<product>."
_ASSET_STEMS: Dict[AssetKind, str] = {
    AssetKind.DATA: "data",
    AssetKind.FRAMEWORK: "framework.js",
    AssetKind.CODE: "wasm",
}


@dataclass(frozen=True, slots=True)
class FileExtensionState:
    """Extension appended to each payload file name ("" or the suffix)."""

    data: str = ""
    framework: str = ""
    code: str = ""

    def for_asset(self, kind: AssetKind) -> str:
        return getattr(self, kind.value)

    def replace(self, kind: AssetKind, ext: str) -> "FileExtensionState":
        return dataclasses.replace(self, **{kind.value: ext})

    def describe(self) -> str:
        return (
            f"data{self.data}, framework{self.framework}, wasm{self.code}"
        )


def asset_filename(config: BuildConfig, kind: AssetKind, ext: str = "") -> str:
    return f"{config.product_name}.{_ASSET_STEMS[kind]}{ext}"


def asset_path(
    build_path: Path, config: BuildConfig, kind: AssetKind, ext: str = ""
) -> Path:
    return build_path / BUILD_DIR / asset_filename(config, kind, ext)


def loader_filename(config: BuildConfig) -> str:
    return f"{config.product_name}.loader.js"


def detect_extensions(
    build_path: Path, config: BuildConfig
) -> FileExtensionState:
    """Flag every payload whose compressed variant exists on disk."""
    suffix = config.compression.suffix
    state = FileExtensionState()
    for kind in ASSET_KINDS:
        if asset_path(build_path, config, kind, suffix).exists():
            state = state.replace(kind, suffix)
    return state


def resolve_extensions(
    build_path: Path, config: BuildConfig, detected: FileExtensionState
) -> FileExtensionState:
    """Prefer the uncompressed variant of each payload whenever it exists."""
    logger = get_logger()
    state = detected
    for kind in ASSET_KINDS:
        if state.for_asset(kind) and asset_path(build_path, config, kind).exists():
            logger.debug(
                "Using uncompressed %s", asset_filename(config, kind)
            )
            state = state.replace(kind, "")
    return state
