"""Build path resolution and required-file checks.

Everything here is read-only. The pipeline runs these checks to completion
before it touches the build directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from .assets import (
    ASSET_KINDS,
    BUILD_DIR,
    FileExtensionState,
    asset_filename,
    loader_filename,
)
from .config import BuildConfig
from .errors import BuildPathError, E_BUILD_PATH, missing_file
from .logging import get_logger

__all__ = [
    "INDEX_HTML",
    "STYLE_CSS",
    "resolve_build_path",
    "required_files",
    "validate_required_files",
]

INDEX_HTML = "index.html"
STYLE_CSS = "TemplateData/style.css"


def resolve_build_path(value: str | Path) -> Path:
    path = Path(value).expanduser().resolve()
    if not path.exists():
        raise BuildPathError(
            code=E_BUILD_PATH,
            message=f"Directory {path} does not exist",
            context={"path": str(path)},
        )
    if not path.is_dir():
        raise BuildPathError(
            code=E_BUILD_PATH,
            message=f"{path} is not a directory",
            context={"path": str(path)},
        )
    return path


def required_files(
    config: BuildConfig, extensions: FileExtensionState
) -> List[str]:
    """Relative paths (POSIX separators) that must exist, in check order."""
    files = [
        INDEX_HTML,
        STYLE_CSS,
        f"{BUILD_DIR}/{loader_filename(config)}",
    ]
    for kind in ASSET_KINDS:
        files.append(
            f"{BUILD_DIR}/{asset_filename(config, kind, extensions.for_asset(kind))}"
        )
    return files


def validate_required_files(
    build_path: Path, config: BuildConfig, extensions: FileExtensionState
) -> None:
    logger = get_logger()
    logger.info("Checking required files...")
    for rel in required_files(config, extensions):
        if not (build_path / rel).is_file():
            raise missing_file(rel)
        logger.debug("Found %s", rel)
    logger.info("All required files found")
