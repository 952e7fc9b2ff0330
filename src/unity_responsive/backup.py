"""Back up the files the pipeline is about to overwrite."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

from .logging import get_logger
from .validation import INDEX_HTML, STYLE_CSS

__all__ = ["BACKUP_DIR", "BACKUP_SUFFIX", "backup_targets", "create_backups"]

BACKUP_DIR = "backup"
BACKUP_SUFFIX = ".backup"


def backup_targets(build_path: Path) -> List[tuple[Path, Path]]:
    backup_dir = build_path / BACKUP_DIR
    pairs = []
    for rel in (INDEX_HTML, STYLE_CSS):
        src = build_path / rel
        pairs.append((src, backup_dir / f"{src.name}{BACKUP_SUFFIX}"))
    return pairs


def create_backups(build_path: Path) -> Path:
    """Copy index.html and style.css into ``backup/``; return that directory.

    Existing backups are overwritten. Copy errors propagate.
    """
    logger = get_logger()
    backup_dir = build_path / BACKUP_DIR
    backup_dir.mkdir(exist_ok=True)
    for src, dst in backup_targets(build_path):
        shutil.copyfile(src, dst)
        logger.debug("Backed up %s -> %s", src.name, dst.name)
    logger.info("Backups created")
    return backup_dir
