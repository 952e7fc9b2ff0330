# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Write the rendered page and stylesheet back into the build directory."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Dict, List

from .errors import E_WRITE_IO, ResponsiveError
from .logging import get_logger
from .render import RenderedPage
from .validation import INDEX_HTML, STYLE_CSS

__all__ = ["output_files", "write_outputs", "transactional_write_files"]


def output_files(build_path: Path, page: RenderedPage) -> Dict[Path, str]:
    # Insertion order is write order: page first, then stylesheet.
    return {
        build_path / INDEX_HTML: page.html,
        build_path / STYLE_CSS: page.css,
    }


def transactional_write_files(files: Dict[Path, str]) -> List[Path]:
    """Write multiple files as a single transaction.

    - Writes each content to a temp file next to its target first.
    - Targets whose content already matches are left alone.
    - Changed targets are backed up, then replaced with the temp file.
    - If any step fails, replaced targets are restored from their backups,
      temp files are removed and ResponsiveError(E_WRITE_IO) is raised.

    Returns the targets whose content changed.
    """
    tmp_suffix = ".tmp.tx"
    bak_suffix = ".bak.tx"
    staged: List[tuple[Path, Path]] = []
    replaced: List[Path] = []
    backups: Dict[Path, Path] = {}
    created_new: set[Path] = set()

    try:
        for target, content in files.items():
            if target.exists() and target.read_bytes() == content.encode("utf-8"):
                continue
            tmp = target.with_name(target.name + tmp_suffix)
            tmp.write_text(content, encoding="utf-8")
            staged.append((target, tmp))

        for target, tmp in staged:
            if target.exists():
                bak = target.with_name(target.name + bak_suffix)
                shutil.copyfile(target, bak)
                backups[target] = bak
            else:
                created_new.add(target)
            os.replace(tmp, target)
            replaced.append(target)
    except OSError as e:
        # Rollback is best effort; the original error is what gets reported.
        # A backup that could not be restored stays on disk.
        unrestored: List[Path] = []
        for target in replaced:
            bak = backups.get(target)
            try:
                if bak is not None and bak.exists():
                    os.replace(bak, target)
                elif target in created_new:
                    target.unlink(missing_ok=True)
            except OSError:
                if bak is not None:
                    unrestored.append(bak)
        for _, tmp in staged:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                pass
        for bak in backups.values():
            if bak in unrestored:
                continue
            try:
                bak.unlink(missing_ok=True)
            except OSError:
                pass
        context: Dict[str, object] = {"files": [str(p) for p in files]}
        if unrestored:
            context["backups"] = [str(p) for p in unrestored]
        raise ResponsiveError(
            code=E_WRITE_IO,
            message=f"Transactional write failed: {e}",
            context=context,
        ) from e

    for bak in backups.values():
        bak.unlink(missing_ok=True)
    return replaced


def write_outputs(
    build_path: Path, page: RenderedPage, *, transactional: bool = False
) -> List[Path]:
    """Overwrite index.html and style.css with the rendered content.

    The default mode writes the two files one after the other; an I/O error
    on the second write leaves the first one already replaced. The
    transactional mode stages both files and rolls back on failure.
    """
    logger = get_logger()
    files = output_files(build_path, page)
    if transactional:
        changed = transactional_write_files(files)
        for path in files:
            state = "updated" if path in changed else "unchanged"
            logger.info("%s %s", path.name, state)
        return list(files)

    for path, content in files.items():
        path.write_text(content, encoding="utf-8")
        logger.info("%s updated", path.name)
    return list(files)
