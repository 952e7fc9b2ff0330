"""High-level pipeline for unity-responsive.

:func:`process_build` runs in two phases. The first phase only reads the build
directory (apart from decompressed payloads, which are new files) and fails
with a :class:`~unity_responsive.errors.ResponsiveError` before anything is
overwritten. The second phase backs up and rewrites the entry page and the
stylesheet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .assets import FileExtensionState, detect_extensions, resolve_extensions
from .backup import create_backups
from .config import DEFAULT_CONFIG, BuildConfig
from .decompress import DecompressionSummary, decompress_assets
from .logging import get_logger, section
from .render import RenderedPage, render_page
from .reporting import TaskStatus, task
from .runner import CommandRunner, SubprocessRunner
from .validation import resolve_build_path, validate_required_files
from .writer import write_outputs

__all__ = [
    "ProcessOptions",
    "ProcessResult",
    "prepare_build",
    "process_build",
]


@dataclass(slots=True)
class ProcessOptions:
    build_path: Path
    config: BuildConfig = DEFAULT_CONFIG
    # None means a SubprocessRunner for config.compression.tool
    runner: Optional[CommandRunner] = None
    decompress: bool = True
    dry_run: bool = False
    transactional: bool = False


@dataclass(slots=True)
class ProcessResult:
    build_path: Path
    extensions: FileExtensionState
    page: RenderedPage
    decompression: Optional[DecompressionSummary] = None
    backup_dir: Optional[Path] = None
    written: List[Path] = field(default_factory=list)


def prepare_build(
    options: ProcessOptions,
) -> tuple[Path, FileExtensionState, Optional[DecompressionSummary]]:
    """Phase one: resolve, decompress, detect extensions and validate."""
    logger = get_logger()
    config = options.config
    build_path = resolve_build_path(options.build_path)
    logger.info("Processing Unity build at: %s", build_path)

    summary: Optional[DecompressionSummary] = None
    if options.decompress:
        runner = options.runner or SubprocessRunner(config.compression.tool)
        with section("Decompress"):
            with task("decompress", "Decompress payloads") as t:
                summary = decompress_assets(build_path, config, runner)
                if summary.tool_available:
                    t.meta.update(
                        decompressed=summary.decompressed,
                        skipped=summary.skipped,
                        failed=summary.failed,
                    )
                else:
                    t.status = TaskStatus.SKIPPED

    with section("Validate"):
        detected = detect_extensions(build_path, config)
        extensions = resolve_extensions(build_path, config, detected)
        logger.info("Detected extensions: %s", extensions.describe())
        validate_required_files(build_path, config, extensions)

    return build_path, extensions, summary


def process_build(options: ProcessOptions) -> ProcessResult:
    logger = get_logger()
    config = options.config
    build_path, extensions, summary = prepare_build(options)

    page = render_page(extensions, config)
    result = ProcessResult(
        build_path=build_path,
        extensions=extensions,
        page=page,
        decompression=summary,
    )
    if options.dry_run:
        logger.info("[DRY RUN] No files written")
        return result

    with section("Write"):
        with task("backup", "Create backups"):
            result.backup_dir = create_backups(build_path)
        with task("write", "Write responsive files", files=2):
            result.written = write_outputs(
                build_path, page, transactional=options.transactional
            )
    return result
