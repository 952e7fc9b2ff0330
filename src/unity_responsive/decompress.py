"""Decompress compressed payloads with an external tool.

Each payload is handled in order. A compressed file whose uncompressed
counterpart already exists is left alone. A missing tool skips the whole
phase, and a failing invocation is reported without aborting the run: the
required-file check later decides whether the build is still usable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .assets import ASSET_KINDS, asset_filename, asset_path
from .config import BuildConfig
from .logging import get_logger
from .runner import CommandRunner

__all__ = ["DecompressionSummary", "decompress_assets"]


@dataclass(slots=True)
class DecompressionSummary:
    tool_available: bool
    decompressed: int = 0
    skipped: int = 0
    failed: int = 0


def decompress_assets(
    build_path: Path, config: BuildConfig, runner: CommandRunner
) -> DecompressionSummary:
    logger = get_logger()
    tool = config.compression.tool
    suffix = config.compression.suffix

    if not runner.is_available():
        logger.warning("'%s' command not found. Skipping decompression.", tool)
        logger.warning(
            "Install it with your package manager (e.g. brew install %s)",
            tool,
        )
        return DecompressionSummary(tool_available=False)

    summary = DecompressionSummary(tool_available=True)
    logger.info("Checking for compressed files...")

    for kind in ASSET_KINDS:
        compressed = asset_path(build_path, config, kind, suffix)
        uncompressed = asset_path(build_path, config, kind)
        if not compressed.exists():
            continue
        if uncompressed.exists():
            summary.skipped += 1
            logger.info(
                "%s already exists, skipping %s",
                uncompressed.name,
                compressed.name,
            )
            continue

        logger.info("Decompressing %s...", compressed.name)
        try:
            result = runner.run(["-d", str(compressed)])
        except OSError as e:
            summary.failed += 1
            logger.error("Failed to decompress %s: %s", compressed.name, e)
            continue
        if result.ok:
            summary.decompressed += 1
            logger.debug("Wrote %s", asset_filename(config, kind))
        else:
            summary.failed += 1
            detail = (result.stderr or result.stdout).strip()
            logger.error(
                "Failed to decompress %s: exit code %d%s",
                compressed.name,
                result.returncode,
                f" ({detail})" if detail else "",
            )

    if summary.decompressed:
        logger.info("Decompressed %d file(s)", summary.decompressed)
    elif summary.skipped:
        logger.info(
            "All files already decompressed (%d skipped)", summary.skipped
        )
    elif not summary.failed:
        logger.info("No compressed files found or already decompressed")
    return summary
