# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Command-line entry point for unity-responsive."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ._version import __version__
from .api import ProcessOptions, ProcessResult, process_build
from .config import DEFAULT_CONFIG, BuildConfig, load_config
from .errors import ResponsiveError
from .logging import configure_logging
from .reporting import (
    PlainReporter,
    RichReporter,
    SilentReporter,
    get_reporter,
    set_reporter,
    set_verbosity,
)


def _epilog(config: BuildConfig) -> str:
    product = config.product_name
    suffix = config.compression.suffix
    return (
        "Examples:\n"
        "  unity-responsive .\n"
        "  unity-responsive ./my-unity-build\n"
        "  unity-responsive --config game.yaml /path/to/unity/build\n\n"
        "Required files in build directory:\n"
        "  - index.html\n"
        "  - TemplateData/style.css\n"
        f"  - Build/{product}.loader.js\n"
        f"  - Build/{product}.data (or .data{suffix})\n"
        f"  - Build/{product}.framework.js (or .framework.js{suffix})\n"
        f"  - Build/{product}.wasm (or .wasm{suffix})\n\n"
        "Original index.html and style.css are saved under backup/."
    )


def build_parser(config: BuildConfig = DEFAULT_CONFIG) -> argparse.ArgumentParser:
    res = config.resolution
    p = argparse.ArgumentParser(
        prog="unity-responsive",
        description=(
            "Convert a Unity web build to be responsive for portrait "
            f"orientation with {res.width}x{res.height} resolution."
        ),
        epilog=_epilog(config),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "build_path",
        nargs="?",
        type=Path,
        help="Path to the Unity build directory",
    )
    p.add_argument(
        "-c",
        "--config",
        type=Path,
        help="YAML (or JSON) file overriding product metadata and resolution",
    )
    p.add_argument(
        "--no-decompress",
        dest="decompress",
        action="store_false",
        help="Do not try to decompress compressed payloads",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate the build and render templates without writing files",
    )
    p.add_argument(
        "--atomic",
        action="store_true",
        help="Replace index.html and style.css together, rolling back on failure",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=["plain", "rich", "silent"],
        default="plain",
        help="Select reporter backend: plain (default), rich, silent",
    )
    p.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    return p


def _select_reporter(name: str) -> None:
    if name == "silent":
        set_reporter(SilentReporter())
    elif name == "rich" and sys.stderr.isatty():
        set_reporter(RichReporter())
    else:
        # rich falls back to plain when stderr is not a terminal
        set_reporter(PlainReporter())


def _print_summary(result: ProcessResult, config: BuildConfig) -> None:
    rep = get_reporter()
    res = config.resolution
    rep.status("Unity build successfully converted to responsive!")
    rep.status(f"Resolution: {res.width}x{res.height}")
    rep.status(f"Game: {config.game_title}")
    rep.status(f"Build path: {result.build_path}")
    if result.backup_dir is not None:
        rep.status(f"Backups saved in: {result.backup_dir}")


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        print(f"unity-responsive {__version__}")
        return 0
    if args.build_path is None:
        parser.print_help()
        return 0

    _select_reporter(args.reporter)
    set_verbosity(args.verbose)
    configure_logging(args.verbose)
    rep = get_reporter()

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
        result = process_build(
            ProcessOptions(
                build_path=args.build_path,
                config=config,
                decompress=args.decompress,
                dry_run=args.dry_run,
                transactional=args.atomic,
            )
        )
    except ResponsiveError as e:
        rep.error(str(e))
        rep.flush()
        return 1

    if not args.dry_run:
        _print_summary(result, config)
    rep.flush()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
