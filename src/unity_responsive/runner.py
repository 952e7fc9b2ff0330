"""External command capability used to invoke the decompressor.

The pipeline never calls :mod:`subprocess` directly; it goes through a
:class:`CommandRunner` so tests can simulate a missing tool or a failing
invocation.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Protocol, Sequence

from .logging import get_logger

__all__ = ["CommandResult", "CommandRunner", "SubprocessRunner"]


@dataclass(frozen=True, slots=True)
class CommandResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    def is_available(self) -> bool: ...

    def run(self, args: Sequence[str]) -> CommandResult: ...


class SubprocessRunner:
    """Run a named executable found on ``PATH``."""

    def __init__(self, tool: str):
        self.tool = tool

    def is_available(self) -> bool:
        return shutil.which(self.tool) is not None

    def run(self, args: Sequence[str]) -> CommandResult:
        cmd = [self.tool, *args]
        get_logger().debug(
            "Running: %s", " ".join(shlex.quote(a) for a in cmd)
        )
        result = subprocess.run(
            cmd, capture_output=True, text=True, check=False
        )
        return CommandResult(result.returncode, result.stdout, result.stderr)
