"""Error definitions for unity-responsive."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

E_BUILD_PATH = "E_BUILD_PATH"
E_MISSING_FILE = "E_MISSING_FILE"
E_CONFIG = "E_CONFIG"
E_WRITE_IO = "E_WRITE_IO"


@dataclass
class ResponsiveError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message


class BuildPathError(ResponsiveError):
    pass


class MissingFileError(ResponsiveError):
    pass


class ConfigError(ResponsiveError):
    pass


def missing_file(relative: str) -> MissingFileError:
    return MissingFileError(
        code=E_MISSING_FILE,
        message=f"Required file {relative} not found",
        context={"file": relative},
    )


def config_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> ConfigError:
    return ConfigError(code=E_CONFIG, message=message, context=context)


__all__ = [
    "ResponsiveError",
    "BuildPathError",
    "MissingFileError",
    "ConfigError",
    "missing_file",
    "config_error",
    "E_BUILD_PATH",
    "E_MISSING_FILE",
    "E_CONFIG",
    "E_WRITE_IO",
]
