"""Build configuration: product metadata, target resolution, compression.

The configuration is immutable and constructed once per run, either from the
built-in defaults or from a YAML/JSON override file, then passed explicitly to
every stage of the pipeline.
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import config_error

__all__ = [
    "Resolution",
    "CompressionConfig",
    "BuildConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "config_from_dict",
]


@dataclass(frozen=True, slots=True)
class Resolution:
    width: int = 1080
    height: int = 2400

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


@dataclass(frozen=True, slots=True)
class CompressionConfig:
    suffix: str = ".br"
    tool: str = "brotli"


@dataclass(frozen=True, slots=True)
class BuildConfig:
    resolution: Resolution = field(default_factory=Resolution)
    game_title: str = "La Gran Travesia Constitucional"
    company_name: str = "NolimStudios"
    product_name: str = "La_Gran_Travesia_Constitucional"
    product_version: str = "1.0"
    icon: str = "TemplateData/travesia_logo.jpg"
    compression: CompressionConfig = field(default_factory=CompressionConfig)


DEFAULT_CONFIG = BuildConfig()

_STRING_KEYS = (
    "game_title",
    "company_name",
    "product_name",
    "product_version",
    "icon",
)


def _require_mapping(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise config_error(
            f"'{where}' must be a mapping", {"key": where, "value": value}
        )
    return value


def _check_unknown(data: Dict[str, Any], allowed, where: str) -> None:
    # YAML keys are not necessarily strings (e.g. ``1080: 2400``)
    unknown = sorted(set(data) - set(allowed), key=str)
    if unknown:
        names = ", ".join(map(str, unknown))
        raise config_error(
            f"Unknown configuration key(s) in {where}: {names}",
            {"keys": unknown},
        )


def _positive_int(value: Any, key: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise config_error(
            f"'{key}' must be a positive integer", {"key": key, "value": value}
        )
    return value


def _string(value: Any, key: str) -> str:
    if not isinstance(value, str) or not value:
        raise config_error(
            f"'{key}' must be a non-empty string", {"key": key, "value": value}
        )
    return value


def config_from_dict(
    data: Dict[str, Any], base: BuildConfig = DEFAULT_CONFIG
) -> BuildConfig:
    """Overlay a plain mapping onto ``base`` and return a new config."""
    data = _require_mapping(data, "<root>")
    _check_unknown(data, _STRING_KEYS + ("resolution", "compression"), "<root>")

    overrides: Dict[str, Any] = {}
    for key in _STRING_KEYS:
        if key in data:
            overrides[key] = _string(data[key], key)

    if "resolution" in data:
        res = _require_mapping(data["resolution"], "resolution")
        _check_unknown(res, ("width", "height"), "resolution")
        overrides["resolution"] = Resolution(
            width=_positive_int(
                res.get("width", base.resolution.width), "resolution.width"
            ),
            height=_positive_int(
                res.get("height", base.resolution.height), "resolution.height"
            ),
        )

    if "compression" in data:
        comp = _require_mapping(data["compression"], "compression")
        _check_unknown(comp, ("suffix", "tool"), "compression")
        suffix = _string(
            comp.get("suffix", base.compression.suffix), "compression.suffix"
        )
        if not suffix.startswith("."):
            raise config_error(
                "'compression.suffix' must start with '.'", {"value": suffix}
            )
        overrides["compression"] = CompressionConfig(
            suffix=suffix,
            tool=_string(
                comp.get("tool", base.compression.tool), "compression.tool"
            ),
        )

    return dataclasses.replace(base, **overrides)


def load_config(path: str | Path) -> BuildConfig:
    """Load a configuration override file (YAML, or JSON by extension)."""
    p = Path(path)
    if not p.is_file():
        raise config_error(f"Configuration file {p} not found", {"path": str(p)})
    try:
        text = p.read_text(encoding="utf-8")
        if p.suffix.lower() == ".json":
            data: Any = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise config_error(
            f"Configuration file {p} could not be parsed: {e}",
            {"path": str(p)},
        ) from e
    if data is None:
        return DEFAULT_CONFIG
    return config_from_dict(data)
