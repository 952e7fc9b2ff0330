"""Configuration defaults and override files."""

from pathlib import Path

import pytest
import yaml

from unity_responsive.config import (
    DEFAULT_CONFIG,
    BuildConfig,
    Resolution,
    config_from_dict,
    load_config,
)
from unity_responsive.errors import ConfigError, E_CONFIG


def test_defaults():
    assert DEFAULT_CONFIG.resolution == Resolution(1080, 2400)
    assert DEFAULT_CONFIG.product_name == "La_Gran_Travesia_Constitucional"
    assert DEFAULT_CONFIG.company_name == "NolimStudios"
    assert DEFAULT_CONFIG.product_version == "1.0"
    assert DEFAULT_CONFIG.compression.suffix == ".br"
    assert DEFAULT_CONFIG.compression.tool == "brotli"


def test_config_is_immutable():
    with pytest.raises(Exception):
        DEFAULT_CONFIG.product_name = "Other"  # type: ignore[misc]


def test_load_yaml_overrides(tmp_path: Path):
    p = tmp_path / "game.yaml"
    p.write_text(
        yaml.safe_dump(
            {
                "product_name": "Game",
                "game_title": "My Game",
                "resolution": {"width": 720},
                "compression": {"tool": "brotli-cli"},
            }
        ),
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.product_name == "Game"
    assert cfg.game_title == "My Game"
    assert cfg.resolution == Resolution(720, 2400)
    assert cfg.compression.tool == "brotli-cli"
    assert cfg.compression.suffix == ".br"
    assert cfg.company_name == DEFAULT_CONFIG.company_name


def test_load_json(tmp_path: Path):
    p = tmp_path / "game.json"
    p.write_text('{"product_name": "Game"}', encoding="utf-8")
    assert load_config(p) == BuildConfig(product_name="Game")


def test_empty_file_gives_defaults(tmp_path: Path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config(p) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "data",
    [
        {"unknown": 1},
        {"product_name": 3},
        {"product_name": ""},
        {"resolution": {"width": 0}},
        {"resolution": {"width": True}},
        {"resolution": [1080, 2400]},
        {"compression": {"suffix": "br"}},
        {"compression": {"level": 9}},
    ],
)
def test_invalid_values(data):
    with pytest.raises(ConfigError) as exc:
        config_from_dict(data)
    assert exc.value.code == E_CONFIG


def test_missing_file(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")


def test_unparseable_yaml(tmp_path: Path):
    p = tmp_path / "bad.yaml"
    p.write_text("product_name: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(p)


def test_non_string_key_is_reported(tmp_path: Path):
    p = tmp_path / "game.yaml"
    p.write_text("1080: 2400\n", encoding="utf-8")
    with pytest.raises(ConfigError) as exc:
        load_config(p)
    assert str(exc.value) == "Unknown configuration key(s) in <root>: 1080"
    assert exc.value.context == {"keys": [1080]}


def test_non_utf8_file(tmp_path: Path):
    p = tmp_path / "game.yaml"
    p.write_bytes(b"game_title: \xff\xfe\n")
    with pytest.raises(ConfigError) as exc:
        load_config(p)
    assert exc.value.code == E_CONFIG
    assert "could not be parsed" in str(exc.value)
