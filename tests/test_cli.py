"""Tests for the command-line surface."""

from pathlib import Path

import pytest
import yaml

from unity_responsive import cli

from build_helper import ORIGINAL_HTML, make_build


def _config_file(tmp_path: Path) -> Path:
    p = tmp_path / "game.yaml"
    p.write_text(yaml.safe_dump({"product_name": "Game"}), encoding="utf-8")
    return p


def test_no_arguments_prints_help(capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "usage: unity-responsive" in out
    assert "1080x2400" in out


def test_help_flag_exits_zero(capsys):
    for flag in ("--help", "-h"):
        with pytest.raises(SystemExit) as exc:
            cli.main([flag])
        assert exc.value.code == 0
    assert "Required files in build directory" in capsys.readouterr().out


def test_version(capsys):
    assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("unity-responsive ")


def test_missing_directory_exits_one(tmp_path: Path, capsys):
    rc = cli.main([str(tmp_path / "missing")])
    assert rc == 1
    assert "does not exist" in capsys.readouterr().err


def test_missing_required_file_exits_one(tmp_path: Path, capsys):
    build = make_build(tmp_path / "build", with_loader=False)
    rc = cli.main(["--config", str(_config_file(tmp_path)), str(build)])
    assert rc == 1
    err = capsys.readouterr().err
    assert "ERROR: Required file Build/Game.loader.js not found" in err
    assert (build / "index.html").read_text(encoding="utf-8") == ORIGINAL_HTML


def test_successful_run(tmp_path: Path, capsys):
    build = make_build(tmp_path / "build")
    rc = cli.main(
        ["--no-decompress", "--config", str(_config_file(tmp_path)), str(build)]
    )
    assert rc == 0
    err = capsys.readouterr().err
    assert "Unity build successfully converted to responsive!" in err
    assert "Resolution: 1080x2400" in err
    assert "Backups saved in:" in err
    assert (build / "backup" / "index.html.backup").exists()
    assert 'width="1080"' in (build / "index.html").read_text(encoding="utf-8")


def test_dry_run_leaves_files(tmp_path: Path, capsys):
    build = make_build(tmp_path / "build")
    rc = cli.main(
        [
            "--dry-run",
            "--no-decompress",
            "--config",
            str(_config_file(tmp_path)),
            str(build),
        ]
    )
    assert rc == 0
    assert "[DRY RUN]" in capsys.readouterr().err
    assert (build / "index.html").read_text(encoding="utf-8") == ORIGINAL_HTML


def test_bad_config_exits_one(tmp_path: Path, capsys):
    build = make_build(tmp_path / "build")
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("resolution: {width: -1}\n", encoding="utf-8")
    assert cli.main(["--config", str(cfg), str(build)]) == 1
    assert "resolution.width" in capsys.readouterr().err


@pytest.mark.parametrize(
    "content",
    [b"1080: 2400\n", b"game_title: \xff\xfe\n"],
    ids=["integer-key", "not-utf8"],
)
def test_malformed_config_exits_one(tmp_path: Path, capsys, content):
    build = make_build(tmp_path / "build")
    cfg = tmp_path / "bad.yaml"
    cfg.write_bytes(content)
    assert cli.main(["--config", str(cfg), str(build)]) == 1
    assert "ERROR: " in capsys.readouterr().err
    assert (build / "index.html").read_text(encoding="utf-8") == ORIGINAL_HTML


def test_silent_reporter(tmp_path: Path, capsys):
    build = make_build(tmp_path / "build")
    rc = cli.main(
        [
            "-r",
            "silent",
            "--no-decompress",
            "--config",
            str(_config_file(tmp_path)),
            str(build),
        ]
    )
    assert rc == 0
    assert capsys.readouterr().err == ""
