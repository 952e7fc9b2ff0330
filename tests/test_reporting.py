"""Reporter backends and the logging bridge."""

import io

import pytest
from rich.console import Console

from unity_responsive.logging import configure_logging, get_logger, section
from unity_responsive.reporting import (
    PlainReporter,
    RichReporter,
    TaskStatus,
    set_reporter,
    set_verbosity,
    task,
)


def test_plain_reporter_levels():
    buf = io.StringIO()
    rep = PlainReporter(stream=buf, use_color=False)
    rep.status("hello")
    rep.warning("careful")
    rep.error("boom")
    rep.verbose("hidden")
    set_verbosity(1)
    rep.verbose("shown")
    assert buf.getvalue().splitlines() == [
        "INFO: hello",
        "WARN: careful",
        "ERROR: boom",
        "VERB1: shown",
    ]


def test_logging_routes_through_reporter():
    buf = io.StringIO()
    set_reporter(PlainReporter(stream=buf, use_color=False))
    configure_logging(0)
    logger = get_logger()
    logger.info("info line")
    logger.warning("warn line")
    logger.debug("debug line")
    with section("Validate") as log:
        log.info("checking")
    out = buf.getvalue()
    assert "INFO: info line" in out
    assert "WARN: warn line" in out
    assert "debug line" not in out
    assert "[Validate]" in out
    assert out.index("[Validate]") < out.index("INFO: checking")


def test_task_reports_failure_and_reraises():
    buf = io.StringIO()
    set_reporter(PlainReporter(stream=buf, use_color=False))
    with pytest.raises(RuntimeError):
        with task("write", "Write responsive files"):
            raise RuntimeError("nope")
    assert "✖ Write responsive files" in buf.getvalue()


def test_rich_reporter_escapes_markup():
    console = Console(file=io.StringIO(), force_terminal=False, width=80)
    rep = RichReporter(console=console)
    set_reporter(rep)
    rep.status("path [bold]x[/bold]")
    with task("t", "Create backups"):
        pass
    out = console.file.getvalue()
    assert "INFO: path [bold]x[/bold]" in out
    assert "Create backups" in out


def test_task_handle_carries_stats_and_status():
    buf = io.StringIO()
    set_reporter(PlainReporter(stream=buf, use_color=False))
    with task("decompress", "Decompress payloads") as t:
        t.meta.update(decompressed=2, skipped=1, failed=0)
    with task("decompress", "Decompress payloads") as t:
        t.status = TaskStatus.SKIPPED
    first, second = buf.getvalue().splitlines()
    assert first.startswith(" ✔ Decompress payloads (")
    assert first.endswith("[decompressed=2 skipped=1 failed=0]")
    assert second.startswith(" → Decompress payloads (")
    assert "[" not in second
