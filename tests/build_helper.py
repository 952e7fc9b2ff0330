"""Helpers to lay out fake Unity build directories for tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from unity_responsive.runner import CommandResult

ORIGINAL_HTML = "<html><body>original unity page</body></html>\n"
ORIGINAL_CSS = "body { background: #231F20; }\n"
STEMS = ("data", "framework.js", "wasm")


def make_build(
    root: Path,
    product: str = "Game",
    *,
    uncompressed: Iterable[str] = STEMS,
    compressed: Iterable[str] = (),
    suffix: str = ".br",
    with_loader: bool = True,
    with_index: bool = True,
    with_style: bool = True,
) -> Path:
    build = root / "Build"
    build.mkdir(parents=True, exist_ok=True)
    (root / "TemplateData").mkdir(exist_ok=True)
    if with_index:
        (root / "index.html").write_text(ORIGINAL_HTML, encoding="utf-8")
    if with_style:
        (root / "TemplateData" / "style.css").write_text(
            ORIGINAL_CSS, encoding="utf-8"
        )
    if with_loader:
        (build / f"{product}.loader.js").write_text("// loader\n")
    for stem in uncompressed:
        (build / f"{product}.{stem}").write_bytes(b"raw:" + stem.encode())
    for stem in compressed:
        (build / f"{product}.{stem}{suffix}").write_bytes(b"br:" + stem.encode())
    return root


class FakeRunner:
    """CommandRunner double that emulates ``brotli -d <file>``."""

    def __init__(
        self,
        available: bool = True,
        fail: Sequence[str] = (),
        suffix: str = ".br",
    ):
        self.available = available
        self.fail = set(fail)
        self.suffix = suffix
        self.calls: List[List[str]] = []

    def is_available(self) -> bool:
        return self.available

    def run(self, args):
        self.calls.append(list(args))
        src = Path(args[-1])
        if src.name in self.fail:
            return CommandResult(1, "", f"corrupt input: {src.name}")
        dst = src.with_name(src.name[: -len(self.suffix)])
        dst.write_bytes(b"decompressed:" + src.read_bytes())
        return CommandResult(0)
