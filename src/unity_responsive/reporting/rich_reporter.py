from __future__ import annotations

import time
from typing import Any, Dict

from rich.console import Console
from rich.markup import escape

from .base import Reporter, TaskStatus, TaskRecord, get_verbosity
from .plain import format_stats

_STATUS_STYLE = {
    TaskStatus.SUCCESS: "[green]✔[/]",
    TaskStatus.FAILED: "[bold red]✖[/]",
    TaskStatus.SKIPPED: "[yellow]→[/]",
}


class RichReporter(Reporter):
    def __init__(self, console: Console | None = None):
        self.console = console or Console(
            stderr=True, highlight=False, soft_wrap=False
        )
        self._tasks: Dict[str, TaskRecord] = {}

    # Tasks --------------------------------------------------------------------
    def start_task(self, task_id: str, name: str, **meta: Any) -> None:
        self._tasks[task_id] = TaskRecord(task_id, name, meta=meta)

    def end_task(
        self,
        task_id: str,
        status: TaskStatus = TaskStatus.SUCCESS,
        **final_meta: Any,
    ) -> None:
        rec = self._tasks.pop(task_id, None)
        if not rec:
            return
        rec.status = status
        rec.end_time = time.time()
        rec.meta.update(final_meta)
        icon = _STATUS_STYLE.get(status, "")
        self.console.print(
            f"{icon} {escape(rec.name)} ({rec.duration:.2f}s)"
            f"{escape(format_stats(rec.meta))}"
        )

    # Messaging / sections ------------------------------------------------------
    def status(self, message: str, **fields: Any) -> None:
        self.console.print(f"[green]INFO[/]: {escape(message)}")

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        self.console.print(f"[cyan]VERB{level}[/]: {escape(message)}")

    def error(self, message: str, **fields: Any) -> None:
        self.console.print(f"[bold red]ERROR[/]: {escape(message)}")

    def warning(self, message: str, **fields: Any) -> None:
        self.console.print(f"[yellow]WARN[/]: {escape(message)}")

    def section(self, title: str) -> None:
        self.console.rule(escape(title))
