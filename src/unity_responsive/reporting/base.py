from __future__ import annotations

import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Iterator

__all__ = [
    "TaskStatus",
    "TaskRecord",
    "Reporter",
    "set_reporter",
    "get_reporter",
    "set_verbosity",
    "get_verbosity",
    "task",
]


class TaskStatus(Enum):
    RUNNING = auto()
    SUCCESS = auto()
    FAILED = auto()
    SKIPPED = auto()


@dataclass(slots=True)
class TaskRecord:
    task_id: str
    name: str
    status: TaskStatus = TaskStatus.RUNNING
    start_time: float = field(default_factory=time.time)
    end_time: float | None = None
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def duration(self) -> float:
        return (self.end_time - self.start_time) if self.end_time else 0.0


_VERBOSITY: int = 0  # global verbosity level set by CLI (-v repeats)


def set_verbosity(level: int) -> None:
    global _VERBOSITY
    _VERBOSITY = max(0, level)


def get_verbosity() -> int:
    return _VERBOSITY


class Reporter:
    def start_task(self, task_id: str, name: str, **meta: Any) -> None:
        raise NotImplementedError

    def end_task(
        self,
        task_id: str,
        status: TaskStatus = TaskStatus.SUCCESS,
        **final_meta: Any,
    ) -> None:
        raise NotImplementedError

    def status(self, message: str, **fields: Any) -> None:  # noteworthy info
        raise NotImplementedError

    def verbose(
        self, message: str, *, level: int = 1, **fields: Any
    ) -> None:  # lower-importance, gated by global verbosity
        pass

    def error(self, message: str, **fields: Any) -> None:
        raise NotImplementedError

    def warning(self, message: str, **fields: Any) -> None:
        self.status(message, **fields)

    def section(self, title: str) -> None:
        raise NotImplementedError

    def flush(self) -> None:
        pass


_ACTIVE_REPORTER: Reporter | None = None


def set_reporter(rep: Reporter) -> None:
    global _ACTIVE_REPORTER
    _ACTIVE_REPORTER = rep


def get_reporter() -> Reporter:
    global _ACTIVE_REPORTER
    if _ACTIVE_REPORTER is None:
        from .plain import PlainReporter  # local import to avoid cycle

        _ACTIVE_REPORTER = PlainReporter(stream=sys.stderr)
    return _ACTIVE_REPORTER


@contextmanager
def task(task_id: str, name: str, **meta: Any) -> Iterator[TaskRecord]:
    """Report a unit of work.

    The yielded record collects what the body learns: entries added to
    ``meta`` are reported when the task ends, and setting ``status`` (e.g.
    to ``TaskStatus.SKIPPED``) overrides the default SUCCESS outcome.
    """
    rep = get_reporter()
    rep.start_task(task_id, name, **meta)
    handle = TaskRecord(task_id, name)
    try:
        yield handle
    except Exception:
        rep.end_task(task_id, TaskStatus.FAILED, **handle.meta)
        raise
    else:
        status = handle.status
        if status is TaskStatus.RUNNING:
            status = TaskStatus.SUCCESS
        rep.end_task(task_id, status, **handle.meta)
