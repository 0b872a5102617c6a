# src/dude/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from ..tasks.task_list import TaskList
from .ports import TaskRepo


class SessionState(StrEnum):
    RUNNING = "running"
    EXITED = "exited"  # terminal


@dataclass(slots=True)
class AppState:
    """
    Everything a command handler may touch.

    Built once by the bootstrap (or by a test fixture) and passed explicitly.
    """

    # Settings (or any object with the same attributes, e.g. SimpleNamespace in tests).
    settings: Any
    store: TaskRepo
    tasks: TaskList = field(default_factory=TaskList)
    session: SessionState = SessionState.RUNNING

    @property
    def running(self) -> bool:
        return self.session is SessionState.RUNNING
