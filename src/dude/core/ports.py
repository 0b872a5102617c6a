# src/dude/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the dispatcher.

Commands depend on a Protocol instead of the concrete flat-file store, so tests can
swap in a store that fails on purpose.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    @property
    def path(self) -> Path: ...

    def ensure_file(self) -> tuple[bool, bool]: ...
    def raw_lines(self) -> list[str]: ...
    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
