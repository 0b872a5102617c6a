# src/dude/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class TaskKind(StrEnum):
    """
    Task variant tag.

    Values double as the type column of the save file and the display prefix.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class Todo:
    kind: ClassVar[TaskKind] = TaskKind.TODO

    description: str
    is_done: bool = False


@dataclass(slots=True)
class Deadline:
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    description: str
    by: str
    is_done: bool = False


@dataclass(slots=True)
class Event:
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    description: str
    start: str  # "/from" value
    end: str  # "/to" value
    is_done: bool = False


Task = Todo | Deadline | Event


def status_icon(task: Task) -> str:
    return "X" if task.is_done else " "


def format_task(task: Task) -> str:
    """Human-readable one-liner, e.g. "[D][X] return book (by: Sunday)"."""
    head = f"[{task.kind}][{status_icon(task)}] {task.description}"
    match task:
        case Todo():
            return head
        case Deadline(by=by):
            return f"{head} (by: {by})"
        case Event(start=start, end=end):
            return f"{head} (from: {start} to: {end})"
    raise TypeError(f"Unsupported task type: {type(task).__name__}")
