# src/dude/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import TaskIndexError
from .task_models import Task


class TaskList:
    """
    Ordered task collection.

    Indices here are 0-based; the dispatcher converts from the 1-based numbers users type.
    Insertion order is display order and save-file order.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def _validate_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._validate_index(index)
        return self._tasks[index]

    def delete(self, index: int) -> Task:
        self._validate_index(index)
        return self._tasks.pop(index)

    def set_done(self, index: int, done: bool) -> Task:
        task = self.get(index)
        task.is_done = done
        return task

    def size(self) -> int:
        return len(self._tasks)

    def all(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def find(self, keyword: str) -> list[Task]:
        """Tasks whose description contains `keyword` (case-sensitive), in list order."""
        return [t for t in self._tasks if keyword in t.description]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.all())
