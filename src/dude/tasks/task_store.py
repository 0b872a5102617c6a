# src/dude/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import MalformedRecordError, NotFoundError, StorageError
from .task_models import Deadline, Event, Task, TaskKind, Todo

logger = logging.getLogger(__name__)

FIELD_SEP = " | "
MAX_FIELDS = 5  # type | status | description | field2 | field3
MIN_FIELDS = 3


def _task_to_line(task: Task) -> str:
    status = "1" if task.is_done else "0"
    fields = [task.kind.value, status, task.description]
    match task:
        case Todo():
            pass
        case Deadline(by=by):
            fields.append(by)
        case Event(start=start, end=end):
            fields.extend((start, end))
        case _:
            raise TypeError(f"Unsupported task type: {type(task).__name__}")
    return FIELD_SEP.join(fields)


def serialize(tasks: Iterable[Task]) -> list[str]:
    """One record per task, in list order."""
    return [_task_to_line(t) for t in tasks]


def _line_to_task(line: str, line_no: int) -> Task | None:
    parts = [p.strip() for p in line.split("|", MAX_FIELDS - 1)]
    if len(parts) < MIN_FIELDS:
        logger.debug("Skipping short record at line %d: %r", line_no, line)
        return None

    kind, status, description = parts[0], parts[1], parts[2]
    is_done = status == "1"

    if kind == TaskKind.TODO:
        return Todo(description, is_done=is_done)

    if kind == TaskKind.DEADLINE:
        if len(parts) < 4:
            raise MalformedRecordError(line_no, line, "deadline without /by field")
        return Deadline(description, parts[3], is_done=is_done)

    if kind == TaskKind.EVENT:
        if len(parts) < 5:
            raise MalformedRecordError(line_no, line, "event without /from and /to fields")
        return Event(description, parts[3], parts[4], is_done=is_done)

    logger.warning("Skipping record with unknown type %r at line %d", kind, line_no)
    return None


def deserialize(lines: Iterable[str]) -> list[Task]:
    """
    Parse save-file lines back into tasks.

    Blank lines, records with fewer than 3 fields and unknown type tags are skipped.
    A deadline/event record missing its extra fields raises MalformedRecordError.
    """
    tasks: list[Task] = []
    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        task = _line_to_task(line, line_no)
        if task is not None:
            tasks.append(task)
    return tasks


class TaskStore:
    """
    Flat-file task store.

    Every save rewrites the whole file: the content goes to a sibling .tmp file that is
    then moved over the target with os.replace.
    """

    def __init__(self, path: str | Path = "data/dude.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def ensure_file(self) -> tuple[bool, bool]:
        """
        Create the parent directory and an empty save file when missing.

        Returns (dir_created, file_created).
        """
        parent = self._path.parent
        dir_created = False
        try:
            if not parent.exists():
                parent.mkdir(parents=True, exist_ok=True)
                dir_created = True
            file_created = False
            if not self._path.exists():
                self._path.touch()
                file_created = True
        except OSError as e:
            raise StorageError(f"couldn't prepare {self._path}: {e}") from e
        if dir_created or file_created:
            logger.info(
                "Storage prepared path=%s dir_created=%s file_created=%s",
                self._path,
                dir_created,
                file_created,
            )
        return dir_created, file_created

    def raw_lines(self) -> list[str]:
        """
        File lines without their terminators.

        Records are separated by "\\n" only, like the console input they come from.
        str.splitlines() would also break on \\x0c, \\x85, \\u2028 and friends inside a
        description.
        """
        try:
            with self._path.open(encoding="utf-8", newline="") as f:
                content = f.read()
        except FileNotFoundError as e:
            raise NotFoundError(f"no save file at {self._path}") from e
        except OSError as e:
            raise StorageError(f"couldn't read {self._path}: {e}") from e

        lines = [line.removesuffix("\r") for line in content.split("\n")]
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def load(self) -> list[Task]:
        tasks = deserialize(self.raw_lines())
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        lines = serialize(tasks)
        content = "".join(line + "\n" for line in lines)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp.write_text(content, encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageError(f"couldn't save to {self._path}: {e}") from e
        logger.debug("Saved %d tasks to %s", len(lines), self._path)

    def move_aside(self, suffix: str = ".bak") -> Path:
        """Rename the save file to the first free <name>.bak, <name>.bak1, ... and return it."""
        target = self._path.with_name(self._path.name + suffix)
        n = 1
        while target.exists():
            target = self._path.with_name(f"{self._path.name}{suffix}{n}")
            n += 1
        try:
            os.replace(self._path, target)
        except OSError as e:
            raise StorageError(f"couldn't move {self._path} aside: {e}") from e
        logger.warning("Moved save file %s to %s", self._path, target)
        return target
