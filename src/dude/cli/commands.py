# src/dude/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..core import parser
from ..core.errors import (
    DudeError,
    EmptyDescriptionError,
    EmptyFieldError,
    EmptyMessageError,
    MissingClauseError,
    OrderingError,
    StorageError,
    UnknownCommandError,
)
from ..core.state import AppState, SessionState
from ..tasks.task_models import Deadline, Event, Task, Todo, format_task

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    text: str
    ok: bool = True


class CommandRegistry:
    """Command-word registry: routes one input line to its handler (list, todo, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, help_text: str) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text

    def names(self) -> list[str]:
        return list(self._help)

    def handle(self, state: AppState, line: str) -> str:
        """
        Run one command line and return the reply.
        Raises DudeError subclasses; the task list is untouched when it does.
        """
        message = line.strip()
        if not message:
            raise EmptyMessageError("your message cannot be empty.")

        name = parser.classify(message).lower()
        handler = self._handlers.get(name)
        if not handler:
            raise UnknownCommandError(f"I don't know '{name}'. {self.build_help()}")

        return handler(state, message)

    def process_line(self, state: AppState, line: str) -> CommandResult:
        try:
            return CommandResult(self.handle(state, line))
        except DudeError as e:
            logger.debug("Command failed (%s): %r", type(e).__name__, line)
            return CommandResult(f"Dude, {e}", ok=False)

    def build_help(self) -> str:
        lines = ["Only the following commands are valid:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _numbered(tasks: Iterable[Task]) -> list[str]:
    return [f"{i}.{format_task(t)}" for i, t in enumerate(tasks, start=1)]


def _count_line(state: AppState) -> str:
    return f"Now you have {state.tasks.size()} tasks in the list."


def _persist(state: AppState) -> str | None:
    """Rewrite the save file. Returns a warning line on failure; memory is not rolled back."""
    try:
        state.store.save(state.tasks.all())
    except StorageError as e:
        logger.exception("Failed to save tasks to %s", state.store.path)
        return f"Dude, I couldn't save the changes: {e}"
    return None


def _with_persist(state: AppState, lines: list[str]) -> str:
    warning = _persist(state)
    if warning:
        lines.append(warning)
    return "\n".join(lines)


def _add(state: AppState, task: Task) -> str:
    state.tasks.add(task)
    logger.debug("Task added kind=%s total=%d", task.kind, state.tasks.size())
    return _with_persist(
        state,
        ["Dude I got it. I've added this task:", f"  {format_task(task)}", _count_line(state)],
    )


def cmd_list(state: AppState, line: str) -> str:
    return "\n".join(["Here are the tasks in your list:", *_numbered(state.tasks)])


def _set_done(state: AppState, line: str, done: bool) -> str:
    index = parser.task_index(line) - 1
    task = state.tasks.set_done(index, done)
    feedback = (
        "Dude OKAY. I've marked this task as done:"
        if done
        else "Dude really? I've marked this task as not done yet:"
    )
    return _with_persist(state, [feedback, f"  {format_task(task)}"])


def cmd_mark(state: AppState, line: str) -> str:
    return _set_done(state, line, True)


def cmd_unmark(state: AppState, line: str) -> str:
    return _set_done(state, line, False)


def cmd_delete(state: AppState, line: str) -> str:
    index = parser.task_index(line) - 1
    removed = state.tasks.delete(index)
    return _with_persist(
        state,
        ["Dude I've removed this task:", f"  {format_task(removed)}", _count_line(state)],
    )


def cmd_todo(state: AppState, line: str) -> str:
    desc = parser.description(line)
    if not desc:
        raise EmptyDescriptionError("your todo task cannot be empty.")
    return _add(state, Todo(desc))


def cmd_deadline(state: AppState, line: str) -> str:
    if parser.BY not in line:
        raise MissingClauseError("deadline task must have a /by.")
    desc = parser.description(line)
    if not desc:
        raise EmptyDescriptionError("your deadline task cannot be empty")
    by = parser.deadline_by(line)
    if not by:
        raise EmptyFieldError("your deadline /by cannot be empty")
    return _add(state, Deadline(desc, by))


def cmd_event(state: AppState, line: str) -> str:
    if parser.FROM not in line or parser.TO not in line:
        raise MissingClauseError("event task must have a /from and a /to.")
    desc = parser.description(line)
    if not desc:
        raise EmptyDescriptionError("your event task cannot be empty")
    start = parser.event_from(line)
    end = parser.event_to(line)
    if not start or not end:
        raise EmptyFieldError("your event /from or /to cannot be empty")
    if parser.FROM in end:
        raise OrderingError("your /from must be before /to")
    return _add(state, Event(desc, start, end))


def cmd_find(state: AppState, line: str) -> str:
    keyword = parser.find_keyword(line)
    matches = state.tasks.find(keyword)
    if not matches:
        return "Dude, I couldn't find any tasks matching that keyword."
    return "\n".join(["Dude, here are the matching tasks in your list:", *_numbered(matches)])


def cmd_bye(state: AppState, line: str) -> str:
    state.session = SessionState.EXITED
    logger.info("Exit command received.")
    return "Dude that's it? Okay Bye. See you again soon I hope."


registry.register("list", cmd_list, help_text="Show all tasks.")
registry.register("mark", cmd_mark, help_text="Mark task <n> as done: mark 2.")
registry.register("unmark", cmd_unmark, help_text="Mark task <n> as not done: unmark 2.")
registry.register("delete", cmd_delete, help_text="Remove task <n>: delete 2.")
registry.register("todo", cmd_todo, help_text="Add a plain task: todo <desc>.")
registry.register(
    "deadline", cmd_deadline, help_text="Add a task with a due date: deadline <desc> /by <when>."
)
registry.register(
    "event", cmd_event, help_text="Add a timed task: event <desc> /from <start> /to <end>."
)
registry.register("find", cmd_find, help_text="Search descriptions: find <keyword>.")
registry.register("bye", cmd_bye, help_text="Exit.")
