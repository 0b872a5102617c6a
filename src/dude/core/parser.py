# src/dude/core/parser.py

"""
Command-line text -> command word + raw field values.

Pure string functions; nothing here touches state. Clause markers (/by, /from, /to) are
matched as plain substrings, first occurrence wins, so "/fromage" counts as "/from".
Semantic checks (empty fields, clause ordering) belong to the dispatcher.
"""

from __future__ import annotations

import re

from .errors import EmptyArgumentError, MissingArgumentError, MissingClauseError, NotANumberError

BY = "/by"
FROM = "/from"
TO = "/to"

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _split_command(line: str) -> tuple[str, str]:
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def classify(line: str) -> str:
    """First whitespace-delimited token, case preserved ("" for a blank line)."""
    return _split_command(line)[0]


def is_exit(line: str) -> bool:
    return classify(line).lower() == "bye"


def task_index(line: str) -> int:
    """The 1-based task number typed after the command word."""
    _, rest = _split_command(line)
    if not rest:
        raise MissingArgumentError("I need a task number to work with.")
    if not _INT_RE.fullmatch(rest):
        raise NotANumberError("That's not a number.")
    return int(rest)


def description(line: str) -> str:
    command, rest = _split_command(line)
    if command.lower() == "todo":
        return rest
    return rest.split("/", 1)[0].strip()


def _after(line: str, marker: str) -> str:
    if marker not in line:
        raise MissingClauseError(f"I can't find {marker} in that.")
    return line.split(marker, 1)[1]


def deadline_by(line: str) -> str:
    return _after(line, BY).strip()


def event_from(line: str) -> str:
    # Only a /to that comes after /from ends the value.
    return _after(line, FROM).split(TO, 1)[0].strip()


def event_to(line: str) -> str:
    return _after(line, TO).strip()


def find_keyword(line: str) -> str:
    _, rest = _split_command(line)
    if not rest:
        raise EmptyArgumentError("your find command cannot be empty")
    return rest
