# src/dude/core/errors.py

"""
Error taxonomy.

Everything the app raises on purpose derives from DudeError, so the console loop can
show the message and keep going. Messages are written to follow a "Dude, " prefix.
"""

from __future__ import annotations


class DudeError(Exception):
    """Base class for user-facing errors."""


# ---- parsing ----


class ParseError(DudeError):
    pass


class MissingArgumentError(ParseError):
    pass


class NotANumberError(ParseError):
    pass


class MalformedRecordError(ParseError):
    def __init__(self, line_no: int, line: str, reason: str) -> None:
        super().__init__(f"save file line {line_no} is broken ({reason}): {line}")
        self.line_no = line_no
        self.line = line


# ---- validation ----


class ValidationError(DudeError):
    pass


class EmptyMessageError(ValidationError):
    pass


class EmptyDescriptionError(ValidationError):
    pass


class EmptyFieldError(ValidationError):
    pass


class EmptyArgumentError(ValidationError):
    pass


class MissingClauseError(ValidationError):
    pass


class OrderingError(ValidationError):
    pass


# ---- lookup / routing ----


class TaskIndexError(DudeError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__("this task number is not valid")
        self.index = index
        self.size = size


class UnknownCommandError(DudeError):
    pass


# ---- storage ----


class StorageError(DudeError):
    pass


class NotFoundError(StorageError, FileNotFoundError):
    """No save file yet. Callers treat this as "start empty"."""
