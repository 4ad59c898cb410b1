"""Exception types raised by the taskline core."""

from __future__ import annotations


class TasklineError(Exception):
    """Base class for all taskline errors."""


class InvalidCommand(TasklineError):
    """A command line was rejected; the message is shown to the user."""


class EmptyArgument(InvalidCommand):
    pass


class NotAnInteger(InvalidCommand):
    pass


class IndexOutOfRange(InvalidCommand):
    pass


class MissingRequiredClause(InvalidCommand):
    pass


class CorruptTask(InvalidCommand):
    """A stored line is too malformed for the requested command."""


class MultilineInput(InvalidCommand):
    pass


class InvalidDate(InvalidCommand):
    pass


class UnknownCommand(InvalidCommand):
    pass


class SessionTerminated(TasklineError):
    """Raised when a command arrives after the session has ended."""


class StorageError(TasklineError):
    """The task file could not be read or written."""


class TaskIndexError(TasklineError, IndexError):
    """A 0-based index fell outside the task list."""
