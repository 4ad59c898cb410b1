"""Command interpreter: applies parsed commands to the session's task list."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from . import messages
from .errors import (
    CorruptTask,
    IndexOutOfRange,
    InvalidCommand,
    InvalidDate,
    SessionTerminated,
)
from .models import Task, TaskKind, is_valid_due, mark_done
from .parser import (
    AddCommand,
    ByeCommand,
    Command,
    DeleteCommand,
    DoneCommand,
    FindCommand,
    ListCommand,
    parse_command,
)
from .tasklist import TaskList

logger = logging.getLogger(__name__)

MAX_TASKS = 100


class SessionState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Reply:
    """A response together with the session state after producing it."""

    text: str
    state: SessionState


class Interpreter:
    """Owns one task list for the lifetime of a session."""

    def __init__(self, lines: list[str] | None = None) -> None:
        self.tasks = TaskList(lines)
        self.state = SessionState.RUNNING

    def is_running(self) -> bool:
        return self.state is SessionState.RUNNING

    def final_snapshot(self) -> list[str]:
        return self.tasks.snapshot()

    def process(self, line: str) -> str:
        """Handle one input line and return the response text.

        Raises InvalidCommand for rejected input and SessionTerminated once
        ``bye`` has been processed.
        """
        return self.handle(line).text

    def handle(self, line: str) -> Reply:
        if not self.is_running():
            raise SessionTerminated("Session has ended; no further commands accepted")

        try:
            command = parse_command(line)
            text = self._execute(command)
        except InvalidCommand as e:
            logger.debug("[REJECT] %r: %s (%s)", line, e, type(e).__name__)
            raise
        return Reply(text=text, state=self.state)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def _execute(self, command: Command) -> str:
        if isinstance(command, DoneCommand):
            return self._done(command.number)
        if isinstance(command, ListCommand):
            return messages.list_tasks(self.tasks.snapshot())
        if isinstance(command, ByeCommand):
            self.state = SessionState.TERMINATED
            logger.debug("[BYE] session terminated with %d task(s)", self.tasks.count())
            return messages.bye()
        if isinstance(command, DeleteCommand):
            return self._delete(command.number)
        if isinstance(command, FindCommand):
            return messages.list_matching_tasks(self.tasks.find(command.keyword))
        return self._add(command)

    def _check_number(self, number: int) -> int:
        """Translate a 1-based task number to a list index."""
        if number < 1 or number > self.tasks.count():
            raise IndexOutOfRange("Hey, no such task exists!")
        return number - 1

    def _done(self, number: int) -> str:
        index = self._check_number(number)
        # Loaded lines are not re-validated and may be too short for a marker
        try:
            updated = mark_done(self.tasks.get(index))
        except ValueError as e:
            raise CorruptTask(f"Task {number} is malformed and can't be marked done!") from e
        self.tasks.replace(index, updated)
        logger.debug("[DONE] #%d", number)
        return messages.done(updated)

    def _delete(self, number: int) -> str:
        index = self._check_number(number)
        removed = self.tasks.remove(index)
        logger.debug("[DELETE] #%d", number)
        return messages.deleted_task(removed, self.tasks.count())

    def _add(self, command: AddCommand) -> str:
        if command.kind is TaskKind.DEADLINE and not is_valid_due(command.when or ""):
            raise InvalidDate(
                "Dates should look like d/m/yyyy [HHmm] or yyyy-mm-dd [HH:MM]!"
            )
        if self.tasks.count() >= MAX_TASKS:
            logger.warning("Task list is full (%d); not adding", MAX_TASKS)
            return messages.list_full()

        line = Task(command.kind, command.description, when=command.when).encode()
        self.tasks.append(line)
        logger.debug("[ADD] %s", line)
        return messages.added_task(line, self.tasks.count())
