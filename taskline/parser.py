"""Parser for taskline command lines."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from .errors import (
    EmptyArgument,
    MissingRequiredClause,
    MultilineInput,
    NotAnInteger,
    UnknownCommand,
)
from .models import TaskKind

RE_INTEGER = re.compile(r"^[+-]?[0-9]+$")
RE_LINE_BREAK = re.compile(r"[\r\n]")

BY_SEPARATOR = " /by "
AT_SEPARATOR = " /at "


@dataclass(frozen=True)
class DoneCommand:
    number: int  # 1-based, not yet range-checked


@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class ByeCommand:
    pass


@dataclass(frozen=True)
class DeleteCommand:
    number: int


@dataclass(frozen=True)
class FindCommand:
    keyword: str


@dataclass(frozen=True)
class AddCommand:
    kind: TaskKind
    description: str
    when: str | None = None


Command = DoneCommand | ListCommand | ByeCommand | DeleteCommand | FindCommand | AddCommand
Matcher = Callable[[str], "Command | None"]


def parse_command(line: str) -> Command:
    """Classify a raw input line into a structured command.

    Matchers run in a fixed precedence order; the first one that claims the
    line decides the outcome, including any validation error it raises.
    """
    for matcher in MATCHERS:
        command = matcher(line)
        if command is not None:
            return command
    raise UnknownCommand("What are you even saying?!")


def _parse_number(raw: str, empty_message: str, invalid_message: str) -> int:
    if raw == "":
        raise EmptyArgument(empty_message)
    if not RE_INTEGER.match(raw):
        raise NotAnInteger(invalid_message)
    return int(raw)


def _require_single_line(line: str) -> None:
    # A task is stored as exactly one line of the task file
    if RE_LINE_BREAK.search(line):
        raise MultilineInput("Tasks have to fit on a single line!")


def _match_done(line: str) -> Command | None:
    if not line.startswith("done "):
        return None
    number = _parse_number(
        line[len("done "):],
        "You did not specify which task you are done with!",
        "Invalid input for done command!",
    )
    return DoneCommand(number)


def _match_list(line: str) -> Command | None:
    return ListCommand() if line == "list" else None


def _match_bye(line: str) -> Command | None:
    return ByeCommand() if line == "bye" else None


def _match_delete(line: str) -> Command | None:
    if not line.startswith("delete "):
        return None
    number = _parse_number(
        line[len("delete "):],
        "You did not specify which task you are deleting!",
        "Invalid input for delete command!",
    )
    return DeleteCommand(number)


def _match_find(line: str) -> Command | None:
    if not line.startswith("find "):
        return None
    keyword = line[len("find "):]
    if keyword == "":
        raise EmptyArgument("What are you trying to find?")
    return FindCommand(keyword)


def _match_todo(line: str) -> Command | None:
    if not line.startswith("todo "):
        return None
    _require_single_line(line)
    description = line[len("todo "):]
    if description == "":
        raise EmptyArgument("Hey! Your Todo is empty >:(")
    return AddCommand(TaskKind.TODO, description)


def _match_deadline(line: str) -> Command | None:
    if not line.startswith("deadline "):
        return None
    _require_single_line(line)
    sep = line.find(BY_SEPARATOR)
    if "deadline" + BY_SEPARATOR in line or (sep != -1 and not line[len("deadline "):sep].strip()):
        raise MissingRequiredClause("You aren't setting anything for your deadline?!")
    if sep == -1 or not line[sep + len(BY_SEPARATOR):].strip():
        raise MissingRequiredClause("Oi, when is this deadline due??")
    return AddCommand(
        TaskKind.DEADLINE,
        line[len("deadline "):sep],
        line[sep + len(BY_SEPARATOR):],
    )


def _match_event(line: str) -> Command | None:
    if not line.startswith("event "):
        return None
    _require_single_line(line)
    sep = line.find(AT_SEPARATOR)
    if sep == -1 or not line[sep + len(AT_SEPARATOR):].strip():
        raise MissingRequiredClause("Oi, when is this event on??")
    if "event" + AT_SEPARATOR in line or not line[len("event "):sep].strip():
        raise MissingRequiredClause("You aren't setting anything as your event?!")
    return AddCommand(
        TaskKind.EVENT,
        line[len("event "):sep],
        line[sep + len(AT_SEPARATOR):],
    )


MATCHERS: tuple[Matcher, ...] = (
    _match_done,
    _match_list,
    _match_bye,
    _match_delete,
    _match_find,
    _match_todo,
    _match_deadline,
    _match_event,
)
