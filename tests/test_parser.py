"""Tests for command classification and argument validation."""

import pytest

from taskline.errors import (
    EmptyArgument,
    InvalidCommand,
    MissingRequiredClause,
    MultilineInput,
    NotAnInteger,
    UnknownCommand,
)
from taskline.models import TaskKind
from taskline.parser import (
    AddCommand,
    ByeCommand,
    DeleteCommand,
    DoneCommand,
    FindCommand,
    ListCommand,
    parse_command,
)


def test_simple_commands():
    assert parse_command("list") == ListCommand()
    assert parse_command("bye") == ByeCommand()
    assert parse_command("done 3") == DoneCommand(3)
    assert parse_command("delete 12") == DeleteCommand(12)
    assert parse_command("find book") == FindCommand("book")


def test_exact_matches_only_for_list_and_bye():
    for line in ("list ", "List", "bye ", "byebye", ""):
        with pytest.raises(UnknownCommand):
            parse_command(line)


def test_numbers_are_not_range_checked_here():
    assert parse_command("done 0") == DoneCommand(0)
    assert parse_command("delete -2") == DeleteCommand(-2)


class TestIndexArguments:
    def test_done_empty(self):
        with pytest.raises(EmptyArgument, match="done with"):
            parse_command("done ")

    def test_delete_empty(self):
        with pytest.raises(EmptyArgument, match="deleting"):
            parse_command("delete ")

    @pytest.mark.parametrize("arg", ["abc", "1.5", " 1", "1 ", "٣", "1_000"])
    def test_done_not_an_integer(self, arg):
        with pytest.raises(NotAnInteger, match="done command"):
            parse_command("done " + arg)

    def test_delete_not_an_integer(self):
        with pytest.raises(NotAnInteger, match="delete command"):
            parse_command("delete two")

    def test_bare_keyword_is_unknown(self):
        with pytest.raises(UnknownCommand):
            parse_command("done")
        with pytest.raises(UnknownCommand):
            parse_command("delete")


class TestFind:
    def test_empty_keyword(self):
        with pytest.raises(EmptyArgument):
            parse_command("find ")

    def test_keyword_kept_verbatim(self):
        assert parse_command("find  two words ") == FindCommand(" two words ")


class TestTodo:
    def test_todo(self):
        assert parse_command("todo read book") == AddCommand(TaskKind.TODO, "read book")

    def test_empty_todo(self):
        with pytest.raises(EmptyArgument, match="Todo is empty"):
            parse_command("todo ")

    def test_todo_without_space_is_unknown(self):
        with pytest.raises(UnknownCommand):
            parse_command("todoread")


class TestDeadline:
    def test_deadline(self):
        cmd = parse_command("deadline submit report /by 2024-01-01")
        assert cmd == AddCommand(TaskKind.DEADLINE, "submit report", "2024-01-01")

    def test_missing_description(self):
        with pytest.raises(MissingRequiredClause, match="anything for your deadline"):
            parse_command("deadline /by 1/1/2024")

    def test_blank_description(self):
        with pytest.raises(MissingRequiredClause, match="anything for your deadline"):
            parse_command("deadline    /by 1/1/2024")

    @pytest.mark.parametrize(
        "line",
        ["deadline submit report", "deadline submit report /by ", "deadline x /by", "deadline "],
    )
    def test_missing_by_clause(self, line):
        with pytest.raises(MissingRequiredClause, match="deadline due"):
            parse_command(line)


class TestEvent:
    def test_event(self):
        cmd = parse_command("event party /at town hall")
        assert cmd == AddCommand(TaskKind.EVENT, "party", "town hall")

    def test_missing_description(self):
        with pytest.raises(MissingRequiredClause, match="as your event"):
            parse_command("event /at town hall")

    @pytest.mark.parametrize("line", ["event party", "event party /at ", "event "])
    def test_missing_at_clause(self, line):
        with pytest.raises(MissingRequiredClause, match="event on"):
            parse_command(line)


def test_unknown_command():
    with pytest.raises(UnknownCommand, match="What are you even saying"):
        parse_command("blah blah")


def test_all_errors_are_invalid_command():
    for line in ("done ", "done x", "find ", "todo ", "deadline x", "event x", "???"):
        with pytest.raises(InvalidCommand):
            parse_command(line)


@pytest.mark.parametrize(
    "line",
    [
        "todo a\nb",
        "todo a\r",
        "deadline pay\nrent /by 1/1/2025",
        "deadline pay rent /by 1/1/2025\n",
        "event party /at town\rhall",
    ],
)
def test_added_tasks_must_be_single_line(line):
    with pytest.raises(MultilineInput):
        parse_command(line)
