"""User-facing response text.

Every response is framed between two divider lines so the host can print it
as-is.
"""

from __future__ import annotations

from collections.abc import Sequence

DIVIDER = "*" * 48 + "\n"


def _framed(body: str) -> str:
    return DIVIDER + body + DIVIDER


def introduction() -> str:
    return _framed("Hello! I'm Taskline\nWhat can I do for you?\n")


def done(updated_line: str) -> str:
    return _framed(f"Nice! I have marked this task as done:\n{updated_line}\n")


def _numbered(lines: Sequence[str]) -> str:
    return "".join(f"{i}.{line}\n" for i, line in enumerate(lines, start=1))


def list_tasks(lines: Sequence[str]) -> str:
    return _framed("Here are the tasks in your list!\n" + _numbered(lines))


def list_matching_tasks(lines: Sequence[str]) -> str:
    """Frame find results; an empty result gets an explicit message."""
    if not lines:
        return _framed("Unfortunately no tasks matches your keyword :(\n")
    return _framed("Here are the matching tasks in your list!\n" + _numbered(lines))


def bye() -> str:
    return _framed("Bye! See you next time!\n")


def deleted_task(line: str, count: int) -> str:
    return _framed(
        "Noted, the task has been deleted\n"
        f"{line}\n"
        f"Now you have {count} tasks in the list.\n"
    )


def added_task(line: str, count: int) -> str:
    return _framed(
        "Got it, I've added this task:\n"
        f" {line}\n"
        f"Now you have {count} tasks in the list.\n"
    )


def list_full() -> str:
    return _framed("Sorry, the list is full!\n")


def error(message: str) -> str:
    return _framed(f"{message}\n")
