"""Data models for tasks and their canonical one-line encoding."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

DONE_GLYPH = "✓"
NOT_DONE = " "
# Offset of the done-tag inside "[T][ ] ..."
DONE_OFFSET = 4

# Accepted deadline formats, tried in order
DUE_FORMATS = (
    "%d/%m/%Y",
    "%d/%m/%Y %H%M",
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M",
)

RE_LINE = re.compile(r"^\[([TDE])\]\[(.)\] (.*)$")
RE_SUFFIX = re.compile(r"^(.*) \((by|at): (.*)\)$")


class TaskKind(Enum):
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def clause(self) -> str | None:
        """Label used inside the parenthesised suffix, if any."""
        return {TaskKind.DEADLINE: "by", TaskKind.EVENT: "at"}.get(self)


@dataclass
class Task:
    """A single task.

    ``when`` holds the due date for deadlines and the location/window for
    events; it is always None for plain todos.
    """

    kind: TaskKind
    description: str
    when: str | None = None
    done: bool = False

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, due: str) -> Task:
        return cls(TaskKind.DEADLINE, description, when=due)

    @classmethod
    def event(cls, description: str, window: str) -> Task:
        return cls(TaskKind.EVENT, description, when=window)

    def encode(self) -> str:
        """Return the canonical line used for display and storage."""
        mark = DONE_GLYPH if self.done else NOT_DONE
        head = f"[{self.kind.value}][{mark}] {self.description}"
        if self.kind is TaskKind.TODO:
            return head
        return f"{head} ({self.kind.clause}: {self.when})"

    @classmethod
    def decode(cls, line: str) -> Task:
        """Parse a canonical line back into a Task.

        Raises ValueError if the line does not follow the canonical layout.

        Decoding is best-effort when the description or ``when`` text itself
        contains a ``" (by: "``/``" (at: "`` suffix: the last one wins, so
        ``x (at: y) (at: z)`` decodes as description ``x (at: y)`` and window
        ``z``. Re-encoding still reproduces the same line.
        """
        m = RE_LINE.match(line)
        if not m:
            raise ValueError(f"Not a task line: {line!r}")
        kind = TaskKind(m.group(1))
        done = m.group(2) == DONE_GLYPH
        rest = m.group(3)
        if kind is TaskKind.TODO:
            return cls(kind, rest, done=done)

        s = RE_SUFFIX.match(rest)
        if not s or s.group(2) != kind.clause:
            raise ValueError(f"Missing '({kind.clause}: ...)' suffix: {line!r}")
        return cls(kind, s.group(1), when=s.group(3), done=done)


def mark_done(line: str) -> str:
    """Set the done-tag of an encoded line, leaving every other character alone."""
    if len(line) <= DONE_OFFSET:
        raise ValueError(f"Line too short to carry a done marker: {line!r}")
    return line[:DONE_OFFSET] + DONE_GLYPH + line[DONE_OFFSET + 1:]


def is_done(line: str) -> bool:
    return len(line) > DONE_OFFSET and line[DONE_OFFSET] == DONE_GLYPH


def is_valid_due(text: str) -> bool:
    """Check a deadline against the accepted day/month/year and ISO formats."""
    for fmt in DUE_FORMATS:
        try:
            datetime.strptime(text, fmt)
        except ValueError:
            continue
        return True
    return False
