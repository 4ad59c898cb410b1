"""Ordered, index-addressable collection of encoded task lines."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import TaskIndexError


class TaskList:
    """Holds task lines in insertion order (0-based)."""

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self._lines: list[str] = list(lines or [])

    def count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._lines):
            raise TaskIndexError(
                f"Task index {index} out of range (have {len(self._lines)})"
            )

    def get(self, index: int) -> str:
        self._check(index)
        return self._lines[index]

    def replace(self, index: int, line: str) -> None:
        self._check(index)
        self._lines[index] = line

    def append(self, line: str) -> None:
        self._lines.append(line)

    def remove(self, index: int) -> str:
        """Remove the line at ``index`` and return it; later lines shift down."""
        self._check(index)
        return self._lines.pop(index)

    def find(self, keyword: str) -> list[str]:
        """Return lines containing ``keyword`` (case-sensitive), in order."""
        return [line for line in self._lines if keyword in line]

    def snapshot(self) -> list[str]:
        return list(self._lines)
