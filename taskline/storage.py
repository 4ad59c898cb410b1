"""Load and save the task file (one encoded task per line)."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import StorageError

logger = logging.getLogger(__name__)


class TaskStorage:
    """Flat text file holding one canonical task line per record."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[str]:
        """Read all task lines.

        A missing file yields an empty list. Lines are returned verbatim
        (minus line endings) and are not re-validated.

        Raises:
            StorageError: if the file exists but cannot be read or decoded.
        """
        if not self.path.exists():
            logger.info("No task file at %s; starting empty", self.path)
            return []
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e

        lines = [line.rstrip("\r") for line in content.split("\n")]
        # Trailing blank lines are not tasks
        while lines and lines[-1] == "":
            lines.pop()
        logger.info("Loaded %d task(s) from %s", len(lines), self.path)
        return lines

    def save(self, lines: Iterable[str]) -> None:
        """Overwrite the file with ``lines``, creating its directory if needed.

        Raises:
            StorageError: if the directory or file cannot be written.
        """
        lines = list(lines)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e
        logger.info("Saved %d task(s) to %s", len(lines), self.path)
