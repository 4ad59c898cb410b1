"""CLI entry point for taskline."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from . import messages
from .errors import InvalidCommand, StorageError
from .interpreter import Interpreter
from .storage import TaskStorage

DEFAULT_DATA_FILE = "data/tasks.txt"


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    parser = argparse.ArgumentParser(
        prog="taskline",
        description="Line-oriented personal task tracker.",
    )
    parser.add_argument(
        "--data-file",
        type=str,
        default=None,
        help=f"Task file to load and save (or set TASKLINE_DATA_FILE; default {DEFAULT_DATA_FILE})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    # Configure logging; responses go to stdout so logs stay on stderr
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )

    # Resolve data file
    data_file = args.data_file or os.environ.get("TASKLINE_DATA_FILE") or DEFAULT_DATA_FILE
    storage = TaskStorage(Path(data_file))

    try:
        lines = storage.load()
    except StorageError as e:
        logging.error("%s", e)
        return 1

    interpreter = Interpreter(lines)
    stdout.write(messages.introduction())

    for raw in stdin:
        line = raw.rstrip("\n").rstrip("\r")
        try:
            stdout.write(interpreter.process(line))
        except InvalidCommand as e:
            stdout.write(messages.error(str(e)))
        stdout.flush()

        if not interpreter.is_running():
            try:
                storage.save(interpreter.final_snapshot())
            except StorageError as e:
                logging.error("%s", e)
                return 1
            return 0

    logging.warning("Input ended without 'bye'; changes were not saved")
    return 0


if __name__ == "__main__":
    sys.exit(main())
