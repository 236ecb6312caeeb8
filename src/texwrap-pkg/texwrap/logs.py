"""Recording and printing diagnostic records.

The log is a plain list owned by the caller. Records are only ever appended,
and they are printed in the order they were recorded.
"""

import sys
from typing import Callable, TextIO

from .types import Level, Log
from .ui import ANSI_DIM, ansi, level_tag, log


def record_line_log(logs: list[Log], level: Level, file: str,
                    linum_new: int, linum_old: int, line: str,
                    message: str) -> None:
    """Append a record about one specific line."""
    logs.append(Log(level=level, file=file, message=message,
                    linum_new=linum_new, linum_old=linum_old, line=line))


def record_file_log(logs: list[Log], level: Level, file: str, message: str) -> None:
    """Append a record that is not tied to any line."""
    logs.append(Log(level=level, file=file, message=message))


def format_log(entry: Log, stream: TextIO | None = None) -> str:
    """Render a record as one or two lines of text."""
    location = entry.file
    if entry.linum_new is not None:
        location += f":{entry.linum_new}"
        if entry.linum_old is not None and entry.linum_old != entry.linum_new:
            location += f" (old {entry.linum_old})"
    text = level_tag(entry.level, stream)
    if location:
        text += f" {location}:"
    text += f" {entry.message}"
    if entry.line is not None:
        text += "\n" + ansi(f"  | {entry.line}", ANSI_DIM, stream=stream)
    return text


def print_logs(logs: list[Log], level: Level,
               log_fn: Callable[[str], None] | None = None) -> None:
    """Print every record at or above the given verbosity threshold."""
    emit = log_fn if log_fn is not None else log
    for entry in logs:
        if entry.level <= level:
            emit(format_log(entry, sys.stderr))


def has_errors(logs: list[Log]) -> bool:
    return any(entry.level == Level.ERROR for entry in logs)
