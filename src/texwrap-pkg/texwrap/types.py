"""Core data types for the texwrap formatter."""

from dataclasses import dataclass
from enum import IntEnum


class Level(IntEnum):
    """Diagnostic severity, ordered from least to most verbose."""
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


@dataclass(frozen=True)
class Log:
    """A single diagnostic record.

    File-scoped records leave the line fields as None.
    """
    level: Level
    file: str
    message: str
    linum_new: int | None = None
    linum_old: int | None = None
    line: str | None = None


@dataclass
class LineContext:
    """Parse state of one line, as seen by the wrap engine."""
    in_verbatim: bool = False
    in_ignore: bool = False
    linum_old: int = 1
    linum_new: int = 1
