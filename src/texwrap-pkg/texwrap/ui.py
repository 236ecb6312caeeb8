"""ANSI terminal output utilities for texwrap."""

import sys
from typing import TextIO

from .types import Level

ANSI_RESET  = "\033[0m"
ANSI_BOLD   = "\033[1m"
ANSI_DIM    = "\033[2m"
ANSI_RED    = "\033[31m"
ANSI_YELLOW = "\033[33m"
ANSI_BLUE   = "\033[34m"
ANSI_CYAN   = "\033[36m"

LEVEL_COLORS = {
    Level.ERROR: ANSI_RED,
    Level.WARN: ANSI_YELLOW,
    Level.INFO: ANSI_CYAN,
    Level.DEBUG: ANSI_BLUE,
    Level.TRACE: ANSI_DIM,
}


def ansi(text: str, *codes: str, stream: TextIO | None = None) -> str:
    """Wrap text in ANSI escape codes when the stream is a TTY (no-op otherwise)."""
    stream = stream if stream is not None else sys.stdout
    if not stream.isatty():
        return text
    return "".join(codes) + text + ANSI_RESET


def level_tag(level: Level, stream: TextIO | None = None) -> str:
    """Bold, coloured severity tag such as `WARN`."""
    return ansi(f"{level.name:<5}", ANSI_BOLD, LEVEL_COLORS[level], stream=stream)


def log(msg: str) -> None:
    """Print a diagnostic line to stderr."""
    print(msg, file=sys.stderr)
