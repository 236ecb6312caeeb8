"""Reading LaTeX sources from disk or standard input."""

import sys
from pathlib import Path

from .logs import record_file_log
from .types import Level, Log

EXTENSIONS = (".tex", ".bib", ".sty", ".cls")
STDIN_NAME = "<STDIN>"


def read(file: str, logs: list[Log]) -> tuple[str, str] | None:
    """Read a source file, adding a `.tex` extension when none is given."""
    has_ext = file.endswith(EXTENSIONS)
    path = file if has_ext else file + ".tex"
    try:
        return path, Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        if has_ext:
            record_file_log(logs, Level.ERROR, file, "Could not open file.")
        else:
            record_file_log(logs, Level.ERROR, file, "File type invalid.")
        return None


def read_stdin(logs: list[Log]) -> tuple[str, str] | None:
    """Read all of standard input as a single document."""
    try:
        text = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        record_file_log(logs, Level.ERROR, STDIN_NAME, f"Could not read from STDIN: {e}")
        return None
    record_file_log(logs, Level.TRACE, STDIN_NAME, f"Read {len(text.encode())} bytes.")
    return STDIN_NAME, text


def write(path: str, text: str, logs: list[Log]) -> bool:
    """Write formatted text back to disk, logging a failure as an error."""
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        record_file_log(logs, Level.ERROR, path, f"Could not write file: {e}")
        return False
    return True
