"""Locating LaTeX comments."""

COMMENT_MARKER = "%"


def find_comment_index(line: str) -> int | None:
    """Character index of the first `%` not escaped by a backslash, if any."""
    if COMMENT_MARKER not in line:
        return None
    prev = ""
    for i, c in enumerate(line):
        if c == COMMENT_MARKER and prev != "\\":
            return i
        prev = c
    return None
