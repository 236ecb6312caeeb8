"""Breaking long lines of LaTeX source.

Each call to `apply_wrap` performs at most one split; the caller re-submits
the tail if it is still too long.
"""

from .comments import COMMENT_MARKER, find_comment_index
from .config import WrapConfig
from .logs import record_line_log
from .types import Level, LineContext, Log


def needs_wrap(line: str, context: LineContext, config: WrapConfig) -> bool:
    """True when the line is longer than the limit and may be reflowed."""
    return (
        not config.keep
        and not context.in_verbatim
        and not context.in_ignore
        and len(line) > config.wrap
    )


def find_wrap_point(line: str, config: WrapConfig) -> int | None:
    """Find the index of the space at which to break a long line.

    A space qualifies when it is not escaped (`\\ `) and some content has
    already been seen; a `%` does not count as content. Scanning stops at
    `wrap_min` as soon as a candidate exists, so the break nearest to the
    minimum width wins over later spaces.
    """
    wrap_point = None
    after_content = False
    prev = ""
    for i, c in enumerate(line):
        if i >= config.wrap_min and wrap_point is not None:
            break
        if c == " " and prev != "\\":
            if after_content:
                wrap_point = i
        elif c != COMMENT_MARKER:
            after_content = True
        prev = c
    return wrap_point


def apply_wrap(line: str, context: LineContext, file: str,
               config: WrapConfig, logs: list[Log]) -> tuple[str, str] | None:
    """Split a long line into a head and a tail.

    If the break falls inside a trailing comment, the tail is prefixed with
    `%` so that it stays commented. Returns None when no break exists.
    """
    if config.trace:
        record_line_log(logs, Level.TRACE, file, context.linum_new,
                        context.linum_old, line, "Wrapping long line.")
    wrap_point = find_wrap_point(line, config)
    comment_index = find_comment_index(line)

    if wrap_point is None or wrap_point > config.wrap:
        record_line_log(logs, Level.WARN, file, context.linum_new,
                        context.linum_old, line, "Line cannot be wrapped.")
    if wrap_point is None:
        return None

    head = line[:wrap_point]
    tail = line[wrap_point:]
    if comment_index is not None and wrap_point > comment_index:
        tail = COMMENT_MARKER + tail
    return head, tail
