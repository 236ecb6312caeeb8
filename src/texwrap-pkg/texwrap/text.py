"""Wrapping whole LaTeX documents, preserving verbatim and ignored regions."""

from dataclasses import replace

from .comments import COMMENT_MARKER
from .config import WrapConfig
from .regions import RegionTracker
from .types import LineContext, Log
from .wrap import apply_wrap, needs_wrap

BLANKS = ' \t'


def wrap_text(text: str, file: str, config: WrapConfig, logs: list[Log]) -> str:
    """Wrap every over-long line of a document.

    - Only `\\n` ends a line; other line-boundary characters are ordinary text
    - Verbatim environments and ignored regions are copied unchanged
    - Other lines lose trailing spaces and tabs, except an escaped space
    - Continuation lines keep the leading indent of the line they came from
    - A line that cannot be broken is kept as is (a warning is logged)
    """
    if not text:
        return text

    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()

    tracker = RegionTracker()
    result: list[str] = []

    for linum_old, line in enumerate(lines, start=1):
        context = tracker.advance(line, linum_old, len(result) + 1)
        if context.in_verbatim or context.in_ignore:
            result.append(line)
            continue
        result.extend(_wrap_line(strip_trailing(line), context, file, config, logs))

    final = '\n'.join(result)
    if text.endswith('\n'):
        final += '\n'
    return final


def strip_trailing(line: str) -> str:
    """Remove trailing spaces and tabs, keeping a space escaped by `\\`."""
    stripped = line.rstrip(BLANKS)
    if stripped.endswith('\\') and len(stripped) < len(line) and line[len(stripped)] == ' ':
        return line[:len(stripped) + 1]
    return stripped


def _wrap_line(line: str, context: LineContext, file: str,
               config: WrapConfig, logs: list[Log]) -> list[str]:
    """Break one source line repeatedly until it fits or cannot be broken."""
    indent = line[:len(line) - len(line.lstrip(BLANKS))]
    lines = []

    while needs_wrap(line, context, config):
        split = apply_wrap(line, context, file, config, logs)
        if split is None:
            break
        head, tail = split
        # The tail starts with a space unless a comment marker was added
        if tail.startswith(COMMENT_MARKER):
            rest = indent + tail
        else:
            rest = indent + tail.lstrip(' ')
        if not head.strip(BLANKS) or len(rest) >= len(line):
            break
        lines.append(strip_trailing(head))
        line = rest
        context = replace(context, linum_new=context.linum_new + 1)

    lines.append(line)
    return lines
