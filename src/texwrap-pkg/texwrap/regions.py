"""Tracking verbatim environments and ignored regions across a document."""

import re

from .comments import find_comment_index
from .types import LineContext

VERBATIMS = ("verbatim", "Verbatim", "lstlisting", "minted", "comment")

IGNORE_OFF = "% texwrap: off"
IGNORE_ON = "% texwrap: on"
IGNORE_SKIP = "% texwrap: skip"

_ENVS = "|".join(VERBATIMS)
VERBATIM_BEGIN_RE = re.compile(r"\\begin\{(?:" + _ENVS + r")\*?\}")
VERBATIM_END_RE = re.compile(r"\\end\{(?:" + _ENVS + r")\*?\}")


class RegionTracker:
    """Scans source lines in order and reports their region flags.

    Lines that open or close a verbatim environment count as verbatim, as do
    the lines between them. The `off`/`on` directive lines are themselves
    ignored, and a `skip` directive ignores only its own line.
    """

    def __init__(self) -> None:
        self.verbatim_depth = 0
        self.ignoring = False

    def advance(self, line: str, linum_old: int, linum_new: int) -> LineContext:
        """Consume the next source line and return its context."""
        if self.verbatim_depth:
            code = line
        else:
            comment_index = find_comment_index(line)
            code = line if comment_index is None else line[:comment_index]
        begins = len(VERBATIM_BEGIN_RE.findall(code))
        ends = len(VERBATIM_END_RE.findall(code))
        in_verbatim = bool(self.verbatim_depth or begins or ends)
        self.verbatim_depth = max(0, self.verbatim_depth + begins - ends)

        in_ignore = self.ignoring or IGNORE_SKIP in line
        if IGNORE_OFF in line:
            self.ignoring = True
            in_ignore = True
        elif IGNORE_ON in line:
            self.ignoring = False
            in_ignore = True

        return LineContext(in_verbatim=in_verbatim, in_ignore=in_ignore,
                           linum_old=linum_old, linum_new=linum_new)
