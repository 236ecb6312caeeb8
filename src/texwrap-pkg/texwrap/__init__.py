"""texwrap: Line wrapping for LaTeX source files.

Public API re-exports for convenient single-import usage.
"""

__version__ = "0.1.0"

from .comments import find_comment_index
from .config import Cli, WrapConfig, min_wrap_width
from .logs import print_logs, record_file_log, record_line_log
from .regions import RegionTracker
from .text import wrap_text
from .types import Level, LineContext, Log
from .wrap import apply_wrap, find_wrap_point, needs_wrap

__all__ = [
    # comments
    "find_comment_index",
    # config
    "Cli",
    "WrapConfig",
    "min_wrap_width",
    # logs
    "print_logs",
    "record_file_log",
    "record_line_log",
    # regions
    "RegionTracker",
    # text
    "wrap_text",
    # types
    "Level",
    "LineContext",
    "Log",
    # wrap
    "apply_wrap",
    "find_wrap_point",
    "needs_wrap",
]
