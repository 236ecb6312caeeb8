"""Configuration for the texwrap formatter.

`Cli` is the validated command-line surface; `WrapConfig` is the small
read-only view of it that the wrap engine consumes.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from .logs import record_file_log
from .types import Level, Log


@dataclass(frozen=True)
class WrapConfig:
    """Per-run settings read by the wrap engine.

    `wrap_min` must not exceed `wrap`; use `from_width` to derive it.
    """
    keep: bool = False
    wrap: int = 80
    wrap_min: int = 70
    trace: bool = False

    @classmethod
    def from_width(cls, wrap: int, keep: bool = False, trace: bool = False) -> "WrapConfig":
        return cls(keep=keep, wrap=wrap, wrap_min=min_wrap_width(wrap), trace=trace)


def min_wrap_width(wrap: int) -> int:
    """Earliest acceptable break column for a given maximum width."""
    return wrap - 10 if wrap >= 50 else wrap


class Cli(BaseModel):
    """Command-line options, validated by pydantic."""
    model_config = ConfigDict(extra="forbid")

    check: bool = Field(False, description="Check formatting, do not modify files")
    print: bool = Field(False, description="Print to STDOUT, do not modify files")
    keep: bool = Field(False, description="Keep lines, do not wrap")
    verbose: bool = Field(False, description="Show info log messages")
    quiet: bool = Field(False, description="Hide warning messages")
    trace: bool = Field(False, description="Show trace log messages")
    files: list[str] = Field(default_factory=list, description="List of files to be formatted")
    stdin: bool = Field(False, description="Process STDIN as a single file, output formatted text to STDOUT")
    wrap: int = Field(80, ge=1, le=255, description="Line length for wrapping")

    @property
    def wrap_min(self) -> int:
        """Derived from `wrap`; not settable."""
        return min_wrap_width(self.wrap)

    @property
    def log_level(self) -> Level:
        if self.trace:
            return Level.TRACE
        if self.verbose:
            return Level.INFO
        if self.quiet:
            return Level.ERROR
        return Level.WARN

    def resolve(self, logs: list[Log]) -> int:
        """Make the options consistent and return an exit code (0 or 1)."""
        exit_code = 0
        self.verbose |= self.trace
        self.print |= self.stdin

        if not self.stdin and not self.files:
            record_file_log(
                logs, Level.ERROR, "",
                "No files specified. Either provide filenames or provide --stdin.",
            )
            exit_code = 1
        if self.stdin and self.files:
            record_file_log(
                logs, Level.ERROR, "",
                "Do not provide file name(s) when using --stdin.",
            )
            exit_code = 1
        return exit_code

    def wrap_config(self) -> WrapConfig:
        return WrapConfig(
            keep=self.keep,
            wrap=self.wrap,
            wrap_min=self.wrap_min,
            trace=self.trace,
        )
