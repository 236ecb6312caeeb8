"""
texwrap: Wrap long lines in LaTeX source files.

Lines longer than --wrap characters are broken at a space, keeping trailing
comments commented. Verbatim environments (verbatim, Verbatim, lstlisting,
minted, comment) are never touched, and neither is anything between
"% texwrap: off" and "% texwrap: on" or a line marked "% texwrap: skip".

Usage:
    texwrap [--check | --print] [--keep] [--wrap N]
            [--verbose | --quiet | --trace] FILES...
    texwrap --stdin [options] < input.tex
"""

import argparse
import sys

from pydantic import ValidationError

from . import __version__
from .config import Cli
from .files import read, read_stdin, write
from .logs import has_errors, print_logs, record_file_log
from .text import wrap_text
from .types import Level, Log


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="texwrap",
        description="Wrap long lines in LaTeX source files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "files", nargs="*",
        help="List of files to be formatted",
    )
    parser.add_argument(
        "-c", "--check", action="store_true",
        help="Check formatting, do not modify files",
    )
    parser.add_argument(
        "-p", "--print", action="store_true",
        help="Print to STDOUT, do not modify files",
    )
    parser.add_argument(
        "-k", "--keep", action="store_true",
        help="Keep lines, do not wrap",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Show info log messages",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Hide warning messages",
    )
    parser.add_argument(
        "-t", "--trace", action="store_true",
        help="Show trace log messages",
    )
    parser.add_argument(
        "-s", "--stdin", action="store_true",
        help="Process STDIN as a single file, output formatted text to STDOUT",
    )
    parser.add_argument(
        "--wrap", type=int, default=80,
        help="Line length for wrapping (default: 80)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    return parser


def run(cli: Cli, logs: list[Log]) -> int:
    """Format every requested source and return the exit code."""
    config = cli.wrap_config()
    if cli.stdin:
        sources = [read_stdin(logs)]
    else:
        sources = [read(file, logs) for file in cli.files]

    for source in sources:
        if source is None:
            continue
        path, text = source
        new_text = wrap_text(text, path, config, logs)
        if cli.check:
            if new_text != text:
                record_file_log(logs, Level.ERROR, path, "Incorrect formatting.")
        elif cli.print:
            sys.stdout.write(new_text)
        elif new_text != text:
            if write(path, new_text, logs):
                record_file_log(logs, Level.INFO, path, "Overwriting file.")

    return 1 if has_errors(logs) else 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cli = Cli.model_validate(vars(args))
    except ValidationError as e:
        print(f"Error: invalid arguments\n{e}", file=sys.stderr)
        return 1

    logs: list[Log] = []
    exit_code = cli.resolve(logs)
    if exit_code == 0:
        exit_code = run(cli, logs)
    print_logs(logs, cli.log_level)
    return exit_code
