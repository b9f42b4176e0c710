"""Command-line front door for lsgrid.

Parses CLI options into a ``ListingOptions`` value, probes the terminal once,
then runs collection, sorting and rendering and writes the result in one go.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .config import load_fallback_columns, load_theme_name
from .errors import InvalidArgument, ListingError
from .listing import SortMode, collect_entries, sort_entries
from .render import RenderOptions, render_listing
from .terminal import detect_terminal
from .ui_theme import available_theme_names, resolve_theme

PROG = "lsgrid"
LOG_FORMAT = f"{PROG}: %(levelname)s: %(message)s"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingOptions:
    """Parsed command line for one listing run."""

    path: Path | None = None
    show_hidden: bool = False
    show_sizes: bool = False
    human_readable: bool = False
    reverse: bool = False
    sort_mode: SortMode = SortMode.NAME
    comma_separated: bool = False
    no_color: bool = False
    force_color: bool = False
    theme: str | None = None
    max_cols: int | None = None
    verbose: bool = False


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    # -h means human-readable sizes, so argparse's automatic -h/--help is off.
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=f"{PROG} - list directory contents",
        epilog="When both -S and -t are given, the one specified last wins.",
        add_help=False,
    )
    parser.add_argument("path", nargs="?", default=None, type=Path, help="Directory to list. Defaults to current directory.")
    parser.add_argument("--help", action="help", help="Show this help message and exit.")
    parser.add_argument("-a", "--all", dest="show_hidden", action="store_true", help="Do not ignore entries starting with '.'.")
    parser.add_argument("-s", "--sizes", dest="show_sizes", action="store_true", help="Show sizes of files; use -h for human-readable units.")
    parser.add_argument("-h", "--human", dest="human_readable", action="store_true", help="Print sizes in human-readable units.")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse the sort order.")
    parser.add_argument(
        "-S",
        "--sort-size",
        dest="sort_mode",
        action="store_const",
        const=SortMode.SIZE,
        default=SortMode.NAME,
        help="Sort by file size, largest first (-r for smallest first).",
    )
    parser.add_argument(
        "-t",
        "--sort-mtime",
        dest="sort_mode",
        action="store_const",
        const=SortMode.MTIME,
        help="Sort by time modified, newest first (-r for oldest first).",
    )
    parser.add_argument("-m", "--comma", dest="comma_separated", action="store_true", help="List entries separated by ', '.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--color", dest="force_color", action="store_true", help="Force color output even when not a TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Listing width in columns (default: terminal width).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def validate_options(options: ListingOptions) -> None:
    """Reject option combinations that cannot be honored."""
    if options.force_color and options.no_color:
        raise InvalidArgument("--color and --no-color cannot be combined")


def parse_options(argv: Sequence[str] | None = None) -> ListingOptions:
    """Parse ``argv`` (default ``sys.argv[1:]``) into ``ListingOptions``.

    Usage errors exit with status 2 through ``argparse``.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    options = ListingOptions(
        path=args.path,
        show_hidden=args.show_hidden,
        show_sizes=args.show_sizes,
        human_readable=args.human_readable,
        reverse=args.reverse,
        sort_mode=args.sort_mode,
        comma_separated=args.comma_separated,
        no_color=args.no_color,
        force_color=args.force_color,
        theme=args.theme,
        max_cols=args.max_cols,
        verbose=args.verbose,
    )
    try:
        validate_options(options)
    except InvalidArgument as exc:
        parser.error(str(exc))
    return options


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route package log records to stderr with a ``lsgrid:`` prefix."""
    package_logger = logging.getLogger(PROG)
    package_logger.handlers.clear()
    package_logger.propagate = False
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return package_logger


def run_listing(options: ListingOptions, stdout: TextIO | None = None) -> None:
    """Collect, sort and render one listing, then write it with a single call.

    Raises ``ListingError`` before anything is written when the path cannot
    be listed.
    """
    stream = sys.stdout if stdout is None else stdout
    capabilities = detect_terminal(
        stream,
        no_color=options.no_color,
        force_color=options.force_color,
        max_cols=options.max_cols,
        fallback_columns=load_fallback_columns(),
    )
    theme = resolve_theme(options.theme or load_theme_name(), no_color=not capabilities.color)
    logger.debug("terminal columns=%d color=%s theme=%s", capabilities.columns, capabilities.color, theme.name)

    entries = collect_entries(options.path, options.show_hidden)
    ordered = sort_entries(entries, options.sort_mode, options.reverse)
    rendered = render_listing(
        ordered,
        RenderOptions(
            show_sizes=options.show_sizes,
            human_readable=options.human_readable,
            columns=capabilities.columns,
            theme=theme,
            comma_separated=options.comma_separated,
        ),
    )
    stream.write(rendered)
    stream.flush()


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and list the requested directory.

    Listing failures exit with status 1 and a message on stderr; usage errors
    exit with status 2.
    """
    options = parse_options(argv)
    configure_logging(options.verbose)
    try:
        run_listing(options)
    except ListingError as exc:
        raise SystemExit(f"{PROG}: {exc}") from None


if __name__ == "__main__":
    main()
