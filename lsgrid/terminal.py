"""Terminal capability detection for one listing run.

Width and color support are probed once at startup and handed to the
renderer as plain values.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class TerminalCapabilities:
    columns: int
    color: bool


def _stream_is_tty(stream: TextIO) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError, OSError):
        return False


def color_supported(
    stream: TextIO,
    *,
    no_color: bool = False,
    force_color: bool = False,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Return whether escape sequences should be written to ``stream``.

    ``force_color`` wins over everything. Otherwise color needs a TTY, no
    ``--no-color``, an empty ``NO_COLOR`` and a ``TERM`` other than ``dumb``.
    """
    if force_color:
        return True
    if no_color:
        return False
    env = os.environ if environ is None else environ
    if env.get("NO_COLOR"):
        return False
    if env.get("TERM") == "dumb":
        return False
    return _stream_is_tty(stream)


def terminal_columns(max_cols: int | None, fallback_columns: int) -> int:
    """Resolve listing width from an explicit override or the terminal size."""
    if max_cols is not None:
        return max(1, max_cols)
    term = shutil.get_terminal_size((fallback_columns, 24))
    return max(1, term.columns)


def detect_terminal(
    stream: TextIO,
    *,
    no_color: bool = False,
    force_color: bool = False,
    max_cols: int | None = None,
    fallback_columns: int = 80,
) -> TerminalCapabilities:
    """Probe width and color capability for ``stream``."""
    return TerminalCapabilities(
        columns=terminal_columns(max_cols, fallback_columns),
        color=color_supported(stream, no_color=no_color, force_color=force_color),
    )


__all__ = [
    "TerminalCapabilities",
    "color_supported",
    "terminal_columns",
    "detect_terminal",
]
