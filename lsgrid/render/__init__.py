"""Rendering engine for directory listings.

Turns sorted entries into one fully composed output string: colored cells
laid out in a terminal-width grid, or a single comma-separated line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..listing import Entry
from ..ui_theme import PLAIN_THEME, ListingTheme
from .cells import Cell, build_cells
from .grid import GridLayout, compute_layout, render_grid
from .sizes import format_size, human_size

COMMA_SEPARATOR = ", "


@dataclass(frozen=True)
class RenderOptions:
    show_sizes: bool = False
    human_readable: bool = False
    columns: int = 80
    theme: ListingTheme = PLAIN_THEME
    comma_separated: bool = False


def render_listing(entries: Sequence[Entry], options: RenderOptions) -> str:
    """Render ``entries`` in order; an empty listing renders as ``""``."""
    if not entries:
        return ""
    cells = build_cells(
        entries,
        options.theme,
        show_sizes=options.show_sizes,
        human_readable=options.human_readable,
        align_sizes=not options.comma_separated,
    )
    if options.comma_separated:
        return COMMA_SEPARATOR.join(cell.text for cell in cells) + "\n"
    return render_grid(cells, options.columns)


__all__ = [
    "RenderOptions",
    "render_listing",
    "Cell",
    "build_cells",
    "GridLayout",
    "compute_layout",
    "render_grid",
    "format_size",
    "human_size",
]
