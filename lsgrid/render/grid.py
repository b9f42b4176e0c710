"""Width-filling, row-major grid layout for rendered cells."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..ansi import pad_ansi
from .cells import Cell

COLUMN_PADDING = 2


@dataclass(frozen=True)
class GridLayout:
    column_width: int
    column_count: int
    row_count: int


def compute_layout(cell_widths: Sequence[int], columns: int, padding: int = COLUMN_PADDING) -> GridLayout:
    """Size the grid from the widest cell.

    ``column_count`` is ``columns // column_width`` with a minimum of one and
    never more than the number of cells.
    """
    if not cell_widths:
        return GridLayout(column_width=0, column_count=0, row_count=0)
    column_width = max(cell_widths) + padding
    column_count = max(1, columns // column_width)
    column_count = min(column_count, len(cell_widths))
    row_count = -(-len(cell_widths) // column_count)
    return GridLayout(column_width=column_width, column_count=column_count, row_count=row_count)


def render_grid(cells: Sequence[Cell], columns: int) -> str:
    """Lay ``cells`` out left to right, wrapping rows at the terminal width.

    Every cell except the last in its row is padded to the column width, so
    rows carry no trailing whitespace.
    """
    layout = compute_layout([cell.width for cell in cells], columns)
    out: list[str] = []
    for row in range(layout.row_count):
        start = row * layout.column_count
        row_cells = cells[start : start + layout.column_count]
        padded = [pad_ansi(cell.text, layout.column_width) for cell in row_cells[:-1]]
        padded.append(row_cells[-1].text)
        out.append("".join(padded))
        out.append("\n")
    return "".join(out)


__all__ = [
    "COLUMN_PADDING",
    "GridLayout",
    "compute_layout",
    "render_grid",
]
