"""Per-entry cell formatting: color by kind, directory suffix, size label."""

from __future__ import annotations

import mimetypes
from collections.abc import Sequence
from dataclasses import dataclass

from ..ansi import display_width
from ..listing import Entry, EntryKind
from ..ui_theme import ListingTheme
from .sizes import format_size


@dataclass(frozen=True)
class Cell:
    """Rendered entry text plus its display width without escape codes."""

    text: str
    width: int


def file_category(name: str) -> str:
    """Return the MIME major type guessed from ``name``.

    Unknown names count as ``application`` (an octet stream).
    """
    mime_type, _encoding = mimetypes.guess_type(name, strict=False)
    if not mime_type:
        return "application"
    return mime_type.split("/", 1)[0]


def color_for(entry: Entry, theme: ListingTheme) -> str:
    if entry.kind is EntryKind.DIRECTORY:
        return theme.directory
    if entry.kind is EntryKind.SYMLINK:
        return theme.symlink
    if entry.kind is EntryKind.OTHER:
        return theme.other
    category = file_category(entry.name)
    if category == "image":
        return theme.file_image
    if category == "text":
        return theme.file_text
    if category == "application":
        return theme.file_application
    if category == "video":
        return theme.file_video
    return theme.file_default


def _styled(text: str, color: str, theme: ListingTheme) -> str:
    if not color:
        return text
    return f"{color}{text}{theme.reset}"


def format_name(entry: Entry, theme: ListingTheme) -> str:
    suffix = "/" if entry.is_dir else ""
    return _styled(entry.name + suffix, color_for(entry, theme), theme)


def build_cells(
    entries: Sequence[Entry],
    theme: ListingTheme,
    *,
    show_sizes: bool = False,
    human_readable: bool = False,
    align_sizes: bool = True,
) -> list[Cell]:
    """Format every entry into a cell.

    With ``show_sizes`` each non-directory name is prefixed by its size label.
    When ``align_sizes`` is set, labels are right-aligned to the widest one and
    directories get a blank label of the same width.
    """
    labels: list[str | None] = [
        None if (not show_sizes or entry.is_dir) else format_size(entry.size, human_readable)
        for entry in entries
    ]
    label_width = max((len(label) for label in labels if label is not None), default=0)

    cells: list[Cell] = []
    for entry, label in zip(entries, labels):
        name = format_name(entry, theme)
        if label is not None:
            if align_sizes:
                label = label.rjust(label_width)
            text = f"{_styled(label, theme.size, theme)} {name}"
        elif show_sizes and align_sizes and label_width:
            text = " " * (label_width + 1) + name
        else:
            text = name
        cells.append(Cell(text=text, width=display_width(text)))
    return cells


__all__ = [
    "Cell",
    "file_category",
    "color_for",
    "format_name",
    "build_cells",
]
