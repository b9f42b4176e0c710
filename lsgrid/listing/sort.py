"""Sort modes and comparator policy for collected entries."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .types import Entry


class SortMode(Enum):
    NAME = "name"
    SIZE = "size"
    MTIME = "mtime"


def _primary_key(mode: SortMode):
    if mode is SortMode.SIZE:
        return lambda entry: entry.size
    if mode is SortMode.MTIME:
        return lambda entry: entry.mtime_ns
    return lambda entry: entry.name


def _descending_by_default(mode: SortMode) -> bool:
    """Size and time list largest/newest first unless reversed."""
    return mode in {SortMode.SIZE, SortMode.MTIME}


def sort_entries(
    entries: Iterable[Entry],
    mode: SortMode = SortMode.NAME,
    reverse: bool = False,
) -> list[Entry]:
    """Return ``entries`` ordered by ``mode``, inverted when ``reverse``.

    Ties under the primary key always fall back to ascending name, even when
    the primary order is reversed. The input iterable is left untouched.
    """
    # Python's sort stays stable with reverse=True, so the name pre-pass
    # survives as the tie-break.
    by_name = sorted(entries, key=lambda entry: entry.name)
    if mode is SortMode.NAME:
        return by_name[::-1] if reverse else by_name
    descending = _descending_by_default(mode) != reverse
    return sorted(by_name, key=_primary_key(mode), reverse=descending)


__all__ = [
    "SortMode",
    "sort_entries",
]
