"""Listing pipeline front half: entry model, directory collection and sorting.

This package contains non-UI primitives:
- the frozen ``Entry`` datatype and its ``EntryKind``
- directory scanning with hidden-entry filtering
- sort modes with deterministic name tie-breaks
"""

from __future__ import annotations

from .types import Entry, EntryKind
from .collect import collect_entries, display_name, entry_from_stat, is_hidden_name
from .sort import SortMode, sort_entries

__all__ = [
    "Entry",
    "EntryKind",
    "collect_entries",
    "display_name",
    "entry_from_stat",
    "is_hidden_name",
    "SortMode",
    "sort_entries",
]
