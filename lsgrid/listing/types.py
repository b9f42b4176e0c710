"""Domain datatypes for one listed directory entry."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> "EntryKind":
        """Classify an ``lstat`` mode; symlinks are reported as links, not targets."""
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER


@dataclass(frozen=True)
class Entry:
    """One directory member with the metadata used for filtering, sorting and display."""

    name: str
    kind: EntryKind
    size: int = 0
    mtime_ns: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("entry name must be non-empty")
        if self.size < 0:
            raise ValueError(f"entry size must be non-negative: {self.size}")

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


__all__ = [
    "EntryKind",
    "Entry",
]
