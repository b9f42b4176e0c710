"""Directory scanning into ``Entry`` values with hidden-entry filtering."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..errors import error_for_os_error
from .types import Entry, EntryKind

logger = logging.getLogger(__name__)


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` is a dotfile."""
    return name.startswith(".")


def display_name(name: str) -> str:
    """Return ``name`` with undecodable filename bytes replaced by U+FFFD.

    ``os.scandir`` hands such bytes back as lone surrogates, which a strict
    UTF-8 stdout refuses to encode.
    """
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def entry_from_stat(name: str, stat_result: os.stat_result) -> Entry:
    """Build an ``Entry`` from an ``lstat`` result.

    Directories report size ``0``; every other kind keeps ``st_size``. The
    name is made printable with :func:`display_name`.
    """
    kind = EntryKind.from_mode(stat_result.st_mode)
    size = 0 if kind is EntryKind.DIRECTORY else max(0, int(stat_result.st_size))
    return Entry(
        name=display_name(name),
        kind=kind,
        size=size,
        mtime_ns=int(stat_result.st_mtime_ns),
    )


def collect_entries(path: Path | None, show_hidden: bool) -> list[Entry]:
    """List the immediate children of ``path`` in filesystem order.

    ``None`` lists the current directory. A path naming a non-directory
    yields a single entry for that path. Raises ``PathNotFound``,
    ``PermissionDenied`` or ``ListingIOError`` when the path cannot be read.
    Children whose metadata vanish mid-scan are skipped with a warning.
    """
    directory = Path(".") if path is None else Path(path)

    try:
        target_stat = os.stat(directory)
    except OSError as exc:
        raise error_for_os_error(directory, exc) from exc

    if not stat.S_ISDIR(target_stat.st_mode):
        try:
            link_stat = os.lstat(directory)
        except OSError as exc:
            raise error_for_os_error(directory, exc) from exc
        logger.debug("listing single non-directory path %s", directory)
        return [entry_from_stat(directory.name or str(directory), link_stat)]

    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if not show_hidden and is_hidden_name(name):
                    continue
                try:
                    child_stat = child.stat(follow_symlinks=False)
                except OSError as exc:
                    logger.warning("skipping %s: %s", child.path, exc.strerror or exc)
                    continue
                entries.append(entry_from_stat(name, child_stat))
    except OSError as exc:
        raise error_for_os_error(directory, exc) from exc

    logger.debug("collected %d entries from %s", len(entries), directory)
    return entries


__all__ = [
    "is_hidden_name",
    "display_name",
    "entry_from_stat",
    "collect_entries",
]
