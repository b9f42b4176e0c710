"""Error kinds raised by the listing pipeline.

Every failure is terminal: the CLI prints the message and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base class for listing failures carrying an optional offending path."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidArgument(ListingError):
    """Unrecognized flag or conflicting options."""


class PathNotFound(ListingError):
    """Requested path does not exist."""


class PermissionDenied(ListingError):
    """Requested path exists but cannot be read."""


class ListingIOError(ListingError):
    """Generic read failure not covered by a more specific kind."""


def error_for_os_error(path: Path, exc: OSError) -> ListingError:
    """Translate an ``OSError`` raised while reading ``path`` into a listing error."""
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return PathNotFound(f"Path not found: {path}", path)
    if isinstance(exc, PermissionError):
        return PermissionDenied(f"Permission denied: {path}", path)
    reason = exc.strerror or str(exc)
    return ListingIOError(f"Cannot read {path}: {reason}", path)


__all__ = [
    "ListingError",
    "InvalidArgument",
    "PathNotFound",
    "PermissionDenied",
    "ListingIOError",
    "error_for_os_error",
]
