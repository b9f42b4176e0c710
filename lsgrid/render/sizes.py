"""Size label formatting for the ``-s`` annotation."""

from __future__ import annotations

SIZE_UNITS: tuple[str, ...] = ("B", "K", "M", "G", "T")


def human_size(size: int) -> str:
    """Format a byte count like ``10B``, ``2.5K`` or ``1.0M``.

    The unit is the largest power of 1024 not exceeding ``size``, capped at
    terabytes. Plain bytes print as an integer, larger units with one decimal.
    """
    if size <= 0:
        return "0B"
    index = 0
    while index < len(SIZE_UNITS) - 1 and size >= 1024 ** (index + 1):
        index += 1
    if index == 0:
        return f"{size}{SIZE_UNITS[0]}"
    return f"{size / 1024 ** index:.1f}{SIZE_UNITS[index]}"


def format_size(size: int, human_readable: bool) -> str:
    """Return the size label shown beside an entry name."""
    if human_readable:
        return human_size(size)
    return str(size)
