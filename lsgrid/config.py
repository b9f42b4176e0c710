"""Persistent JSON config helpers.

Reads the preferred theme and the fallback listing width.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lsgrid"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_FALLBACK_COLUMNS = 80


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Return the persisted theme name, or ``None`` when unset or not a string."""
    value = load_config().get("theme")
    if isinstance(value, str) and value.strip():
        return value
    return None


def load_fallback_columns() -> int:
    """Return the width used when the terminal size cannot be determined.

    Booleans, non-integers and values below 1 fall back to
    ``DEFAULT_FALLBACK_COLUMNS``.
    """
    value = load_config().get("fallback_columns")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_FALLBACK_COLUMNS
    return value


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_FALLBACK_COLUMNS",
    "load_config",
    "load_theme_name",
    "load_fallback_columns",
]
