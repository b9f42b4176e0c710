"""UI theme definitions and selection helpers.

Themes are ANSI palettes keyed by entry kind and file category. The plain
theme carries empty sequences so rendering emits no escape codes at all.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by the listing renderer."""

    name: str
    reset: str
    directory: str
    symlink: str
    other: str
    file_image: str
    file_text: str
    file_application: str
    file_video: str
    file_default: str
    size: str

    @property
    def is_plain(self) -> bool:
        return not self.reset


DEFAULT_THEME = ListingTheme(
    name="default",
    reset="\033[0m",
    directory="\033[1;31m",
    symlink="\033[1;36m",
    other="\033[33;40m",
    file_image="\033[34m",
    file_text="\033[33m",
    file_application="\033[32m",
    file_video="\033[36m",
    file_default="\033[35m",
    size="\033[38;5;109m",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    reset="\033[0m",
    directory="\033[1;38;5;45m",
    symlink="\033[38;5;117m",
    other="\033[38;5;215m",
    file_image="\033[38;5;39m",
    file_text="\033[38;5;153m",
    file_application="\033[38;5;84m",
    file_video="\033[38;5;81m",
    file_default="\033[38;5;252m",
    size="\033[38;5;73m",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    reset="",
    directory="",
    symlink="",
    other="",
    file_image="",
    file_text="",
    file_application="",
    file_video="",
    file_default="",
    size="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
