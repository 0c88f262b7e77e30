"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the header, listing, preview, and status line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    header: str
    divider: str
    list_dir: str
    list_file: str
    list_selected: str
    match_hit: str
    preview_text: str
    preview_title: str
    status_normal: str
    status_insert: str
    status_error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[36m",
    divider="\033[2m",
    list_dir="\033[1;34m",
    list_file="\033[38;5;252m",
    list_selected="\033[30;104m",
    match_hit="\033[1;33m",
    preview_text="\033[37m",
    preview_title="\033[1;38;5;81m",
    status_normal="\033[36m",
    status_insert="\033[32m",
    status_error="\033[31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    divider="\033[2;38;5;31m",
    list_dir="\033[1;38;5;45m",
    list_file="\033[38;5;252m",
    list_selected="\033[30;48;5;39m",
    match_hit="\033[1;38;5;153m",
    preview_text="\033[38;5;252m",
    preview_title="\033[1;38;5;39m",
    status_normal="\033[38;5;45m",
    status_insert="\033[38;5;84m",
    status_error="\033[38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header="",
    divider="",
    list_dir="",
    list_file="",
    list_selected="",
    match_hit="",
    preview_text="",
    preview_title="",
    status_normal="",
    status_insert="",
    status_error="",
)

_THEMES: dict[str, UITheme] = {
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]
