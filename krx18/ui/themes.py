"""
Theme System - Color palettes for catalog tables, panels and messages.

Each palette names the colors of the things krx18 actually draws:
entry titles and URLs in tables, the detail panel, link tables and the
warning, info and error panels.
"""

from dataclasses import dataclass
from typing import Dict, Optional
from enum import Enum

from rich.theme import Theme


class ThemeName(str, Enum):
    """Available theme names."""
    DEFAULT = "default"
    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class ColorPalette:
    """Colors for one theme."""

    title: str
    url: str
    header: str
    muted: str

    table_border: str
    panel_border: str

    warning: str
    error: str
    info: str


PALETTES: Dict[ThemeName, ColorPalette] = {
    ThemeName.DEFAULT: ColorPalette(
        title="blue",
        url="dim white",
        header="cyan",
        muted="dim",
        table_border="blue",
        panel_border="dim blue",
        warning="yellow",
        error="red",
        info="blue",
    ),
    ThemeName.DARK: ColorPalette(
        title="bright_blue",
        url="bright_black",
        header="bright_cyan",
        muted="grey50",
        table_border="bright_blue",
        panel_border="grey37",
        warning="bright_yellow",
        error="bright_red",
        info="bright_blue",
    ),
    ThemeName.LIGHT: ColorPalette(
        title="dark_blue",
        url="grey37",
        header="dark_cyan",
        muted="grey50",
        table_border="blue",
        panel_border="grey70",
        warning="dark_orange",
        error="dark_red",
        info="blue",
    ),
}


class ThemeManager:
    """Tracks the active theme."""

    def __init__(self, theme_name: ThemeName = ThemeName.DEFAULT):
        self.current = theme_name

    def get_palette(self, theme_name: Optional[ThemeName] = None) -> ColorPalette:
        return PALETTES.get(theme_name or self.current, PALETTES[ThemeName.DEFAULT])

    def set_theme(self, theme_name: ThemeName) -> None:
        if theme_name not in PALETTES:
            raise ValueError(f"Unknown theme: {theme_name}")
        self.current = theme_name

    def create_rich_theme(self, theme_name: Optional[ThemeName] = None) -> Theme:
        """Expose the palette as named Rich styles for markup such as [entry.title]."""
        palette = self.get_palette(theme_name)
        return Theme({
            "entry.title": f"bold {palette.title}",
            "entry.url": palette.url,
            "table.header": f"bold {palette.header}",
            "muted": palette.muted,
            "warning": palette.warning,
            "error": palette.error,
            "info": palette.info,
        })


_theme_manager = ThemeManager()


def get_theme(theme_name: Optional[ThemeName] = None) -> Theme:
    """Get a Rich Theme object (defaults to the current theme)."""
    return _theme_manager.create_rich_theme(theme_name)


def get_palette(theme_name: Optional[ThemeName] = None) -> ColorPalette:
    """Get color palette for a theme (defaults to the current theme)."""
    return _theme_manager.get_palette(theme_name)


def set_theme(theme_name: ThemeName) -> None:
    _theme_manager.set_theme(theme_name)


__all__ = [
    "ThemeName",
    "ColorPalette",
    "ThemeManager",
    "PALETTES",
    "get_theme",
    "get_palette",
    "set_theme",
]
