"""Colour themes for the terminal UI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ThemeColors:
    background: str
    accent: str
    ok: str


class Theme(str, Enum):
    DRACULA = "dracula"
    SOLARIZED_DARK = "solarized-dark"
    GRUVBOX_DARK = "gruvbox-dark"

    @property
    def colors(self) -> ThemeColors:
        return _THEME_COLORS[self]

    @classmethod
    def from_name(cls, name: str) -> "Theme":
        return cls(name.strip().lower().replace("_", "-"))


_THEME_COLORS: dict[Theme, ThemeColors] = {
    Theme.DRACULA: ThemeColors(background="#282a36", accent="#bd93f9", ok="#50fa7b"),
    Theme.SOLARIZED_DARK: ThemeColors(background="#002b36", accent="#268bd2", ok="#859900"),
    Theme.GRUVBOX_DARK: ThemeColors(background="#282828", accent="#fabd2f", ok="#b8bb26"),
}

THEME_NAMES: tuple[str, ...] = tuple(theme.value for theme in Theme)
