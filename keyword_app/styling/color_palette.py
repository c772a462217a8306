"""Color palette for KeywordQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#0F172A", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#64748B", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#F8FAFC", dark="#1E1E1E")
    BORDER_PRIMARY = ThemeColors(light="#CBD5E1", dark="#555555")

    BUTTON_PRIMARY_BG = ThemeColors(light="#2563EB", dark="#4A9EFF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#FFFFFF", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E2E8F0", dark="#505050")

    # Tiles: face down, revealed during play, and the solved keyword
    TILE_HIDDEN = ThemeColors(light="#1E293B", dark="#334155")
    TILE_HIDDEN_TEXT = ThemeColors(light="#94A3B8", dark="#CBD5E1")
    TILE_REVEALED = ThemeColors(light="#10B981", dark="#34D399")
    TILE_SOLVED = ThemeColors(light="#4F46E5", dark="#818CF8")
    TILE_TEXT = ThemeColors(light="#FFFFFF", dark="#0F172A")

    SUCCESS = ThemeColors(light="#107C10", dark="#6FCF6F")
    ERROR = ThemeColors(light="#D13438", dark="#FF6B6B")
