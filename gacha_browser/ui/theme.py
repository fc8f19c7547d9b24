from __future__ import annotations

from typing import Optional

LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)


def resolve_theme(stored: Optional[str], system_prefers_dark: Optional[bool]) -> str:
    """A stored choice wins; otherwise follow the browser's colour-scheme preference."""
    if stored in THEMES:
        return stored
    return DARK if system_prefers_dark else LIGHT


def toggle_theme(theme: Optional[str]) -> str:
    return LIGHT if theme == DARK else DARK


def theme_icon(theme: str) -> str:
    # Shows the theme a click switches to
    return "☀" if theme == DARK else "☾"
