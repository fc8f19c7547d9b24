from __future__ import annotations

import pytest

from gacha_browser.ui.theme import DARK, LIGHT, resolve_theme, theme_icon, toggle_theme


@pytest.mark.parametrize(
    "stored, system_dark, expected",
    [
        (None, None, LIGHT),
        (None, False, LIGHT),
        (None, True, DARK),
        (LIGHT, True, LIGHT),
        (DARK, False, DARK),
        ("sepia", True, DARK),
    ],
)
def test_resolve_theme(stored, system_dark, expected):
    assert resolve_theme(stored, system_dark) == expected


def test_toggle_theme():
    assert toggle_theme(LIGHT) == DARK
    assert toggle_theme(DARK) == LIGHT
    assert toggle_theme(None) == DARK


def test_theme_icon_differs_per_theme():
    assert theme_icon(LIGHT) != theme_icon(DARK)
