from __future__ import annotations

from typing import TYPE_CHECKING

import dash
from dash import ClientsideFunction, Input, Output, State

from gacha_browser.ui.ids import IDs
from gacha_browser.ui.theme import resolve_theme, theme_icon, toggle_theme

if TYPE_CHECKING:
    from gacha_browser.ui.config import AppConfig


def register_theme_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # Browser colour-scheme preference -> store (assets/theme.js)
    app.clientside_callback(
        ClientsideFunction(namespace="gachaTheme", function_name="systemPrefersDark"),
        Output(IDs.Store.SYSTEM_THEME, "data"),
        Input(IDs.Control.URL, "pathname"),
    )

    # ---------------------------------------------------------
    # Stored choice / system default / toggle -> active theme
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.THEME, "data"),
        Output(IDs.Store.ACTIVE_THEME, "data"),
        Output(IDs.Control.THEME_TOGGLE, "children"),
        Input(IDs.Store.SYSTEM_THEME, "data"),
        Input(IDs.Control.THEME_TOGGLE, "n_clicks"),
        State(IDs.Store.THEME, "data"),
        State(IDs.Store.ACTIVE_THEME, "data"),
        prevent_initial_call=True,
    )
    def update_theme(system_prefers_dark, _n_clicks, stored, active):
        if dash.ctx.triggered_id == IDs.Control.THEME_TOGGLE:
            # Only an explicit choice is persisted
            theme = toggle_theme(active or resolve_theme(stored, system_prefers_dark))
            return theme, theme, theme_icon(theme)

        theme = resolve_theme(stored, system_prefers_dark)
        return dash.no_update, theme, theme_icon(theme)

    # Active theme -> <html data-bs-theme=...>
    app.clientside_callback(
        ClientsideFunction(namespace="gachaTheme", function_name="applyTheme"),
        Output(IDs.Control.ROOT, "className"),
        Input(IDs.Store.ACTIVE_THEME, "data"),
    )
