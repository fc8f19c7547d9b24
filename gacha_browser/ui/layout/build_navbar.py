from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from gacha_browser.config.model import GlobalConfig
from gacha_browser.ui.ids import IDs
from gacha_browser.ui.theme import LIGHT, theme_icon


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                dbc.Button(
                    theme_icon(LIGHT),
                    id=IDs.Control.THEME_TOGGLE,
                    color="secondary",
                    outline=True,
                    size="sm",
                    title="Toggle light / dark mode",
                    className="ms-auto",
                ),
            ],
        ),
        className="shadow-sm gb-navbar",
    )
