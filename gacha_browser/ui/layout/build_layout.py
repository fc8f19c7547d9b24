from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from gacha_browser.core.view_state import ViewState
from gacha_browser.services.dataset_service import LoadStatus
from gacha_browser.ui.ids import IDs
from gacha_browser.ui.layout.build_filter_panel import build_filter_panel
from gacha_browser.ui.layout.build_navbar import build_navbar
from gacha_browser.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from gacha_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    navbar = build_navbar(ctx.global_config)
    filter_panel = build_filter_panel(ctx.location_label)
    table_panel = build_table_panel(ctx.location_label)

    return dbc.Container(
        fluid=True,
        id=IDs.Control.ROOT,
        className="gb-root",
        children=[
            dcc.Location(id=IDs.Control.URL),
            navbar,

            # View state is per page load only; the theme choice persists
            dcc.Store(id=IDs.Store.VIEW_STATE, storage_type="memory", data=ViewState().to_dict()),
            dcc.Store(id=IDs.Store.LOAD_STATUS, storage_type="memory", data={"status": LoadStatus.PENDING.value}),
            dcc.Store(id=IDs.Store.THEME, storage_type="local"),
            dcc.Store(id=IDs.Store.ACTIVE_THEME, storage_type="memory"),
            dcc.Store(id=IDs.Store.SYSTEM_THEME, storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(filter_panel, md=3, className="mt-3"),
                    dbc.Col(table_panel, md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )
