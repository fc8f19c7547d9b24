from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc, exceptions

from gacha_browser.core.projection import current_view
from gacha_browser.core.view_state import ViewState
from gacha_browser.ui.ids import IDs

if TYPE_CHECKING:
    from gacha_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

DOWNLOAD_FILENAME = "gacha_items.csv"


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Download the visible rows as CSV
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_visible_rows(_n_clicks, view_data):
        service = ctx.dataset_service
        if not service.is_loaded():
            raise exceptions.PreventUpdate

        state = ViewState.from_dict(view_data or {})
        rows = current_view(service.dataset, state)
        frame = service.dataset.to_frame(rows)

        logger.info("Exporting visible rows", extra={"rows": len(rows)})
        return dcc.send_data_frame(frame.to_csv, DOWNLOAD_FILENAME, index=False)
