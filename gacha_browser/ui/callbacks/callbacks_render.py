from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import ALL, Input, Output

from gacha_browser.core.dataset import Dataset
from gacha_browser.core.projection import current_view
from gacha_browser.core.view_state import ViewState
from gacha_browser.ui.helpers import (
    build_table_rows,
    header_decorations,
    message_row,
    result_count_message,
    status_message,
)
from gacha_browser.ui.ids import IDs

if TYPE_CHECKING:
    from gacha_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def render_table(
    dataset: Dataset,
    status: Optional[str],
    view_data: Optional[dict[str, Any]],
    location_label: str,
):
    """
    Pure helper: (load status, view state) -> table body, count text,
    header labels and header classes.
    """
    state = ViewState.from_dict(view_data or {})
    labels, classes = header_decorations(state, location_label)

    message = status_message(status or "pending")
    if message is not None:
        return [message_row(message)], message, labels, classes

    rows = current_view(dataset, state)
    return build_table_rows(rows), result_count_message(len(rows)), labels, classes


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # ViewState -> table
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_BODY, "children"),
        Output(IDs.Control.RESULT_COUNT, "children"),
        Output({"type": IDs.Pattern.SORT_HEADER, "column": ALL}, "children"),
        Output({"type": IDs.Pattern.SORT_HEADER, "column": ALL}, "className"),
        Input(IDs.Store.VIEW_STATE, "data"),
        Input(IDs.Store.LOAD_STATUS, "data"),
    )
    def update_table(view_data, status_data):
        status = (status_data or {}).get("status")
        return render_table(
            ctx.dataset_service.dataset,
            status,
            view_data,
            ctx.location_label,
        )
