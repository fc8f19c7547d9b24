from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional

import dash
from dash import Input, Output, State

from gacha_browser.core.dataset import Dataset
from gacha_browser.core.view_state import ViewState
from gacha_browser.services.dataset_service import LoadStatus
from gacha_browser.ui.helpers import location_options
from gacha_browser.ui.ids import IDs

if TYPE_CHECKING:
    from gacha_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def load_status_payload(ctx: AppConfig) -> dict[str, Any]:
    """Trigger a load (a no-op once loaded, a retry after a failure) and describe the outcome."""
    service = ctx.dataset_service
    status = service.load()
    payload: dict[str, Any] = {"status": status.value}
    if service.error is not None:
        payload["error"] = str(service.error)
    return payload


def checklist_selection(
    dataset: Dataset,
    triggered_id: Optional[str],
    current: Optional[List[str]],
) -> List[str]:
    """
    Checklist value after a load or a bulk action.
    Loading selects every location; the bulk buttons select all / none.
    """
    state = ViewState(selected_locations=set(current or []))
    if triggered_id == IDs.Control.SELECT_NONE_BTN:
        state.select_none()
    elif triggered_id == IDs.Control.SELECT_ALL_BTN:
        state.select_all(dataset)
    elif triggered_id in (IDs.Store.LOAD_STATUS, None):
        state = ViewState.initial(dataset)
    else:
        state.set_selected_locations(loc for loc in state.selected_locations if loc in dataset.locations)
    return sorted(state.selected_locations)


def register_load_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Page load -> fetch/parse the dataset (retried until it succeeds)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.LOAD_STATUS, "data"),
        Input(IDs.Control.URL, "pathname"),
    )
    def ensure_dataset_loaded(_pathname):
        return load_status_payload(ctx)

    # ---------------------------------------------------------
    # Location checklist: options after load, bulk select all / none
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.LOCATION_CHECKLIST, "options"),
        Output(IDs.Control.LOCATION_CHECKLIST, "value"),
        Input(IDs.Store.LOAD_STATUS, "data"),
        Input(IDs.Control.SELECT_ALL_BTN, "n_clicks"),
        Input(IDs.Control.SELECT_NONE_BTN, "n_clicks"),
        State(IDs.Control.LOCATION_CHECKLIST, "value"),
    )
    def update_location_checklist(status_data, _all_clicks, _none_clicks, current):
        status = (status_data or {}).get("status")
        if status != LoadStatus.LOADED.value:
            return [], []

        dataset = ctx.dataset_service.dataset
        triggered_id = dash.ctx.triggered_id
        return location_options(dataset), checklist_selection(dataset, triggered_id, current)
