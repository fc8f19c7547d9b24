from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Optional

import dash
from dash import ALL, Input, Output, State

from gacha_browser.core.view_state import SortColumn, ViewState
from gacha_browser.ui.ids import IDs

if TYPE_CHECKING:
    from gacha_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def sort_column_from_trigger(triggered_id: Any) -> Optional[SortColumn]:
    """Header click -> column, anything else -> None."""
    if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.SORT_HEADER:
        column = triggered_id.get("column")
        if column in {c.value for c in SortColumn}:
            return SortColumn(column)
    return None


def build_view_state(
    previous: Optional[dict[str, Any]],
    *,
    search_term: Optional[str],
    selected_locations: Optional[Iterable[str]],
    known_locations: Iterable[str],
    activated_column: Optional[SortColumn] = None,
) -> dict[str, Any]:
    """
    Pure helper: fold the current control values (and at most one header
    click) into the previous view state.
    """
    state = ViewState.from_dict(previous or {})
    known = set(known_locations)

    state.set_search_term(search_term)
    state.set_selected_locations(loc for loc in (selected_locations or []) if loc in known)
    if activated_column is not None:
        state.activate_sort(activated_column)

    return state.to_dict()


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI -> ViewState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.LOCATION_CHECKLIST, "value"),
        Input({"type": IDs.Pattern.SORT_HEADER, "column": ALL}, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
    )
    def sync_view_state_from_ui(search_val, locations_val, _header_clicks, previous):
        activated = sort_column_from_trigger(dash.ctx.triggered_id)
        if activated is not None:
            logger.debug("Sort header activated", extra={"column": activated.value})

        return build_view_state(
            previous,
            search_term=search_val,
            selected_locations=locations_val,
            known_locations=ctx.dataset_service.dataset.locations,
            activated_column=activated,
        )
