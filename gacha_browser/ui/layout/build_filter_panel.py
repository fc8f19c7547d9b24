from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from gacha_browser.ui.ids import IDs


def build_filter_panel(location_label: str) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Item name", className="form-label", htmlFor=IDs.Control.SEARCH_INPUT),
                    # debounce=False: every keystroke recomputes the table
                    dcc.Input(
                        id=IDs.Control.SEARCH_INPUT,
                        type="search",
                        value="",
                        debounce=False,
                        placeholder="Search items…",
                        className="form-control mb-3",
                    ),
                    html.Label(location_label, className="form-label"),
                    html.Div(
                        [
                            dbc.Button(
                                "Select all",
                                id=IDs.Control.SELECT_ALL_BTN,
                                color="secondary",
                                size="sm",
                                outline=True,
                                className="me-2",
                            ),
                            dbc.Button(
                                "Select none",
                                id=IDs.Control.SELECT_NONE_BTN,
                                color="secondary",
                                size="sm",
                                outline=True,
                            ),
                        ],
                        className="mb-2",
                    ),
                    # Options arrive once the dataset has loaded
                    dbc.Checklist(
                        id=IDs.Control.LOCATION_CHECKLIST,
                        options=[],
                        value=[],
                        className="gb-location-list",
                    ),
                ]
            ),
        ],
        className="gb-sidebar",
    )
