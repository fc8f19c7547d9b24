from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from gacha_browser.core.view_state import SortColumn, ViewState
from gacha_browser.ui.helpers import LOADING_MESSAGE, header_decorations, message_row
from gacha_browser.ui.ids import IDs, sort_header_id


def build_table_panel(location_label: str) -> dbc.Card:
    labels, classes = header_decorations(ViewState(), location_label)

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Items"),
                        html.Span(LOADING_MESSAGE, id=IDs.Control.RESULT_COUNT, className="ms-3 text-muted"),
                        dbc.Button(
                            "Download CSV",
                            id=IDs.Control.DOWNLOAD_DATA_BTN,
                            color="secondary",
                            size="sm",
                            className="ms-auto",
                        ),
                        dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                dbc.Table(
                    [
                        html.Thead(
                            html.Tr(
                                [
                                    html.Th(
                                        label,
                                        id=sort_header_id(column.value),
                                        n_clicks=0,
                                        className=class_name,
                                        role="button",
                                    )
                                    for column, label, class_name in zip(SortColumn, labels, classes)
                                ]
                            )
                        ),
                        html.Tbody(
                            [message_row(LOADING_MESSAGE)],
                            id=IDs.Control.TABLE_BODY,
                        ),
                    ],
                    hover=True,
                    striped=True,
                    size="sm",
                    className="gb-table mb-0",
                ),
                className="gb-main-body",
            ),
        ],
        className="gb-maincard",
    )
