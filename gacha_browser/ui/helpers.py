from __future__ import annotations

from typing import List, Sequence, Tuple

from dash import html

from gacha_browser.core.dataset import Dataset, Row
from gacha_browser.core.projection import list_locations
from gacha_browser.core.view_state import SortColumn, ViewState
from gacha_browser.services.dataset_service import LoadStatus

TABLE_COLUMN_COUNT = 3

LOADING_MESSAGE = "Loading data…"
LOAD_FAILED_MESSAGE = "Failed to load data. Please check the data source path."
FORMAT_FAILED_MESSAGE = "Failed to load data: malformed file format."
EMPTY_RESULT_MESSAGE = "No items match the current filters."


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def result_count_message(count: int) -> str:
    noun = "result" if count == 1 else "results"
    return f"{count} {noun} found."


def status_message(status: LoadStatus | str) -> str | None:
    """Message shown instead of a result count while not (successfully) loaded."""
    status = LoadStatus(status)
    if status == LoadStatus.PENDING:
        return LOADING_MESSAGE
    if status == LoadStatus.LOAD_FAILED:
        return LOAD_FAILED_MESSAGE
    if status == LoadStatus.FORMAT_FAILED:
        return FORMAT_FAILED_MESSAGE
    return None


def location_options(dataset: Dataset) -> List[dict]:
    return [{"label": loc, "value": loc} for loc in list_locations(dataset)]


def message_row(text: str, class_name: str = "gb-message-row") -> html.Tr:
    return html.Tr(html.Td(text, colSpan=TABLE_COLUMN_COUNT), className=class_name)


def build_table_rows(rows: Sequence[Row]) -> List[html.Tr]:
    if not rows:
        return [message_row(EMPTY_RESULT_MESSAGE, "gb-empty-row")]
    return [
        html.Tr(
            [
                html.Td(row.name),
                html.Td(row.location),
                html.Td(format_percent(row.percent), className="text-end"),
            ]
        )
        for row in rows
    ]


def header_decorations(state: ViewState, location_label: str) -> Tuple[List[str], List[str]]:
    """
    Labels and CSS classes for the three sortable headers, in table order.
    The active column gets an arrow and an 'asc' / 'desc' class.
    """
    titles = {
        SortColumn.NAME: "Name",
        SortColumn.LOCATION: location_label,
        SortColumn.PERCENT: "Percent",
    }
    labels: List[str] = []
    classes: List[str] = []
    for column in SortColumn:
        if column == state.sort_column:
            direction = "asc" if state.sort_ascending else "desc"
            arrow = " ▲" if state.sort_ascending else " ▼"
            labels.append(titles[column] + arrow)
            classes.append(f"gb-sortable {direction}")
        else:
            labels.append(titles[column])
            classes.append("gb-sortable")
    return labels, classes
