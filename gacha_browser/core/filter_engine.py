from __future__ import annotations

from typing import List

from gacha_browser.core.dataset import Dataset, Row
from gacha_browser.core.view_state import ViewState


def normalise_search_term(search_term: str | None) -> str:
    return (search_term or "").strip().lower()


def row_matches(row: Row, needle: str, selected_locations: set[str] | frozenset[str]) -> bool:
    """`needle` must already be normalised with normalise_search_term()."""
    return row.location in selected_locations and needle in row.name.lower()


def filter_rows(dataset: Dataset, view_state: ViewState) -> List[Row]:
    """
    Rows whose location is selected and whose name contains the search term.

    Always works from the full dataset and returns a new list; neither the
    dataset nor the view state is touched. An empty search term matches
    every name, an empty location selection matches nothing.
    """
    selected = view_state.selected_locations
    if not selected:
        return []

    needle = normalise_search_term(view_state.search_term)
    return [row for row in dataset.rows if row_matches(row, needle, selected)]
