from __future__ import annotations

from typing import List

from gacha_browser.core.dataset import Dataset, Row
from gacha_browser.core.filter_engine import filter_rows
from gacha_browser.core.sort_engine import sort_rows
from gacha_browser.core.view_state import ViewState


def current_view(dataset: Dataset, view_state: ViewState) -> List[Row]:
    """Filter then sort the full dataset under the given view state."""
    visible = filter_rows(dataset, view_state)
    return sort_rows(visible, view_state.sort_column, view_state.sort_ascending)


def list_locations(dataset: Dataset) -> List[str]:
    """Sorted distinct locations, used to build the selection controls."""
    return dataset.sorted_locations()
