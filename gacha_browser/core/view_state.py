from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Set

from gacha_browser.core.dataset import Dataset


class SortColumn(str, Enum):
    NAME = "name"
    LOCATION = "location"
    PERCENT = "percent"

    @classmethod
    def parse(cls, value: Any, default: Optional[SortColumn] = None) -> SortColumn:
        try:
            return cls(value)
        except ValueError:
            return default if default is not None else cls.NAME


@dataclass
class ViewState:
    """
    Represents the current user selection for the table.

    Fields:

    - search_term: free text matched (case-insensitively) against item names.
    - selected_locations: locations whose rows are shown. Empty means nothing is shown.
    - sort_column: column the projection is ordered by.
    - sort_ascending: direction for sort_column.

    One instance per session, mutated only by the UI event handlers.
    """

    search_term: str = ""
    selected_locations: Set[str] = field(default_factory=set)
    sort_column: SortColumn = SortColumn.NAME
    sort_ascending: bool = True

    @classmethod
    def initial(cls, dataset: Dataset) -> ViewState:
        """Default state for a freshly loaded dataset: every location selected."""
        return cls(selected_locations=set(dataset.locations))

    # ---------------------------------------------------------
    # Event handlers
    # ---------------------------------------------------------
    def set_search_term(self, text: str | None) -> None:
        self.search_term = text or ""

    def set_selected_locations(self, locations: Iterable[str] | None) -> None:
        self.selected_locations = set(locations or [])

    def select_all(self, dataset: Dataset) -> None:
        self.selected_locations = set(dataset.locations)

    def select_none(self) -> None:
        self.selected_locations = set()

    def activate_sort(self, column: SortColumn | str) -> None:
        """
        Header click: the active column flips direction, any other column
        becomes active in ascending order.
        """
        column = SortColumn(column)
        if column == self.sort_column:
            self.sort_ascending = not self.sort_ascending
        else:
            self.sort_column = column
            self.sort_ascending = True

    # ---------------------------------------------------------
    # Store transport
    # ---------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "search_term": self.search_term,
            "selected_locations": sorted(self.selected_locations),
            "sort_column": self.sort_column.value,
            "sort_ascending": self.sort_ascending,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewState:
        return cls(
            search_term=str(data.get("search_term") or ""),
            selected_locations=set(data.get("selected_locations") or []),
            sort_column=SortColumn.parse(data.get("sort_column")),
            sort_ascending=bool(data.get("sort_ascending", True)),
        )
