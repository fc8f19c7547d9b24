from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

from gacha_browser.core.dataset import Row
from gacha_browser.core.view_state import SortColumn

_SORT_KEYS: Dict[SortColumn, Callable[[Row], Any]] = {
    SortColumn.NAME: lambda r: r.name.lower(),
    SortColumn.LOCATION: lambda r: r.location.lower(),
    SortColumn.PERCENT: lambda r: r.percent,
}


def sort_key(column: SortColumn | str) -> Callable[[Row], Any]:
    return _SORT_KEYS[SortColumn(column)]


def sort_rows(rows: Iterable[Row], column: SortColumn | str, ascending: bool = True) -> List[Row]:
    """
    Return a new list ordered by `column`.

    Text columns compare on their lowercase form, percent compares
    numerically. The sort is stable in both directions: `sorted(reverse=True)`
    inverts the comparison rather than the output, so rows with equal keys
    keep their input order when descending too.
    """
    return sorted(rows, key=sort_key(column), reverse=not ascending)
