from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

import pandas as pd


@dataclass(frozen=True)
class Row:
    """
    One catalog entry: an item, the machine/location it drops from, and its rate.
    Names are not unique; the same item can appear under several locations.
    """
    name: str
    location: str
    percent: float


class Dataset:
    """
    Immutable, ordered collection of parsed rows plus the distinct locations.

    Built once from parsed text; never mutated afterwards. Reloading means
    constructing a new Dataset from the source.
    """

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(
        self,
        rows: Iterable[Row],
        source: Optional[str] = None,
        location_label: str = "Location",
    ) -> None:
        self._rows: Tuple[Row, ...] = tuple(rows)
        self._locations: FrozenSet[str] = frozenset(r.location for r in self._rows)
        self.source = source
        self.location_label = location_label

    @classmethod
    def empty(cls, source: Optional[str] = None, location_label: str = "Location") -> Dataset:
        return cls((), source=source, location_label=location_label)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    @property
    def locations(self) -> FrozenSet[str]:
        return self._locations

    def sorted_locations(self) -> List[str]:
        """Locations in display order (plain code-point sort, like the checkbox list)."""
        return sorted(self._locations)

    def is_empty(self) -> bool:
        return not self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __repr__(self) -> str:
        return (
            f"Dataset(rows={len(self._rows)}, locations={len(self._locations)}, "
            f"source={self.source!r})"
        )

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------
    def to_frame(self, rows: Optional[Sequence[Row]] = None) -> pd.DataFrame:
        """
        Tabular copy of `rows` (defaults to every row) with display headers.
        Used for CSV download of the current projection.
        """
        selected = self._rows if rows is None else rows
        return pd.DataFrame(
            {
                "Name": [r.name for r in selected],
                self.location_label: [r.location for r in selected],
                "Percent": [r.percent for r in selected],
            },
            columns=["Name", self.location_label, "Percent"],
        )
