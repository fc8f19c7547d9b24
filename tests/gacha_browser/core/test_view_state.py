from __future__ import annotations

from gacha_browser.core.dataset import Dataset, Row
from gacha_browser.core.view_state import SortColumn, ViewState


def _make_dataset() -> Dataset:
    return Dataset([Row("Sword", "TownA", 1.0), Row("Shield", "TownB", 2.0)])


def test_defaults():
    st = ViewState()

    assert st.search_term == ""
    assert st.selected_locations == set()
    assert st.sort_column == SortColumn.NAME
    assert st.sort_ascending is True


def test_initial_selects_every_location():
    assert ViewState.initial(_make_dataset()).selected_locations == {"TownA", "TownB"}


def test_clicking_active_column_toggles_direction():
    st = ViewState()

    st.activate_sort(SortColumn.NAME)
    assert (st.sort_column, st.sort_ascending) == (SortColumn.NAME, False)

    st.activate_sort("name")
    assert (st.sort_column, st.sort_ascending) == (SortColumn.NAME, True)


def test_clicking_other_column_resets_to_ascending():
    st = ViewState(sort_column=SortColumn.NAME, sort_ascending=False)

    st.activate_sort(SortColumn.PERCENT)

    assert st.sort_column == SortColumn.PERCENT
    assert st.sort_ascending is True


def test_location_selection_handlers():
    ds = _make_dataset()
    st = ViewState.initial(ds)

    st.select_none()
    assert st.selected_locations == set()
    st.select_all(ds)
    assert st.selected_locations == {"TownA", "TownB"}


def test_view_state_to_from_dict_roundtrip():
    st = ViewState(
        search_term="potion",
        selected_locations={"TownB", "TownA"},
        sort_column=SortColumn.LOCATION,
        sort_ascending=False,
    )

    raw = st.to_dict()
    rebuilt = ViewState.from_dict(raw)

    assert raw["selected_locations"] == ["TownA", "TownB"]
    assert raw["sort_column"] == "location"
    assert rebuilt == st


def test_from_dict_falls_back_to_defaults():
    st = ViewState.from_dict({"sort_column": "rarity", "search_term": None})

    assert st == ViewState()
