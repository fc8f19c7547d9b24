from __future__ import annotations

__all__ = ["IDs", "sort_header_id"]


class IDs:
    class Store:
        VIEW_STATE = "view-state"
        LOAD_STATUS = "load-status"
        THEME = "theme-preference"
        ACTIVE_THEME = "active-theme"
        SYSTEM_THEME = "system-theme"

    class Control:
        URL = "url"
        ROOT = "gb-root"

        # Filters
        SEARCH_INPUT = "search-input"
        LOCATION_CHECKLIST = "location-checklist"
        SELECT_ALL_BTN = "select-all-btn"
        SELECT_NONE_BTN = "select-none-btn"

        # Table
        TABLE_BODY = "table-body"
        RESULT_COUNT = "result-count"
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"

        # Navbar
        THEME_TOGGLE = "theme-toggle"

    class Pattern:
        # pattern-matching "type" strings
        SORT_HEADER = "sort-header"


def sort_header_id(column: str) -> dict:
    return {"type": IDs.Pattern.SORT_HEADER, "column": column}
