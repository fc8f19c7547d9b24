from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from gacha_browser.core.dataset_loader import DEFAULT_TIMEOUT
from gacha_browser.core.table_parser import DEFAULT_LOCATION_COLUMNS


@dataclass(frozen=True)
class GlobalConfig:
    """
    Parsed global.json.

    - data_source: absolute file path or http(s) URL of the drop table
    - location_columns: header literals accepted for the location column
    - location_label: how the location column is titled in the UI
    """
    config_root: Path
    data_source: str
    ui_title: str = "Gacha Browser"
    subtitle: str = "Drop-rate lookup"
    location_columns: Tuple[str, ...] = DEFAULT_LOCATION_COLUMNS
    location_label: str = "Location"
    request_timeout: float = DEFAULT_TIMEOUT
