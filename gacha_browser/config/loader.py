from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Tuple

from gacha_browser.config.model import GlobalConfig
from gacha_browser.core.dataset_loader import DEFAULT_TIMEOUT, is_url
from gacha_browser.core.exceptions import ConfigError
from gacha_browser.core.table_parser import DEFAULT_LOCATION_COLUMNS

logger = logging.getLogger(__name__)

DATA_SOURCE_ENV = "GACHA_BROWSER_DATA_SOURCE"


def _resolve_data_source(raw_source: str, root: Path) -> str:
    """
    URLs are used as-is. Absolute paths are used as-is.
    Relative paths are resolved relative to the config root directory.
    """
    if is_url(raw_source):
        return raw_source
    path = Path(raw_source)
    if path.is_absolute():
        return str(path)
    return str((root / path).resolve())


def _location_columns(raw_global: Dict[str, Any]) -> Tuple[str, ...]:
    value = raw_global.get("location_column")
    if value is None:
        return DEFAULT_LOCATION_COLUMNS
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not value or not all(isinstance(v, str) and v for v in value):
        raise ConfigError("'location_column' must be a non-empty string or list of strings")
    return tuple(value)


def _timeout(raw_global: Dict[str, Any]) -> float:
    value = raw_global.get("request_timeout", DEFAULT_TIMEOUT)
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"'request_timeout' must be a number, got {value!r}") from e
    if timeout <= 0:
        raise ConfigError("'request_timeout' must be positive")
    return timeout


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json
            data/
                gachadata.csv

    Recognised keys in global.json:

    - ui_title / subtitle: navbar text
    - data_source: path or URL of the tab-delimited table (required unless
                   the GACHA_BROWSER_DATA_SOURCE env var is set, which wins)
    - location_column: accepted header literal(s) for the location column
    - location_label: display title for that column
    - request_timeout: seconds allowed for a URL fetch

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if a value is missing or has the wrong type.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open(encoding="utf-8") as f:
        try:
            raw_global = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    raw_source = os.environ.get(DATA_SOURCE_ENV) or raw_global.get("data_source")
    if not raw_source or not isinstance(raw_source, str):
        raise ConfigError(f"No data_source configured in {global_path} or ${DATA_SOURCE_ENV}")

    return GlobalConfig(
        config_root=root,
        data_source=_resolve_data_source(raw_source, root),
        ui_title=raw_global.get("ui_title", "Gacha Browser"),
        subtitle=raw_global.get("subtitle", "Drop-rate lookup"),
        location_columns=_location_columns(raw_global),
        location_label=raw_global.get("location_label", "Location"),
        request_timeout=_timeout(raw_global),
    )
