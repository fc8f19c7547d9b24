from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "GACHA_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "GACHA_BROWSER_LOG_LEVEL"

# Per-request access lines from the dev server and connection-pool chatter
# from URL fetches drown out the app's own records at INFO
NOISY_LOGGERS = ("werkzeug", "urllib3")


def resolve_log_level(value: Union[str, int, None], default: int = logging.INFO) -> int:
    """
    Turn "debug", "WARNING", "10" or 10 into a logging level number.
    Unknown names fall back to `default`.
    """
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else default


def _build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    # Fields passed via extra= (source, rows, error...) become JSON keys
    return jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")


def configure_logging(
        level: Union[str, int, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure root logger for the gacha browser.

    Format ("json" or "plain"):
        1) force_format argument if provided
        2) env var GACHA_BROWSER_LOG_FORMAT
        3) default = "json"

    Level:
        1) level argument if provided (name or number)
        2) env var GACHA_BROWSER_LOG_LEVEL
        3) default = INFO

    werkzeug and urllib3 are held at WARNING unless the app itself runs at DEBUG.
    """
    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv(LOG_FORMAT_ENV, "json").lower()

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV)
    root_level = resolve_log_level(level)

    root = logging.getLogger()
    root.setLevel(root_level)

    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(format_mode))

    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)

    noisy_level = root_level if root_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)
