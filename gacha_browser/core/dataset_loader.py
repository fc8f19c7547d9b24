from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Union
from urllib.parse import urlparse

import requests

from gacha_browser.core.dataset import Dataset
from gacha_browser.core.exceptions import LoadError
from gacha_browser.core.table_parser import DEFAULT_LOCATION_COLUMNS, parse_table_report

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
# utf-8-sig also drops a byte-order mark, which would otherwise corrupt "Name"
ENCODING = "utf-8-sig"

Source = Union[str, Path]


def is_url(source: Source) -> bool:
    return isinstance(source, str) and urlparse(source).scheme in ("http", "https")


def _fetch_url(url: str, timeout: float) -> bytes:
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise LoadError(url, str(e)) from e
    return response.content


def _read_file(path: Path) -> bytes:
    if not path.is_file():
        raise LoadError(str(path), "file not found")
    try:
        return path.read_bytes()
    except OSError as e:
        raise LoadError(str(path), str(e)) from e


def read_source_bytes(source: Source, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    if is_url(source):
        return _fetch_url(str(source), timeout)
    return _read_file(Path(source))


def decode_text(raw: bytes, source: str) -> str:
    """Decode as UTF-8 regardless of platform default."""
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise LoadError(source, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e


def load_dataset(
    source: Source,
    *,
    location_columns: Sequence[str] = DEFAULT_LOCATION_COLUMNS,
    location_label: str = "Location",
    timeout: float = DEFAULT_TIMEOUT,
) -> Dataset:
    """
    Fetch, decode and parse a tab-delimited drop table.

    `source` is a filesystem path or an http(s) URL.

    :raises LoadError: if the resource cannot be read or decoded.
    :raises HeaderMismatch: if the header line is not the expected format.
    """
    source_str = str(source)
    logger.info("Loading dataset", extra={"source": source_str})

    raw = read_source_bytes(source, timeout=timeout)
    text = decode_text(raw, source_str)

    report = parse_table_report(
        text,
        location_columns=location_columns,
        source=source_str,
        location_label=location_label,
    )
    dataset = report.dataset

    logger.info(
        "Dataset loaded",
        extra={
            "source": source_str,
            "rows": len(dataset),
            "locations": len(dataset.locations),
            "skipped_lines": report.skipped_lines,
            "percent_fallbacks": report.percent_fallbacks,
        },
    )
    return dataset
