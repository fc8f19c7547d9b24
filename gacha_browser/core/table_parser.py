from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from gacha_browser.core.dataset import Dataset, Row
from gacha_browser.core.exceptions import HeaderMismatch

logger = logging.getLogger(__name__)

DELIMITER = "\t"
NAME_COLUMN = "Name"
PERCENT_COLUMN = "Percent"
# "gachapon" is the literal used by the published drop-table file
DEFAULT_LOCATION_COLUMNS = ("Location", "gachapon")
EXPECTED_COLUMN_COUNT = 3
# Longest leading decimal number; anything after it is ignored ("12abc" -> 12)
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class ParseReport:
    """
    Outcome of a successful parse.

    - dataset: the accepted rows
    - skipped_lines: non-blank data lines dropped for having too few fields
    - percent_fallbacks: rows whose percent could not be read and became 0.0
    """
    dataset: Dataset
    skipped_lines: int = 0
    percent_fallbacks: int = 0


def parse_percent(raw: str) -> Optional[float]:
    """
    Read a percent cell such as "12.5%" or "7".

    Only the leading number counts, so "12abc" reads as 12 and "1_5%" as 1.
    Returns None when the cell does not start with a number, or the number
    is not a usable non-negative value.
    """
    match = _LEADING_NUMBER.match(raw.strip())
    if match is None:
        return None
    value = float(match.group(0))
    if not math.isfinite(value) or value < 0:
        return None
    return value


def _split(line: str) -> List[str]:
    return [field.strip() for field in line.split(DELIMITER)]


def _validate_header(fields: List[str], location_columns: Sequence[str]) -> None:
    # A trailing delimiter on the header produces empty fields; ignore them
    while fields and fields[-1] == "":
        fields = fields[:-1]

    ok = (
        len(fields) == EXPECTED_COLUMN_COUNT
        and fields[0] == NAME_COLUMN
        and fields[1] in location_columns
        and fields[2] == PERCENT_COLUMN
    )
    if not ok:
        expected = [NAME_COLUMN, "|".join(location_columns), PERCENT_COLUMN]
        logger.error(
            "Header mismatch",
            extra={"found": fields, "expected": expected},
        )
        raise HeaderMismatch(found=fields, expected=expected)


def parse_table_report(
    raw_text: str,
    *,
    location_columns: Sequence[str] = DEFAULT_LOCATION_COLUMNS,
    source: Optional[str] = None,
    location_label: str = "Location",
) -> ParseReport:
    """
    Parse tab-delimited text into a Dataset.

    The first non-empty line is the header and must read
    ``Name<TAB><location column><TAB>Percent``. Every later line with at
    least three fields becomes a Row (extra trailing fields are ignored);
    shorter lines are skipped.

    :raises HeaderMismatch: if the header is missing or wrong. Nothing is
        returned in that case, so no partial data can leak out.
    """
    lines = raw_text.split("\n")

    header_index = next((i for i, line in enumerate(lines) if line.strip()), None)
    if header_index is None:
        expected = [NAME_COLUMN, "|".join(location_columns), PERCENT_COLUMN]
        logger.error("Empty input; no header line found")
        raise HeaderMismatch(found=[], expected=expected)

    _validate_header(_split(lines[header_index]), location_columns)

    rows: List[Row] = []
    locations: Set[str] = set()
    skipped = 0
    fallbacks = 0

    for line_no, line in enumerate(lines[header_index + 1:], start=header_index + 2):
        # Field count, not content, decides: "\t\t" yields a row of empty fields
        fields = _split(line)
        if len(fields) < EXPECTED_COLUMN_COUNT:
            if line.strip():
                logger.debug("Skipping short line", extra={"line": line_no, "fields": len(fields)})
                skipped += 1
            continue

        name, location, raw_percent = fields[0], fields[1], fields[2]
        percent = parse_percent(raw_percent)
        if percent is None:
            logger.debug("Percent fallback to 0.0", extra={"line": line_no, "value": raw_percent})
            fallbacks += 1
            percent = 0.0

        rows.append(Row(name=name, location=location, percent=percent))
        locations.add(location)

    logger.debug(
        "Parsed table",
        extra={
            "rows": len(rows),
            "locations": len(locations),
            "skipped_lines": skipped,
            "percent_fallbacks": fallbacks,
        },
    )

    return ParseReport(
        dataset=Dataset(rows, source=source, location_label=location_label),
        skipped_lines=skipped,
        percent_fallbacks=fallbacks,
    )


def parse_table(
    raw_text: str,
    *,
    location_columns: Sequence[str] = DEFAULT_LOCATION_COLUMNS,
    source: Optional[str] = None,
    location_label: str = "Location",
) -> Dataset:
    return parse_table_report(
        raw_text,
        location_columns=location_columns,
        source=source,
        location_label=location_label,
    ).dataset
