"""
Batch conversion reports (DataFrame/CSV).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .core.errors import IsbnParsingError
from .json_formatter import parse_isbn_to_dict
from .ranges_loader import RangeTable


logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "Input",
    "Valid",
    "ISBN-10",
    "ISBN-13",
    "EAN-13",
    "GTIN-14",
    "Registration Agency",
    "Error Code",
    "Error",
]


def report_row(code: str, gtin_prefix: int = 0, ranges: Optional[RangeTable] = None) -> Dict[str, object]:
    row: Dict[str, object] = {column: "" for column in REPORT_COLUMNS}
    row["Input"] = code
    try:
        parsed = parse_isbn_to_dict(code, gtin_prefix=gtin_prefix, ranges=ranges)
    except IsbnParsingError as exc:
        row["Valid"] = False
        row["Error Code"] = exc.code.value
        row["Error"] = exc.message
        return row

    row["Valid"] = True
    for column in REPORT_COLUMNS[2:7]:
        row[column] = parsed.get(column, "")
    return row


def build_report(
    codes: Iterable[str],
    gtin_prefix: int = 0,
    ranges: Optional[RangeTable] = None
) -> pd.DataFrame:
    """One row per input code; failed codes keep their error instead of formats."""
    lines: List[Dict[str, object]] = [
        report_row(code, gtin_prefix=gtin_prefix, ranges=ranges) for code in codes
    ]
    df = pd.DataFrame(lines, columns=REPORT_COLUMNS)
    invalid = sum(1 for line in lines if not line["Valid"])
    logger.info("Built report: %d codes, %d invalid", len(df), invalid)
    return df


def read_codes(path: Path) -> List[str]:
    """Non-empty, stripped lines of a text file."""
    text = Path(path).read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


def export_csv(df: pd.DataFrame, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return path
