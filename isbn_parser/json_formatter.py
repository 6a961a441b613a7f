"""
JSON Formatter for ISBN Parser

Provides clean JSON output with:
- Human-readable field names
- All four output formats alongside the parsed elements
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from .core.formatter import (
    format_as_isbn10,
    format_as_isbn13,
    format_as_ean13,
    format_as_gtin14,
)
from .core.parser import parse_isbn
from .ranges_loader import RangeTable


# Element name to human-readable name mapping
FIELD_NAMES = {
    "gs1_element": "GS1 Element",
    "registration_group_element": "Registration Group",
    "registrant_element": "Registrant",
    "publication_element": "Publication",
    "registration_agency_name": "Registration Agency",
}


def parse_isbn_to_dict(
    code: str,
    gtin_prefix: int = 0,
    ranges: Optional[RangeTable] = None
) -> Dict[str, Any]:
    """
    Parse a code and return a flat dict with readable field names.

    Args:
        code: Any parsable ISBN/EAN input
        gtin_prefix: Indicator digit used for the GTIN-14 field
        ranges: Optional range table

    Returns:
        Dict with the parsed elements and the ISBN-10, ISBN-13, EAN-13
        and GTIN-14 renderings. ISBN-10 is omitted for 979 codes.

    Raises:
        IsbnParsingError subclass when the code cannot be parsed
    """
    isbn = parse_isbn(code, ranges)

    output: Dict[str, Any] = {
        FIELD_NAMES[key]: value for key, value in isbn.to_dict().items()
    }
    if isbn.gs1_element == "978":
        output["ISBN-10"] = format_as_isbn10(code, ranges)
    output["ISBN-13"] = format_as_isbn13(code, ranges)
    output["EAN-13"] = format_as_ean13(code, ranges)
    output["GTIN-14"] = format_as_gtin14(code, gtin_prefix, ranges)
    return output


def parse_isbn_to_json(
    code: str,
    gtin_prefix: int = 0,
    ranges: Optional[RangeTable] = None,
    indent: int = 2
) -> str:
    """Parse a code and return the parse_isbn_to_dict() output as JSON."""
    return json.dumps(
        parse_isbn_to_dict(code, gtin_prefix=gtin_prefix, ranges=ranges),
        indent=indent,
        ensure_ascii=False,
    )
