"""
Output formats for parsed ISBNs.

Each function parses its input, recomputes the check digit and renders
one canonical representation:

    format_as_isbn10("9782207258040")    -> "2-207-25804-1"
    format_as_isbn13("2207258041")       -> "978-2-207-25804-0"
    format_as_ean13("978-2-207-25804-0") -> "9782207258040"
    format_as_gtin14("9782207258040", 1) -> "19782207258047"

Parsing errors propagate unchanged.
"""

from __future__ import annotations

from typing import Optional, Union

from ..ranges_loader import RangeTable
from ..validators.validators import (
    calculate_isbn10_checksum,
    calculate_isbn13_checksum,
)
from .parser import parse_isbn


def format_as_isbn10(code: str, ranges: Optional[RangeTable] = None) -> str:
    """Hyphenated ISBN-10 with recomputed mod-11 check digit, e.g. "2-207-25804-1"."""
    isbn = parse_isbn(code, ranges)
    checksum = calculate_isbn10_checksum(
        isbn.registration_group_element,
        isbn.registrant_element,
        isbn.publication_element,
    )
    return "-".join([
        isbn.registration_group_element,
        isbn.registrant_element,
        isbn.publication_element,
        checksum,
    ])


def format_as_isbn13(code: str, ranges: Optional[RangeTable] = None) -> str:
    """Hyphenated ISBN-13 with recomputed check digit, e.g. "978-2-207-25804-0"."""
    isbn = parse_isbn(code, ranges)
    checksum = calculate_isbn13_checksum(
        isbn.gs1_element,
        isbn.registration_group_element,
        isbn.registrant_element,
        isbn.publication_element,
    )
    return "-".join([
        isbn.gs1_element,
        isbn.registration_group_element,
        isbn.registrant_element,
        isbn.publication_element,
        checksum,
    ])


def format_as_ean13(code: str, ranges: Optional[RangeTable] = None) -> str:
    """Unhyphenated 13-digit EAN with recomputed check digit."""
    isbn = parse_isbn(code, ranges)
    checksum = calculate_isbn13_checksum(
        isbn.gs1_element,
        isbn.registration_group_element,
        isbn.registrant_element,
        isbn.publication_element,
    )
    return isbn.gs1_element + isbn.significant_digits + checksum


def format_as_gtin14(
    code: str,
    prefix: Union[int, str],
    ranges: Optional[RangeTable] = None
) -> str:
    """
    Render as GTIN-14 with a leading packaging indicator digit.

    The indicator is part of the checksum input, so the check digit is
    computed over all 13 leading digits rather than reused from EAN-13.

    Args:
        code: Any parsable ISBN/EAN input
        prefix: Indicator digit, 0-9
        ranges: Optional range table
    """
    indicator = str(prefix)
    if len(indicator) != 1 or indicator not in "0123456789":
        raise ValueError(f"GTIN-14 prefix must be a single digit, got {prefix!r}")

    isbn = parse_isbn(code, ranges)
    gs1_element_with_prefix = indicator + isbn.gs1_element
    checksum = calculate_isbn13_checksum(
        gs1_element_with_prefix,
        isbn.registration_group_element,
        isbn.registrant_element,
        isbn.publication_element,
    )
    return gs1_element_with_prefix + isbn.significant_digits + checksum
