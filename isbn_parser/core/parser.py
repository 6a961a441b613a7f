"""
ISBN Element Parser

Decomposes a raw book identifier (ISBN-10, ISBN-13, EAN-13, with or without
separators and check digit) into its structural elements:

    GS1 element | registration group | registrant | publication

Steps:
- Normalization: strip separators, check length, drop the check digit
- GS1 extraction: explicit 978/979 prefix, or implicit 978 for 9 digits
- Registration group extraction: GS1-level rules, inclusive ranges
- Registrant/publication split: group-level rules, exclusive ranges
  compared on bounds truncated to the width of the remaining digits

Key rules:
- The 9 digits left after the GS1 element are fully partitioned among
  group, registrant and publication
- Range values are compared as integers on equal-width digit strings
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Optional, Tuple

from ..ranges_loader import load_ranges, RangeTable, RangeRule
from .errors import (
    EmptyInputError,
    InvalidLengthError,
    InvalidCharactersError,
    InvalidProductCodeError,
    InvalidCountryCodeError,
    InvalidRegistrantAssignmentError,
)


logger = logging.getLogger(__name__)

# Characters removed before parsing
SEPARATORS = ('-', '_', ' ')

DIGITS = frozenset('0123456789')

GS1_ELEMENTS = ('978', '979')

# Implicit GS1 element of legacy 9/10 digit ISBNs
IMPLICIT_GS1_ELEMENT = '978'

# Number of leading digits compared against range boundaries
COMPARISON_WIDTH = 7


@dataclass(frozen=True)
class ParsedIsbn:
    """
    Structural elements of a parsed ISBN.

    All fields are strings so leading zeros are preserved.

    Attributes:
        gs1_element: "978" or "979"
        registration_group_element: Language/country group (1-5 digits)
        registrant_element: Publisher code
        publication_element: Title/edition code
        registration_agency_name: Agency governing the group, from the dataset
    """
    gs1_element: str
    registration_group_element: str
    registrant_element: str
    publication_element: str
    registration_agency_name: str

    @property
    def significant_digits(self) -> str:
        """The 9 digits following the GS1 element, without check digit."""
        return (
            self.registration_group_element
            + self.registrant_element
            + self.publication_element
        )

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary representation."""
        return asdict(self)


def strip_separators(code: str) -> str:
    """Remove hyphens, underscores and spaces."""
    for separator in SEPARATORS:
        code = code.replace(separator, '')
    return code


def normalize(raw: str) -> str:
    """
    Reduce a raw code to its significant digits.

    Args:
        raw: Input such as "978-2-207-25804-0" or "2 207 25804 1"

    Returns:
        9 or 12 digit string, without check digit

    Raises:
        EmptyInputError, InvalidLengthError, InvalidCharactersError
    """
    if not raw:
        raise EmptyInputError()

    code = strip_separators(raw)

    length = len(code)
    if length in (10, 13):
        code = code[:-1]
    elif length not in (9, 12):
        raise InvalidLengthError(f"Code is too short or too long ({length} characters)")

    # Runs after the check digit is dropped so a trailing X is accepted
    if not all(char in DIGITS for char in code):
        raise InvalidCharactersError()

    return code


def extract_gs1_element(code: str) -> Tuple[str, str]:
    """
    Split the GS1 element from a normalized code.

    Returns:
        (remainder, gs1_element) where remainder has 9 digits
    """
    if len(code) == 9:
        return code, IMPLICIT_GS1_ELEMENT

    first3 = code[:3]
    if first3 not in GS1_ELEMENTS:
        raise InvalidProductCodeError()

    return code[3:], first3


def _leading_value(code: str) -> Tuple[int, int]:
    """First digits (at most COMPARISON_WIDTH) as (value, width)."""
    leading = code[:COMPARISON_WIDTH]
    return int(leading), len(leading)


def _in_range_inclusive(rule: RangeRule, value: int, width: int) -> bool:
    low, high = rule.bounds(width)
    return low <= value <= high


def _in_range_exclusive(rule: RangeRule, value: int, width: int) -> bool:
    low, high = rule.bounds(width)
    return low < value < high


def extract_registration_group_element(
    code: str,
    gs1_element: str,
    ranges: RangeTable
) -> Tuple[str, str]:
    """
    Split the registration group element using the GS1-level rules.

    Returns:
        (remainder, registration_group_element)

    Raises:
        InvalidCountryCodeError: no assigned rule covers the code
    """
    value, width = _leading_value(code)

    length = 0
    for rule in ranges.registration_group_rules(gs1_element):
        if rule.length and _in_range_inclusive(rule, value, width):
            length = rule.length
            break

    if not length:
        raise InvalidCountryCodeError()

    logger.debug("Group rule for %s: %s digits", gs1_element, length)
    return code[length:], code[:length]


def extract_registrant_and_publication_elements(
    code: str,
    gs1_element: str,
    registration_group_element: str,
    ranges: RangeTable
) -> Tuple[str, str, str]:
    """
    Split registrant and publication elements using the group-level rules.

    Range bounds are truncated to the number of compared digits and
    matched exclusively on both ends.

    Returns:
        (registration_agency_name, registrant_element, publication_element)

    Raises:
        InvalidRegistrantAssignmentError: unknown group or no assigned range
    """
    prefix = f"{gs1_element}-{registration_group_element}"
    group = ranges.group(prefix)
    if group is None:
        raise InvalidRegistrantAssignmentError(f"No registrant ranges for group {prefix}")
    if not code:
        raise InvalidRegistrantAssignmentError(f"No digits left after group {prefix}")

    value, width = _leading_value(code)

    for rule in group.rules:
        if not rule.length:
            # Unassigned range
            continue
        if _in_range_exclusive(rule, value, width):
            logger.debug("Registrant rule for %s: %s", prefix, rule.range)
            return group.agency, code[:rule.length], code[rule.length:]

    raise InvalidRegistrantAssignmentError(
        f"No registrant range of group {prefix} covers {code[:COMPARISON_WIDTH]}"
    )


def parse_isbn(
    code: str,
    ranges: Optional[RangeTable] = None
) -> ParsedIsbn:
    """
    Parse a book identifier into its structural elements.

    Args:
        code: ISBN-10, ISBN-13 or EAN-13, with or without separators
            and check digit. The check digit is not verified.
        ranges: Optional range table (defaults to the cached dataset)

    Returns:
        ParsedIsbn

    Raises:
        IsbnParsingError subclass describing the first failed step
    """
    if ranges is None:
        ranges = load_ranges()

    significant = normalize(code)
    remainder, gs1_element = extract_gs1_element(significant)
    remainder, registration_group_element = extract_registration_group_element(
        remainder, gs1_element, ranges
    )
    agency, registrant_element, publication_element = (
        extract_registrant_and_publication_elements(
            remainder, gs1_element, registration_group_element, ranges
        )
    )

    return ParsedIsbn(
        gs1_element=gs1_element,
        registration_group_element=registration_group_element,
        registrant_element=registrant_element,
        publication_element=publication_element,
        registration_agency_name=agency,
    )
