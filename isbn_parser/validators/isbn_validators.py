"""
Whole-code validation for ISBN-10, ISBN-13 and EAN-13 inputs.

Unlike the formatters, these functions verify the check character the
caller supplied and never raise for bad input: problems are collected in
a ValidationResult.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.errors import IsbnParsingError
from ..core.parser import parse_isbn, ParsedIsbn, strip_separators
from ..ranges_loader import RangeTable
from .validators import (
    ValidationResult,
    validate_check_digit,
    calculate_isbn10_checksum,
    calculate_isbn13_checksum,
)


logger = logging.getLogger(__name__)


def _parse_into(
    result: ValidationResult,
    code: str,
    ranges: Optional[RangeTable]
) -> Optional[ParsedIsbn]:
    try:
        isbn = parse_isbn(code, ranges)
    except IsbnParsingError as exc:
        logger.debug("Validation of %r failed: %s", code, exc.message)
        result.valid = False
        result.errors.append(exc.message)
        result.meta['error_code'] = exc.code.value
        return None

    result.meta['parsed'] = isbn.to_dict()
    return isbn


def _check_length(result: ValidationResult, code: str, expected: int, label: str) -> bool:
    if len(code) != expected:
        result.valid = False
        result.errors.append(f"{label} must have {expected} characters, got {len(code)}")
        return False
    return True


def _merge_check_digit(result: ValidationResult, code: str) -> None:
    check_result = validate_check_digit(code)
    result.valid = result.valid and check_result.valid
    result.errors.extend(check_result.errors)
    result.meta.update(check_result.meta)


def _check_hyphenation(result: ValidationResult, code: str, canonical: str) -> None:
    if '-' in code and code.upper() != canonical:
        result.warnings.append(f"Hyphenation differs from canonical form {canonical}")


def validate_as_isbn10(code: str, ranges: Optional[RangeTable] = None) -> ValidationResult:
    """
    Validate an ISBN-10 including its check character.

    Example: "2-207-25804-1" is valid, "2-207-25804-2" is not.
    """
    result = ValidationResult(valid=True)

    isbn = _parse_into(result, code, ranges)
    if isbn is None:
        return result

    digits = strip_separators(code)
    if not _check_length(result, digits, 10, "ISBN-10"):
        return result

    if isbn.gs1_element != '978':
        result.valid = False
        result.errors.append(f"GS1 element {isbn.gs1_element} has no ISBN-10 form")
        return result

    _merge_check_digit(result, digits)

    canonical = "-".join([
        isbn.registration_group_element,
        isbn.registrant_element,
        isbn.publication_element,
        calculate_isbn10_checksum(
            isbn.registration_group_element,
            isbn.registrant_element,
            isbn.publication_element,
        ),
    ])
    _check_hyphenation(result, code, canonical)
    return result


def validate_as_isbn13(code: str, ranges: Optional[RangeTable] = None) -> ValidationResult:
    """Validate an ISBN-13 (separators allowed) including its check digit."""
    result = ValidationResult(valid=True)

    isbn = _parse_into(result, code, ranges)
    if isbn is None:
        return result

    digits = strip_separators(code)
    if not _check_length(result, digits, 13, "ISBN-13"):
        return result

    _merge_check_digit(result, digits)

    canonical = "-".join([
        isbn.gs1_element,
        isbn.registration_group_element,
        isbn.registrant_element,
        isbn.publication_element,
        calculate_isbn13_checksum(
            isbn.gs1_element,
            isbn.registration_group_element,
            isbn.registrant_element,
            isbn.publication_element,
        ),
    ])
    _check_hyphenation(result, code, canonical)
    return result


def validate_as_ean13(code: str, ranges: Optional[RangeTable] = None) -> ValidationResult:
    """Validate an EAN-13: exactly 13 digits, no separators, valid check digit."""
    result = ValidationResult(valid=True)

    isbn = _parse_into(result, code, ranges)
    if isbn is None:
        return result

    if strip_separators(code) != code:
        result.valid = False
        result.errors.append("EAN-13 must not contain separators")
        return result

    if not _check_length(result, code, 13, "EAN-13"):
        return result

    _merge_check_digit(result, code)
    return result


def is_parsable(code: str, ranges: Optional[RangeTable] = None) -> bool:
    """True when the code can be decomposed (the check digit is not verified)."""
    try:
        parse_isbn(code, ranges)
    except IsbnParsingError:
        return False
    return True
