"""
ISBN Check Digit Functions

Implements the two check digit schemes used by book identifiers:
- Mod11 with weights 10..2 for ISBN-10 (10 is written as "X")
- GS1 Mod10 with alternating weights 3/1 from the right for
  ISBN-13, EAN-13 and GTIN-14

Based on ISO 2108 and the GS1 General Specifications.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


NUMERIC = frozenset('0123456789')

# Check character standing for 10 in ISBN-10
ISBN10_TEN = 'X'


def _require_digits(digits: str) -> None:
    if not digits or not all(c in NUMERIC for c in digits):
        raise ValueError("Input must be a non-empty numeric string")


def calculate_check_digit_mod10(digits: str) -> int:
    """
    Calculate GS1 Mod10 check digit.

    Algorithm (GS1 General Specifications):
    1. From right to left, alternate multipliers 3 and 1
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    Args:
        digits: Numeric string without check digit

    Returns:
        Calculated check digit (0-9)
    """
    _require_digits(digits)

    total = 0
    for i, digit in enumerate(reversed(digits)):
        multiplier = 3 if i % 2 == 0 else 1
        total += int(digit) * multiplier

    return (10 - (total % 10)) % 10


def calculate_check_digit_mod11(digits: str) -> str:
    """
    Calculate ISBN-10 Mod11 check character.

    Algorithm (ISO 2108):
    1. Weight the 9 digits 10, 9, ... 2 from left to right
    2. Check digit = (11 - (sum mod 11)) mod 11
    3. A check digit of 10 is written "X"

    Args:
        digits: 9-digit numeric string without check digit

    Returns:
        "0"-"9" or "X"
    """
    _require_digits(digits)
    if len(digits) != 9:
        raise ValueError(f"ISBN-10 check digit needs 9 digits, got {len(digits)}")

    total = sum(int(digit) * weight for digit, weight in zip(digits, range(10, 1, -1)))
    checksum = (11 - (total % 11)) % 11

    return ISBN10_TEN if checksum == 10 else str(checksum)


def calculate_isbn10_checksum(
    registration_group_element: str,
    registrant_element: str,
    publication_element: str
) -> str:
    """ISBN-10 check character for parsed elements (GS1 element excluded)."""
    return calculate_check_digit_mod11(
        registration_group_element + registrant_element + publication_element
    )


def calculate_isbn13_checksum(
    gs1_element: str,
    registration_group_element: str,
    registrant_element: str,
    publication_element: str
) -> str:
    """
    ISBN-13/EAN-13 check digit for parsed elements.

    For GTIN-14 pass the indicator digit prepended to gs1_element.
    """
    return str(calculate_check_digit_mod10(
        gs1_element + registration_group_element + registrant_element + publication_element
    ))


def validate_check_digit(value: str) -> ValidationResult:
    """
    Validate the trailing check character of a complete code.

    Uses Mod11 for 10-character codes and GS1 Mod10 otherwise.

    Args:
        value: The complete digit string including check character

    Returns:
        ValidationResult with check digit status
    """
    result = ValidationResult(valid=True)

    if len(value) < 2:
        result.valid = False
        result.errors.append("Value too short for check digit validation")
        return result

    data_digits = value[:-1]
    provided_check = value[-1].upper()

    if not all(c in NUMERIC for c in data_digits):
        result.valid = False
        result.errors.append("Value must be numeric for check digit validation")
        return result

    if len(value) == 10:
        calculated_check = calculate_check_digit_mod11(data_digits)
    else:
        calculated_check = str(calculate_check_digit_mod10(data_digits))

    result.meta['calculated_check_digit'] = calculated_check
    result.meta['provided_check_digit'] = provided_check
    result.meta['check_digit_valid'] = (provided_check == calculated_check)

    if provided_check != calculated_check:
        result.valid = False
        result.errors.append(
            f"Check digit mismatch: expected {calculated_check}, got {provided_check}"
        )

    return result
