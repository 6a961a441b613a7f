"""
Validation modules for ISBN parser.
"""

from .validators import (
    calculate_check_digit_mod10,
    calculate_check_digit_mod11,
    calculate_isbn10_checksum,
    calculate_isbn13_checksum,
    validate_check_digit,
    ValidationResult,
    NUMERIC,
)
from .isbn_validators import (
    validate_as_isbn10,
    validate_as_isbn13,
    validate_as_ean13,
    is_parsable,
)

__all__ = [
    "calculate_check_digit_mod10",
    "calculate_check_digit_mod11",
    "calculate_isbn10_checksum",
    "calculate_isbn13_checksum",
    "validate_check_digit",
    "ValidationResult",
    "NUMERIC",
    "validate_as_isbn10",
    "validate_as_isbn13",
    "validate_as_ean13",
    "is_parsable",
]
