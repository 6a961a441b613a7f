"""
ISBN Parser

Decomposes ISBN-10, ISBN-13, EAN-13 and GTIN-14 codes into GS1 element,
registration group, registrant and publication elements using the
International ISBN Agency range table, and re-encodes them with a
recomputed check digit.
"""

from .core.parser import parse_isbn, normalize, ParsedIsbn
from .core.formatter import (
    format_as_isbn10,
    format_as_isbn13,
    format_as_ean13,
    format_as_gtin14,
)
from .core.errors import (
    ErrorCode,
    IsbnParsingError,
    EmptyInputError,
    InvalidLengthError,
    InvalidCharactersError,
    InvalidProductCodeError,
    InvalidCountryCodeError,
    InvalidRegistrantAssignmentError,
)
from .ranges_loader import (
    load_ranges,
    save_ranges,
    RangeTable,
    RangeTableError,
    GroupEntry,
    RegistrationGroupRule,
    RegistrantRule,
)
from .validators import (
    validate_as_isbn10,
    validate_as_isbn13,
    validate_as_ean13,
    is_parsable,
    ValidationResult,
)
from .json_formatter import parse_isbn_to_dict, parse_isbn_to_json

__version__ = "1.0.0"
__all__ = [
    "parse_isbn",
    "normalize",
    "ParsedIsbn",
    "format_as_isbn10",
    "format_as_isbn13",
    "format_as_ean13",
    "format_as_gtin14",
    "ErrorCode",
    "IsbnParsingError",
    "EmptyInputError",
    "InvalidLengthError",
    "InvalidCharactersError",
    "InvalidProductCodeError",
    "InvalidCountryCodeError",
    "InvalidRegistrantAssignmentError",
    "load_ranges",
    "save_ranges",
    "RangeTable",
    "RangeTableError",
    "GroupEntry",
    "RegistrationGroupRule",
    "RegistrantRule",
    "validate_as_isbn10",
    "validate_as_isbn13",
    "validate_as_ean13",
    "is_parsable",
    "ValidationResult",
    "parse_isbn_to_dict",
    "parse_isbn_to_json",
]
