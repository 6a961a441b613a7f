"""
Parsing errors for ISBN parser.

Every failure is raised immediately as a typed exception; no partial
result is ever returned.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes."""
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    INVALID_PRODUCT_CODE = "INVALID_PRODUCT_CODE"
    INVALID_COUNTRY_CODE = "INVALID_COUNTRY_CODE"
    INVALID_REGISTRANT_ASSIGNMENT = "INVALID_REGISTRANT_ASSIGNMENT"


class IsbnParsingError(ValueError):
    """Base class for all parsing errors."""
    code: ErrorCode
    default_message = "Unable to parse code"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyInputError(IsbnParsingError):
    code = ErrorCode.EMPTY_INPUT
    default_message = "No code provided"


class InvalidLengthError(IsbnParsingError):
    code = ErrorCode.INVALID_LENGTH
    default_message = "Code is too short or too long"


class InvalidCharactersError(IsbnParsingError):
    code = ErrorCode.INVALID_CHARACTERS
    default_message = "Invalid characters in the code"


class InvalidProductCodeError(IsbnParsingError):
    code = ErrorCode.INVALID_PRODUCT_CODE
    default_message = "Product code should be 978 or 979"


class InvalidCountryCodeError(IsbnParsingError):
    code = ErrorCode.INVALID_COUNTRY_CODE
    default_message = "Country code is unknown"


class InvalidRegistrantAssignmentError(IsbnParsingError):
    code = ErrorCode.INVALID_REGISTRANT_ASSIGNMENT
    default_message = "Registrant range is not assigned"
