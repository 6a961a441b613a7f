"""
Core parsing and formatting modules for ISBN parser.
"""

from .parser import (
    parse_isbn,
    normalize,
    strip_separators,
    extract_gs1_element,
    extract_registration_group_element,
    extract_registrant_and_publication_elements,
    ParsedIsbn,
)
from .formatter import (
    format_as_isbn10,
    format_as_isbn13,
    format_as_ean13,
    format_as_gtin14,
)

__all__ = [
    "parse_isbn",
    "normalize",
    "strip_separators",
    "extract_gs1_element",
    "extract_registration_group_element",
    "extract_registrant_and_publication_elements",
    "ParsedIsbn",
    "format_as_isbn10",
    "format_as_isbn13",
    "format_as_ean13",
    "format_as_gtin14",
]
