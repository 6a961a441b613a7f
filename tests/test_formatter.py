"""
Tests for ISBN output formats.

Golden values are real ISBNs; check digits are recomputed, never copied
from the input.
"""

import pytest

from isbn_parser import (
    parse_isbn,
    format_as_isbn10,
    format_as_isbn13,
    format_as_ean13,
    format_as_gtin14,
    InvalidProductCodeError,
    InvalidCountryCodeError,
    EmptyInputError,
)
from isbn_parser.validators import calculate_check_digit_mod10


class TestIsbn10:
    """Tests for ISBN-10 output."""

    def test_from_isbn13(self):
        assert format_as_isbn10("9782207258040") == "2-207-25804-1"

    def test_x_check_digit(self):
        assert format_as_isbn10("978-3-16-148410-0") == "3-16-148410-X"

    def test_from_nine_digits(self):
        assert format_as_isbn10("080442957") == "0-8044-2957-X"

    def test_wrong_input_check_digit_is_corrected(self):
        assert format_as_isbn10("0-306-40615-9") == "0-306-40615-2"


class TestIsbn13:
    """Tests for hyphenated ISBN-13 output."""

    @pytest.mark.parametrize("code,expected", [
        ("2207258041", "978-2-207-25804-0"),
        ("0-306-40615-2", "978-0-306-40615-7"),
        ("080442957X", "978-0-8044-2957-3"),
        ("88-04-47328-2", "978-88-04-47328-2"),
        ("84-376-0494-X", "978-84-376-0494-7"),
        ("9785171183664", "978-5-17-118366-0"),
        ("9791091146135", "979-10-91146-13-5"),
    ])
    def test_golden_values(self, code, expected):
        assert format_as_isbn13(code) == expected


class TestEan13:
    """Tests for unhyphenated EAN-13 output."""

    def test_from_hyphenated(self):
        assert format_as_ean13("978-2-207-25804-0") == "9782207258040"

    def test_from_isbn10(self):
        assert format_as_ean13("0-8044-2957-X") == "9780804429573"

    def test_from_twelve_digits(self):
        assert format_as_ean13("979109114613") == "9791091146135"


class TestGtin14:
    """Tests for GTIN-14 output."""

    def test_prefix_digit_included_in_checksum(self):
        assert format_as_gtin14("9782207258040", 1) == "19782207258047"

    def test_prefix_as_string(self):
        assert format_as_gtin14("9782207258040", "1") == "19782207258047"

    def test_checksum_computed_over_thirteen_digits(self):
        gtin = format_as_gtin14("0-306-40615-2", 5)
        assert len(gtin) == 14
        assert gtin[:13] == "5" + format_as_ean13("0-306-40615-2")[:12]
        assert gtin[-1] == str(calculate_check_digit_mod10(gtin[:13]))

    def test_zero_prefix(self):
        assert format_as_gtin14("9782207258040", 0) == "09782207258040"

    @pytest.mark.parametrize("prefix", [10, -1, "12", "a", ""])
    def test_invalid_prefix(self, prefix):
        with pytest.raises(ValueError):
            format_as_gtin14("9782207258040", prefix)


class TestErrorPropagation:
    """Formatters raise whatever the parser raised."""

    @pytest.mark.parametrize("formatter", [
        format_as_isbn10,
        format_as_isbn13,
        format_as_ean13,
        lambda code: format_as_gtin14(code, 1),
    ])
    def test_parser_errors_propagate(self, formatter):
        with pytest.raises(EmptyInputError):
            formatter("")
        with pytest.raises(InvalidProductCodeError):
            formatter("9772123456801")
        with pytest.raises(InvalidCountryCodeError):
            formatter("9790123456789")


class TestProperties:
    """Cross-format consistency."""

    CODES = [
        "9782207258040",
        "0-306-40615-2",
        "978-3-16-148410-0",
        "88-04-47328-2",
        "84-376-0494-X",
        "9785171183664",
        "9788535902778",
        "9788954612340",
    ]

    @pytest.mark.parametrize("code", CODES)
    def test_isbn10_to_isbn13_agrees_with_ean13(self, code):
        isbn13 = format_as_isbn13(format_as_isbn10(code))
        assert isbn13.replace("-", "") == format_as_ean13(code)

    @pytest.mark.parametrize("code", CODES + ["9791091146135"])
    def test_reparse_formatted_code(self, code):
        parsed = parse_isbn(code)
        assert parse_isbn(format_as_isbn13(code)) == parsed
        assert parse_isbn(format_as_ean13(code)) == parsed

    @pytest.mark.parametrize("code", CODES)
    def test_reparse_isbn10(self, code):
        assert parse_isbn(format_as_isbn10(code)) == parse_isbn(code)

    def test_formatting_is_deterministic(self):
        assert format_as_isbn13("2207258041") == format_as_isbn13("2207258041")

    @pytest.mark.parametrize("formatter", [
        format_as_isbn10,
        format_as_isbn13,
        format_as_ean13,
        format_as_gtin14,
    ])
    def test_formatters_are_documented(self, formatter):
        assert formatter.__doc__.strip()
