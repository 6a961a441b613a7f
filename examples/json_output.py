"""
Demo: Parsing and reformatting ISBNs

Shows the parsed elements and every output format for a few real codes.
"""

from isbn_parser import (
    parse_isbn_to_json,
    parse_isbn_to_dict,
    validate_as_isbn10,
    IsbnParsingError,
)


def demo_json_output():
    """Demonstrate JSON output for sample codes."""

    print("=" * 80)
    print("  ISBN JSON OUTPUT DEMO")
    print("=" * 80)

    test_cases = [
        ("French ISBN-13", "9782207258040"),
        ("English ISBN-10", "0-306-40615-2"),
        ("ISBN-10 with X check digit", "080442957X"),
        ("979 prefix (no ISBN-10 form)", "979-10-91146-13-5"),
    ]

    for title, code in test_cases:
        print(f"\n{title}")
        print("-" * 80)
        print(f"Input: {code}")
        print("\nJSON Output:")
        print(parse_isbn_to_json(code))

    print("\n\n" + "=" * 80)
    print("  DICTIONARY FORMAT EXAMPLE")
    print("=" * 80)

    data = parse_isbn_to_dict("978-3-16-148410-0", gtin_prefix=1)
    for key, value in data.items():
        print(f"  {key:25s}: {value}")

    print("\n\n" + "=" * 80)
    print("  ERRORS AND VALIDATION")
    print("=" * 80)

    for code in ["", "9772123456801", "9790123456789"]:
        try:
            parse_isbn_to_dict(code)
        except IsbnParsingError as exc:
            print(f"  {code!r:20s} -> [{exc.code.value}] {exc.message}")

    result = validate_as_isbn10("2-207-25804-2")
    print(f"\n  2-207-25804-2 valid: {result.valid} {result.errors}")


if __name__ == "__main__":
    demo_json_output()
