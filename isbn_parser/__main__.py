"""
CLI interface for ISBN Parser.

Usage:
    python -m isbn_parser "<code>" ["<code>" ...] [options]

Options:
    --format FORMAT       isbn10, isbn13, ean13, gtin14 or all (default: isbn13)
    --gtin-prefix DIGIT   Indicator digit for GTIN-14 (default: 0)
    --json                Output parsed elements as JSON
    --validate            Verify the supplied check digit (not with --batch)
    --batch FILE          Read codes from a file, one per line
    --output FILE         Write the batch report as CSV
    --ranges FILE         Range dataset (.json or RangeMessage .xml)
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .core.errors import IsbnParsingError
from .core.formatter import (
    format_as_isbn10,
    format_as_isbn13,
    format_as_ean13,
    format_as_gtin14,
)
from .core.parser import parse_isbn, strip_separators
from .json_formatter import parse_isbn_to_dict
from .logging_config import setup_logging
from .ranges_loader import load_ranges, RangeTable
from .reports import build_report, export_csv, read_codes
from .validators import (
    validate_as_isbn10,
    validate_as_isbn13,
    ValidationResult,
)


logger = logging.getLogger("isbn_parser.cli")

FORMATS = ("isbn10", "isbn13", "ean13", "gtin14", "all")


def format_code(code: str, fmt: str, gtin_prefix: int, ranges: RangeTable) -> str:
    """Render one code in the requested format."""
    formatters: Dict[str, Callable[[], str]] = {
        "isbn10": lambda: format_as_isbn10(code, ranges),
        "isbn13": lambda: format_as_isbn13(code, ranges),
        "ean13": lambda: format_as_ean13(code, ranges),
        "gtin14": lambda: format_as_gtin14(code, gtin_prefix, ranges),
    }
    if fmt == "all":
        return "\n".join(
            f"  {name:7s}: {render()}" for name, render in formatters.items()
        )
    return formatters[fmt]()


def format_validation(code: str, result: ValidationResult) -> str:
    """Format a validation result for display."""
    lines = [f"{code}: {'valid' if result.valid else 'invalid'}"]
    for error in result.errors:
        lines.append(f"  Error: {error}")
    for warning in result.warnings:
        lines.append(f"  Warning: {warning}")
    return "\n".join(lines)


def validate_code(code: str, ranges: RangeTable) -> ValidationResult:
    if len(strip_separators(code)) == 10:
        return validate_as_isbn10(code, ranges)
    return validate_as_isbn13(code, ranges)


def run_codes(codes: List[str], args: argparse.Namespace, ranges: RangeTable) -> int:
    failures = 0
    for code in codes:
        if args.validate:
            result = validate_code(code, ranges)
            print(format_validation(code, result))
            failures += 0 if result.valid else 1
            continue

        try:
            if args.json:
                output = parse_isbn_to_dict(code, gtin_prefix=args.gtin_prefix, ranges=ranges)
                print(json.dumps(output, indent=2, ensure_ascii=False))
            elif args.format == "all":
                isbn = parse_isbn(code, ranges)
                print(f"{code} ({isbn.registration_agency_name})")
                print(format_code(code, args.format, args.gtin_prefix, ranges))
            else:
                print(format_code(code, args.format, args.gtin_prefix, ranges))
        except IsbnParsingError as exc:
            failures += 1
            logger.debug("Failed to parse %r", code, exc_info=True)
            if args.json:
                print(json.dumps(
                    {"input": code, "error": exc.message, "code": exc.code.value},
                    ensure_ascii=False,
                    indent=2,
                ))
            else:
                print(f"{code}: [{exc.code.value}] {exc.message}", file=sys.stderr)
    return failures


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='isbn_parser',
        description='Parse and reformat ISBN-10, ISBN-13, EAN-13 and GTIN-14 codes'
    )

    parser.add_argument(
        'codes',
        nargs='*',
        help='Codes to parse'
    )

    parser.add_argument(
        '--format',
        choices=FORMATS,
        default='isbn13',
        help='Output format (default: isbn13)'
    )

    parser.add_argument(
        '--gtin-prefix',
        type=int,
        choices=range(10),
        default=0,
        help='Indicator digit for GTIN-14 output'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output parsed elements as JSON'
    )

    parser.add_argument(
        '--validate',
        action='store_true',
        help='Verify the supplied check digit instead of reformatting'
    )

    parser.add_argument(
        '--batch',
        default=None,
        help='File with one code per line'
    )

    parser.add_argument(
        '--output',
        default=None,
        help='Write the batch report to this CSV file (stdout if omitted)'
    )

    parser.add_argument(
        '--ranges',
        default=None,
        help='Range dataset (.json or RangeMessage .xml, defaults to package data)'
    )

    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level'
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not args.codes and not args.batch:
        parser.error("no codes given (pass codes or --batch FILE)")
    if args.batch and args.validate:
        parser.error("--validate cannot be combined with --batch")

    ranges = load_ranges(Path(args.ranges) if args.ranges else None)

    codes = list(args.codes)
    if args.batch:
        codes.extend(read_codes(Path(args.batch)))

    if args.batch:
        df = build_report(codes, gtin_prefix=args.gtin_prefix, ranges=ranges)
        if args.output:
            path = export_csv(df, Path(args.output))
            print(f"Report written to {path}")
        else:
            print(df.to_csv(index=False), end="")
        return 0 if df["Valid"].all() else 1

    return 0 if run_codes(codes, args, ranges) == 0 else 1


if __name__ == '__main__':
    sys.exit(main())
