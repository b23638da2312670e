"""
Command-line interface for RUT parsing and formatting.

Builds one RUT from text or from a bare number and prints it.
Example: python -m services.rut_id 16894365-2 --format simple
"""

import argparse
import sys
from typing import Optional, Sequence, Type

from pydantic import ValidationError

from . import __version__
from .errors import RutError
from .log_config import configure_logging, get_logger
from .rut import FormatStyle, Rut, Standard, constrained
from .settings import settings

logger = get_logger(__name__)


def resolve_type(max_digits: Optional[int], min_digits: Optional[int]) -> Type[Rut]:
    """
    Pick the identifier type for the requested digit bounds.

    Missing bounds fall back to the standard ones.

    Raises:
        ValueError: If the bounds are invalid
    """
    if max_digits is None and min_digits is None:
        return Standard

    return constrained(
        Standard.max_digits if max_digits is None else max_digits,
        Standard.min_digits if min_digits is None else min_digits,
    )


def build_rut(value: str, rut_type: Type[Rut], as_number: bool, separator: str) -> Rut:
    """
    Build a RUT from command-line input.

    Args:
        value: RUT text, or its numeric body when as_number is set
        rut_type: Identifier type whose digit bounds apply
        as_number: Treat value as a bare numeric body
        separator: Group separator accepted when parsing text

    Raises:
        RutError: If value is not a valid RUT for rut_type
        ValueError: If as_number is set and value is not a number
    """
    if as_number:
        try:
            number = int(value)
        except ValueError as e:
            raise ValueError(f"Invalid number {value!r}") from e
        return rut_type.from_number(number)

    return rut_type.parse(value, separator=separator)


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Parse, validate and format Chilean RUTs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m services.rut_id 16.894.365-2
  python -m services.rut_id 168943652 --format simple
  python -m services.rut_id --number 25917936
  python -m services.rut_id --max-digits 9 --min-digits 6 116.894.365-9
        """
    )

    parser.add_argument(
        "value",
        help="RUT text (e.g. 16.894.365-2) or, with --number, its numeric body"
    )

    parser.add_argument(
        "--number",
        action="store_true",
        help="Treat VALUE as the numeric body, without verifier"
    )

    parser.add_argument(
        "--format",
        dest="style",
        choices=["human", "simple", "numeric", "default"],
        help="Output style (defaults to RUT_DEFAULT_STYLE, human)"
    )

    parser.add_argument(
        "--max-digits",
        type=int,
        help="Maximum digits of the numeric body (default: 8)"
    )

    parser.add_argument(
        "--min-digits",
        type=int,
        help="Minimum digits of the numeric body (default: 7)"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override log level from configuration"
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Override log format from configuration"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"rut-id {__version__}"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = settings()
    except ValidationError as e:
        # Logging cannot be configured without valid settings
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(args.log_level, args.log_format)

    style = FormatStyle.from_selector(args.style) if args.style else config.default_style

    try:
        rut_type = resolve_type(args.max_digits, args.min_digits)
    except ValueError as e:
        logger.error("Invalid digit bounds", error=str(e))
        return 1

    logger.debug(
        "Building RUT",
        value=args.value,
        as_number=args.number,
        max_digits=rut_type.max_digits,
        min_digits=rut_type.min_digits,
    )

    try:
        rut = build_rut(args.value, rut_type, args.number, config.group_separator)
    except RutError as e:
        logger.error(
            "Invalid RUT",
            value=args.value,
            error=str(e),
            error_type=type(e).__name__
        )
        return 1
    except ValueError as e:
        logger.error("Invalid input", value=args.value, error=str(e))
        return 1

    print(rut.to_text(style))
    return 0


def cli_main():
    """Synchronous entry point for setuptools console scripts."""
    return main()


if __name__ == "__main__":
    sys.exit(main())
