"""
Command line interface for sweid.

Usage:
    sweid classify 811218-9876 556036-0793
    sweid --today 2024-06-01 classify --json 8112189876
    sweid format 8112189876
"""

import argparse
import json
import logging
import sys
from datetime import date
from typing import Optional

from sweid.config import current_date, settings
from sweid.exceptions import ConfigurationError
from sweid.identity import (
    ClassificationResult,
    CoordinationNumber,
    IdentityKind,
    OrganizationNumber,
    PersonalNumber,
    classify,
    format_organisationsnummer,
    format_personnummer,
)

logger = logging.getLogger(__name__)


def parse_today(value: Optional[str]) -> date:
    """Parse the --today option, falling back to the configured clock."""
    if value is None:
        return current_date()
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid date for --today: {value!r}") from e


def result_to_dict(value: str, result: ClassificationResult) -> dict:
    """Convert a classification to a JSON-serializable dict."""
    data = {"value": value, "kind": result.kind.value}
    if isinstance(result, (PersonalNumber, CoordinationNumber)):
        data["gender"] = result.gender.value if result.gender else None
    elif isinstance(result, OrganizationNumber):
        data["company_type"] = result.company_type.value
        data["company_type_description"] = result.company_type.description
    return data


def describe(value: str, result: ClassificationResult) -> str:
    """One-line human readable description of a classification."""
    if isinstance(result, (PersonalNumber, CoordinationNumber)):
        gender = result.gender.value if result.gender else "?"
        return f"{value}\t{result.kind.value}\tgender={gender}"
    if isinstance(result, OrganizationNumber):
        return f"{value}\t{result.kind.value}\t{result.company_type.description}"
    return f"{value}\t{result.kind.value}"


def cmd_classify(args: argparse.Namespace, today: date) -> int:
    all_valid = True
    for value in args.values:
        result = classify(value, today)
        all_valid = all_valid and result.kind != IdentityKind.INVALID
        if args.json:
            print(json.dumps(result_to_dict(value, result), ensure_ascii=False))
        else:
            print(describe(value, result))
    return 0 if all_valid else 1


def cmd_format(args: argparse.Namespace, today: date) -> int:
    all_valid = True
    for value in args.values:
        formatted = format_personnummer(value, today, separator=args.separator)
        if formatted is None:
            formatted = format_organisationsnummer(value, today, separator=args.separator)
        if formatted is None:
            all_valid = False
            formatted = "invalid"
        print(f"{value}\t{formatted}")
    return 0 if all_valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sweid",
        description="Classify and format Swedish identity numbers",
    )
    parser.add_argument(
        "--today",
        help="Date to classify against (YYYY-MM-DD, default: today)",
    )
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser("classify", help="Classify identity numbers")
    classify_parser.add_argument("values", nargs="+", help="Numbers to classify")
    classify_parser.add_argument("--json", action="store_true", help="Output JSON lines")
    classify_parser.set_defaults(handler=cmd_classify)

    format_parser = subparsers.add_parser("format", help="Print numbers in canonical form")
    format_parser.add_argument("values", nargs="+", help="Numbers to format")
    format_parser.add_argument("--separator", default="-", help="Separator (default: '-')")
    format_parser.set_defaults(handler=cmd_format)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        today = parse_today(args.today)
    except ConfigurationError as e:
        logger.error(str(e))
        return 2

    logger.debug(f"Classifying against {today.isoformat()}")
    return args.handler(args, today)


if __name__ == "__main__":
    sys.exit(main())
