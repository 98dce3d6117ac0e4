"""Command-line entry point: decode a URL's query string against a descriptor schema.

Example:
    python -m src.cli "https://www.example.com/api/endpoint?caseId=4" --param caseId=number

Without `--param`, a demonstration schema is used. The decoded record is printed as JSON; decoder
errors are logged and reported through the exit status.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from src.config.logging import configure_logging
from src.config.settings import LOG_LEVELS, load_settings
from src.params.errors import ParamsError
from src.params.parser import params

logger = logging.getLogger(__name__)

DEMO_DESCRIPTORS: dict[str, str] = {
    "clientId": "number?",
    "caseId": "number",
    "typeId": "number=-1",
    "type": "string=DefaultType",
    "debug": "boolean=true",
}


def _param_argument(value: str) -> tuple[str, str]:
    name, sep, descriptor = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=DESCRIPTOR, got {value!r}")
    return name, descriptor


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode typed query parameters from a URL.")
    parser.add_argument("url", help="URL whose query string is decoded.")
    parser.add_argument(
        "--param",
        dest="params",
        action="append",
        type=_param_argument,
        metavar="NAME=DESCRIPTOR",
        help="Field descriptor, e.g. caseId=number or typeId=number=-1 (repeatable).",
    )
    parser.add_argument(
        "--duplicates",
        choices=("first", "last"),
        default=None,
        help="Which occurrence of a repeated query key wins (default: QUERY_DUPLICATE_KEYS).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: LOG_LEVEL).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the decoder and return the process exit status."""

    args = build_arg_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)

    descriptors = dict(args.params) if args.params else DEMO_DESCRIPTORS
    duplicates = args.duplicates or settings.duplicate_keys

    try:
        parsed = params(descriptors, duplicates=duplicates).parse(args.url)
    except ParamsError as exc:
        logger.info("decode failed code=%s field=%s reason=%s", exc.code, exc.field, exc)
        return 1

    print(json.dumps(parsed, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
