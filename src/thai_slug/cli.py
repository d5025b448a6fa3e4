"""Command-line interface for generating slugs from Thai text.

Usage:
    thai-slug "สวัสดีโลก"
    thai-slug --strategy royal --separator _ --max-length 40 "ข่าว ด่วน"
    echo "สวัสดี" | thai-slug --option preserve_tone_marks=true
"""

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any

from thai_slug.core.config import get_settings
from thai_slug.core.exceptions import ConfigurationError
from thai_slug.core.logging import get_logger, setup_logging
from thai_slug.slug import ThaiSlug
from thai_slug.transliterator import Strategy

logger = get_logger(__name__)


def parse_option(raw: str) -> tuple[str, Any]:
    """Parse a ``KEY=VALUE`` strategy option; VALUE is decoded as JSON when possible."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw!r}")
    try:
        return key, json.loads(value)
    except json.JSONDecodeError:
        return key, value


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="thai-slug",
        description="Convert Thai text into URL-safe slugs",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to convert (reads one text per line from stdin when omitted)",
    )
    parser.add_argument(
        "-s",
        "--strategy",
        choices=[s.value for s in Strategy],
        default=settings.default_strategy,
        help="Transliteration strategy (default: %(default)s)",
    )
    parser.add_argument(
        "--separator",
        default=settings.separator,
        help="Word separator (default: %(default)r)",
    )
    parser.add_argument(
        "-m",
        "--max-length",
        type=int,
        default=settings.max_length,
        help="Maximum slug length",
    )
    parser.add_argument(
        "--no-lowercase",
        action="store_true",
        help="Keep the original case",
    )
    parser.add_argument(
        "-o",
        "--option",
        action="append",
        type=parse_option,
        default=[],
        metavar="KEY=VALUE",
        help="Strategy option, repeatable (e.g. preserve_tone_marks=true)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)

    texts = [" ".join(args.text)] if args.text else [line.rstrip("\n") for line in sys.stdin]

    options: dict[str, Any] = {
        "strategy_options": dict(args.option),
        "separator": args.separator,
        "max_length": args.max_length,
        "lowercase": not args.no_lowercase,
    }

    try:
        generator = ThaiSlug(default_strategy=args.strategy)
        for text in texts:
            print(generator.generate(text, **options))
    except ConfigurationError as e:
        logger.error("invalid_configuration", error=e.message, **e.context)
        message = e.message if e.suggestion is None else f"{e.message} {e.suggestion}"
        print(f"thai-slug: error: {message}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
