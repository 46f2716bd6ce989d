"""Main entry point for the describer project."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from common import logger
from config.config import Config
from excerpt.fetcher import strip_tags
from excerpt.trimmer import trim_excerpt
from models.models import DescriptionType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Trim text into a search, Open Graph or Twitter description.")
    parser.add_argument("path", nargs="?", help="File to read; stdin when omitted")
    parser.add_argument(
        "--type",
        dest="description_type",
        choices=[t.value for t in DescriptionType],
        default=DescriptionType.SEARCH.value,
        help="Description type, picks the character budget",
    )
    parser.add_argument("--max-chars", type=int, default=None, help="Override the character budget")
    parser.add_argument("--html", action="store_true", help="Strip HTML tags before trimming")
    return parser


def read_source(path: Optional[str] = None) -> str:
    if path:
        return Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv: Optional[list] = None) -> int:
    """Точка входа в приложение."""
    args = build_parser().parse_args(argv)
    if not Config.validate():
        logger.error("Invalid configuration: description budgets must be positive")
        return 1

    try:
        text = read_source(args.path)
    except OSError as e:
        logger.error("Could not read %s: %s", args.path or "stdin", e)
        return 1

    if args.html:
        text = strip_tags(text)

    budget = args.max_chars if args.max_chars is not None else Config.budget_for(args.description_type)
    logger.debug("Trimming %d chars to a budget of %d", len(text), budget)
    print(trim_excerpt(text, budget))
    return 0


if __name__ == "__main__":
    sys.exit(main())
