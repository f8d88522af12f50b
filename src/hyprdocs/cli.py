"""Command-line inspection of the extracted documentation model."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from hyprdocs.config import HYPRDOCS_LOG_LEVEL, HYPRDOCS_SOURCES_PATH
from hyprdocs.exceptions import HyprdocsError
from hyprdocs.model import build_model
from hyprdocs.output_formatter import format_model
from hyprdocs.schemas import Keyword
from hyprdocs.sources import DocumentBundle

logger = logging.getLogger(__name__)

_KEYWORDS_ADAPTER = TypeAdapter(list[Keyword])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hyprdocs",
        description="Extract configuration sections and keyword descriptions from documentation.",
    )
    parser.add_argument(
        "--sources",
        type=Path,
        default=HYPRDOCS_SOURCES_PATH,
        help="Directory containing the documentation pages (*.md, *.html)",
    )
    parser.add_argument("--keywords", type=Path, help="JSON file listing keywords to describe")
    parser.add_argument("--json", action="store_true", help="Print the model as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else HYPRDOCS_LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        keywords = load_keywords(args.keywords) if args.keywords else []
        bundle = DocumentBundle.from_directory(args.sources)
        model = build_model(bundle, keywords=keywords, verbose=args.verbose)
    except HyprdocsError as exc:
        logger.error("%s", exc)
        return 1

    if args.json:
        print(model.model_dump_json(indent=2))
    else:
        print(format_model(model))
    return 0


def load_keywords(path: Path) -> list[Keyword]:
    """Read a keyword registry from a JSON list of keyword objects."""
    try:
        return _KEYWORDS_ADAPTER.validate_json(path.read_bytes())
    except OSError as exc:
        raise HyprdocsError(f"Failed to read keywords file {path}: {exc}") from exc
    except ValidationError as exc:
        raise HyprdocsError(f"Invalid keywords file {path}: {exc}") from exc


if __name__ == "__main__":
    sys.exit(main())
