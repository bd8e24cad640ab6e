"""Application entry point."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from pydantic import TypeAdapter

from .api import replace_all, search
from .app.app_config import load_config
from .common.pydantic import ReplaceResult, SearchBlock, SearchResult, SearchTarget, SearchType
from .errors import QueryError


def format_search_result(result: SearchResult) -> str:
    """Format a search result as a single line."""
    if result.line_number is not None:
        return f"{result.relative_path}:{result.line_number}: {result.line_text}"
    line = f"{result.relative_path} ({result.match_count})"
    if result.found_time is not None:
        line += f" [{datetime.fromtimestamp(result.found_time / 1000):%m/%d/%Y %I:%M %p}]"
    return line


def format_replace_result(result: ReplaceResult) -> str:
    """Format a replace result as a single line."""
    if result.success:
        return f"{result.relative_path}: {result.replacement_count} replacement(s)"
    return f"{result.relative_path}: FAILED ({result.error})"


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog="mkfind", description="Search and replace in markdown and text folders")
    parser.add_argument("--config", type=Path, help="Path to a JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Search file contents or names")
    search_parser.add_argument("root", type=Path, help="Folder to search")
    search_parser.add_argument("query", help="Text, wildcard pattern or advanced expression")
    search_parser.add_argument(
        "--type", choices=[t.value for t in SearchType], default=SearchType.LITERAL.value, help="Search type"
    )
    search_parser.add_argument("--filenames", action="store_true", help="Match file and folder names")
    search_parser.add_argument("--lines", action="store_true", help="Report individual matching lines")
    search_parser.add_argument("--ignore", action="append", default=[], metavar="PATTERN", help="Ignore pattern")
    search_parser.add_argument("--json", action="store_true", help="Print results as JSON")

    replace_parser = subparsers.add_parser("replace", help="Replace text in all files (case-sensitive)")
    replace_parser.add_argument("root", type=Path, help="Folder to process")
    replace_parser.add_argument("search", help="Literal text to replace")
    replace_parser.add_argument("replacement", help="Replacement text")
    replace_parser.add_argument("--ignore", action="append", default=[], metavar="PATTERN", help="Ignore pattern")
    replace_parser.add_argument("--json", action="store_true", help="Print results as JSON")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_config(args.config)

    if args.command == "search":
        try:
            results = asyncio.run(
                search(
                    args.root,
                    args.query,
                    search_type=args.type,
                    target=SearchTarget.FILENAMES if args.filenames else SearchTarget.CONTENT,
                    block=SearchBlock.FILE_LINES if args.lines else SearchBlock.ENTIRE_FILE,
                    ignore_patterns=args.ignore,
                    config=config,
                )
            )
        except QueryError as e:
            print(f"Invalid query: {e}", file=sys.stderr)
            return 2
        if args.json:
            print(TypeAdapter(list[SearchResult]).dump_json(results, indent=2).decode())
        else:
            for result in results:
                print(format_search_result(result))
        return 0

    replace_results = asyncio.run(
        replace_all(args.root, args.search, args.replacement, ignore_patterns=args.ignore, config=config)
    )
    if args.json:
        print(TypeAdapter(list[ReplaceResult]).dump_json(replace_results, indent=2).decode())
    else:
        for result in replace_results:
            print(format_replace_result(result))
    return 0 if all(result.success for result in replace_results) else 1


if __name__ == "__main__":
    sys.exit(main())
