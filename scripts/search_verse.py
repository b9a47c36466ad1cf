#!/usr/bin/env python3
"""
Corpus search script: find verses whose Arabic text or English translation
approximately match a query.
"""
import sys
import argparse
import logging
from pathlib import Path
from rich.console import Console
from rich.table import Table

# Add project root to Python path when running script directly
if __name__ == "__main__":
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

from verse_matcher.config import SEARCH_DEFAULT_LIMIT
from verse_matcher.exceptions import VerseMatcherError
from verse_matcher.search import CorpusSearchService
from verse_matcher.utils.logging_utils import setup_logging

console = Console()


def parse_args():
    """Process command line options for corpus search."""
    parser = argparse.ArgumentParser(description="Search the Quran corpus by text")

    parser.add_argument("query", type=str, help="Arabic or English search text")
    parser.add_argument(
        "--limit", type=int, default=SEARCH_DEFAULT_LIMIT,
        help=f"Maximum number of results (default: {SEARCH_DEFAULT_LIMIT})")
    parser.add_argument(
        "--corpus", type=str, default=None,
        help="Path to a corpus JSON file (default: bundled sample corpus)")
    parser.add_argument(
        "--normalize-arabic", action="store_true",
        help="Ignore Arabic diacritics and letter variants when matching")
    parser.add_argument(
        "--log-file", action="store_true",
        help="Also write a log file under logs/")

    return parser.parse_args()


def main():
    args = parse_args()
    logger, _ = setup_logging("search_verse", log_to_console=False, log_to_file=args.log_file)

    service = CorpusSearchService(normalize_arabic=args.normalize_arabic)
    try:
        service.load_file(args.corpus)
    except VerseMatcherError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    results = service.find_verse(args.query, args.limit)
    logger.info(f"Query {args.query!r} returned {len(results)} result(s)")
    if not results:
        console.print("[yellow]No matching verses found.[/yellow]")
        return 0

    table = Table(title=f"Results for \"{args.query}\"", show_lines=True)
    table.add_column("Confidence", style="cyan")
    table.add_column("Ref", style="bold")
    table.add_column("Arabic")
    table.add_column("English")
    for match in results:
        table.add_row(
            f"{match.confidence:.2f}%",
            f"{match.surah}:{match.ayah}",
            match.arabic,
            match.english,
        )
    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
