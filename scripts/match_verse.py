#!/usr/bin/env python3
"""
Verse matching script for the Quran verse matcher.
Given a speech-recognition transcript, identifies the Quranic verse (ayah) it refers to.
"""
import sys
import argparse
import logging
from pathlib import Path
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Add project root to Python path when running script directly
if __name__ == "__main__":
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

from verse_matcher.exceptions import VerseMatcherError
from verse_matcher.matching import VerseMatcher
from verse_matcher.utils.logging_utils import setup_logging
from verse_matcher.utils.text_utils import format_reference

console = Console()


def parse_args():
    """Process command line options for verse matching."""
    parser = argparse.ArgumentParser(
        description="Identify the Quranic verse (ayah) a transcript refers to")

    parser.add_argument(
        "transcript", type=str,
        help="Transcript text to match (quote it)")

    parser.add_argument(
        "--no-remote", action="store_true",
        help="Only use the local phrase table, skip the remote search fallback")

    parser.add_argument(
        "--phrases", type=str, default=None,
        help="Path to an alternative phrase table JSON file")

    parser.add_argument(
        "--show-debug", action="store_true",
        help="Show log output and tracebacks")

    return parser.parse_args()


def format_match_display(result, surahs):
    table = Table(show_header=False, box=None)
    table.add_column("Label", style="bold cyan")
    table.add_column("Value")

    info = surahs.get(result.surah)
    table.add_row("Reference", f"{result.reference} ({format_reference(result.surah, result.ayah, arabic=True)})")
    table.add_row("Surah (English)", result.surah_name)
    if info:
        table.add_row("Surah (Arabic)", info.name)
    table.add_row("Matched Text", result.matched_text)
    if result.ayah_text and result.ayah_text != result.matched_text:
        table.add_row("Ayah Text", result.ayah_text)
    table.add_row("Match Type", result.match_type.value)
    table.add_row("Confidence", f"{result.confidence:.1%}")
    return table


def main():
    """Run verse matching on a transcript."""
    args = parse_args()
    setup_logging("match_verse", log_to_console=args.show_debug,
                  level=logging.DEBUG if args.show_debug else logging.WARNING)

    try:
        matcher = VerseMatcher.from_config(phrases_path=args.phrases, enable_remote=not args.no_remote)
        result = matcher.match(args.transcript)
    except VerseMatcherError as e:
        console.print(f"[red]Error:[/red] {e}")
        if args.show_debug:
            console.print_exception()
        return 1

    if result is None:
        console.print("[yellow]No matching verse found.[/yellow]")
        return 1

    console.print(Panel(
        format_match_display(result, matcher.phrase_matcher.surahs),
        title="[bold]Matched Ayah[/bold]",
        border_style="green",
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
