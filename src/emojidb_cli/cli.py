from __future__ import annotations

import argparse
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .core import DEFAULT_CONFIG, EmojiDBError, SearchConfig
from .emoji_sources import search
from .table import render_emoji_table


HELP_FLAGS = ("-h", "--help")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="emojidb", description="Search EmojiDB and print matching emojis as a table.", allow_abbrev=False
    )
    p.add_argument("terms", nargs="*", help="Search term; multiple words are joined with spaces.")
    return p


def main(
    argv: list[str] | None = None,
    *,
    console: Optional[Console] = None,
    config: Optional[SearchConfig] = None,
) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    # only --help is an option; every other word, dashed or not, is part of the query
    build_parser().parse_known_args(argv)
    terms = [a for a in argv if a not in HELP_FLAGS]
    console = console or Console()
    config = config or DEFAULT_CONFIG

    if not terms:
        console.print("[red]Error: Please provide a search term.[/red]", highlight=False)
        console.print("Usage: emojidb <search-term>", highlight=False)
        return 2

    query = " ".join(terms)
    console.print(f"[bold cyan]🔎 Searching EmojiDB for: '{escape(query)}'...[/bold cyan]", emoji=False, highlight=False)

    try:
        emojis = search(query, config=config)
    except EmojiDBError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]", emoji=False, highlight=False)
        return 1

    if not emojis:
        console.print(f"[yellow]⚠️  No emojis found for '{escape(query)}'.[/yellow]", emoji=False, highlight=False)
        return 0

    console.print()
    render_emoji_table(console, emojis, config.columns)
    console.print(f"\n[bright_green]✅ Done! Found {len(emojis)} emojis.[/bright_green]", highlight=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
