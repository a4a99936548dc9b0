from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text


def chunk_rows(emojis: Sequence[str], columns: int = 5) -> list[list[str]]:
    """Split emojis into numbered rows of `columns` cells, padding the last one with ''."""
    rows: list[list[str]] = []
    for i in range(0, len(emojis), columns):
        items = list(emojis[i : i + columns])
        items += [""] * (columns - len(items))
        rows.append([f"{i // columns + 1:02d}", *items])
    return rows


def build_emoji_table(emojis: Sequence[str], columns: int = 5) -> Table:
    """
    Header cells are centered, data cells left-aligned.
    Column justify applies to headers too in rich, so headers carry their own Text justify.
    Cells are Text so scraped tokens are never read as markup or :shortcodes:.
    """
    table = Table()
    table.add_column(Text("#", justify="center"), justify="left", style="bright_black")
    for _ in range(columns):
        table.add_column(Text("EMOJIS", justify="center"), justify="left")
    for row in chunk_rows(emojis, columns):
        table.add_row(*(Text(cell) for cell in row))
    return table


def render_emoji_table(console: Console, emojis: Sequence[str], columns: int = 5) -> None:
    console.print(build_emoji_table(emojis, columns))
