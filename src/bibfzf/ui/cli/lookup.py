"""Non-interactive rendering of a single entry (the preview pane)."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from bibfzf.core.bibliography import NormalizedEntry, strformat


def build_entry_table(entry: NormalizedEntry) -> Table:
    """Return a two-column grid: key, type, then every tag in parser order."""
    grid = Table.grid(padding=(0, 1))
    grid.add_column(style="bold", no_wrap=True)
    grid.add_column()

    grid.add_row("key", Text(entry.key))
    grid.add_row("type", Text(entry.entry_type))
    for name, value in entry.raw.tags:
        grid.add_row(Text(name), Text(strformat(value)))
    return grid


def print_entry(entry: NormalizedEntry, console: Console) -> None:
    console.print(build_entry_table(entry))


def not_found_message(key: str) -> str:
    return f"Couldn't find key {key}"


__all__ = ["build_entry_table", "not_found_message", "print_entry"]
