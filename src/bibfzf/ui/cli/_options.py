"""Shared Typer option definitions for the CLI command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


DIAGNOSTICS_PANEL = "Diagnostics"

BibtexArgument = Annotated[
    Path,
    typer.Argument(
        metavar="BIBTEX",
        help="Input BibTeX file.",
        show_default=False,
    ),
]

KeyOption = Annotated[
    str | None,
    typer.Option(
        "-k",
        "--key",
        metavar="KEY",
        help="Print the entry with this citation key and exit (used by the preview pane).",
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "-c",
        "--config",
        metavar="FILE",
        help="Configuration file (defaults to ~/.bibfzf.conf).",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
