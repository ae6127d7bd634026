"""Implementation of the ``bibfzf`` command."""

from __future__ import annotations

from typing import Annotated

import typer

from bibfzf.core.actions import ActionContext
from bibfzf.core.bibliography import Bibliography, load_bibliography
from bibfzf.core.config import load_config
from bibfzf.core.exceptions import BibfzfError
from bibfzf.version import get_version

from .._options import BibtexArgument, ConfigOption, DebugOption, KeyOption, VerboseOption
from ..browser import browse, preview_command
from ..diagnostics import CliEmitter
from ..lookup import not_found_message, print_entry
from ..selector import FzfSelector
from ..state import CLIState, configure_logging, emit_error, set_cli_state


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bibfzf {get_version()}")
        raise typer.Exit()


def bibfzf(
    bibtex: BibtexArgument,
    key: KeyOption = None,
    config: ConfigOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the installed version and exit.",
        ),
    ] = False,
) -> None:
    """Browse a BibTeX file interactively and act on the selected entry."""
    state = set_cli_state(verbosity=verbose, debug=debug)
    configure_logging(state)
    emitter = CliEmitter(state)

    try:
        settings = load_config(config)
        bibliography = load_bibliography(bibtex, settings, emitter=emitter)
    except BibfzfError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if key is not None:
        lookup(bibliography, key, state)

    context = ActionContext(config=settings, emitter=emitter, echo=typer.echo)
    try:
        browse(
            bibliography,
            selector=FzfSelector(settings.selector),
            context=context,
            preview=preview_command(bibtex, config_path=config),
        )
    except BibfzfError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


def lookup(bibliography: Bibliography, key: str, state: CLIState) -> None:
    """Print one entry and exit 0, or report the missing key and exit 1."""
    wanted = key.strip()
    entry = bibliography.find(wanted)
    if entry is None:
        typer.echo(not_found_message(wanted))
        raise typer.Exit(code=1)
    print_entry(entry, state.console)
    raise typer.Exit(code=0)


__all__ = ["bibfzf", "lookup"]
