"""Two-stage interactive flow: pick an entry, then pick an action for it."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import shlex
import sys

from bibfzf.core.actions import ActionContext, ActionMenu, EntryAction
from bibfzf.core.bibliography import SUMMARY_DELIMITER, Bibliography
from bibfzf.core.selection import LineSelector


KEY_PLACEHOLDER = "{1}"


def self_command() -> list[str]:
    """Return the argv prefix that re-runs this program."""
    return [sys.executable, "-m", "bibfzf"]


def preview_command(
    bib_path: Path | str,
    *,
    config_path: Path | str | None = None,
    program: Sequence[str] | None = None,
) -> str:
    """Shell template that renders the highlighted entry in lookup mode."""
    parts = [shlex.quote(part) for part in (program or self_command())]
    if config_path is not None:
        parts.extend(["--config", shlex.quote(str(config_path))])
    parts.extend(["--key", KEY_PLACEHOLDER, shlex.quote(str(bib_path))])
    return " ".join(parts)


def browse(
    bibliography: Bibliography,
    *,
    selector: LineSelector,
    context: ActionContext,
    preview: str | None = None,
) -> EntryAction | None:
    """Run the entry list, then the action menu for the chosen entry."""
    lines = bibliography.summaries()
    if not lines:
        context.emitter.warning("No references found.")
        return None

    index = selector.select(lines, preview=preview, delimiter=SUMMARY_DELIMITER)
    if index is None:
        return None

    entry = bibliography.entries[index]
    return ActionMenu(entry).run(selector, context)


__all__ = ["KEY_PLACEHOLDER", "browse", "preview_command", "self_command"]
