"""Interactive line selection backed by the ``fzf`` executable."""

from __future__ import annotations

from collections.abc import Sequence
import logging
import re
import subprocess

from bibfzf.core.exceptions import SelectorError, SelectorUnavailableError


logger = logging.getLogger(__name__)

# fzf exits with 1 when nothing matched and 130 when the user aborted.
_NO_SELECTION_CODES = frozenset({1, 130})


class FzfSelector:
    """Run ``fzf`` in single-selection mode over a list of lines.

    The chosen line is mapped back to the index of its first occurrence in
    ``lines``.
    """

    def __init__(self, executable: str = "fzf") -> None:
        self.executable = executable

    def build_command(
        self,
        *,
        preview: str | None = None,
        delimiter: str | None = None,
        prompt: str | None = None,
    ) -> list[str]:
        command = [self.executable, "--no-multi"]
        if delimiter:
            command.extend(["--delimiter", re.escape(delimiter)])
        if preview:
            command.extend(["--preview", preview])
        if prompt:
            command.extend(["--prompt", prompt])
        return command

    def select(
        self,
        lines: Sequence[str],
        *,
        preview: str | None = None,
        delimiter: str | None = None,
        prompt: str | None = None,
    ) -> int | None:
        if not lines:
            return None

        command = self.build_command(preview=preview, delimiter=delimiter, prompt=prompt)
        logger.debug("Running selector: %s", command)
        try:
            process = subprocess.run(
                command,
                input="\n".join(lines),
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise SelectorUnavailableError(
                f"Interactive selector '{self.executable}' not found."
            ) from exc
        except OSError as exc:
            raise SelectorError(f"Failed to run '{self.executable}': {exc}") from exc

        if process.returncode in _NO_SELECTION_CODES:
            return None
        if process.returncode != 0:
            raise SelectorError(
                f"Interactive selector '{self.executable}' exited with status {process.returncode}."
            )

        chosen = (process.stdout or "").rstrip("\n")
        try:
            return list(lines).index(chosen)
        except ValueError:
            logger.debug("Selector returned an unknown line: %r", chosen)
            return None


__all__ = ["FzfSelector"]
