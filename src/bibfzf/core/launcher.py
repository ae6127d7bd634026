"""Fire-and-forget execution of the external opener and clipboard commands.

Failures never propagate: a command that cannot be spawned or exits non-zero
is logged at debug level and reported as ``False``.
"""

from __future__ import annotations

import logging
import shlex
import subprocess


logger = logging.getLogger(__name__)


class CommandLauncher:
    """Run configured commands synchronously, ignoring their outcome."""

    def launch(self, command: str, argument: str) -> bool:
        """Run ``command`` with ``argument`` as its single extra argument."""
        argv = [*shlex.split(command), argument]
        return self._run(argv)

    def pipe(self, command: str, text: str) -> bool:
        """Run ``command`` with ``text`` on standard input."""
        return self._run(shlex.split(command), stdin_text=text)

    def _run(self, argv: list[str], *, stdin_text: str | None = None) -> bool:
        if not argv:
            logger.debug("Skipping empty command.")
            return False
        try:
            process = subprocess.run(argv, input=stdin_text, text=True, check=False)
        except OSError as exc:
            logger.debug("Failed to spawn %s: %s", argv[0], exc)
            return False
        if process.returncode != 0:
            logger.debug("%s exited with status %d", argv[0], process.returncode)
            return False
        return True


__all__ = ["CommandLauncher"]
