"""Interface of the interactive line selector."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSelector(Protocol):
    """Present ``lines`` to the user and return the chosen index, if any.

    ``preview`` is a command template run by the selector for the highlighted
    line; ``{1}`` expands to the first ``delimiter``-separated column.
    """

    def select(
        self,
        lines: Sequence[str],
        *,
        preview: str | None = None,
        delimiter: str | None = None,
        prompt: str | None = None,
    ) -> int | None: ...


__all__ = ["LineSelector"]
