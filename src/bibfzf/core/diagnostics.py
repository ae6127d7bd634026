"""Diagnostic abstractions shared between the core and the CLI."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Interface used to surface warnings, errors, and structured events."""

    debug_enabled: bool

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def error(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that ignores every diagnostic."""

    debug_enabled: bool = False

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a human-friendly summary for selected diagnostic events."""
    data = dict(payload)

    if name == "shared_tree_scan":
        root = data.get("root") or "<unknown>"
        count = data.get("count", 0)
        return f"Indexed {count} shared bibliography file(s) under {root}"

    if name == "action_dispatch":
        label = data.get("action") or "<unknown>"
        key = data.get("key") or "<unknown>"
        return f"Running '{label}' on entry '{key}'"

    return None


__all__ = [
    "DiagnosticEmitter",
    "NullEmitter",
    "format_event_message",
]
