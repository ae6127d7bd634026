"""CLI command implementations."""

from __future__ import annotations

from .browse import bibfzf


__all__ = ["bibfzf"]
