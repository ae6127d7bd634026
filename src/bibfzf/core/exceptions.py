"""Exception hierarchy shared by the bibfzf pipeline."""

from __future__ import annotations

from pathlib import Path


class BibfzfError(RuntimeError):
    """Base exception for fatal bibfzf failures."""


class BibliographyReadError(BibfzfError):
    """Raised when an explicitly addressed bibliography file cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to read '{self.path}': {reason}")


class BibliographyParseError(BibfzfError):
    """Raised when the composed bibliography text cannot be parsed."""


class ConfigError(BibfzfError):
    """Raised when the configuration file is malformed."""


class SelectorError(BibfzfError):
    """Raised when the interactive selector exits abnormally."""


class SelectorUnavailableError(SelectorError):
    """Raised when the interactive selector executable cannot be found."""


__all__ = [
    "BibfzfError",
    "BibliographyParseError",
    "BibliographyReadError",
    "ConfigError",
    "SelectorError",
    "SelectorUnavailableError",
]
