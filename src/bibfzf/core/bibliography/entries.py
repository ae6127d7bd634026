"""Entry records and display helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
import re


_WHITESPACE_PATTERN = re.compile(r"\s+")

SUMMARY_DELIMITER = "|"
SUMMARY_FIELDS = ("title", "author", "year")


def strformat(value: str) -> str:
    """Collapse whitespace runs to single spaces and trim the result."""
    return _WHITESPACE_PATTERN.sub(" ", value).strip()


@dataclass(frozen=True, slots=True)
class RawEntry:
    """One entry as produced by the parser, tags kept in source order."""

    key: str
    entry_type: str
    tags: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True, slots=True)
class NormalizedEntry:
    """Case-insensitive view over the tags of a :class:`RawEntry`.

    Repeated tag names resolve to the last occurrence. Stored values are the
    parser's raw text; use :meth:`display` for single-line output.
    """

    raw: RawEntry
    fields: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        mapping: dict[str, str] = {}
        for name, value in self.raw.tags:
            mapping[name.lower()] = value
        object.__setattr__(self, "fields", mapping)

    @property
    def key(self) -> str:
        return self.raw.key

    @property
    def entry_type(self) -> str:
        return self.raw.entry_type

    def has(self, name: str) -> bool:
        return name.lower() in self.fields

    def get(self, name: str) -> str | None:
        """Return the raw value for ``name`` or ``None`` when absent."""
        return self.fields.get(name.lower())

    def display(self, name: str) -> str:
        value = self.get(name)
        return strformat(value) if value is not None else ""


def normalize_entries(entries: Iterable[RawEntry]) -> list[NormalizedEntry]:
    return [NormalizedEntry(entry) for entry in entries]


def summarize_entry(entry: NormalizedEntry) -> str:
    """Project an entry onto the ``key | title - author - year`` list line."""
    details = " - ".join(entry.display(name) for name in SUMMARY_FIELDS)
    return f"{entry.key} {SUMMARY_DELIMITER} {details}"


__all__ = [
    "SUMMARY_DELIMITER",
    "SUMMARY_FIELDS",
    "NormalizedEntry",
    "RawEntry",
    "normalize_entries",
    "strformat",
    "summarize_entry",
]
