"""Adapter turning BibTeX text into :class:`RawEntry` records via pybtex."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from pybtex import errors as pybtex_errors
from pybtex.database.input import bibtex
from pybtex.database.input.bibtex import UndefinedMacro
from pybtex.exceptions import PybtexError
from pybtex.scanner import PybtexSyntaxError

from ..exceptions import BibliographyParseError
from .entries import RawEntry
from .issues import BibliographyIssue


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParsedBibliography:
    """Entries in parse order plus the recoverable issues reported on the way."""

    entries: list[RawEntry] = field(default_factory=list)
    issues: list[BibliographyIssue] = field(default_factory=list)


class _TagRecordingParser(bibtex.Parser):
    """pybtex parser that records every entry and tag exactly as written.

    pybtex folds citation keys case-insensitively and drops repeated fields.
    Entries are captured here before that happens, so the caller sees every
    tag in source order. Repetitions are reported as issues instead.
    """

    def __init__(self) -> None:
        super().__init__(macros={}, person_fields=())
        self.records: list[RawEntry] = []
        self.issues: list[BibliographyIssue] = []
        self._seen_keys: set[str] = set()

    def process_entry(self, entry_type, key, fields) -> None:
        key = str(key)
        tags: list[tuple[str, str]] = []
        seen_fields: set[str] = set()
        for name, value_list in fields:
            name = str(name)
            if name.lower() in seen_fields:
                self.issues.append(
                    BibliographyIssue(
                        message=f"entry with key {key} has a duplicate {name} field",
                        key=key,
                    )
                )
            seen_fields.add(name.lower())
            tags.append((name, self.flatten_value_list(value_list)))

        if key in self._seen_keys:
            self.issues.append(
                BibliographyIssue(message=f"repeated bibliography entry: {key}", key=key)
            )
        self._seen_keys.add(key)
        self.records.append(
            RawEntry(key=key, entry_type=str(entry_type).lower(), tags=tuple(tags))
        )


def parse_bibliography(text: str) -> ParsedBibliography:
    """Parse composed BibTeX text.

    Month strings and other macros must be defined by the text itself, and
    name fields such as ``author`` are kept as plain tags. Every entry is
    returned, including repeated citation keys; keys compare case-sensitively.
    Repeated keys or fields and undefined macros become issues; syntax errors
    are fatal.
    """
    parser = _TagRecordingParser()
    with pybtex_errors.capture() as captured:
        try:
            parser.parse_string(text)
        except PybtexError as exc:
            raise BibliographyParseError(f"Failed to parse bibliography: {exc}") from exc

    syntax_errors = [
        error
        for error in captured
        if isinstance(error, PybtexSyntaxError) and not isinstance(error, UndefinedMacro)
    ]
    if syntax_errors:
        first = syntax_errors[0]
        raise BibliographyParseError(f"Failed to parse bibliography: {first}") from first

    parsed = ParsedBibliography(entries=parser.records, issues=parser.issues)
    for error in captured:
        parsed.issues.append(BibliographyIssue(message=str(error)))
    logger.debug(
        "Parsed %d entries (%d issue(s)).", len(parsed.entries), len(parsed.issues)
    )
    return parsed


__all__ = ["ParsedBibliography", "parse_bibliography"]
