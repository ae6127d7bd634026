"""Bibliography loading: preamble composition, parsing, and entry views."""

from __future__ import annotations

from .entries import (
    SUMMARY_DELIMITER,
    NormalizedEntry,
    RawEntry,
    normalize_entries,
    strformat,
    summarize_entry,
)
from .issues import BibliographyIssue
from .library import Bibliography, load_bibliography
from .parsing import ParsedBibliography, parse_bibliography
from .preamble import (
    TEXLIVE_BIB_PATTERN,
    ComposedBibliography,
    PreambleComposer,
    SharedTreeIndex,
    read_bibliography_file,
)


__all__ = [
    "SUMMARY_DELIMITER",
    "TEXLIVE_BIB_PATTERN",
    "Bibliography",
    "BibliographyIssue",
    "ComposedBibliography",
    "NormalizedEntry",
    "ParsedBibliography",
    "PreambleComposer",
    "RawEntry",
    "SharedTreeIndex",
    "load_bibliography",
    "normalize_entries",
    "parse_bibliography",
    "read_bibliography_file",
    "strformat",
    "summarize_entry",
]
