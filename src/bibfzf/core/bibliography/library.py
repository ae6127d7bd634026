"""Loading a bibliography end to end: compose, parse, normalise."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config import BibfzfConfig
from ..diagnostics import DiagnosticEmitter, NullEmitter
from .entries import NormalizedEntry, normalize_entries, summarize_entry
from .issues import BibliographyIssue
from .parsing import parse_bibliography
from .preamble import PreambleComposer, SharedTreeIndex


@dataclass(slots=True)
class Bibliography:
    """Normalised entries of one bibliography file, in parse order."""

    entries: list[NormalizedEntry] = field(default_factory=list)
    issues: list[BibliographyIssue] = field(default_factory=list)
    sources: list[Path] = field(default_factory=list)

    def find(self, key: str) -> NormalizedEntry | None:
        """Return the first entry whose citation key equals ``key`` exactly."""
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def summaries(self) -> list[str]:
        return [summarize_entry(entry) for entry in self.entries]


def load_bibliography(
    target: Path | str,
    config: BibfzfConfig,
    *,
    emitter: DiagnosticEmitter | None = None,
    shared_index: SharedTreeIndex | None = None,
) -> Bibliography:
    """Compose the preamble for ``target``, parse it, and normalise every entry."""
    emitter = emitter or NullEmitter()
    composer = PreambleComposer(
        config.preamble,
        config.preamble_files,
        shared_root=config.texlive_path,
        shared_index=shared_index,
        emitter=emitter,
    )
    composed = composer.compose(target)
    parsed = parse_bibliography(composed.text)
    for issue in parsed.issues:
        emitter.warning(issue.message)

    return Bibliography(
        entries=normalize_entries(parsed.entries),
        issues=[*composed.issues, *parsed.issues],
        sources=composed.sources,
    )


__all__ = ["Bibliography", "load_bibliography"]
