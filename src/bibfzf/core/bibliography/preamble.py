"""Composition of the text handed to the BibTeX parser."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
import glob
import logging
from pathlib import Path

from ..diagnostics import DiagnosticEmitter, NullEmitter
from ..exceptions import BibliographyReadError
from .issues import BibliographyIssue


logger = logging.getLogger(__name__)

TEXLIVE_BIB_PATTERN = "*/texmf-dist/bibtex/bib/**/*.bib"


def read_bibliography_file(path: Path | str) -> str:
    """Return the text of ``path``, raising :class:`BibliographyReadError` on failure."""
    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BibliographyReadError(file_path, str(exc)) from exc


class SharedTreeIndex:
    """File name to path index over a shared bibliography tree.

    When two files share a name, whichever the directory walk yields last is
    kept; no further ordering is imposed.
    """

    def __init__(self, paths: Mapping[str, Path] | None = None) -> None:
        self._paths: dict[str, Path] = dict(paths or {})

    @classmethod
    def scan(cls, root: Path | str, pattern: str = TEXLIVE_BIB_PATTERN) -> SharedTreeIndex:
        """Recursively glob ``pattern`` below ``root`` and index the matches by name."""
        root_path = Path(root).expanduser()
        search = str(root_path / pattern)
        paths: dict[str, Path] = {}
        for match in glob.iglob(search, recursive=True):
            candidate = Path(match)
            if candidate.is_file():
                paths[candidate.name] = candidate
        logger.debug("Indexed %d bibliography file(s) under %s", len(paths), root_path)
        return cls(paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, name: object) -> bool:
        return name in self._paths

    def lookup(self, name: str) -> Path | None:
        return self._paths.get(name)


@dataclass(slots=True)
class ComposedBibliography:
    """Parser input and the fragments that went into it, in order."""

    text: str
    sources: list[Path] = field(default_factory=list)
    issues: list[BibliographyIssue] = field(default_factory=list)


class PreambleComposer:
    """Concatenate builtin definitions, preamble files, and the target file.

    Absolute preamble paths are read directly; other names are resolved in the
    shared tree, which is scanned lazily on the first such lookup. Names that
    cannot be resolved are reported and skipped. Read failures on explicitly
    addressed files are fatal.
    """

    def __init__(
        self,
        preamble: str,
        preamble_files: Iterable[str] = (),
        *,
        shared_root: Path | str | None = None,
        shared_index: SharedTreeIndex | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.preamble = preamble
        self.preamble_files = list(preamble_files)
        self.shared_root = Path(shared_root) if shared_root is not None else None
        self._shared_index = shared_index
        self._emitter = emitter or NullEmitter()

    @property
    def shared_index(self) -> SharedTreeIndex:
        if self._shared_index is None:
            if self.shared_root is None:
                self._shared_index = SharedTreeIndex()
            else:
                self._shared_index = SharedTreeIndex.scan(self.shared_root)
                self._emitter.event(
                    "shared_tree_scan",
                    {"root": str(self.shared_root), "count": len(self._shared_index)},
                )
        return self._shared_index

    def resolve(self, identifier: str) -> Path | None:
        """Return the path for a preamble identifier, or ``None`` when unknown."""
        candidate = Path(identifier).expanduser()
        if candidate.is_absolute():
            return candidate
        return self.shared_index.lookup(identifier)

    def compose(self, target: Path | str) -> ComposedBibliography:
        fragments = [self.preamble]
        sources: list[Path] = []
        issues: list[BibliographyIssue] = []

        for identifier in self.preamble_files:
            path = self.resolve(identifier)
            if path is None:
                message = f"Couldn't locate: {identifier}"
                issues.append(BibliographyIssue(message=message))
                self._emitter.warning(message)
                continue
            fragments.append(read_bibliography_file(path))
            sources.append(path)

        target_path = Path(target)
        fragments.append(read_bibliography_file(target_path))
        sources.append(target_path)

        return ComposedBibliography(text="\n".join(fragments), sources=sources, issues=issues)


__all__ = [
    "TEXLIVE_BIB_PATTERN",
    "ComposedBibliography",
    "PreambleComposer",
    "SharedTreeIndex",
    "read_bibliography_file",
]
