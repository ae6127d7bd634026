"""Primary public API for bibfzf."""

from __future__ import annotations

from bibfzf.core.actions import (
    ACTIONS,
    ActionContext,
    ActionMenu,
    EntryAction,
    MenuState,
    available_actions,
)
from bibfzf.core.bibliography import (
    Bibliography,
    BibliographyIssue,
    NormalizedEntry,
    PreambleComposer,
    RawEntry,
    SharedTreeIndex,
    load_bibliography,
    parse_bibliography,
    strformat,
    summarize_entry,
)
from bibfzf.core.config import ActionCommands, BibfzfConfig, load_config
from bibfzf.core.exceptions import (
    BibfzfError,
    BibliographyParseError,
    BibliographyReadError,
    ConfigError,
    SelectorError,
    SelectorUnavailableError,
)
from bibfzf.core.launcher import CommandLauncher
from bibfzf.version import get_version


__version__ = get_version()

__all__ = [
    "ACTIONS",
    "ActionCommands",
    "ActionContext",
    "ActionMenu",
    "BibfzfConfig",
    "BibfzfError",
    "Bibliography",
    "BibliographyIssue",
    "BibliographyParseError",
    "BibliographyReadError",
    "CommandLauncher",
    "ConfigError",
    "EntryAction",
    "MenuState",
    "NormalizedEntry",
    "PreambleComposer",
    "RawEntry",
    "SelectorError",
    "SelectorUnavailableError",
    "SharedTreeIndex",
    "__version__",
    "available_actions",
    "get_version",
    "load_bibliography",
    "load_config",
    "parse_bibliography",
    "strformat",
    "summarize_entry",
]
