"""Configuration models for bibfzf.

The configuration file is TOML, read from ``~/.bibfzf.conf`` unless another
path is given on the command line. Every key is optional; values found in the
file replace the built-in defaults below.

BibfzfConfig

`preamble` (`str`)
: BibTeX text prepended to every parse. Defaults to ``@String`` definitions for
  the English month abbreviations so entries may use ``month = jan``.

`preamble_files` (`list[str]`)
: Additional BibTeX fragments parsed before the target file. Absolute paths are
  read directly; bare file names are looked up in the TeX Live tree.

`texlive_path` (`Path`)
: Root of the TeX Live installation searched for shared ``.bib`` files
  (``<texlive_path>/*/texmf-dist/bibtex/bib/**/*.bib``).

`clipboard` (`bool`)
: When `True`, the copy actions also pipe their text into the configured
  clipboard command. By default they only print.

`selector` (`str`)
: Executable used for the interactive list (``fzf`` by default).

ActionCommands (``[actions]`` table)

`open_pdf`, `open_doi`, `open_url` (`str`)
: Commands receiving a file path or URL as their single argument.

`copy_key`, `copy_cite` (`str`)
: Clipboard commands receiving text on standard input.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any


try:  # Python >=3.11
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.10
    import tomli as tomllib

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError


logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".bibfzf.conf"

MONTH_NAMES = (
    ("jan", "January"),
    ("feb", "February"),
    ("mar", "March"),
    ("apr", "April"),
    ("may", "May"),
    ("jun", "June"),
    ("jul", "July"),
    ("aug", "August"),
    ("sep", "September"),
    ("oct", "October"),
    ("nov", "November"),
    ("dec", "December"),
)

DEFAULT_PREAMBLE = "\n".join(f'@String {{ {abbr} = "{name}" }}' for abbr, name in MONTH_NAMES)

DEFAULT_TEXLIVE_PATH = Path("/usr/local/texlive")


class ActionCommands(BaseModel):
    """External commands bound to the entry actions."""

    model_config = ConfigDict(extra="ignore")

    open_pdf: str = "open"
    open_doi: str = "open"
    open_url: str = "open"
    copy_cite: str = "pbcopy"
    copy_key: str = "pbcopy"


class BibfzfConfig(BaseModel):
    """Resolved runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    preamble: str = DEFAULT_PREAMBLE
    preamble_files: list[str] = Field(default_factory=list)
    texlive_path: Path = DEFAULT_TEXLIVE_PATH
    clipboard: bool = False
    selector: str = "fzf"
    actions: ActionCommands = Field(default_factory=ActionCommands)


def default_config_path() -> Path:
    """Return the configuration path used when none is supplied."""
    return Path(os.path.expanduser("~")) / CONFIG_FILENAME


def load_config(path: Path | str | None = None) -> BibfzfConfig:
    """Overlay the TOML file at ``path`` onto the built-in defaults.

    A missing file yields the defaults unchanged. Malformed TOML or values of
    the wrong type raise :class:`ConfigError`.
    """
    config_path = Path(path).expanduser() if path is not None else default_config_path()
    if not config_path.exists():
        logger.debug("No configuration file at %s, using defaults.", config_path)
        return BibfzfConfig()

    try:
        payload = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration {config_path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid configuration {config_path}: {exc}") from exc

    _log_unknown_keys(payload, config_path)

    try:
        config = BibfzfConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration {config_path}: {exc}") from exc

    logger.debug("Loaded configuration from %s", config_path)
    return config


def _log_unknown_keys(payload: dict[str, Any], source: Path) -> None:
    known = set(BibfzfConfig.model_fields)
    for key in sorted(set(payload) - known):
        logger.debug("Ignoring unknown configuration key '%s' in %s", key, source)

    actions = payload.get("actions")
    if isinstance(actions, dict):
        known_actions = set(ActionCommands.model_fields)
        for key in sorted(set(actions) - known_actions):
            logger.debug("Ignoring unknown action 'actions.%s' in %s", key, source)


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_PREAMBLE",
    "DEFAULT_TEXLIVE_PATH",
    "ActionCommands",
    "BibfzfConfig",
    "default_config_path",
    "load_config",
]
