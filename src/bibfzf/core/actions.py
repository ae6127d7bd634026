"""Entry actions and the menu that dispatches them."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .bibliography.entries import NormalizedEntry
from .config import BibfzfConfig
from .diagnostics import DiagnosticEmitter, NullEmitter
from .launcher import CommandLauncher
from .selection import LineSelector


DOI_RESOLVER = "https://dx.doi.org/"


@dataclass(slots=True)
class ActionContext:
    """Collaborators available to an action while it runs."""

    config: BibfzfConfig
    launcher: CommandLauncher = field(default_factory=CommandLauncher)
    emitter: DiagnosticEmitter = field(default_factory=NullEmitter)
    echo: Callable[[str], None] = print


class EntryAction:
    """An action offered when ``required_field`` is present in the entry.

    An empty ``required_field`` makes the action always available. Each
    action re-checks its own preconditions before touching the entry.
    """

    label: str = ""
    required_field: str = ""

    def available(self, entry: NormalizedEntry) -> bool:
        return not self.required_field or entry.has(self.required_field)

    def execute(self, entry: NormalizedEntry, context: ActionContext) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self.label!r})"


class OpenPdfAction(EntryAction):
    """Open the attachment stored as ``description:path:type`` in ``file``."""

    label = "Open PDF"
    required_field = "file"

    def execute(self, entry: NormalizedEntry, context: ActionContext) -> None:
        value = entry.get(self.required_field)
        if value is None:
            context.emitter.warning(f"No PDF in entry {entry.key}")
            return
        segments = value.split(":")
        if len(segments) < 3:
            context.emitter.warning("'file' field not recognized")
            return
        context.launcher.launch(context.config.actions.open_pdf, segments[1])


class OpenUrlAction(EntryAction):
    label = "Open URL"
    required_field = "url"

    def execute(self, entry: NormalizedEntry, context: ActionContext) -> None:
        value = entry.get(self.required_field)
        if value is None:
            context.emitter.warning(f"No URL in entry {entry.key}")
            return
        context.launcher.launch(context.config.actions.open_url, value)


class OpenDoiAction(EntryAction):
    label = "Open DOI"
    required_field = "doi"

    def execute(self, entry: NormalizedEntry, context: ActionContext) -> None:
        value = entry.get(self.required_field)
        if value is None:
            context.emitter.warning(f"No DOI in entry {entry.key}")
            return
        context.launcher.launch(context.config.actions.open_doi, f"{DOI_RESOLVER}{value}")


class CopyKeyAction(EntryAction):
    label = "Copy key"

    def execute(self, entry: NormalizedEntry, context: ActionContext) -> None:
        _copy(entry.key, context.config.actions.copy_key, context)


class CopyCiteAction(EntryAction):
    label = "Copy \\cite"

    def execute(self, entry: NormalizedEntry, context: ActionContext) -> None:
        _copy(f"\\cite{{{entry.key}}}", context.config.actions.copy_cite, context)


def _copy(text: str, command: str, context: ActionContext) -> None:
    context.echo(text)
    if context.config.clipboard:
        context.launcher.pipe(command, text)


ACTIONS: tuple[EntryAction, ...] = (
    OpenPdfAction(),
    OpenUrlAction(),
    OpenDoiAction(),
    CopyKeyAction(),
    CopyCiteAction(),
)


def available_actions(
    entry: NormalizedEntry, actions: Sequence[EntryAction] = ACTIONS
) -> list[EntryAction]:
    """Return the actions whose required field is present, in table order."""
    return [action for action in actions if action.available(entry)]


class MenuState(Enum):
    IDLE = "idle"
    MENU_BUILT = "menu-built"
    DISPATCHED = "dispatched"


class ActionMenu:
    """Build the action list for one entry and run the chosen action."""

    def __init__(self, entry: NormalizedEntry, actions: Sequence[EntryAction] = ACTIONS) -> None:
        self.entry = entry
        self._actions = tuple(actions)
        self._choices: list[EntryAction] = []
        self.state = MenuState.IDLE

    @property
    def choices(self) -> list[EntryAction]:
        return list(self._choices)

    def build(self) -> list[EntryAction]:
        self._choices = available_actions(self.entry, self._actions)
        self.state = MenuState.MENU_BUILT
        return self.choices

    def dispatch(self, index: int | None, context: ActionContext) -> EntryAction | None:
        """Run the action at ``index``; ``None`` cancels without side effects."""
        if self.state is not MenuState.MENU_BUILT:
            raise RuntimeError("Action menu must be built before dispatching.")
        if index is None:
            self.state = MenuState.IDLE
            return None

        action = self._choices[index]
        self.state = MenuState.DISPATCHED
        context.emitter.event("action_dispatch", {"action": action.label, "key": self.entry.key})
        try:
            action.execute(self.entry, context)
        finally:
            self.state = MenuState.IDLE
        return action

    def run(self, selector: LineSelector, context: ActionContext) -> EntryAction | None:
        choices = self.build()
        index = selector.select([action.label for action in choices], prompt="Action> ")
        return self.dispatch(index, context)


__all__ = [
    "ACTIONS",
    "DOI_RESOLVER",
    "ActionContext",
    "ActionMenu",
    "CopyCiteAction",
    "CopyKeyAction",
    "EntryAction",
    "MenuState",
    "OpenDoiAction",
    "OpenPdfAction",
    "OpenUrlAction",
    "available_actions",
]
