from __future__ import annotations

import subprocess

import pytest

from bibfzf.core.actions import (
    ActionContext,
    ActionMenu,
    MenuState,
    OpenPdfAction,
    available_actions,
)
from bibfzf.core.bibliography import NormalizedEntry, RawEntry
from bibfzf.core.config import ActionCommands, BibfzfConfig
from bibfzf.core.launcher import CommandLauncher


class RecordingLauncher(CommandLauncher):
    def __init__(self) -> None:
        self.launched: list[tuple[str, str]] = []
        self.piped: list[tuple[str, str]] = []

    def launch(self, command: str, argument: str) -> bool:
        self.launched.append((command, argument))
        return True

    def pipe(self, command: str, text: str) -> bool:
        self.piped.append((command, text))
        return True


class RecordingEmitter:
    debug_enabled = False

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.events: list[tuple[str, dict]] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def event(self, name: str, payload) -> None:
        self.events.append((name, dict(payload)))


class ScriptedSelector:
    def __init__(self, *answers: int | None) -> None:
        self.answers = list(answers)
        self.calls: list[list[str]] = []

    def select(self, lines, *, preview=None, delimiter=None, prompt=None) -> int | None:
        self.calls.append(list(lines))
        return self.answers.pop(0)


def _entry(key: str = "doe2020", **fields: str) -> NormalizedEntry:
    return NormalizedEntry(RawEntry(key=key, entry_type="article", tags=tuple(fields.items())))


def _context(**config: object) -> tuple[ActionContext, RecordingLauncher, RecordingEmitter, list[str]]:
    launcher = RecordingLauncher()
    emitter = RecordingEmitter()
    output: list[str] = []
    context = ActionContext(
        config=BibfzfConfig(**config),
        launcher=launcher,
        emitter=emitter,
        echo=output.append,
    )
    return context, launcher, emitter, output


def test_menu_without_links_offers_only_copy_actions() -> None:
    labels = [action.label for action in available_actions(_entry(title="T"))]

    assert labels == ["Copy key", "Copy \\cite"]


def test_menu_with_all_links_offers_every_action_in_order() -> None:
    entry = _entry(File="paper:/tmp/x.pdf:PDF", DOI="10.1/abc", Url="https://example.org")

    labels = [action.label for action in available_actions(entry)]

    assert labels == ["Open PDF", "Open URL", "Open DOI", "Copy key", "Copy \\cite"]


def test_open_pdf_rejects_unstructured_file_field() -> None:
    context, launcher, emitter, _ = _context()

    OpenPdfAction().execute(_entry(file="desc"), context)

    assert launcher.launched == []
    assert emitter.warnings == ["'file' field not recognized"]


def test_open_pdf_launches_viewer_with_path_segment() -> None:
    context, launcher, emitter, _ = _context(actions=ActionCommands(open_pdf="zathura"))

    OpenPdfAction().execute(_entry(file="desc:/tmp/x.pdf:PDF"), context)

    assert launcher.launched == [("zathura", "/tmp/x.pdf")]
    assert emitter.warnings == []


def test_open_pdf_reports_missing_field() -> None:
    context, launcher, emitter, _ = _context()

    OpenPdfAction().execute(_entry(), context)

    assert launcher.launched == []
    assert emitter.warnings == ["No PDF in entry doe2020"]


@pytest.mark.parametrize(
    ("fields", "label", "expected"),
    [
        ({"doi": "10.1000/182"}, "Open DOI", ("open", "https://dx.doi.org/10.1000/182")),
        ({"url": "https://example.org/a b"}, "Open URL", ("open", "https://example.org/a b")),
    ],
)
def test_link_actions_pass_raw_values(fields: dict[str, str], label: str, expected) -> None:
    context, launcher, _, _ = _context()
    entry = _entry(**fields)
    menu = ActionMenu(entry)
    labels = [action.label for action in menu.build()]

    menu.dispatch(labels.index(label), context)

    assert launcher.launched == [expected]


def test_copy_actions_print_by_default() -> None:
    context, launcher, _, output = _context()
    entry = _entry()
    menu = ActionMenu(entry)
    menu.build()

    menu.dispatch(0, context)
    menu.build()
    menu.dispatch(1, context)

    assert output == ["doe2020", "\\cite{doe2020}"]
    assert launcher.piped == []


def test_copy_actions_pipe_into_clipboard_when_enabled() -> None:
    context, launcher, _, output = _context(clipboard=True)
    menu = ActionMenu(_entry())
    menu.build()

    menu.dispatch(1, context)

    assert output == ["\\cite{doe2020}"]
    assert launcher.piped == [("pbcopy", "\\cite{doe2020}")]


def test_menu_state_transitions() -> None:
    context, _, emitter, _ = _context()
    menu = ActionMenu(_entry())
    assert menu.state is MenuState.IDLE

    menu.build()
    assert menu.state is MenuState.MENU_BUILT

    action = menu.dispatch(0, context)
    assert action is not None and action.label == "Copy key"
    assert menu.state is MenuState.IDLE
    assert emitter.events == [("action_dispatch", {"action": "Copy key", "key": "doe2020"})]


def test_menu_cancel_has_no_side_effects() -> None:
    context, launcher, _, output = _context()
    menu = ActionMenu(_entry(url="https://example.org"))
    menu.build()

    assert menu.dispatch(None, context) is None
    assert menu.state is MenuState.IDLE
    assert launcher.launched == []
    assert output == []


def test_dispatch_requires_built_menu() -> None:
    context, _, _, _ = _context()

    with pytest.raises(RuntimeError):
        ActionMenu(_entry()).dispatch(0, context)


def test_menu_run_presents_labels_without_preview() -> None:
    context, launcher, _, _ = _context()
    selector = ScriptedSelector(0)

    action = ActionMenu(_entry(url="https://example.org")).run(selector, context)

    assert action is not None and action.label == "Open URL"
    assert selector.calls == [["Open URL", "Copy key", "Copy \\cite"]]
    assert launcher.launched == [("open", "https://example.org")]


def test_launcher_ignores_spawn_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(*args, **kwargs):
        raise FileNotFoundError("no such opener")

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert CommandLauncher().launch("missing-opener", "/tmp/x.pdf") is False
    assert CommandLauncher().pipe("missing-clipboard", "text") is False


def test_launcher_ignores_non_zero_exit(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[list[str], object]] = []

    def fake_run(argv, **kwargs):
        calls.append((argv, kwargs.get("input")))
        return subprocess.CompletedProcess(argv, 3)

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert CommandLauncher().launch("xdg-open --new", "https://example.org") is False
    assert calls == [(["xdg-open", "--new", "https://example.org"], None)]


def test_launcher_pipes_text(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[list[str], object]] = []

    def fake_run(argv, **kwargs):
        calls.append((argv, kwargs.get("input")))
        return subprocess.CompletedProcess(argv, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert CommandLauncher().pipe("pbcopy", "doe2020") is True
    assert calls == [(["pbcopy"], "doe2020")]
