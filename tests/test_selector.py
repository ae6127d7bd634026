from __future__ import annotations

import subprocess

import pytest

from bibfzf.core.exceptions import SelectorError, SelectorUnavailableError
from bibfzf.ui.cli import selector as selector_module
from bibfzf.ui.cli.selector import FzfSelector


def _fake_run(returncode: int, stdout: str, calls: list[dict]):
    def fake_run(argv, **kwargs):
        calls.append({"argv": argv, **kwargs})
        return subprocess.CompletedProcess(argv, returncode, stdout=stdout)

    return fake_run


def test_build_command_escapes_delimiter_and_adds_preview() -> None:
    command = FzfSelector().build_command(preview="show {1}", delimiter="|", prompt="> ")

    assert command == [
        "fzf",
        "--no-multi",
        "--delimiter",
        "\\|",
        "--preview",
        "show {1}",
        "--prompt",
        "> ",
    ]


def test_select_returns_index_of_chosen_line(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(selector_module.subprocess, "run", _fake_run(0, "b | Second -  - \n", calls))

    index = FzfSelector().select(["a | First -  - ", "b | Second -  - "], delimiter="|")

    assert index == 1
    assert calls[0]["input"] == "a | First -  - \nb | Second -  - "
    assert calls[0]["argv"][:2] == ["fzf", "--no-multi"]


@pytest.mark.parametrize("returncode", [1, 130])
def test_select_returns_none_when_cancelled(monkeypatch: pytest.MonkeyPatch, returncode: int) -> None:
    monkeypatch.setattr(selector_module.subprocess, "run", _fake_run(returncode, "", []))

    assert FzfSelector().select(["Copy key"]) is None


def test_select_skips_empty_input(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(selector_module.subprocess, "run", _fake_run(0, "", calls))

    assert FzfSelector().select([]) is None
    assert calls == []


def test_select_reports_missing_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(*args, **kwargs):
        raise FileNotFoundError("fzf")

    monkeypatch.setattr(selector_module.subprocess, "run", fake_run)

    with pytest.raises(SelectorUnavailableError, match="'sk' not found"):
        FzfSelector("sk").select(["line"])


def test_select_reports_selector_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(selector_module.subprocess, "run", _fake_run(2, "", []))

    with pytest.raises(SelectorError, match="status 2"):
        FzfSelector().select(["line"])
