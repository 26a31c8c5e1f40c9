"""Tests for the arrow-key selector, StepTracker and ConsolePrompter."""

from __future__ import annotations

import io
from unittest.mock import patch

import pytest
import typer
from rich.console import Console

from ralph_gemini.cli.prompts import ConsolePrompter
from ralph_gemini.cli.ui import StepTracker, select_with_arrows

OPTIONS = {"vm-managed": "GCP VM", "ssh": "Self-hosted VM", "none": "Skip"}


def quiet_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False)


def test_select_returns_default_on_enter() -> None:
    with patch("ralph_gemini.cli.ui.get_key", side_effect=["enter"]):
        assert select_with_arrows(OPTIONS, "Pick", default_key="ssh", console=quiet_console()) == "ssh"


def test_select_moves_with_arrows_and_wraps() -> None:
    with patch("ralph_gemini.cli.ui.get_key", side_effect=["up", "enter"]):
        assert select_with_arrows(OPTIONS, "Pick", default_key="vm-managed", console=quiet_console()) == "none"
    with patch("ralph_gemini.cli.ui.get_key", side_effect=["down", "down", "enter"]):
        assert select_with_arrows(OPTIONS, "Pick", console=quiet_console()) == "none"


@pytest.mark.parametrize("keys", [["escape"], [KeyboardInterrupt()]])
def test_select_cancel_exits(keys) -> None:
    with patch("ralph_gemini.cli.ui.get_key", side_effect=keys):
        with pytest.raises(typer.Exit) as exc_info:
            select_with_arrows(OPTIONS, "Pick", console=quiet_console())
    assert exc_info.value.exit_code == 1


def test_step_tracker_render() -> None:
    tracker = StepTracker("Core files")
    tracker.add(".ralph/lib/", ".ralph/lib/")
    tracker.add(".ralph/templates/", ".ralph/templates/")
    tracker.complete(".ralph/lib/", "1 files")
    tracker.error(".ralph/scripts/", "denied")
    tracker.skip(".ralph/templates/", "not shipped")

    console = quiet_console()
    console.print(tracker.render())
    output = console.file.getvalue()

    assert "Core files" in output
    assert ".ralph/lib/ (1 files)" in output
    assert ".ralph/scripts/ (denied)" in output
    assert [step["status"] for step in tracker.steps] == ["done", "skipped", "error"]


class TestConsolePrompter:
    def test_select_delegates_to_arrow_selector(self) -> None:
        console = quiet_console()
        with patch("ralph_gemini.cli.prompts.select_with_arrows", return_value="ssh") as selector:
            assert ConsolePrompter(console).select("Where?", OPTIONS, default="none") == "ssh"
        selector.assert_called_once_with(OPTIONS, prompt_text="Where?", default_key="none", console=console)

    def test_text_and_confirm_use_typer(self) -> None:
        prompter = ConsolePrompter(quiet_console())
        with patch("typer.prompt", return_value="octocat") as prompt:
            assert prompter.text("GitHub username?", default="") == "octocat"
        prompt.assert_called_once_with("GitHub username?", default="", show_default=False)

        with patch("typer.confirm", return_value=True) as confirm:
            assert prompter.confirm("Reinstall?") is True
        confirm.assert_called_once_with("Reinstall?", default=False)
