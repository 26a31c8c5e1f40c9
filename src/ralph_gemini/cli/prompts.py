"""Terminal implementation of the install questionnaire's Prompter."""

from __future__ import annotations

from collections.abc import Mapping

import typer
from rich.console import Console

from ralph_gemini.cli.ui import select_with_arrows


class ConsolePrompter:
    """Arrow-key choice lists plus typer text and yes/no prompts."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select(self, message: str, choices: Mapping[str, str], default: str | None = None) -> str:
        return select_with_arrows(choices, prompt_text=message, default_key=default, console=self.console)

    def text(self, message: str, default: str = "") -> str:
        return typer.prompt(message, default=default, show_default=bool(default))

    def confirm(self, message: str, default: bool = False) -> bool:
        return typer.confirm(message, default=default)


__all__ = ["ConsolePrompter"]
