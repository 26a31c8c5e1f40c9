"""Shared wiring for the install and update commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from ralph_gemini.cli.prompts import ConsolePrompter
from ralph_gemini.cli.ui import StepTracker
from ralph_gemini.core.context import WorkspaceContext
from ralph_gemini.core.probe import ShellToolProbe, ToolProbe
from ralph_gemini.lifecycle import LifecycleResult
from ralph_gemini.lifecycle.configure import Prompter

console = Console()


def build_context() -> WorkspaceContext:
    """Resolve the workspace for the current directory, or exit with an error."""
    try:
        return WorkspaceContext.from_environment(Path.cwd())
    except FileNotFoundError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)


def build_prompter() -> Prompter:
    return ConsolePrompter(console)


def build_probe() -> ToolProbe:
    return ShellToolProbe()


def _display_path(path: Path | None, root: Path) -> str:
    if path is None:
        return "?"
    try:
        return f"{path.relative_to(root).as_posix()}/"
    except ValueError:
        return str(path)


def render_sync_summary(result: LifecycleResult, context: WorkspaceContext, title: str) -> None:
    """Print one tree line per synchronized, skipped or failed subtree."""
    if not result.synced and not result.failures:
        return

    tracker = StepTracker(title)
    for item in result.synced:
        key = _display_path(item.destination, context.project_root)
        tracker.add(key, key)
        if item.skipped:
            tracker.skip(key, "not shipped")
        else:
            tracker.complete(key, f"{item.item_count} files")
    for failure in result.failures:
        key = _display_path(failure.destination, context.project_root)
        tracker.add(key, key)
        tracker.error(key, str(failure.cause))

    console.print(tracker.render())

    if result.failures:
        names = ", ".join(f"{failure.subtree}/" for failure in result.failures)
        console.print(f"[red]Sync failed for:[/red] {names}")
        console.print("[dim]Fix the problem and run the command again.[/dim]")


__all__ = [
    "build_context",
    "build_probe",
    "build_prompter",
    "console",
    "render_sync_summary",
]
