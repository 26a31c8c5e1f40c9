"""Update command implementation for the Ralph CLI."""

from __future__ import annotations

import typer

from ralph_gemini.cli.helpers import (
    build_context,
    build_probe,
    build_prompter,
    console,
    render_sync_summary,
)
from ralph_gemini.lifecycle import LifecycleController, Outcome


def update() -> None:
    """Update core files, preserve config.

    Every core directory is replaced from this release; only the version
    stored in .ralph/config.json changes.
    """
    console.print("[cyan]\nRalph Gemini Update\n[/cyan]")

    context = build_context()
    controller = LifecycleController(context, build_prompter(), build_probe(), console=console)
    result = controller.update()

    if result.outcome is Outcome.NOT_INSTALLED:
        return

    render_sync_summary(result, context, "Updating core files")

    if result.outcome is Outcome.FINALIZED:
        console.print("[green]  config.json preserved[/green]")
        console.print(f"\n[bold green]  Update complete! (v{result.record.schema_version})[/bold green]\n")
    else:
        console.print("[bold red]Update failed.[/bold red]")
        raise typer.Exit(result.exit_code)


__all__ = ["update"]
