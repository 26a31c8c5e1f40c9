"""Install command implementation for the Ralph CLI."""

from __future__ import annotations

import typer

from ralph_gemini.cli.banner import (
    DISCLAIMER_CHOICES,
    show_banner,
    show_disclaimer,
    show_next_steps,
    show_setup_instructions,
)
from ralph_gemini.cli.helpers import (
    build_context,
    build_probe,
    build_prompter,
    console,
    render_sync_summary,
)
from ralph_gemini.lifecycle import LifecycleController, Outcome


def install() -> None:
    """Install Ralph Gemini in the current project.

    Asks for the execution environment, default model and GitHub identity,
    copies the core files into .ralph/ and .gemini/commands/, and writes
    the ./ralph launcher.
    """
    show_banner(console)
    show_disclaimer(console)

    prompter = build_prompter()
    accepted = prompter.select("Do you accept the terms above?", DISCLAIMER_CHOICES, default="yes")
    if accepted != "yes":
        console.print("[dim]Installation cancelled.[/dim]")
        return

    context = build_context()
    controller = LifecycleController(context, prompter, build_probe(), console=console)
    result = controller.install()

    if result.outcome is Outcome.CANCELLED:
        return

    render_sync_summary(result, context, "Core files")

    if result.record is not None and result.error is None:
        console.print(f"[green]  version {result.record.schema_version}[/green]")
        console.print("[green]  config.json created[/green]")
        console.print("[green]  ralph wrapper created[/green]")
        show_setup_instructions(console, result.record.default_model)

    if result.outcome is Outcome.FINALIZED:
        console.print("\n[bold green]RALPH GEMINI INSTALLED![/bold green]\n")
        show_next_steps(console)
    else:
        console.print("[bold red]Installation incomplete.[/bold red]")
        raise typer.Exit(result.exit_code)


__all__ = ["install"]
