"""Banner, disclaimer and setup text printed around install/update."""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.text import Text

from ralph_gemini.core.config import DefaultModel

BANNER = """
██████╗  █████╗ ██╗     ██████╗ ██╗  ██╗
██╔══██╗██╔══██╗██║     ██╔══██╗██║  ██║
██████╔╝███████║██║     ██████╔╝███████║
██╔══██╗██╔══██║██║     ██╔═══╝ ██╔══██║
██║  ██║██║  ██║███████╗██║     ██║  ██║
╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝╚═╝     ╚═╝  ╚═╝
"""

EDITION = "G E M I N I   E D I T I O N"
TAGLINE = "Build while you sleep. Wake to working code"

DISCLAIMER = """
[yellow]DISCLAIMER
------------------------------------------------------------

Ralph Gemini runs AI-driven autonomous code.[/yellow]

[red]ALWAYS RUN RALPH IN AN EXTERNAL SANDBOX ENVIRONMENT!
Use a disposable VM that can be destroyed if something goes wrong.
NEVER run Ralph directly on your local machine.[/red]

[yellow]- YOU are fully responsible for all actions performed
- Review generated code before running in production
- NEVER store sensitive credentials in code or config
- Ralph can make mistakes - monitor and verify results

By continuing, you accept full responsibility for usage.
------------------------------------------------------------[/yellow]
"""

DISCLAIMER_CHOICES = {
    "yes": "Yes, I understand and accept",
    "no": "No, cancel installation",
}

SETUP_INSTRUCTIONS: dict[DefaultModel, str] = {
    DefaultModel.PROVIDER_A: """
------------------------------------------------------------
  Gemini CLI Setup
------------------------------------------------------------

  After VM is created, ensure Gemini CLI is installed:

    npm install -g @google/gemini-cli

  Authenticate:

    gemini auth login
------------------------------------------------------------
""",
    DefaultModel.PROVIDER_B: """
------------------------------------------------------------
  Claude via Antigravity Setup
------------------------------------------------------------

  After VM is created, ensure Antigravity is installed
  and set your API key:

    export ANTHROPIC_API_KEY="sk-ant-..."

  Add to ~/.bashrc for persistence.
------------------------------------------------------------
""",
}


def show_banner(console: Console) -> None:
    """Display the ASCII art banner."""
    styled = Text(BANNER.strip("\n") + "\n", style="bright_blue")
    console.print(Align.center(styled))
    console.print(Align.center(Text(EDITION, style="bold yellow")))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


def show_disclaimer(console: Console) -> None:
    console.print(DISCLAIMER)


def show_setup_instructions(console: Console, model: DefaultModel) -> None:
    text = SETUP_INSTRUCTIONS.get(model)
    if text:
        console.print(f"[cyan]{text}[/cyan]")


def show_next_steps(console: Console) -> None:
    console.print("[cyan]Next steps:[/cyan]")
    console.print("[dim]  1. Run /ralph:discover in Gemini CLI to set up your project[/dim]")
    console.print("[dim]  2. Or run: ./ralph --help[/dim]")
    console.print()


__all__ = [
    "BANNER",
    "DISCLAIMER",
    "DISCLAIMER_CHOICES",
    "SETUP_INSTRUCTIONS",
    "show_banner",
    "show_disclaimer",
    "show_next_steps",
    "show_setup_instructions",
]
