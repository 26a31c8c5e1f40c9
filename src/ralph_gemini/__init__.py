"""
Ralph Gemini CLI - installs and updates the Ralph autonomous development
workspace (.ralph/) in a project.

Usage:
    ralph-gemini install
    ralph-gemini update
    ralph-gemini --version
"""

from typing import Optional

import typer
from typer.core import TyperGroup

from ralph_gemini.cli.banner import show_banner
from ralph_gemini.cli.commands.install import install
from ralph_gemini.cli.commands.update import update
from ralph_gemini.cli.helpers import console
from ralph_gemini.runtime.version import get_version

__version__ = get_version()


class BannerGroup(TyperGroup):
    """Custom group that shows banner before help."""

    def format_help(self, ctx, formatter):
        show_banner(console)
        super().format_help(ctx, formatter)


app = typer.Typer(
    name="ralph-gemini",
    help="AI-driven autonomous development workflow for Gemini CLI and Antigravity",
    add_completion=False,
    invoke_without_command=True,
    cls=BannerGroup,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"ralph-gemini {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Show usage hint when no subcommand is provided."""
    if ctx.invoked_subcommand is None:
        console.print("[dim]Run 'ralph-gemini --help' for usage information[/dim]")


app.command(help="Install Ralph Gemini in current project")(install)
app.command(help="Update core files, preserve config")(update)


def main():
    app()


if __name__ == "__main__":
    main()
