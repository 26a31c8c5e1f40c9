"""CLI command modules for ralph-gemini.

Each module exposes one command function; the Typer app in
``ralph_gemini`` registers them.
"""

__all__: list[str] = []
