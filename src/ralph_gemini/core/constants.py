"""Shared path constants for the Ralph workspace layout."""

from __future__ import annotations

WORKSPACE_DIR = ".ralph"
SECONDARY_DIR = ".gemini"
CONFIG_FILENAME = "config.json"
VERSION_FILENAME = "version"
LAUNCHER_NAME = "ralph"

DISTRIBUTION_NAME = "ralph-gemini"

# Vendored subtrees, synchronized in this order.
ASSET_SUBTREES: tuple[str, ...] = ("lib", "scripts", "templates", "commands")
COMMANDS_SUBTREE = "commands"

TEMPLATE_ROOT_ENV = "RALPH_TEMPLATE_ROOT"

__all__ = [
    "ASSET_SUBTREES",
    "COMMANDS_SUBTREE",
    "CONFIG_FILENAME",
    "DISTRIBUTION_NAME",
    "LAUNCHER_NAME",
    "SECONDARY_DIR",
    "TEMPLATE_ROOT_ENV",
    "VERSION_FILENAME",
    "WORKSPACE_DIR",
]
