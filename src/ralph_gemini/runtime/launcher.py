"""The ``./ralph`` entry-point wrapper written into the project root."""

from __future__ import annotations

import logging
from pathlib import Path

from ralph_gemini.core.constants import WORKSPACE_DIR
from ralph_gemini.core.context import WorkspaceContext

logger = logging.getLogger(__name__)

LAUNCHER_TEMPLATE = """#!/bin/bash
# Ralph CLI wrapper
RALPH_DIR="{workspace_dir}"
exec "$RALPH_DIR/scripts/ralph.sh" "$@"
"""


def write_launcher(context: WorkspaceContext) -> Path:
    """Write the launcher (mode 0755), replacing any existing one."""
    path = context.launcher_path
    path.write_text(LAUNCHER_TEMPLATE.format(workspace_dir=WORKSPACE_DIR), encoding="utf-8")
    path.chmod(0o755)
    logger.info("Wrote launcher %s", path)
    return path


__all__ = ["LAUNCHER_TEMPLATE", "write_launcher"]
