"""Probing for auxiliary command-line tools (gcloud, docker, gh)."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Protocol

logger = logging.getLogger(__name__)

# command -> install hint shown when the command is missing
TOOL_INSTALL_HINTS: dict[str, str] = {
    "gcloud": "Install with: brew install --cask google-cloud-sdk",
    "docker": "Install Docker Desktop from docker.com",
    "gh": "Install the GitHub CLI from cli.github.com",
}


class ToolProbe(Protocol):
    """Answers questions about helper CLIs installed on this machine."""

    def is_available(self, command: str) -> bool: ...

    def detect_identity(self) -> str | None: ...


class ShellToolProbe:
    """ToolProbe backed by ``PATH`` lookup and the GitHub CLI."""

    def __init__(self, timeout: float = 10.0) -> None:
        self.timeout = timeout

    def is_available(self, command: str) -> bool:
        return shutil.which(command) is not None

    def detect_identity(self) -> str | None:
        """Return the GitHub login reported by ``gh``, or None."""
        if not self.is_available("gh"):
            return None
        try:
            result = subprocess.run(
                ["gh", "api", "user", "--jq", ".login"],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            logger.warning("gh api user failed: %s", exc)
            return None
        if result.returncode != 0:
            logger.debug("gh api user exited with %s", result.returncode)
            return None
        login = result.stdout.strip()
        return login or None


__all__ = ["ShellToolProbe", "TOOL_INSTALL_HINTS", "ToolProbe"]
