"""Resolved paths and environment snapshot for one CLI invocation."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from ralph_gemini.core.constants import (
    CONFIG_FILENAME,
    LAUNCHER_NAME,
    SECONDARY_DIR,
    VERSION_FILENAME,
    WORKSPACE_DIR,
)
from ralph_gemini.runtime.home import get_package_asset_root

# Environment variables captured into the context; nothing else is read later.
_ENV_KEYS = ("USER", "RALPH_TEMPLATE_ROOT")


@dataclass(frozen=True)
class WorkspaceContext:
    """Everything a lifecycle component needs to know about where it runs.

    Built once at the CLI boundary and passed down, so no component looks
    at the process working directory or environment on its own.
    """

    project_root: Path
    asset_root: Path
    env: Mapping[str, str] = field(default_factory=dict)

    @property
    def workspace_dir(self) -> Path:
        return self.project_root / WORKSPACE_DIR

    @property
    def secondary_dir(self) -> Path:
        return self.project_root / SECONDARY_DIR

    @property
    def config_path(self) -> Path:
        return self.workspace_dir / CONFIG_FILENAME

    @property
    def version_path(self) -> Path:
        return self.workspace_dir / VERSION_FILENAME

    @property
    def launcher_path(self) -> Path:
        return self.project_root / LAUNCHER_NAME

    @property
    def default_user(self) -> str:
        return self.env.get("USER", "") or "ralph"

    @classmethod
    def from_environment(
        cls,
        project_root: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "WorkspaceContext":
        """Snapshot the current directory and environment into a context."""
        source = os.environ if environ is None else environ
        snapshot = {key: source[key] for key in _ENV_KEYS if key in source}
        root = (project_root or Path.cwd()).resolve()
        return cls(
            project_root=root,
            asset_root=get_package_asset_root(snapshot),
            env=MappingProxyType(snapshot),
        )


__all__ = ["WorkspaceContext"]
