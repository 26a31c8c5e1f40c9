"""Directory-level synchronization of vendored assets into a project.

Two destinations receive assets:

- the workspace mirror (``.ralph/``): every subtree is fully replaced, so a
  release that drops or renames a file never leaves the old copy behind;
- the secondary mirror (``.gemini/``): only ``commands/`` is merged in.
  That directory is shared with the Gemini CLI, so files we do not ship are
  never removed; files we do ship are overwritten.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ralph_gemini.core.constants import ASSET_SUBTREES
from ralph_gemini.core.context import WorkspaceContext
from ralph_gemini.core.errors import SyncFailed

logger = logging.getLogger(__name__)


class ReplacePolicy(str, Enum):
    FULL_REPLACE = "full-replace"
    MERGE_OVERWRITE = "merge-overwrite"


@dataclass(frozen=True)
class SyncResult:
    """Outcome of synchronizing one subtree.

    ``item_count`` is for display only.
    """

    subtree: str
    destination: Path | None = None
    item_count: int = 0
    skipped: bool = False


@dataclass(frozen=True)
class AssetSet:
    """The read-only asset tree shipped with the package."""

    root: Path
    subtrees: tuple[str, ...] = ASSET_SUBTREES

    def subtree(self, name: str) -> Path:
        return self.root / name


def count_files(directory: Path) -> int:
    """Count regular files below *directory*, recursively."""
    if not directory.is_dir():
        return 0
    return sum(1 for path in directory.rglob("*") if path.is_file())


@dataclass(frozen=True)
class MirrorTarget:
    """A destination root plus the policy used to write into it."""

    root: Path
    policy: ReplacePolicy

    def sync_subtree(self, source: Path) -> SyncResult:
        """Copy the subtree at *source* to ``root / source.name``.

        A missing *source* is not an error: the asset set may omit a
        category.

        Raises:
            SyncFailed: On any I/O error while copying this subtree.
        """
        name = source.name
        dest = self.root / name
        if not source.is_dir():
            logger.debug("Skipping %s: %s does not exist", name, source)
            return SyncResult(subtree=name, destination=dest, skipped=True)

        try:
            if self.policy is ReplacePolicy.FULL_REPLACE:
                self.remove_subtree(name)
                dest.parent.mkdir(parents=True, exist_ok=True)
                shutil.copytree(source, dest)
            else:
                dest.parent.mkdir(parents=True, exist_ok=True)
                shutil.copytree(source, dest, dirs_exist_ok=True)
        except OSError as exc:
            logger.error("Sync of %s into %s failed: %s", name, self.root, exc)
            raise SyncFailed(name, exc, destination=dest) from exc

        item_count = count_files(source)
        logger.info("Synced %s/ into %s (%d files, %s)", name, self.root, item_count, self.policy.value)
        return SyncResult(subtree=name, destination=dest, item_count=item_count)

    def remove_subtree(self, name: str) -> None:
        """Delete ``root / name`` if it exists."""
        dest = self.root / name
        if dest.is_dir() and not dest.is_symlink():
            shutil.rmtree(dest)
        elif dest.exists() or dest.is_symlink():
            dest.unlink()


def workspace_target(context: WorkspaceContext) -> MirrorTarget:
    return MirrorTarget(root=context.workspace_dir, policy=ReplacePolicy.FULL_REPLACE)


def secondary_target(context: WorkspaceContext) -> MirrorTarget:
    return MirrorTarget(root=context.secondary_dir, policy=ReplacePolicy.MERGE_OVERWRITE)


__all__ = [
    "AssetSet",
    "MirrorTarget",
    "ReplacePolicy",
    "SyncResult",
    "count_files",
    "secondary_target",
    "workspace_target",
]
