"""Installed asset-set version vs. the running distribution's version."""

from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable

from packaging.version import InvalidVersion, Version

from ralph_gemini.core.config import ConfigurationRecord
from ralph_gemini.core.constants import DISTRIBUTION_NAME
from ralph_gemini.core.context import WorkspaceContext
from ralph_gemini.core.errors import VersionUnavailable

logger = logging.getLogger(__name__)

# Used when package metadata is missing (e.g. running from a bare checkout).
FALLBACK_VERSION = "1.0.0"

MetadataLookup = Callable[[str], str]


def read_distribution_version(metadata_version: MetadataLookup = importlib.metadata.version) -> str:
    """Return the version declared by the installed distribution.

    Raises:
        VersionUnavailable: If the distribution is not installed or declares
            a missing or unparseable version.
    """
    try:
        raw = metadata_version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError as exc:
        raise VersionUnavailable(f"{DISTRIBUTION_NAME} is not installed") from exc

    if not raw or not raw.strip():
        raise VersionUnavailable(f"{DISTRIBUTION_NAME} declares no version")
    try:
        Version(raw)
    except InvalidVersion as exc:
        raise VersionUnavailable(f"Unparseable version {raw!r}") from exc
    return raw.strip()


def get_version(metadata_version: MetadataLookup = importlib.metadata.version) -> str:
    """Return the distribution version, degrading to FALLBACK_VERSION."""
    try:
        return read_distribution_version(metadata_version)
    except VersionUnavailable as exc:
        logger.warning("%s; using fallback version %s", exc, FALLBACK_VERSION)
        return FALLBACK_VERSION


class VersionTracker:
    """Reads the distribution version and records it in the workspace."""

    def __init__(self, context: WorkspaceContext, metadata_version: MetadataLookup = importlib.metadata.version) -> None:
        self._context = context
        self._metadata_version = metadata_version

    def current_distribution_version(self) -> str:
        # Advisory only: never aborts an install or update.
        return get_version(self._metadata_version)

    @staticmethod
    def installed_version(record: ConfigurationRecord) -> str:
        return record.schema_version

    @staticmethod
    def is_upgrade(installed: str, current: str) -> bool:
        # Any mismatch needs an update; downgrades are not detected.
        return installed != current

    def record_version(self, version: str) -> None:
        """Write the plain-text ``version`` marker into the workspace root."""
        path = self._context.version_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(version, encoding="utf-8")
        logger.debug("Wrote version marker %s to %s", version, path)


__all__ = [
    "FALLBACK_VERSION",
    "VersionTracker",
    "get_version",
    "read_distribution_version",
]
