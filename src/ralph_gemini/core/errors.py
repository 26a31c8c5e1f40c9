"""Error types raised by the install/update lifecycle."""

from __future__ import annotations


class RalphError(RuntimeError):
    """Base class for all lifecycle errors."""


class NotInstalled(RalphError):
    """Raised when an operation needs a workspace configuration that does not exist."""

    def __init__(self, config_path: object) -> None:
        super().__init__(f"Ralph is not installed here (no {config_path})")
        self.config_path = config_path


class ConfigError(RalphError):
    """Raised when config.json cannot be parsed or fails validation."""


class SyncFailed(RalphError):
    """Raised when copying one asset subtree fails.

    Attributes:
        subtree: Name of the subtree being synchronized (e.g. ``scripts``).
        cause: The underlying I/O error.
        destination: Directory that was being written, when known.
    """

    def __init__(self, subtree: str, cause: BaseException, destination: object = None) -> None:
        super().__init__(f"Failed to sync {subtree}/: {cause}")
        self.subtree = subtree
        self.cause = cause
        self.destination = destination


class VersionUnavailable(RalphError):
    """Raised when the distribution version cannot be determined."""


class AuxiliaryToolMissing(RalphError):
    """An optional helper CLI (gcloud, docker, gh) is not on PATH."""

    def __init__(self, command: str, install_hint: str = "") -> None:
        message = f"{command} CLI not found"
        if install_hint:
            message = f"{message}. {install_hint}"
        super().__init__(message)
        self.command = command
        self.install_hint = install_hint


__all__ = [
    "AuxiliaryToolMissing",
    "ConfigError",
    "NotInstalled",
    "RalphError",
    "SyncFailed",
    "VersionUnavailable",
]
