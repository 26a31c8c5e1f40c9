"""Workspace configuration record and its on-disk store.

The record lives in ``.ralph/config.json``. Install writes it in full;
update may only advance ``schemaVersion`` (see :meth:`ConfigStore.bump_version`).
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from enum import Enum
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, model_validator
from pydantic.alias_generators import to_camel

from ralph_gemini.core.context import WorkspaceContext
from ralph_gemini.core.errors import ConfigError, NotInstalled

logger = logging.getLogger(__name__)

UNKNOWN_VERSION = "unknown"
SCHEMA_VERSION_KEY = "schemaVersion"

# Validation context key; False skips the mode/target cross-check.
CHECK_TARGET = "check_target"

CONFIG_FILE_MODE = 0o644


class ExecutionMode(str, Enum):
    """Where autonomous runs execute."""

    NONE = "none"
    VM_MANAGED = "vm-managed"
    SSH = "ssh"
    CONTAINER = "container"


class DefaultModel(str, Enum):
    """Model used for execution by default."""

    PROVIDER_A = "provider-a"  # Gemini CLI
    PROVIDER_B = "provider-b"  # Claude via Antigravity
    AUTO = "auto"


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )


class VmTarget(_RecordModel):
    """A managed cloud VM."""

    model_config = ConfigDict(extra="forbid")

    vm_name: str = ""
    project: str = ""
    zone: str = "europe-north1-a"


class SshTarget(_RecordModel):
    """A self-hosted machine reached over SSH."""

    model_config = ConfigDict(extra="forbid")

    host: str = ""
    user: str = ""


class NotificationPolicy(_RecordModel):
    enabled: bool = True
    channel: str = "os"


class Identity(_RecordModel):
    username: str = ""


class ConfigurationRecord(_RecordModel):
    """The single persisted settings object for a workspace.

    Unknown top-level keys read from disk are kept as extras so that a
    load/save round trip never drops them.
    """

    schema_version: str = UNKNOWN_VERSION
    execution_mode: ExecutionMode = ExecutionMode.NONE
    execution_target: Union[VmTarget, SshTarget, None] = None
    default_model: DefaultModel = DefaultModel.AUTO
    notification_policy: NotificationPolicy = Field(default_factory=NotificationPolicy)
    identity: Identity = Field(default_factory=Identity)

    @model_validator(mode="after")
    def _check_target_matches_mode(self, info: ValidationInfo) -> "ConfigurationRecord":
        if info.context and not info.context.get(CHECK_TARGET, True):
            return self
        problem = self.target_problem()
        if problem:
            raise ValueError(problem)
        return self

    def target_problem(self) -> str | None:
        """Describe how ``execution_target`` disagrees with ``execution_mode``, if it does."""
        mode = self.execution_mode
        target = self.execution_target
        if mode is ExecutionMode.SSH:
            if not isinstance(target, SshTarget) or not target.host.strip() or not target.user.strip():
                return "ssh execution requires executionTarget.host and executionTarget.user"
        elif mode is ExecutionMode.VM_MANAGED:
            if not isinstance(target, VmTarget) or not target.vm_name.strip():
                return "vm-managed execution requires executionTarget.vmName"
        elif target is not None:
            return f"{mode.value} execution does not take an executionTarget"
        return None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any], check_target: bool = True) -> "ConfigurationRecord":
        return cls.model_validate(data, context={CHECK_TARGET: check_target})


class ConfigStore:
    """Reads and writes the ConfigurationRecord of one workspace."""

    def __init__(self, context: WorkspaceContext) -> None:
        self._path = context.config_path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read_document(self) -> dict[str, Any]:
        """Return config.json exactly as stored.

        Raises:
            NotInstalled: If config.json does not exist.
            ConfigError: If config.json is not a readable JSON object.
        """
        if not self.exists():
            raise NotInstalled(self._path)

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigError(f"Cannot read {self._path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError(f"{self._path} must contain a JSON object")
        return data

    def parse(self, document: dict[str, Any], check_target: bool = True) -> ConfigurationRecord:
        """Validate a stored document.

        With ``check_target=False`` a mode/target mismatch is accepted;
        callers report it through :meth:`ConfigurationRecord.target_problem`.

        Raises:
            ConfigError: If the document does not describe a record.
        """
        try:
            return ConfigurationRecord.from_dict(document, check_target=check_target)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration in {self._path}: {exc}") from exc

    def load(self, check_target: bool = True) -> ConfigurationRecord:
        """Load and validate the record.

        Raises:
            NotInstalled: If config.json does not exist.
            ConfigError: If config.json is malformed or invalid.
        """
        return self.parse(self.read_document(), check_target=check_target)

    def save(self, record: ConfigurationRecord) -> None:
        """Write *record* in full."""
        self.write_document(record.to_dict())

    def write_document(self, document: dict[str, Any]) -> None:
        """Write *document* atomically (temp file + ``os.replace``)."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(document, indent=2) + "\n"

        # Temp file in the same directory keeps the rename on one filesystem.
        fd, tmp_path = tempfile.mkstemp(
            dir=self._path.parent,
            prefix=".config.json.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            # mkstemp creates the file as 0600.
            os.chmod(tmp_path, CONFIG_FILE_MODE)
            os.replace(tmp_path, self._path)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.info("Saved workspace config to %s", self._path)

    @staticmethod
    def with_version(document: dict[str, Any], new_version: str) -> dict[str, Any]:
        """Return a copy of a stored *document* with only ``schemaVersion`` replaced."""
        return {**document, SCHEMA_VERSION_KEY: new_version}

    @staticmethod
    def bump_version(record: ConfigurationRecord, new_version: str) -> ConfigurationRecord:
        """Return a copy of *record* with only ``schema_version`` replaced."""
        return record.model_copy(update={"schema_version": new_version})


__all__ = [
    "ConfigStore",
    "CONFIG_FILE_MODE",
    "ConfigurationRecord",
    "DefaultModel",
    "ExecutionMode",
    "Identity",
    "NotificationPolicy",
    "SCHEMA_VERSION_KEY",
    "SshTarget",
    "UNKNOWN_VERSION",
    "VmTarget",
]
