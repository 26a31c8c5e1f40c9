"""The configuration questionnaire run by ``install``.

Answers are gathered through a :class:`Prompter` and assembled into a
:class:`ConfigurationRecord` in memory; nothing is written here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from pydantic import ValidationError
from rich.console import Console

from ralph_gemini.core.config import (
    ConfigurationRecord,
    DefaultModel,
    ExecutionMode,
    Identity,
    NotificationPolicy,
    SshTarget,
    VmTarget,
)
from ralph_gemini.core.context import WorkspaceContext
from ralph_gemini.core.errors import AuxiliaryToolMissing, ConfigError
from ralph_gemini.core.probe import TOOL_INSTALL_HINTS, ToolProbe

logger = logging.getLogger(__name__)


class Prompter(Protocol):
    """One typed answer per question."""

    def select(self, message: str, choices: Mapping[str, str], default: str | None = None) -> str: ...

    def text(self, message: str, default: str = "") -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...


EXECUTION_CHOICES: dict[str, str] = {
    ExecutionMode.VM_MANAGED.value: "GCP VM (recommended)",
    ExecutionMode.SSH.value: "Self-hosted VM (SSH)",
    ExecutionMode.CONTAINER.value: "Docker (local fallback)",
    ExecutionMode.NONE.value: "Skip (configure later)",
}

MODEL_CHOICES: dict[str, str] = {
    DefaultModel.PROVIDER_A.value: "Gemini CLI (recommended)",
    DefaultModel.PROVIDER_B.value: "Claude via Antigravity",
    DefaultModel.AUTO.value: "Auto-detect (use AGENTS.md)",
}

# Helper CLI each execution mode relies on.
MODE_TOOLS: dict[ExecutionMode, str] = {
    ExecutionMode.VM_MANAGED: "gcloud",
    ExecutionMode.CONTAINER: "docker",
}


def check_auxiliary_tool(probe: ToolProbe, command: str) -> AuxiliaryToolMissing | None:
    """Return an advisory if *command* is not installed, else None."""
    if probe.is_available(command):
        return None
    logger.info("%s not found on PATH", command)
    return AuxiliaryToolMissing(command, TOOL_INSTALL_HINTS.get(command, ""))


def _ask_required(prompter: Prompter, message: str, default: str = "") -> str:
    while True:
        answer = prompter.text(message, default=default).strip()
        if answer:
            return answer


def _ask_target(
    prompter: Prompter, mode: ExecutionMode, context: WorkspaceContext
) -> VmTarget | SshTarget | None:
    if mode is ExecutionMode.VM_MANAGED:
        return VmTarget(
            vm_name=_ask_required(prompter, "VM name?", default="ralph-sandbox"),
            project=prompter.text("GCP project ID?", default="").strip(),
            zone=prompter.text("GCP zone?", default="europe-north1-a").strip(),
        )
    if mode is ExecutionMode.SSH:
        return SshTarget(
            host=_ask_required(prompter, "VM IP address?"),
            user=_ask_required(prompter, "SSH user?", default=context.default_user),
        )
    return None


def collect_configuration(
    prompter: Prompter,
    probe: ToolProbe,
    context: WorkspaceContext,
    schema_version: str,
    console: Console | None = None,
) -> tuple[ConfigurationRecord, list[AuxiliaryToolMissing]]:
    """Ask the install questions and build a complete record.

    Returns the record and any advisories about missing helper CLIs.
    Advisories and the detected GitHub login are printed to *console* as
    they come up.

    Raises:
        ConfigError: If the answers do not form a valid record.
    """
    console = console or Console()
    advisories: list[AuxiliaryToolMissing] = []

    mode = ExecutionMode(
        prompter.select("Execution environment?", EXECUTION_CHOICES, default=ExecutionMode.VM_MANAGED.value)
    )
    if mode in MODE_TOOLS:
        missing = check_auxiliary_tool(probe, MODE_TOOLS[mode])
        if missing is not None:
            advisories.append(missing)
            console.print(f"[yellow]  {missing.command} CLI not found.[/yellow]")
            if missing.install_hint:
                console.print(f"[dim]  {missing.install_hint}[/dim]")

    target = _ask_target(prompter, mode, context)

    model = DefaultModel(
        prompter.select("Default AI model for execution?", MODEL_CHOICES, default=DefaultModel.PROVIDER_A.value)
    )

    detected = probe.detect_identity() or ""
    if detected:
        console.print(f"[green]  GitHub detected: {detected}[/green]")
    username = prompter.text("GitHub username?", default=detected).strip()

    try:
        record = ConfigurationRecord(
            schema_version=schema_version,
            execution_mode=mode,
            execution_target=target,
            default_model=model,
            notification_policy=NotificationPolicy(enabled=True, channel="os"),
            identity=Identity(username=username),
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    return record, advisories


__all__ = [
    "EXECUTION_CHOICES",
    "MODEL_CHOICES",
    "MODE_TOOLS",
    "Prompter",
    "check_auxiliary_tool",
    "collect_configuration",
]
