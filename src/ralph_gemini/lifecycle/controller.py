"""Install and update orchestration.

``install`` may create or fully replace the workspace configuration.
``update`` never creates one and only ever advances its ``schemaVersion``;
everything else in the record passes through untouched.

Both operations resynchronize every asset subtree from scratch. A failure
in one subtree is reported and the remaining subtrees are still attempted;
nothing already copied is rolled back. Running the command again is the
only retry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from rich.console import Console

from ralph_gemini.core.config import (
    ConfigStore,
    ConfigurationRecord,
    ExecutionMode,
    SshTarget,
    VmTarget,
)
from ralph_gemini.core.constants import COMMANDS_SUBTREE
from ralph_gemini.core.context import WorkspaceContext
from ralph_gemini.core.errors import AuxiliaryToolMissing, ConfigError, NotInstalled, SyncFailed
from ralph_gemini.core.probe import ToolProbe
from ralph_gemini.lifecycle.configure import Prompter, collect_configuration
from ralph_gemini.runtime.launcher import write_launcher
from ralph_gemini.runtime.mirror import AssetSet, SyncResult, secondary_target, workspace_target
from ralph_gemini.runtime.version import VersionTracker

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    FINALIZED = "finalized"
    CANCELLED = "cancelled"
    NOT_INSTALLED = "not_installed"
    FAILED = "failed"


@dataclass
class LifecycleResult:
    """What an install or update run did."""

    outcome: Outcome
    record: ConfigurationRecord | None = None
    synced: list[SyncResult] = field(default_factory=list)
    failures: list[SyncFailed] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    advisories: list[AuxiliaryToolMissing] = field(default_factory=list)
    error: str | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.outcome is Outcome.FAILED else 0


def collect_config_warnings(record: ConfigurationRecord) -> list[str]:
    """Return advisory messages for settings an installed workspace should have."""
    warnings: list[str] = []
    if record.execution_mode is ExecutionMode.NONE:
        warnings.append("executionMode - VM or Docker is required for safe execution")
    problem = record.target_problem()
    if problem:
        warnings.append(f"executionTarget - {problem}")
    if not record.identity.username.strip():
        warnings.append("identity.username - Needed for repo operations")
    return warnings


class LifecycleController:
    """Sequences ConfigStore, asset mirroring and version tracking."""

    def __init__(
        self,
        context: WorkspaceContext,
        prompter: Prompter,
        probe: ToolProbe,
        console: Console | None = None,
        store: ConfigStore | None = None,
        tracker: VersionTracker | None = None,
    ) -> None:
        self.context = context
        self.prompter = prompter
        self.probe = probe
        self.console = console or Console()
        self.store = store or ConfigStore(context)
        self.tracker = tracker or VersionTracker(context)
        self.assets = AssetSet(root=context.asset_root)

    def sync_assets(self) -> tuple[list[SyncResult], list[SyncFailed]]:
        """Full-replace every subtree into the workspace, then merge commands/ into the secondary mirror."""
        synced: list[SyncResult] = []
        failures: list[SyncFailed] = []

        jobs = [(workspace_target(self.context), name) for name in self.assets.subtrees]
        jobs.append((secondary_target(self.context), COMMANDS_SUBTREE))

        for target, name in jobs:
            try:
                synced.append(target.sync_subtree(self.assets.subtree(name)))
            except SyncFailed as exc:
                failures.append(exc)
        return synced, failures

    def install(self) -> LifecycleResult:
        if self.store.exists():
            reinstall = self.prompter.confirm(
                "Ralph is already installed. Reinstall? (configuration will be asked again)",
                default=False,
            )
            if not reinstall:
                self.console.print("[yellow]Use 'ralph-gemini update' to update core files.[/yellow]")
                return LifecycleResult(Outcome.CANCELLED)

        version = self.tracker.current_distribution_version()
        try:
            record, advisories = collect_configuration(
                self.prompter, self.probe, self.context, version, console=self.console
            )
        except ConfigError as exc:
            return self._failed(str(exc))

        self.console.print("\n[cyan]Installing...[/cyan]")
        synced, failures = self.sync_assets()

        try:
            self.store.save(record)
            self.tracker.record_version(version)
            write_launcher(self.context)
        except OSError as exc:
            logger.error("Install could not finish: %s", exc)
            return self._failed(f"Could not write workspace files: {exc}", record, synced, failures)

        outcome = Outcome.FAILED if failures else Outcome.FINALIZED
        return LifecycleResult(
            outcome,
            record=record,
            synced=synced,
            failures=failures,
            advisories=advisories,
        )

    def update(self) -> LifecycleResult:
        try:
            document = self.store.read_document()
            # Stored settings are reported, never enforced, on update.
            record = self.store.parse(document, check_target=False)
        except NotInstalled:
            self.console.print("[red]Ralph not installed in this directory.[/red]")
            self.console.print("[dim]Run: ralph-gemini install[/dim]")
            return LifecycleResult(Outcome.NOT_INSTALLED)
        except ConfigError as exc:
            return self._failed(str(exc))

        self._show_current_config(record)

        installed = self.tracker.installed_version(record)
        current = self.tracker.current_distribution_version()
        if self.tracker.is_upgrade(installed, current):
            self.console.print(f"[cyan]Updating[/cyan] {installed} -> {current}")
        else:
            self.console.print(f"[cyan]Resyncing[/cyan] {current}")

        warnings = collect_config_warnings(record)
        if warnings:
            self.console.print("[yellow]  Missing config:[/yellow]")
            for warning in warnings:
                self.console.print(f"[yellow]   - {warning}[/yellow]")
            self.console.print("[dim]   Fix by running: ralph-gemini install[/dim]\n")

        synced, failures = self.sync_assets()
        if failures:
            # Leave the old version in place so the workspace still reads as stale.
            return LifecycleResult(
                Outcome.FAILED, record=record, synced=synced, failures=failures, warnings=warnings
            )

        bumped = ConfigStore.bump_version(record, current)
        try:
            self.store.write_document(ConfigStore.with_version(document, current))
            self.tracker.record_version(current)
        except OSError as exc:
            logger.error("Update could not record version %s: %s", current, exc)
            return self._failed(f"Could not write workspace files: {exc}", record, synced, failures)

        return LifecycleResult(Outcome.FINALIZED, record=bumped, synced=synced, warnings=warnings)

    def _show_current_config(self, record: ConfigurationRecord) -> None:
        target = record.execution_target
        if isinstance(target, VmTarget):
            target_label = target.vm_name or "not set"
        elif isinstance(target, SshTarget):
            target_label = f"{target.user}@{target.host}"
        else:
            target_label = "not set"
        self.console.print("[dim]Current config:[/dim]")
        self.console.print(f"[dim]  Execution: {record.execution_mode.value}[/dim]")
        self.console.print(f"[dim]  Model: {record.default_model.value}[/dim]")
        self.console.print(f"[dim]  VM: {target_label}[/dim]")
        self.console.print()

    def _failed(
        self,
        message: str,
        record: ConfigurationRecord | None = None,
        synced: list[SyncResult] | None = None,
        failures: list[SyncFailed] | None = None,
    ) -> LifecycleResult:
        self.console.print(f"[red]Error:[/red] {message}")
        return LifecycleResult(
            Outcome.FAILED,
            record=record,
            synced=synced or [],
            failures=failures or [],
            error=message,
        )


__all__ = [
    "LifecycleController",
    "LifecycleResult",
    "Outcome",
    "collect_config_warnings",
]
