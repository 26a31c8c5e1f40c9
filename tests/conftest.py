from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

from ralph_gemini.core.context import WorkspaceContext
from ralph_gemini.runtime.version import VersionTracker

DIST_VERSION = "1.2.0"


class ScriptedPrompter:
    """Prompter answering from fixed per-question answers.

    Questions without a scripted answer get the prompt's default.
    """

    def __init__(
        self,
        answers: Mapping[str, str] | None = None,
        confirms: Mapping[str, bool] | None = None,
    ) -> None:
        self.answers = dict(answers or {})
        self.confirms = dict(confirms or {})
        self.asked: list[str] = []

    def select(self, message: str, choices: Mapping[str, str], default: str | None = None) -> str:
        self.asked.append(message)
        answer = self.answers.get(message, default)
        assert answer in choices, f"{answer!r} is not a choice for {message!r}"
        return answer

    def text(self, message: str, default: str = "") -> str:
        self.asked.append(message)
        return self.answers.get(message, default)

    def confirm(self, message: str, default: bool = False) -> bool:
        self.asked.append(message)
        for prefix, value in self.confirms.items():
            if message.startswith(prefix):
                return value
        return default


class FakeProbe:
    def __init__(self, available: set[str] | None = None, identity: str | None = None) -> None:
        self.available = set(available or ())
        self.identity = identity
        self.checked: list[str] = []

    def is_available(self, command: str) -> bool:
        self.checked.append(command)
        return command in self.available

    def detect_identity(self) -> str | None:
        return self.identity


@pytest.fixture()
def fake_assets(tmp_path: Path) -> Path:
    """A package asset root with all four subtrees."""
    root = tmp_path / "assets"
    (root / "lib").mkdir(parents=True)
    (root / "lib" / "common.sh").write_text("# common v2\n")
    (root / "scripts").mkdir()
    (root / "scripts" / "ralph.sh").write_text("#!/bin/bash\necho ralph\n")
    (root / "templates").mkdir()
    (root / "templates" / "PROMPT.md").write_text("# Prompt\n")
    (root / "commands" / "ralph").mkdir(parents=True)
    (root / "commands" / "ralph" / "discover.toml").write_text('description = "discover"\n')
    (root / "commands" / "ralph" / "run.toml").write_text('description = "run"\n')
    return root


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture()
def context(project: Path, fake_assets: Path) -> WorkspaceContext:
    return WorkspaceContext(project_root=project, asset_root=fake_assets, env={"USER": "tester"})


@pytest.fixture()
def tracker(context: WorkspaceContext) -> VersionTracker:
    return VersionTracker(context, metadata_version=lambda name: DIST_VERSION)


@pytest.fixture()
def make_prompter() -> Callable[..., ScriptedPrompter]:
    return ScriptedPrompter


@pytest.fixture()
def make_probe() -> Callable[..., FakeProbe]:
    return FakeProbe


@pytest.fixture()
def tree_snapshot() -> Callable[[Path], dict[str, bytes]]:
    """Return a function mapping every file under a root to its bytes."""

    def snapshot(root: Path) -> dict[str, bytes]:
        if not root.exists():
            return {}
        return {
            path.relative_to(root).as_posix(): path.read_bytes()
            for path in sorted(root.rglob("*"))
            if path.is_file()
        }

    return snapshot
