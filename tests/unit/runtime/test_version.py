"""Tests for ralph_gemini.runtime.version."""

from __future__ import annotations

import importlib.metadata
import logging

import pytest

from ralph_gemini.core.config import ConfigurationRecord
from ralph_gemini.core.errors import VersionUnavailable
from ralph_gemini.runtime.version import (
    FALLBACK_VERSION,
    VersionTracker,
    get_version,
    read_distribution_version,
)


def _not_installed(name: str) -> str:
    raise importlib.metadata.PackageNotFoundError(name)


class TestReadDistributionVersion:
    def test_returns_declared_version(self) -> None:
        assert read_distribution_version(lambda name: "1.2.0") == "1.2.0"

    def test_queries_our_distribution(self) -> None:
        seen: list[str] = []

        def lookup(name: str) -> str:
            seen.append(name)
            return "3.0.0"

        read_distribution_version(lookup)
        assert seen == ["ralph-gemini"]

    def test_missing_distribution(self) -> None:
        with pytest.raises(VersionUnavailable):
            read_distribution_version(_not_installed)

    @pytest.mark.parametrize("raw", ["", "   ", "not a version"])
    def test_unusable_declaration(self, raw: str) -> None:
        with pytest.raises(VersionUnavailable):
            read_distribution_version(lambda name: raw)


class TestGetVersion:
    def test_fallback_when_unavailable(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="ralph_gemini.runtime.version"):
            assert get_version(_not_installed) == FALLBACK_VERSION
        assert "fallback" in caplog.text

    def test_fallback_constant(self) -> None:
        assert FALLBACK_VERSION == "1.0.0"


class TestVersionTracker:
    def test_current_distribution_version(self, context) -> None:
        assert VersionTracker(context, metadata_version=lambda name: "1.2.0").current_distribution_version() == "1.2.0"

    def test_current_version_never_raises(self, context) -> None:
        tracker = VersionTracker(context, metadata_version=_not_installed)
        assert tracker.current_distribution_version() == FALLBACK_VERSION

    def test_installed_version_projects_record(self) -> None:
        record = ConfigurationRecord(schema_version="0.9.0")
        assert VersionTracker.installed_version(record) == "0.9.0"

    @pytest.mark.parametrize(
        ("installed", "current", "expected"),
        [
            ("1.0.0", "1.2.0", True),
            ("1.2.0", "1.2.0", False),
            # Downgrades are treated as an update too.
            ("2.0.0", "1.2.0", True),
        ],
    )
    def test_is_upgrade_is_plain_inequality(self, installed: str, current: str, expected: bool) -> None:
        assert VersionTracker.is_upgrade(installed, current) is expected

    def test_record_version_writes_marker(self, context, tracker) -> None:
        tracker.record_version("1.2.0")
        assert context.version_path.read_text(encoding="utf-8") == "1.2.0"
