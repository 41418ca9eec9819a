"""Shared test fixtures for the barrelgen test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from barrelgen.config import BarrelConfig
from barrelgen.registry import Registry


# === Loggers ===


class RecordingLogger:
    """ReportLogger that records every call for test assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any] | None]] = []

    def _record(self, level: str, message: str, extra: dict[str, Any] | None) -> None:
        self.records.append((level, message, extra))

    def trace(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._record("trace", message, extra)

    def debug(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._record("debug", message, extra)

    def info(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._record("info", message, extra)

    def error(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._record("error", message, extra)

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


# === Helpers ===


def _add_component(root: Path, name: str, group: str = "components", filename: str = "index.tsx") -> Path:
    """Create ``root/group/name/filename`` and return its path."""
    path = root / group / name / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"export default function {name}() {{}}\n")
    return path


# === Fixtures ===


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project with a ``src`` base holding Button and Card plus an empty index.ts."""
    base = tmp_path / "src"
    base.mkdir()
    _add_component(base, "Button")
    _add_component(base, "Card")
    (base / "index.ts").write_text("")
    return tmp_path


@pytest.fixture
def config(project: Path) -> BarrelConfig:
    return BarrelConfig(base="src", output="index.ts", header="// generated\n", context=project)


@pytest.fixture
def registry(config: BarrelConfig, recording_logger: RecordingLogger) -> Registry:
    """Registry pointed at the ``project`` fixture (initial_scan NOT called)."""
    return Registry(config=config, logger=recording_logger)


@pytest.fixture
def add_component() -> Any:
    """Factory creating ``root/group/name/filename`` component entry files."""
    return _add_component
