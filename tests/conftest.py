"""Shared fixtures for the quickfile test suite."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import pytest

from quickfile.config.defaults import ENV_PREFIX
from quickfile.core.capabilities import ConfirmAnswer, LocalFileSystem


class RecordingHost:
    """Host surface double that records every call.

    ``answer`` is what :meth:`confirm` returns.
    """

    def __init__(self, answer: ConfirmAnswer = "Yes"):
        self.answer = answer
        self.prompts: list[str] = []
        self.notifications: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.opened: list[Path] = []
        self.revealed: list[Path] = []
        self.open_error: Optional[Exception] = None

    async def confirm(self, message: str) -> ConfirmAnswer:
        self.prompts.append(message)
        return self.answer

    def notify(self, message: str) -> None:
        self.notifications.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    async def open_document(self, path: Path) -> None:
        if self.open_error is not None:
            raise self.open_error
        self.opened.append(path)

    def reveal(self, path: Path) -> None:
        self.revealed.append(path)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep QUICKFILE_* variables from the caller out of settings."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)


@pytest.fixture
def host() -> RecordingHost:
    """A host that answers "Yes" to every prompt."""
    return RecordingHost()


@pytest.fixture
def fs() -> LocalFileSystem:
    return LocalFileSystem()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A small workspace tree.

    ::

        ws/
          README.md
          .github/workflows/
          docs/guide.md
          node_modules/pkg/
          src/components/Button.tsx
          src/utils/
    """
    root = tmp_path / "ws"
    (root / ".github" / "workflows").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("# Guide\n", encoding="utf-8")
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "src" / "components").mkdir(parents=True)
    (root / "src" / "components" / "Button.tsx").write_text("export {}\n", encoding="utf-8")
    (root / "src" / "utils").mkdir()
    (root / "README.md").write_text("hello\n", encoding="utf-8")
    return root


@pytest.fixture
def make_host() -> type[RecordingHost]:
    """Factory for hosts with a specific confirm answer."""
    return RecordingHost
