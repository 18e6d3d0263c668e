"""Capabilities the core consumes from its surroundings.

The core never touches ``os`` or a UI toolkit directly. It talks to a
:class:`FileSystem` and a :class:`HostSurface`, which lets the same logic
drive the Textual TUI, the console CLI and the test doubles.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional, Protocol, runtime_checkable

ConfirmAnswer = Optional[Literal["Yes", "No"]]

CONFIRM_YES = "Yes"
CONFIRM_NO = "No"


@runtime_checkable
class FileSystem(Protocol):
    """Synchronous filesystem capability. Failures raise ``OSError``."""

    def exists(self, path: Path) -> bool: ...

    def is_directory(self, path: Path) -> bool: ...

    def list_dir(self, path: Path) -> list[str]: ...

    def mkdir(self, path: Path, recursive: bool = True) -> None: ...

    def write_empty_file(self, path: Path) -> None: ...


@runtime_checkable
class HostSurface(Protocol):
    """Document-editing surface hosting the picker.

    ``confirm`` returns ``"Yes"``, ``"No"`` or ``None`` when dismissed.
    ``notify``, ``warn`` and ``error`` are fire-and-forget.
    """

    async def confirm(self, message: str) -> ConfirmAnswer: ...

    def notify(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    async def open_document(self, path: Path) -> None: ...

    def reveal(self, path: Path) -> None: ...


class LocalFileSystem:
    """:class:`FileSystem` backed by the real disk."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def list_dir(self, path: Path) -> list[str]:
        return [entry.name for entry in Path(path).iterdir()]

    def mkdir(self, path: Path, recursive: bool = True) -> None:
        Path(path).mkdir(parents=recursive, exist_ok=recursive)

    def write_empty_file(self, path: Path) -> None:
        # Overwrites to empty when the file exists
        Path(path).write_text("", encoding="utf-8")


__all__ = [
    "ConfirmAnswer",
    "CONFIRM_YES",
    "CONFIRM_NO",
    "FileSystem",
    "HostSurface",
    "LocalFileSystem",
]
