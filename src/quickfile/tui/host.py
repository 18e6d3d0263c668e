"""Host surface backed by the Textual application."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from ..core.capabilities import ConfirmAnswer
from .dialogs.confirmation import ConfirmationDialog

if TYPE_CHECKING:
    from .app import QuickFileTUI


class TextualHost:
    """:class:`~quickfile.core.capabilities.HostSurface` for the TUI.

    ``confirm`` pushes a modal and waits for it, so it must be awaited from
    inside a worker.
    """

    def __init__(self, app: QuickFileTUI):
        self.app = app

    async def confirm(self, message: str) -> ConfirmAnswer:
        return await self.app.push_screen_wait(
            ConfirmationDialog(title="Already exists", message=message, destructive=True)
        )

    def notify(self, message: str) -> None:
        self.app.notify(escape(message), severity="information")

    def warn(self, message: str) -> None:
        self.app.notify(escape(message), severity="warning")

    def error(self, message: str) -> None:
        self.app.notify(escape(message), severity="error", timeout=10)

    async def open_document(self, path: Path) -> None:
        await self.app.open_document(path)

    def reveal(self, path: Path) -> None:
        self.app.reveal_path(path)
