"""Host surface for the command line."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..core.capabilities import CONFIRM_NO, CONFIRM_YES, ConfirmAnswer
from ..tui.styles.icons import ICON_CHECK, ICON_CROSS, ICON_INFO, ICON_WARNING


class ConsoleHost:
    """:class:`~quickfile.core.capabilities.HostSurface` printing with rich.

    Messages are also kept on the instance so callers can pick an exit code.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        assume_yes: bool = False,
        launch_editor: bool = False,
    ):
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)
        self.assume_yes = assume_yes
        self.launch_editor = launch_editor
        self.notifications: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    async def confirm(self, message: str) -> ConfirmAnswer:
        if self.assume_yes:
            return CONFIRM_YES
        try:
            return CONFIRM_YES if typer.confirm(message, default=False) else CONFIRM_NO
        except typer.Abort:
            return None

    def notify(self, message: str) -> None:
        self.notifications.append(message)
        self.console.print(f"[green]{ICON_CHECK}[/green] {escape(message)}")

    def warn(self, message: str) -> None:
        self.warnings.append(message)
        self.console.print(f"[yellow]{ICON_WARNING}[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        self.errors.append(message)
        self.error_console.print(f"[red]{ICON_CROSS}[/red] {escape(message)}")

    async def open_document(self, path: Path) -> None:
        if self.launch_editor:
            code = typer.launch(str(path))
            if code != 0:
                raise OSError(f"Could not open {path} (exit code {code})")
        self.console.print(f"[cyan]{ICON_INFO}[/cyan] Opened {escape(str(path))}")

    def reveal(self, path: Path) -> None:
        if self.launch_editor:
            typer.launch(str(path), locate=True)
        self.console.print(f"[cyan]{ICON_INFO}[/cyan] Revealed {escape(str(path))}")
