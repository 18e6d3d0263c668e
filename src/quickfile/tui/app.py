"""Main QuickFileTUI Application.

Hosts the picker: a workspace tree to reveal folders in, a document view to
open files in, and the "create file or folder" command on ``ctrl+n``.
"""

import asyncio
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import DirectoryTree, Footer, Header, Static, TextArea

from ..config.settings import Settings
from ..core.capabilities import FileSystem, LocalFileSystem
from ..core.classifier import display_path
from ..core.command import COMMAND_TITLE, complete_accept, run_command
from ..core.executor import CreationResult
from ..core.session import start_session
from ..utils.logging import get_logger
from .dialogs.picker import PathPicker
from .host import TextualHost

logger = get_logger("tui")


class QuickFileTUI(App):
    """quickfile Terminal User Interface."""

    TITLE = "quickfile"
    SUB_TITLE = COMMAND_TITLE

    CSS = """
    #main {
        height: 1fr;
    }

    #tree {
        width: 35%;
        border-right: solid $primary-darken-2;
    }

    #document-title {
        padding: 0 1;
        color: $text-muted;
    }

    #document {
        height: 1fr;
    }

    #status {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "create_file_or_folder", "New File/Folder", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        workspace_root: Optional[Path],
        active_document: Optional[Path] = None,
        settings: Optional[Settings] = None,
        fs: Optional[FileSystem] = None,
    ):
        """Initialize the application.

        Args:
            workspace_root: Root directory for the session (None reports an
                error when the command runs)
            active_document: File to show in the document view on start
            settings: Loaded settings (defaults when None)
            fs: Filesystem capability (the real disk when None)
        """
        super().__init__()
        self.workspace_root = workspace_root
        self.active_document: Optional[Path] = None
        self._initial_document = active_document
        self.settings = settings or Settings()
        self.fs = fs or LocalFileSystem()
        self.host = TextualHost(self)
        self.last_result: Optional[CreationResult] = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main"):
            yield DirectoryTree(self.workspace_root or Path.cwd(), id="tree")
            with Vertical():
                yield Static("No document open", id="document-title", markup=False)
                yield TextArea(id="document", read_only=True)
        yield Static("ctrl+n to create a file or folder", id="status", markup=False)
        yield Footer()

    async def on_mount(self) -> None:
        """Open the initial document if one was given."""
        if self._initial_document is not None:
            try:
                await self.open_document(self._initial_document)
            except OSError as exc:
                self.host.error(f"Error: {exc}")

    async def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        """Open files picked in the tree; they become the active document."""
        try:
            await self.open_document(event.path)
        except OSError as exc:
            self.host.error(f"Error: {exc}")

    def _set_status(self, message: str) -> None:
        self.query_one("#status", Static).update(message)

    async def open_document(self, path: Path) -> None:
        """Load ``path`` into the document view and make it active."""
        path = Path(path)
        text = await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")
        self.query_one("#document", TextArea).load_text(text)
        self.query_one("#document-title", Static).update(self._display_path(path))
        self.active_document = path
        logger.debug("tui.document_opened", path=str(path))

    def reveal_path(self, path: Path) -> None:
        """Refresh the tree so ``path`` shows up, and point at it."""
        self.query_one("#tree", DirectoryTree).reload()
        self._set_status(f"Revealed: {self._display_path(path)}")

    def _display_path(self, path: Path) -> str:
        return display_path(path, self.workspace_root)

    def action_create_file_or_folder(self) -> None:
        """Run the create command."""
        self.run_worker(
            run_command(self._create_file_or_folder(), self.host),
            exclusive=True,
            group="command",
        )

    async def _create_file_or_folder(self) -> Optional[CreationResult]:
        session = await asyncio.to_thread(
            start_session,
            self.workspace_root,
            self.active_document,
            self.fs,
            self.settings.picker,
        )
        target = await self.push_screen_wait(PathPicker(session))
        if target is None:
            session.dismiss()
            return None

        result = await complete_accept(session, target, self.host)
        self.last_result = result
        return result


def launch(
    workspace_root: Optional[Path],
    active_document: Optional[Path] = None,
    settings: Optional[Settings] = None,
) -> None:
    """Launch the quickfile TUI.

    Args:
        workspace_root: Root directory for the session
        active_document: Optional file to open on start
        settings: Loaded settings
    """
    app = QuickFileTUI(workspace_root, active_document, settings)
    app.run()
