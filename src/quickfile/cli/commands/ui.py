"""
TUI CLI command.

Launch the Terminal User Interface.
"""

from pathlib import Path
from typing import Optional

import typer

from ..context import load_settings


def ui(
    ctx: typer.Context,
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Workspace root (default: current directory)"),
    document: Optional[Path] = typer.Option(None, "--document", "-d", help="File to open as the active document"),
) -> None:
    """Launch the TUI (ctrl+n creates a file or folder)."""
    launch_tui(ctx, root or Path.cwd(), document)


def launch_tui(ctx: typer.Context, root: Path, document: Optional[Path] = None) -> None:
    """Launch the quickfile TUI for ``root``."""
    settings = load_settings(ctx, root, to_stream=False)
    try:
        from quickfile.tui.app import launch
        launch(root, document, settings)
    except Exception as e:
        typer.echo(f"Error launching TUI: {e}", err=True)
        raise typer.Exit(1)
