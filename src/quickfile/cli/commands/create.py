"""
Create CLI command.

Run the create command for a typed path without the picker.
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from ...core.command import create_from_text, run_command
from ..context import load_settings
from ..host import ConsoleHost


def create(
    ctx: typer.Context,
    path_text: str = typer.Argument(..., help="Path to create (extension = file, otherwise folder)"),
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Workspace root (default: current directory)"),
    document: Optional[Path] = typer.Option(None, "--document", "-d", help="Active document path"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Overwrite existing files without asking"),
) -> None:
    """Create PATH_TEXT relative to the workspace root (or absolute)."""
    root = root or Path.cwd()
    settings = load_settings(ctx, root)
    host = ConsoleHost(assume_yes=yes, launch_editor=settings.host.launch_editor)

    asyncio.run(
        run_command(
            create_from_text(path_text, root, host, active_document=document),
            host,
        )
    )

    if host.errors:
        raise typer.Exit(1)
