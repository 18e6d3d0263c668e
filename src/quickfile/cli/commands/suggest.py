"""
Suggest CLI command.

Print the picker's suggestions for a given input.
"""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ...core.errors import NoWorkspaceContext
from ...core.session import start_session
from ...core.suggestions import SuggestionRecord
from ..context import load_settings

OUTPUT_FORMATS = ("table", "plain", "json")


def suggest(
    ctx: typer.Context,
    input_text: str = typer.Argument("", help="Picker input (empty lists all folders)"),
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Workspace root (default: current directory)"),
    document: Optional[Path] = typer.Option(None, "--document", "-d", help="Active document path"),
    output_format: str = typer.Option("table", "--format", "-f", help="Output format (table|plain|json)"),
) -> None:
    """Show the suggestions the picker would offer for INPUT_TEXT."""
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(2)

    root = root or Path.cwd()
    settings = load_settings(ctx, root)
    try:
        session = start_session(root, document, settings=settings.picker)
    except NoWorkspaceContext as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    records = session.on_input_changed(input_text)
    session.dismiss()
    render_records(records, output_format)


def render_records(records: List[SuggestionRecord], output_format: str) -> None:
    """Print ``records`` in the requested format."""
    if output_format == "json":
        payload = [
            {
                "label": r.label,
                "kind": r.kind.value,
                "target_path": r.target_path,
                "description": r.description,
            }
            for r in records
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    if output_format == "plain":
        for r in records:
            typer.echo("\t".join([r.kind.value, r.label, r.target_path or "", r.description]))
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Label", style="bold")
    table.add_column("Description", style="dim")
    table.add_column("Target")
    for r in records:
        table.add_row(r.kind.value, r.label, r.description, r.target_path or "")
    Console(highlight=False).print(table)
