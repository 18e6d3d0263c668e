"""
quickfile command line entry point.
"""

from pathlib import Path
from typing import Optional

import typer

from quickfile import __version__
from quickfile.cli.commands import create, suggest, ui
from quickfile.cli.context import CLIContext

app = typer.Typer(
    name="quickfile",
    help="Create, open or navigate to files and folders from a single path input.",
    no_args_is_help=True,
)

app.command("ui")(ui.ui)
app.command("suggest")(suggest.suggest)
app.command("create")(create.create)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"quickfile {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase log verbosity (-v info, -vv debug)"),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="Log format (text|json)"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """quickfile - incremental create-file-or-folder picker."""
    general: dict = {}
    if verbose:
        general["verbosity"] = "info" if verbose == 1 else "debug"
    if log_format:
        general["output_format"] = log_format
    if log_file:
        general["log_file"] = log_file
    ctx.obj = CLIContext(overrides={"general": general} if general else {})


@app.command("version")
def version_command() -> None:
    """Show the installed version."""
    typer.echo(f"quickfile {__version__}")
