"""Shared state passed from the root callback to every command."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import typer

from ..config.settings import Settings, get_settings
from ..core.errors import ConfigError
from ..utils.logging import configure_from_settings


@dataclass
class CLIContext:
    """Overrides collected from global options."""

    overrides: dict[str, Any] = field(default_factory=dict)


def load_settings(
    ctx: typer.Context,
    root: Optional[Path],
    *,
    to_stream: bool = True,
) -> Settings:
    """Load settings for ``root`` and configure logging from them."""
    cli_context = ctx.obj if isinstance(ctx.obj, CLIContext) else CLIContext()
    try:
        settings = get_settings(project_root=root, overrides=cli_context.overrides)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    configure_from_settings(settings, to_stream=to_stream)
    return settings
