"""Unit tests for launching the TUI from the command line."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import typer

from quickfile.cli.commands.ui import launch_tui
from quickfile.config.settings import Settings
from quickfile.tui.app import QuickFileTUI, launch

pytestmark = pytest.mark.unit


class TestLaunch:
    def test_launch_runs_app(self, workspace: Path) -> None:
        settings = Settings()

        with patch.object(QuickFileTUI, "run") as run:
            launch(workspace, workspace / "README.md", settings)

        run.assert_called_once_with()

    def test_cli_routes_through_launch(self, workspace: Path) -> None:
        settings = Settings()

        with patch("quickfile.cli.commands.ui.load_settings", return_value=settings), \
                patch("quickfile.tui.app.launch") as tui_launch:
            launch_tui(MagicMock(), workspace, Path("docs/guide.md"))

        tui_launch.assert_called_once_with(workspace, Path("docs/guide.md"), settings)

    def test_launch_failure_exits(self, workspace: Path) -> None:
        with patch("quickfile.cli.commands.ui.load_settings", return_value=Settings()), \
                patch("quickfile.tui.app.launch", side_effect=RuntimeError("no terminal")):
            with pytest.raises(typer.Exit) as excinfo:
                launch_tui(MagicMock(), workspace)

        assert excinfo.value.exit_code == 1
