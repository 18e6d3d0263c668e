"""
End-to-end tests for the CLI interface.

Tests full user workflows from command line to output.
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = [pytest.mark.e2e]


def run_cli(*args: str, cwd: Path, home: Path, input_text: str | None = None) -> subprocess.CompletedProcess:
    """Run ``python -m quickfile`` with an isolated home directory."""
    env = dict(os.environ)
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env = {k: v for k, v in env.items() if not k.startswith("QUICKFILE_")}
    return subprocess.run(
        [sys.executable, "-m", "quickfile", *args],
        capture_output=True,
        text=True,
        timeout=60,
        cwd=cwd,
        env=env,
        input=input_text,
    )


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


class TestCLIVersion:
    """Test version output."""

    def test_version_flag(self, workspace: Path, home: Path) -> None:
        result = run_cli("--version", cwd=workspace, home=home)

        assert result.returncode == 0
        assert result.stdout.startswith("quickfile 0.")

    def test_version_command(self, workspace: Path, home: Path) -> None:
        result = run_cli("version", cwd=workspace, home=home)

        assert result.returncode == 0
        assert "quickfile" in result.stdout


class TestCLIHelp:
    """Test help output."""

    def test_help_shows_commands(self, workspace: Path, home: Path) -> None:
        result = run_cli("--help", cwd=workspace, home=home)

        assert result.returncode == 0
        for command in ("ui", "suggest", "create", "version"):
            assert command in result.stdout


class TestSuggest:
    """The suggest command prints what the picker would offer."""

    def test_blank_input_lists_folders(self, workspace: Path, home: Path) -> None:
        result = run_cli("suggest", "--format", "json", cwd=workspace, home=home)

        assert result.returncode == 0
        records = json.loads(result.stdout)
        assert [r["target_path"] for r in records] == [
            ".", "docs", "src", "src/components", "src/utils",
        ]

    def test_simple_name(self, workspace: Path, home: Path) -> None:
        result = run_cli(
            "suggest", "util",
            "--document", "src/components/Button.tsx",
            "--format", "plain",
            cwd=workspace, home=home,
        )

        assert result.returncode == 0
        lines = [line.split("\t") for line in result.stdout.splitlines()]
        assert [line[0] for line in lines] == [
            "create_folder", "create_folder", "separator", "navigate_folder",
        ]
        assert lines[0][2] == "src/components/util"
        assert lines[1][2] == "util"
        assert lines[3][2] == "src/utils"

    def test_browse_directory(self, workspace: Path, home: Path) -> None:
        result = run_cli("suggest", "docs/", "-f", "json", cwd=workspace, home=home)

        records = json.loads(result.stdout)
        assert [(r["label"], r["kind"]) for r in records] == [
            ("..", "navigate_parent"),
            ("guide.md", "open_file"),
        ]

    def test_project_config_shows_hidden(self, workspace: Path, home: Path) -> None:
        (workspace / ".quickfile.yaml").write_text("picker:\n  show_hidden_entries: true\n", encoding="utf-8")

        result = run_cli("suggest", "./", "-f", "json", cwd=workspace, home=home)

        labels = [r["label"] for r in json.loads(result.stdout)]
        assert ".github" in labels

    def test_table_output(self, workspace: Path, home: Path) -> None:
        result = run_cli("suggest", "notes.md", "--root", str(workspace), cwd=home, home=home)

        assert result.returncode == 0
        assert "Create: notes.md" in result.stdout

    def test_unknown_format(self, workspace: Path, home: Path) -> None:
        result = run_cli("suggest", "-f", "xml", cwd=workspace, home=home)

        assert result.returncode == 2

    def test_missing_root(self, tmp_path: Path, home: Path) -> None:
        result = run_cli("suggest", "--root", str(tmp_path / "missing"), cwd=tmp_path, home=home)

        assert result.returncode == 1
        assert "not a directory" in result.stderr

    def test_invalid_config(self, workspace: Path, home: Path) -> None:
        (workspace / ".quickfile.yaml").write_text("general:\n  verbosity: loud\n", encoding="utf-8")

        result = run_cli("suggest", cwd=workspace, home=home)

        assert result.returncode == 1
        assert "Invalid configuration" in result.stderr


class TestCreate:
    """The create command runs the full create flow."""

    def test_creates_nested_file(self, workspace: Path, home: Path) -> None:
        result = run_cli("create", "src/utils/helpers.ts", cwd=workspace, home=home)

        assert result.returncode == 0
        assert (workspace / "src" / "utils" / "helpers.ts").read_text(encoding="utf-8") == ""
        assert "File created: helpers.ts" in result.stdout

    def test_creates_folder(self, workspace: Path, home: Path) -> None:
        result = run_cli("create", "assets/images", cwd=workspace, home=home)

        assert result.returncode == 0
        assert (workspace / "assets" / "images").is_dir()
        assert "Folder created: images" in result.stdout

    def test_hidden_name_is_a_folder(self, workspace: Path, home: Path) -> None:
        result = run_cli("create", ".vscode", cwd=workspace, home=home)

        assert result.returncode == 0
        assert (workspace / ".vscode").is_dir()

    def test_existing_folder_warns(self, workspace: Path, home: Path) -> None:
        result = run_cli("create", "docs", cwd=workspace, home=home)

        assert result.returncode == 0
        assert 'Folder "docs" already exists.' in result.stdout
        assert (workspace / "docs" / "guide.md").exists()

    def test_overwrite_declined(self, workspace: Path, home: Path) -> None:
        result = run_cli("create", "README.md", cwd=workspace, home=home, input_text="n\n")

        assert result.returncode == 0
        assert (workspace / "README.md").read_text(encoding="utf-8") == "hello\n"

    def test_overwrite_with_yes(self, workspace: Path, home: Path) -> None:
        result = run_cli("create", "README.md", "--yes", cwd=workspace, home=home)

        assert result.returncode == 0
        assert (workspace / "README.md").read_text(encoding="utf-8") == ""

    def test_creation_failure(self, workspace: Path, home: Path) -> None:
        result = run_cli("create", "README.md/inner.txt", cwd=workspace, home=home)

        assert result.returncode == 1
        assert "Error: Failed to create file:" in result.stderr
        assert (workspace / "README.md").read_text(encoding="utf-8") == "hello\n"


class TestUI:
    """The ui command."""

    def test_help_lists_options(self, workspace: Path, home: Path) -> None:
        result = run_cli("ui", "--help", cwd=workspace, home=home)

        assert result.returncode == 0
        assert "--root" in result.stdout
        assert "--document" in result.stdout
