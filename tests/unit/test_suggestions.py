"""Unit tests for the suggestion engine."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from quickfile.core.capabilities import LocalFileSystem
from quickfile.core.enumerator import enumerate_folders
from quickfile.core.state import SessionState
from quickfile.core.suggestions import (
    MATCH_LIMIT,
    SuggestionKind,
    SuggestionRecord,
    compute_suggestions,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def state(workspace: Path, fs: LocalFileSystem) -> SessionState:
    return SessionState(
        workspace_root=workspace,
        active_context_dir=workspace / "src" / "components",
        known_folders=enumerate_folders(workspace, fs),
    )


def _kinds(records: list[SuggestionRecord]) -> list[SuggestionKind]:
    return [record.kind for record in records]


class TestBlankInput:
    """Blank input lists every known folder."""

    def test_lists_known_folders(self, state: SessionState) -> None:
        records = compute_suggestions("", state)

        assert _kinds(records) == [SuggestionKind.NAVIGATE_FOLDER] * len(state.known_folders)
        assert [r.target_path for r in records] == [
            ".", "docs", "src", "src/components", "src/utils",
        ]
        assert records[0].label == "."
        assert records[3].label == "components"
        assert all(r.description == "folder" for r in records)

    def test_whitespace_counts_as_blank(self, state: SessionState) -> None:
        assert compute_suggestions("   ", state) == compute_suggestions("", state)


class TestPathInput:
    """Input containing a separator."""

    def test_single_create_file_record(self, state: SessionState) -> None:
        records = compute_suggestions("src/utils/helpers.ts", state)

        assert records == [
            SuggestionRecord(
                label="Create: helpers.ts",
                kind=SuggestionKind.CREATE_FILE,
                target_path="src/utils/helpers.ts",
                description="new file",
            )
        ]

    def test_single_create_folder_record(self, state: SessionState) -> None:
        records = compute_suggestions("src/newdir", state)

        assert len(records) == 1
        assert records[0].kind is SuggestionKind.CREATE_FOLDER
        assert records[0].target_path == "src/newdir"
        assert records[0].description == "new folder"

    def test_no_folder_matches_for_paths(self, state: SessionState) -> None:
        records = compute_suggestions("src/comp", state)

        assert SuggestionKind.SEPARATOR not in _kinds(records)
        assert SuggestionKind.NAVIGATE_FOLDER not in _kinds(records)

    def test_trailing_separator_without_browsing(self, state: SessionState) -> None:
        assert compute_suggestions("src/", state) == []


class TestBrowsing:
    """Input ending in a separator lists that directory."""

    def test_lists_parent_then_entries(self, state: SessionState, fs: LocalFileSystem) -> None:
        records = compute_suggestions("src/", state, fs)

        assert [(r.label, r.kind, r.target_path) for r in records] == [
            ("..", SuggestionKind.NAVIGATE_PARENT, "."),
            ("components", SuggestionKind.NAVIGATE_FOLDER, "src/components"),
            ("utils", SuggestionKind.NAVIGATE_FOLDER, "src/utils"),
        ]

    def test_files_open(self, state: SessionState, fs: LocalFileSystem) -> None:
        records = compute_suggestions("docs/", state, fs)

        assert records[-1].label == "guide.md"
        assert records[-1].kind is SuggestionKind.OPEN_FILE
        assert records[-1].target_path == "docs/guide.md"

    def test_never_offers_create(self, state: SessionState, fs: LocalFileSystem) -> None:
        records = compute_suggestions("src/", state, fs)

        assert not any(r.is_create for r in records)

    def test_hidden_entries(self, state: SessionState, fs: LocalFileSystem) -> None:
        hidden = compute_suggestions("./", state, fs)
        shown = compute_suggestions("./", state, fs, show_hidden=True)

        assert ".github" not in [r.label for r in hidden]
        assert ".github" in [r.label for r in shown]

    def test_uninspectable_entries_are_skipped(self, state: SessionState) -> None:
        src = state.workspace_root / "src"
        fs = MagicMock()
        fs.list_dir.return_value = ["components", "utils"]

        def is_directory(path: Path) -> bool:
            if path == src / "utils":
                raise PermissionError("search permission denied")
            return True

        fs.is_directory.side_effect = is_directory

        records = compute_suggestions("src/", state, fs)

        assert [r.label for r in records] == ["..", "components"]

    def test_unreadable_directory(self, state: SessionState) -> None:
        fs = MagicMock()
        fs.is_directory.side_effect = PermissionError("denied")

        assert compute_suggestions("src/", state, fs) == []

    def test_missing_directory(self, state: SessionState, fs: LocalFileSystem) -> None:
        assert compute_suggestions("nope/", state, fs) == []


class TestSimpleName:
    """A bare name offers creation and folder matches."""

    def test_order_with_active_directory(self, state: SessionState) -> None:
        records = compute_suggestions("util", state)

        assert _kinds(records) == [
            SuggestionKind.CREATE_FOLDER,
            SuggestionKind.CREATE_FOLDER,
            SuggestionKind.SEPARATOR,
            SuggestionKind.NAVIGATE_FOLDER,
        ]
        assert records[0].target_path == "src/components/util"
        assert records[0].description == "new folder in current directory"
        assert records[1].target_path == "util"
        assert records[1].description == "new folder in workspace root"
        assert records[2].label == "Folders"
        assert records[2].target_path is None
        assert records[3].target_path == "src/utils"

    def test_without_active_directory(self, state: SessionState) -> None:
        state.active_context_dir = None
        records = compute_suggestions("notes.md", state)

        assert records == [
            SuggestionRecord(
                label="Create: notes.md",
                kind=SuggestionKind.CREATE_FILE,
                target_path="notes.md",
                description="new file in workspace root",
            )
        ]

    def test_active_directory_at_root(self, state: SessionState) -> None:
        state.active_context_dir = state.workspace_root
        records = compute_suggestions("notes.md", state)

        assert [r.target_path for r in records] == ["notes.md", "notes.md"]

    def test_matches_are_case_insensitive(self, state: SessionState) -> None:
        records = compute_suggestions("COMP", state)

        assert records[-1].target_path == "src/components"

    def test_no_separator_without_matches(self, state: SessionState) -> None:
        records = compute_suggestions("zzz", state)

        assert SuggestionKind.SEPARATOR not in _kinds(records)
        assert len(records) == 2

    def test_match_limit(self, tmp_path: Path, fs: LocalFileSystem) -> None:
        root = tmp_path / "ws"
        for i in range(MATCH_LIMIT + 5):
            (root / f"match{i:02d}").mkdir(parents=True)
        state = SessionState(
            workspace_root=root,
            known_folders=enumerate_folders(root, fs),
        )

        records = compute_suggestions("match", state)
        folders = [r for r in records if r.kind is SuggestionKind.NAVIGATE_FOLDER]

        assert len(folders) == MATCH_LIMIT
        assert _kinds(records).count(SuggestionKind.SEPARATOR) == 1
        assert folders[0].target_path == "match00"


class TestRecords:
    """Record properties."""

    def test_recompute_is_stable(self, state: SessionState, fs: LocalFileSystem) -> None:
        for text in ["", "util", "src/a.ts", "src/"]:
            assert compute_suggestions(text, state, fs) == compute_suggestions(text, state, fs)

    def test_records_are_frozen(self) -> None:
        record = SuggestionRecord(label="x", kind=SuggestionKind.CREATE_FOLDER, target_path="x")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.label = "y"  # type: ignore[misc]

    def test_separator_is_not_selectable(self) -> None:
        separator = SuggestionRecord(label="Folders", kind=SuggestionKind.SEPARATOR)

        assert separator.is_selectable is False
        assert separator.is_navigation is False
