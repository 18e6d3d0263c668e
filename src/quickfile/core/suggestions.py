"""Incremental suggestion engine.

Turns the picker's current text into an ordered list of typed
:class:`SuggestionRecord` objects. Records are rebuilt from scratch on every
input change and never mutated afterwards.

Rules, highest priority first:

1. Blank input lists every known folder.
2. Input containing a separator offers one create record for the full path,
   or, when it ends in a separator, browses that directory.
3. A bare name offers create records in the active document's directory and
   in the workspace root, then up to ``MATCH_LIMIT`` matching folders.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from quickfile.core.capabilities import FileSystem
from quickfile.core.classifier import (
    SEPARATOR,
    display_path,
    has_file_extension,
    normalize_separators,
    split_input,
    to_absolute,
)
from quickfile.core.state import SessionState
from quickfile.utils.logging import get_logger

MATCH_LIMIT = 10

CREATE_PREFIX = "Create: "

logger = get_logger("suggestions")


class SuggestionKind(str, Enum):
    """What accepting a suggestion does."""

    NAVIGATE_PARENT = "navigate_parent"
    NAVIGATE_FOLDER = "navigate_folder"
    OPEN_FILE = "open_file"
    CREATE_FILE = "create_file"
    CREATE_FOLDER = "create_folder"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class SuggestionRecord:
    """One candidate action shown in the picker.

    ``target_path`` is workspace-relative or absolute and is resolved only
    when the record is accepted. Separators carry no target.
    """

    label: str
    kind: SuggestionKind
    target_path: Optional[str] = None
    description: str = ""

    @property
    def is_selectable(self) -> bool:
        return self.kind is not SuggestionKind.SEPARATOR

    @property
    def is_navigation(self) -> bool:
        return self.kind in (SuggestionKind.NAVIGATE_PARENT, SuggestionKind.NAVIGATE_FOLDER)

    @property
    def is_create(self) -> bool:
        return self.kind in (SuggestionKind.CREATE_FILE, SuggestionKind.CREATE_FOLDER)


def _folder_label(folder: Path, root: Path) -> str:
    return "." if folder == root else folder.name


def _create_record(name: str, target_path: str, scope: str = "") -> SuggestionRecord:
    is_file = has_file_extension(name)
    description = "new file" if is_file else "new folder"
    if scope:
        description = f"{description} {scope}"
    return SuggestionRecord(
        label=f"{CREATE_PREFIX}{name}",
        kind=SuggestionKind.CREATE_FILE if is_file else SuggestionKind.CREATE_FOLDER,
        target_path=target_path,
        description=description,
    )


def _known_folder_records(session: SessionState) -> List[SuggestionRecord]:
    root = session.workspace_root
    return [
        SuggestionRecord(
            label=_folder_label(folder, root),
            kind=SuggestionKind.NAVIGATE_FOLDER,
            target_path=display_path(folder, root),
            description="folder",
        )
        for folder in session.known_folders
    ]


def _browse_records(
    directory_text: str,
    session: SessionState,
    fs: FileSystem,
    show_hidden: bool,
) -> List[SuggestionRecord]:
    """List an existing directory live: ``..`` first, then its entries."""
    root = session.workspace_root
    directory = to_absolute(directory_text, root)
    try:
        if not fs.is_directory(directory):
            return []
        names = fs.list_dir(directory)
    except OSError as exc:
        logger.warning("suggestions.browse_failed", path=str(directory), error=str(exc))
        return []

    records: List[SuggestionRecord] = []
    if directory.parent != directory:
        records.append(
            SuggestionRecord(
                label="..",
                kind=SuggestionKind.NAVIGATE_PARENT,
                target_path=display_path(directory.parent, root),
                description="parent directory",
            )
        )

    for name in sorted(names, key=lambda n: (n.lower(), n)):
        if name.startswith(".") and not show_hidden:
            continue
        entry = directory / name
        try:
            is_dir = fs.is_directory(entry)
        except OSError as exc:
            logger.debug("suggestions.entry_skipped", path=str(entry), error=str(exc))
            continue
        if is_dir:
            kind, description = SuggestionKind.NAVIGATE_FOLDER, "folder"
        else:
            kind, description = SuggestionKind.OPEN_FILE, "file"
        records.append(
            SuggestionRecord(
                label=name,
                kind=kind,
                target_path=display_path(entry, root),
                description=description,
            )
        )
    return records


def _simple_name_records(name: str, session: SessionState) -> List[SuggestionRecord]:
    root = session.workspace_root
    records: List[SuggestionRecord] = []

    if session.active_context_dir is not None:
        relative_dir = display_path(session.active_context_dir, root)
        target = name if relative_dir == "." else f"{relative_dir}{SEPARATOR}{name}"
        records.append(_create_record(name, target, "in current directory"))

    records.append(_create_record(name, name, "in workspace root"))

    needle = name.lower()
    matches = [
        folder for folder in session.known_folders
        if needle in folder.name.lower()
    ][:MATCH_LIMIT]
    if matches:
        records.append(SuggestionRecord(label="Folders", kind=SuggestionKind.SEPARATOR))
        for folder in matches:
            records.append(
                SuggestionRecord(
                    label=_folder_label(folder, root),
                    kind=SuggestionKind.NAVIGATE_FOLDER,
                    target_path=display_path(folder, root),
                    description="folder",
                )
            )
    return records


def compute_suggestions(
    raw_input: str,
    session: SessionState,
    fs: Optional[FileSystem] = None,
    *,
    show_hidden: bool = False,
) -> List[SuggestionRecord]:
    """Build the suggestion list for ``raw_input``.

    Args:
        raw_input: Current picker text
        session: Session snapshot (root, active directory, known folders)
        fs: When given, inputs ending in a separator browse that directory
        show_hidden: Include dot-entries when browsing

    Returns:
        A fresh list of records in display order
    """
    text = raw_input.strip()
    if not text:
        return _known_folder_records(session)

    normalized = normalize_separators(text)
    if SEPARATOR in normalized:
        directory, name = split_input(normalized)
        if name:
            return [_create_record(name, normalized)]
        if fs is None:
            return []
        return _browse_records(directory, session, fs, show_hidden)

    return _simple_name_records(normalized, session)


__all__ = [
    "MATCH_LIMIT",
    "CREATE_PREFIX",
    "SuggestionKind",
    "SuggestionRecord",
    "compute_suggestions",
]
