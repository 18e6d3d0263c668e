"""Turns an accepted record or free text into a concrete target."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from quickfile.core.capabilities import FileSystem
from quickfile.core.classifier import (
    SEPARATOR,
    has_file_extension,
    normalize_separators,
    to_absolute,
)
from quickfile.core.state import SessionState
from quickfile.core.suggestions import SuggestionKind, SuggestionRecord


class TargetAction(str, Enum):
    """Terminal action for a resolved target."""

    OPEN = "open"
    CREATE = "create"


@dataclass(frozen=True)
class ResolvedTarget:
    """A single absolute path plus the file/folder decision.

    ``is_file`` comes from the record kind or the extension heuristic, never
    from what is on disk. ``already_exists`` is checked live at resolution.
    """

    absolute_path: Path
    is_file: bool
    already_exists: bool
    action: TargetAction = TargetAction.CREATE

    @property
    def kind_name(self) -> str:
        return "file" if self.is_file else "folder"


@dataclass(frozen=True)
class NavigationRequest:
    """Non-terminal result: restart the suggestion loop with ``new_input``."""

    new_input: str


Resolution = Union[ResolvedTarget, NavigationRequest]


def resolve_path(path_string: str, workspace_root: Optional[Path]) -> Path:
    """Resolve ``path_string`` against the workspace root.

    Absolute input is used as-is; relative input is anchored at the root,
    or at the current working directory when no root is known.
    """
    return to_absolute(path_string.strip(), workspace_root)


def _navigation_input(target_path: str) -> str:
    text = normalize_separators(target_path)
    return text if text.endswith(SEPARATOR) else text + SEPARATOR


def resolve(
    accepted: Union[SuggestionRecord, str, None],
    session: SessionState,
    fs: FileSystem,
) -> Optional[Resolution]:
    """Resolve what the user accepted.

    Args:
        accepted: The active record, explicit free text, or None to use
            ``session.raw_input``
        session: The current session
        fs: Filesystem used for the live existence check

    Returns:
        A :class:`NavigationRequest` for navigation records, a
        :class:`ResolvedTarget` for terminal actions, or None when there is
        nothing to act on (blank free text)

    Raises:
        ValueError: If a separator record is passed in
    """
    root = session.workspace_root

    if isinstance(accepted, SuggestionRecord):
        if accepted.kind is SuggestionKind.SEPARATOR or accepted.target_path is None:
            raise ValueError("Separator records cannot be accepted")

        if accepted.is_navigation:
            return NavigationRequest(new_input=_navigation_input(accepted.target_path))

        path = resolve_path(accepted.target_path, root)
        if accepted.kind is SuggestionKind.OPEN_FILE:
            return ResolvedTarget(
                absolute_path=path,
                is_file=True,
                already_exists=fs.exists(path),
                action=TargetAction.OPEN,
            )
        return ResolvedTarget(
            absolute_path=path,
            is_file=accepted.kind is SuggestionKind.CREATE_FILE,
            already_exists=fs.exists(path),
        )

    text = session.raw_input if accepted is None else accepted
    if not text.strip():
        return None
    path = resolve_path(text, root)
    return ResolvedTarget(
        absolute_path=path,
        is_file=has_file_extension(text.strip()),
        already_exists=fs.exists(path),
    )


__all__ = [
    "TargetAction",
    "ResolvedTarget",
    "NavigationRequest",
    "Resolution",
    "resolve_path",
    "resolve",
]
