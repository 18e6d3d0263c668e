"""Picker session driven by two events: input changed and accept.

One :class:`PickerSession` exists per invocation of the picker. It owns the
:class:`~quickfile.core.state.SessionState` snapshot, recomputes suggestions
on every input change and resolves accept events. Nothing is shared between
sessions.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from quickfile.core.capabilities import FileSystem, LocalFileSystem
from quickfile.core.classifier import to_absolute
from quickfile.core.enumerator import enumerate_folders
from quickfile.core.errors import NoWorkspaceContext
from quickfile.core.resolver import NavigationRequest, Resolution, ResolvedTarget, resolve
from quickfile.core.state import SessionPhase, SessionState
from quickfile.core.suggestions import SuggestionRecord, compute_suggestions
from quickfile.utils.logging import clear_session_context, get_logger, set_session_context

if TYPE_CHECKING:
    from quickfile.config.settings import PickerSettings

logger = get_logger("session")


class SessionClosedError(RuntimeError):
    """Raised when an event reaches a session that is no longer active."""


class PickerSession:
    """Explicit two-event state machine for one picker invocation.

    Parameters
    ----------
    state : SessionState
        Snapshot taken at session start.
    fs : FileSystem
        Filesystem used for browsing and existence checks.
    browse_directories : bool
        List the typed directory when input ends in a separator.
    show_hidden : bool
        Include dot-entries when browsing.
    """

    def __init__(
        self,
        state: SessionState,
        fs: FileSystem,
        *,
        browse_directories: bool = True,
        show_hidden: bool = False,
    ):
        self.state = state
        self.fs = fs
        self.browse_directories = browse_directories
        self.show_hidden = show_hidden
        self.phase = SessionPhase.ACTIVE
        self._records: List[SuggestionRecord] = []

    @property
    def records(self) -> List[SuggestionRecord]:
        """Suggestions for the current input."""
        return list(self._records)

    @property
    def is_active(self) -> bool:
        return self.phase is SessionPhase.ACTIVE

    def _require_active(self) -> None:
        if self.phase is not SessionPhase.ACTIVE:
            raise SessionClosedError(f"Session {self.state.session_id} is {self.phase.value}")

    def on_input_changed(self, text: str) -> List[SuggestionRecord]:
        """Recompute suggestions for ``text`` and return them."""
        self._require_active()
        self.state.raw_input = text
        self._records = compute_suggestions(
            text,
            self.state,
            self.fs if self.browse_directories else None,
            show_hidden=self.show_hidden,
        )
        return self.records

    def on_accept(
        self, record: Union[SuggestionRecord, str, None] = None
    ) -> Optional[Resolution]:
        """Handle an accept event.

        Navigation records restart the loop with new input (the returned
        :class:`NavigationRequest` carries it). Terminal targets move the
        session to EXECUTING; the caller runs the action and then closes it.
        """
        self._require_active()
        result = resolve(record, self.state, self.fs)

        if isinstance(result, NavigationRequest):
            logger.debug("session.navigate", new_input=result.new_input)
            self.on_input_changed(result.new_input)
        elif isinstance(result, ResolvedTarget):
            logger.info(
                "session.accepted",
                path=str(result.absolute_path),
                action=result.action.value,
                is_file=result.is_file,
            )
            self.phase = SessionPhase.EXECUTING
        return result

    def close(self) -> None:
        """Tear the session down (accept finished or picker dismissed)."""
        if self.phase is SessionPhase.CLOSED:
            return
        logger.debug("session.closed", phase=self.phase.value)
        self.phase = SessionPhase.CLOSED
        self._records = []
        clear_session_context()

    dismiss = close


def start_session(
    workspace_root: Optional[Path],
    active_document: Optional[Path] = None,
    fs: Optional[FileSystem] = None,
    settings: Optional[PickerSettings] = None,
) -> PickerSession:
    """Open a new session: validate the root and snapshot known folders.

    Raises:
        NoWorkspaceContext: No root given, or it is not a directory
    """
    fs = fs or LocalFileSystem()
    if workspace_root is None:
        raise NoWorkspaceContext()

    root = to_absolute(str(workspace_root), None)
    if not fs.is_directory(root):
        raise NoWorkspaceContext(root)

    active_dir = None
    if active_document is not None:
        active_dir = to_absolute(str(active_document), root).parent

    state = SessionState(
        workspace_root=root,
        active_context_dir=active_dir,
        known_folders=enumerate_folders(root, fs),
    )
    set_session_context(session_id=state.session_id)
    logger.info(
        "session.started",
        root=str(root),
        active_dir=str(active_dir) if active_dir else None,
        folders=len(state.known_folders),
    )

    session = PickerSession(
        state,
        fs,
        browse_directories=settings.browse_directories if settings else True,
        show_hidden=settings.show_hidden_entries if settings else False,
    )
    session.on_input_changed("")
    return session


__all__ = ["SessionClosedError", "PickerSession", "start_session"]
