"""The "create file or folder" command and its error boundary.

Hosts drive a :class:`~quickfile.core.session.PickerSession` while the picker
is open, then hand the resolved target to :func:`complete_accept`. Every
invocation is wrapped in :func:`run_command`, which turns any failure into
a single user-visible error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Awaitable, Optional, TypeVar, Union

from quickfile.core.capabilities import FileSystem, HostSurface
from quickfile.core.errors import CreationFailure
from quickfile.core.executor import CreationExecutor, CreationResult
from quickfile.core.resolver import ResolvedTarget, TargetAction
from quickfile.core.session import PickerSession, start_session
from quickfile.utils.logging import get_logger

COMMAND_ID = "quickfile.create"
COMMAND_TITLE = "Create File or Folder"

T = TypeVar("T")

logger = get_logger("command")


async def execute_target(
    target: ResolvedTarget,
    fs: FileSystem,
    host: HostSurface,
) -> Optional[CreationResult]:
    """Open an existing file or run the creation executor.

    Returns None for the open action.
    """
    if target.action is TargetAction.OPEN:
        try:
            await host.open_document(target.absolute_path)
        except Exception as exc:
            raise CreationFailure("file", exc, verb="open") from exc
        return None
    return await CreationExecutor(fs, host).create(target)


async def complete_accept(
    session: PickerSession,
    target: ResolvedTarget,
    host: HostSurface,
) -> Optional[CreationResult]:
    """Run the terminal action for ``target`` and close ``session``."""
    try:
        return await execute_target(target, session.fs, host)
    finally:
        session.close()


async def create_from_text(
    text: str,
    workspace_root: Optional[Path],
    host: HostSurface,
    *,
    active_document: Optional[Path] = None,
    fs: Optional[FileSystem] = None,
) -> Union[CreationResult, ResolvedTarget, None]:
    """Accept ``text`` as free input without showing a picker.

    Returns the creation result, the resolved target for the open action,
    or None when ``text`` is blank.
    """
    session = start_session(workspace_root, active_document, fs)
    session.on_input_changed(text)
    result = session.on_accept(None)
    if not isinstance(result, ResolvedTarget):
        session.close()
        return None

    outcome = await complete_accept(session, result, host)
    return result if outcome is None else outcome


async def run_command(action: Awaitable[T], host: HostSurface) -> Optional[T]:
    """Await ``action``; report any failure once through ``host.error``."""
    try:
        return await action
    except Exception as exc:
        logger.error("command.failed", error=str(exc), error_type=type(exc).__name__)
        host.error(f"Error: {exc}")
        return None


__all__ = [
    "COMMAND_ID",
    "COMMAND_TITLE",
    "execute_target",
    "complete_accept",
    "create_from_text",
    "run_command",
]
