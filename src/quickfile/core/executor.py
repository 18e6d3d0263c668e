"""Creation executor state machine.

Implements the create lifecycle with explicit states and transitions:

    IDLE -> ENSURING_PARENT -> CHECKING_CONFLICT -> WRITING -> POST_ACTION -> IDLE

Any step may ``abort`` back to IDLE. Declined or pre-existing targets end
the run quietly; filesystem failures end it with a single
:class:`~quickfile.core.errors.CreationFailure`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from transitions import Machine

from quickfile.core.capabilities import CONFIRM_YES, FileSystem, HostSurface
from quickfile.core.errors import ConflictDeclined, CreationFailure
from quickfile.core.resolver import ResolvedTarget
from quickfile.utils.logging import get_logger


class CreationState(str, Enum):
    """Creation lifecycle states."""

    IDLE = "IDLE"
    ENSURING_PARENT = "ENSURING_PARENT"
    CHECKING_CONFLICT = "CHECKING_CONFLICT"
    WRITING = "WRITING"
    POST_ACTION = "POST_ACTION"


class CreationStatus(str, Enum):
    """How a creation run ended."""

    CREATED = "created"
    DECLINED = "declined"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class CreationResult:
    """Outcome of :meth:`CreationExecutor.create`."""

    status: CreationStatus
    path: Path
    is_file: bool

    @property
    def created(self) -> bool:
        return self.status is CreationStatus.CREATED


TRANSITIONS: list[dict[str, Any]] = [
    {
        "trigger": "begin",
        "source": CreationState.IDLE.value,
        "dest": CreationState.ENSURING_PARENT.value,
    },
    {
        "trigger": "parent_ready",
        "source": CreationState.ENSURING_PARENT.value,
        "dest": CreationState.CHECKING_CONFLICT.value,
    },
    {
        "trigger": "conflict_cleared",
        "source": CreationState.CHECKING_CONFLICT.value,
        "dest": CreationState.WRITING.value,
    },
    {
        "trigger": "write_done",
        "source": CreationState.WRITING.value,
        "dest": CreationState.POST_ACTION.value,
    },
    {
        "trigger": "settle",
        "source": CreationState.POST_ACTION.value,
        "dest": CreationState.IDLE.value,
    },
    {"trigger": "abort", "source": "*", "dest": CreationState.IDLE.value},
]


class CreationExecutor:
    """Creates one file or folder and triggers the follow-up action.

    Parameters
    ----------
    fs : FileSystem
        Filesystem capability used for every mutation.
    host : HostSurface
        Host used for the overwrite prompt, notifications, opening and
        revealing.
    """

    def __init__(self, fs: FileSystem, host: HostSurface):
        self.fs = fs
        self.host = host
        self.logger = get_logger("executor")
        self.history: list[str] = []
        self.state: str = CreationState.IDLE.value

        self._machine = Machine(
            model=self,
            states=[state.value for state in CreationState],
            transitions=TRANSITIONS,
            initial=CreationState.IDLE.value,
            auto_transitions=False,
            ignore_invalid_triggers=True,
            after_state_change=self._record_transition,
            send_event=False,
        )

    def _record_transition(self) -> None:
        self.history.append(self.state)
        self.logger.debug("executor.transition", state=self.state)

    @property
    def state_enum(self) -> CreationState:
        return CreationState(self.state)

    @property
    def is_idle(self) -> bool:
        return self.state == CreationState.IDLE.value

    async def create(self, target: ResolvedTarget) -> CreationResult:
        """Run one creation to completion or abort.

        Raises:
            CreationFailure: Parent creation, the write, or opening the new
                file failed
        """
        path = target.absolute_path
        self.logger.info("executor.started", path=str(path), kind=target.kind_name)
        self.begin()

        try:
            self._ensure_parent(path, target.kind_name)
            self.parent_ready()
            await self._check_conflict(target)
            self.conflict_cleared()
            self._write(target)
            self.write_done()
            await self._post_action(target)
            self.settle()
        except ConflictDeclined as exc:
            self.abort()
            self.logger.info("executor.conflict", path=str(path), prompted=exc.prompted)
            status = CreationStatus.DECLINED if exc.prompted else CreationStatus.ALREADY_EXISTS
            return CreationResult(status=status, path=path, is_file=target.is_file)
        except CreationFailure as exc:
            self.abort()
            self.logger.error("executor.failed", path=str(path), error=str(exc))
            raise

        self.logger.info("executor.completed", path=str(path), kind=target.kind_name)
        return CreationResult(status=CreationStatus.CREATED, path=path, is_file=target.is_file)

    def _ensure_parent(self, path: Path, kind: str) -> None:
        parent = path.parent
        try:
            if not self.fs.exists(parent):
                self.fs.mkdir(parent, recursive=True)
        except OSError as exc:
            raise CreationFailure(kind, exc) from exc

    async def _check_conflict(self, target: ResolvedTarget) -> None:
        path = target.absolute_path
        try:
            exists = self.fs.exists(path)
        except OSError as exc:
            raise CreationFailure(target.kind_name, exc) from exc
        if not exists:
            return

        if not target.is_file:
            self.host.warn(f'Folder "{path.name}" already exists.')
            raise ConflictDeclined(path, is_file=False, prompted=False)

        answer = await self.host.confirm(f'File "{path.name}" already exists. Overwrite?')
        if answer != CONFIRM_YES:
            raise ConflictDeclined(path, is_file=True, prompted=True)

    def _write(self, target: ResolvedTarget) -> None:
        try:
            if target.is_file:
                self.fs.write_empty_file(target.absolute_path)
            else:
                self.fs.mkdir(target.absolute_path, recursive=True)
        except OSError as exc:
            raise CreationFailure(target.kind_name, exc) from exc

    async def _post_action(self, target: ResolvedTarget) -> None:
        path = target.absolute_path
        if target.is_file:
            try:
                await self.host.open_document(path)
            except Exception as exc:
                raise CreationFailure("file", exc) from exc
            self.host.notify(f"File created: {path.name}")
            return

        try:
            self.host.reveal(path)
        except Exception as exc:
            self.logger.debug("executor.reveal_failed", path=str(path), error=str(exc))
        self.host.notify(f"Folder created: {path.name}")


__all__ = [
    "CreationState",
    "CreationStatus",
    "CreationResult",
    "TRANSITIONS",
    "CreationExecutor",
]
