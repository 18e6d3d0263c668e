"""Per-invocation session data for the picker.

A session lives from the moment the picker opens until it is accepted or
dismissed. Nothing here survives teardown.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from quickfile.utils.logging import generate_session_id


class SessionPhase(str, Enum):
    """Lifecycle of a picker session."""

    ACTIVE = "ACTIVE"
    EXECUTING = "EXECUTING"
    CLOSED = "CLOSED"


@dataclass
class SessionState:
    """Ephemeral state for one invocation of the picker.

    ``known_folders`` is a snapshot taken once at session start. Folders
    created while the session is open are not added to it.
    """

    workspace_root: Path
    active_context_dir: Optional[Path] = None
    known_folders: Tuple[Path, ...] = ()
    raw_input: str = ""
    session_id: str = field(default_factory=generate_session_id)

    @property
    def has_active_context(self) -> bool:
        return self.active_context_dir is not None


__all__ = ["SessionPhase", "SessionState"]
