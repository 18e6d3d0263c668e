"""Error taxonomy for the create-file-or-folder command.

Every failure the command can hit is one of these, and all of them are
recovered at the command boundary (see ``quickfile.core.command``).
"""

from __future__ import annotations

from pathlib import Path


class QuickFileError(Exception):
    """Base class for all quickfile errors."""


class NoWorkspaceContext(QuickFileError):
    """Raised when no usable workspace root is known."""

    def __init__(self, root: Path | None = None):
        if root is None:
            message = "No workspace folder is open"
        else:
            message = f"Workspace root is not a directory: {root}"
        super().__init__(message)
        self.root = root


class EnumerationPartialFailure(QuickFileError):
    """A directory could not be listed during folder enumeration.

    Never raised out of the enumerator; it is logged and handed to the
    optional error callback so callers can count skipped directories.
    """

    def __init__(self, path: Path, cause: BaseException):
        super().__init__(f"Could not list {path}: {cause}")
        self.path = path
        self.cause = cause


class ConflictDeclined(QuickFileError):
    """The target already exists and creation will not proceed.

    Raised when the user declines to overwrite a file, or when the target
    folder already exists. Reported as a warning or a silent no-op.
    """

    def __init__(self, path: Path, is_file: bool, prompted: bool):
        kind = "File" if is_file else "Folder"
        super().__init__(f'{kind} "{path.name}" already exists.')
        self.path = path
        self.is_file = is_file
        self.prompted = prompted


class CreationFailure(QuickFileError):
    """Parent creation, the write itself, or opening the result failed."""

    def __init__(self, target_kind: str, cause: BaseException, verb: str = "create"):
        super().__init__(f"Failed to {verb} {target_kind}: {cause}")
        self.target_kind = target_kind
        self.cause = cause
        self.verb = verb


class ConfigError(QuickFileError):
    """Configuration could not be loaded or failed validation."""


__all__ = [
    "QuickFileError",
    "NoWorkspaceContext",
    "EnumerationPartialFailure",
    "ConflictDeclined",
    "CreationFailure",
    "ConfigError",
]
