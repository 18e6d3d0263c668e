"""Core picker logic: classification, enumeration, suggestions, resolution
and creation."""

from .errors import (
    QuickFileError,
    NoWorkspaceContext,
    EnumerationPartialFailure,
    ConflictDeclined,
    CreationFailure,
    ConfigError,
)
from .capabilities import (
    CONFIRM_NO,
    CONFIRM_YES,
    FileSystem,
    HostSurface,
    LocalFileSystem,
)
from .classifier import (
    display_path,
    has_file_extension,
    is_absolute,
    normalize_separators,
)
from .enumerator import EXCLUDED_NAMES, MAX_DEPTH, enumerate_folders
from .state import SessionPhase, SessionState
from .suggestions import (
    MATCH_LIMIT,
    SuggestionKind,
    SuggestionRecord,
    compute_suggestions,
)
from .resolver import (
    NavigationRequest,
    ResolvedTarget,
    TargetAction,
    resolve,
    resolve_path,
)
from .executor import (
    CreationExecutor,
    CreationResult,
    CreationState,
    CreationStatus,
)
from .session import PickerSession, SessionClosedError, start_session
from .command import (
    COMMAND_ID,
    COMMAND_TITLE,
    complete_accept,
    create_from_text,
    execute_target,
    run_command,
)

__all__ = [
    # Errors
    "QuickFileError",
    "NoWorkspaceContext",
    "EnumerationPartialFailure",
    "ConflictDeclined",
    "CreationFailure",
    "ConfigError",
    # Capabilities
    "CONFIRM_NO",
    "CONFIRM_YES",
    "FileSystem",
    "HostSurface",
    "LocalFileSystem",
    # Classifier
    "display_path",
    "has_file_extension",
    "is_absolute",
    "normalize_separators",
    # Enumerator
    "EXCLUDED_NAMES",
    "MAX_DEPTH",
    "enumerate_folders",
    # Session data
    "SessionPhase",
    "SessionState",
    # Suggestions
    "MATCH_LIMIT",
    "SuggestionKind",
    "SuggestionRecord",
    "compute_suggestions",
    # Resolver
    "NavigationRequest",
    "ResolvedTarget",
    "TargetAction",
    "resolve",
    "resolve_path",
    # Executor
    "CreationExecutor",
    "CreationResult",
    "CreationState",
    "CreationStatus",
    # Session
    "PickerSession",
    "SessionClosedError",
    "start_session",
    # Command
    "COMMAND_ID",
    "COMMAND_TITLE",
    "complete_accept",
    "create_from_text",
    "execute_target",
    "run_command",
]
