"""quickfile - create, open or navigate to files and folders from one
incremental path input."""

__version__ = "0.1.0"

from quickfile.core import (
    CreationExecutor,
    PickerSession,
    ResolvedTarget,
    SessionState,
    SuggestionKind,
    SuggestionRecord,
    compute_suggestions,
    enumerate_folders,
    has_file_extension,
    resolve,
    start_session,
)

__all__ = [
    "__version__",
    "CreationExecutor",
    "PickerSession",
    "ResolvedTarget",
    "SessionState",
    "SuggestionKind",
    "SuggestionRecord",
    "compute_suggestions",
    "enumerate_folders",
    "has_file_extension",
    "resolve",
    "start_session",
]
