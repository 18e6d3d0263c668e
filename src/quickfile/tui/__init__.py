"""quickfile TUI - Terminal User Interface.

Textual front end for the create-file-or-folder command:

- Workspace tree for revealing created folders
- Read-only document view; its file is the active document
- Incremental path picker on ctrl+n
- Overwrite confirmation dialog
"""

from .app import QuickFileTUI, launch
from .host import TextualHost
from .dialogs import ConfirmationDialog, PathPicker, SuggestionItem

__all__ = [
    # Main app
    "QuickFileTUI",
    "launch",
    # Host surface
    "TextualHost",
    # Dialogs
    "ConfirmationDialog",
    "PathPicker",
    "SuggestionItem",
]
