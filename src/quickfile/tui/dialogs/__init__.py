"""quickfile TUI Dialogs Package.

Contains all dialog definitions for the TUI.
"""

from .confirmation import ConfirmationDialog
from .picker import PathPicker, SuggestionItem, SuggestionsListView

__all__ = [
    # Confirmation
    "ConfirmationDialog",
    # Picker
    "PathPicker",
    "SuggestionItem",
    "SuggestionsListView",
]
