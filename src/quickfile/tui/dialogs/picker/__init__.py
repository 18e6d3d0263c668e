"""quickfile TUI Picker Package.

Incremental path picker dialog.
"""

from .picker import PathPicker, SuggestionsListView, first_selectable
from .suggestion_item import SuggestionItem

__all__ = [
    "PathPicker",
    "SuggestionsListView",
    "SuggestionItem",
    "first_selectable",
]
