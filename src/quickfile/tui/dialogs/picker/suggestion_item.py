"""Suggestion item component for the path picker.

Individual suggestion record in the picker list.
"""

from textual.widgets import ListItem, Label
from rich.text import Text

from ....core.suggestions import SuggestionKind, SuggestionRecord
from ...styles.theme import get_theme
from ...styles.icons import icon_for_kind


class SuggestionItem(ListItem):
    """A single suggestion in the list."""

    DEFAULT_CSS = """
    SuggestionItem {
        padding: 0 1;
        height: 1;
    }

    SuggestionItem:hover {
        background: $primary-darken-3;
    }

    SuggestionItem.-highlight {
        background: $primary-darken-2;
    }

    SuggestionItem.separator {
        color: $text-muted;
        border-top: solid $primary-darken-3;
        height: 2;
    }
    """

    def __init__(self, record: SuggestionRecord, **kwargs):
        """Initialize the suggestion item.

        Args:
            record: The SuggestionRecord to display
        """
        is_separator = record.kind is SuggestionKind.SEPARATOR
        super().__init__(
            classes="separator" if is_separator else "",
            disabled=is_separator,
            **kwargs,
        )
        self.record = record

    def compose(self):
        """Compose the suggestion item."""
        yield Label(self._render_content())

    def _render_content(self) -> Text:
        """Render icon, label, description and target on one line."""
        theme = get_theme()
        record = self.record
        text = Text()

        if record.kind is SuggestionKind.SEPARATOR:
            text.append(record.label, style=f"italic {theme.fg_subtle}")
            return text

        text.append(f"{icon_for_kind(record.kind.value)} ", style=theme.get_kind_color(record.kind.value))
        text.append(record.label, style=f"bold {theme.fg_base}")

        if record.description:
            text.append("  ")
            text.append(record.description, style=theme.fg_muted)

        if record.target_path and record.target_path != record.label:
            text.append("  ")
            text.append(record.target_path, style=theme.fg_subtle)

        return text
