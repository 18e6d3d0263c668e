"""Path picker dialog for the quickfile TUI.

Incremental picker: every keystroke recomputes the suggestion list through
the session, and enter either navigates or hands a resolved target back to
the app.
"""

from typing import List, Optional

from textual import on
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, ListView, Static

from ....core.resolver import NavigationRequest, ResolvedTarget
from ....core.session import PickerSession
from ....core.suggestions import SuggestionRecord
from .suggestion_item import SuggestionItem

PLACEHOLDER = "Enter file/folder path (ends with extension = file, otherwise = folder)"


def first_selectable(records: List[SuggestionRecord], start: int = 0, step: int = 1) -> Optional[int]:
    """Index of the first selectable record from ``start`` walking by ``step``."""
    index = start
    while 0 <= index < len(records):
        if records[index].is_selectable:
            return index
        index += step
    return None


class PathPicker(ModalScreen[Optional[ResolvedTarget]]):
    """Incremental path picker.

    Dismisses with a :class:`ResolvedTarget`, or None when cancelled or
    when blank free text is accepted.
    """

    DIALOG_TITLE = "Create File or Folder"

    DEFAULT_CSS = """
    PathPicker {
        align: center top;
        padding-top: 3;
    }

    PathPicker > .picker-container {
        width: 90;
        height: auto;
        max-height: 80%;
        border: thick $primary;
        background: $surface;
    }

    PathPicker .picker-title {
        text-style: bold;
        color: $primary;
        padding: 0 1;
    }

    PathPicker .path-input {
        margin: 0 1;
        border: solid $primary-darken-2;
    }

    PathPicker .path-input:focus {
        border: solid $primary;
    }

    PathPicker .suggestions-list {
        height: auto;
        max-height: 24;
        padding: 0 1;
    }

    PathPicker .picker-hint {
        color: $text-muted;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("escape", "close", "Close"),
        ("up", "move_up", "Up"),
        ("down", "move_down", "Down"),
    ]

    def __init__(self, session: PickerSession, **kwargs):
        """Initialize the picker.

        Args:
            session: Active picker session driving the suggestions
        """
        super().__init__(**kwargs)
        self.session = session
        self.records: List[SuggestionRecord] = session.records
        self.selected_index: Optional[int] = first_selectable(self.records)

    def compose(self):
        """Compose the picker layout."""
        with Vertical(classes="picker-container"):
            yield Static(self.DIALOG_TITLE, classes="picker-title")
            yield Input(
                value=self.session.state.raw_input,
                placeholder=PLACEHOLDER,
                classes="path-input",
            )
            yield SuggestionsListView(classes="suggestions-list")
            yield Static(
                "enter accept · ↑↓ move · esc cancel",
                classes="picker-hint",
            )

    async def on_mount(self) -> None:
        """Focus the input and show the initial suggestions."""
        self.query_one(Input).focus()
        await self._show(self.records)

    @on(Input.Changed)
    async def input_changed(self, event: Input.Changed) -> None:
        """Recompute suggestions for the new input."""
        await self._show(self.session.on_input_changed(event.value))

    @on(Input.Submitted)
    def input_submitted(self, event: Input.Submitted) -> None:
        """Accept the highlighted record, or the free text."""
        self._accept(self.selected_record)

    @on(ListView.Selected)
    def item_selected(self, event: ListView.Selected) -> None:
        """Accept a clicked record."""
        item = event.item
        if isinstance(item, SuggestionItem) and item.record.is_selectable:
            self._accept(item.record)

    @on(ListView.Highlighted)
    def item_highlighted(self, event: ListView.Highlighted) -> None:
        """Keep the tracked selection in sync with the list."""
        item = event.item
        if isinstance(item, SuggestionItem) and item.record.is_selectable:
            self.selected_index = event.list_view.index

    @property
    def selected_record(self) -> Optional[SuggestionRecord]:
        """The highlighted record, if any."""
        if self.selected_index is None or self.selected_index >= len(self.records):
            return None
        return self.records[self.selected_index]

    async def _show(self, records: List[SuggestionRecord]) -> None:
        self.records = records
        self.selected_index = first_selectable(records)
        suggestions = self.query_one(SuggestionsListView)
        await suggestions.update_records(records)
        suggestions.index = self.selected_index

    def _accept(self, record: Optional[SuggestionRecord]) -> None:
        result = self.session.on_accept(record)

        if isinstance(result, NavigationRequest):
            search = self.query_one(Input)
            search.value = result.new_input
            search.cursor_position = len(result.new_input)
            return

        self.dismiss(result)

    def action_close(self) -> None:
        """Close the picker without acting."""
        self.dismiss(None)

    def action_move_up(self) -> None:
        """Move selection up, skipping separators."""
        if self.selected_index is None:
            return
        index = first_selectable(self.records, self.selected_index - 1, -1)
        if index is not None:
            self.selected_index = index
            self.query_one(SuggestionsListView).index = index

    def action_move_down(self) -> None:
        """Move selection down, skipping separators."""
        start = 0 if self.selected_index is None else self.selected_index + 1
        index = first_selectable(self.records, start, 1)
        if index is not None:
            self.selected_index = index
            self.query_one(SuggestionsListView).index = index


class SuggestionsListView(ListView):
    """List view for displaying suggestion records."""

    async def update_records(self, records: List[SuggestionRecord]) -> None:
        """Replace the displayed records wholesale."""
        await self.clear()
        if records:
            await self.extend(SuggestionItem(record) for record in records)
