"""Confirmation dialog for the quickfile TUI.

Yes/no prompt used before overwriting an existing file.
"""

from typing import Optional

from textual.screen import ModalScreen
from textual.containers import Horizontal, Vertical
from textual.widgets import Static, Button

from ....core.capabilities import CONFIRM_NO, CONFIRM_YES


class ConfirmationDialog(ModalScreen[Optional[str]]):
    """Simple confirmation dialog.

    Dismisses with ``"Yes"``, ``"No"``, or None when escaped.
    """

    DEFAULT_CSS = """
    ConfirmationDialog {
        align: center middle;
    }

    ConfirmationDialog > .dialog-container {
        width: 60;
        height: auto;
        padding: 1 2;
        border: thick $warning;
        background: $surface;
    }

    ConfirmationDialog .dialog-title {
        text-style: bold;
        color: $warning;
        text-align: center;
        margin-bottom: 1;
    }

    ConfirmationDialog .dialog-message {
        margin: 1 0;
        text-align: center;
    }

    ConfirmationDialog .buttons {
        layout: horizontal;
        height: auto;
        margin-top: 1;
        align: center middle;
    }

    ConfirmationDialog .btn {
        margin: 0 1;
        min-width: 12;
    }
    """

    BINDINGS = [
        ("escape", "dismiss_dialog", "Dismiss"),
        ("y", "confirm", "Yes"),
        ("n", "decline", "No"),
    ]

    def __init__(
        self,
        title: str = "Confirm",
        message: str = "Are you sure?",
        destructive: bool = False,
        **kwargs,
    ):
        """Initialize the confirmation dialog.

        Args:
            title: Dialog title
            message: Confirmation message
            destructive: Whether confirming destroys data
        """
        super().__init__(**kwargs)
        self.title_text = title
        self.message = message
        self.destructive = destructive

    def compose(self):
        """Compose the dialog layout."""
        with Vertical(classes="dialog-container"):
            yield Static(self.title_text, classes="dialog-title")
            yield Static(self.message, classes="dialog-message", markup=False)

            with Horizontal(classes="buttons"):
                yield Button(
                    f"{CONFIRM_YES} (y)",
                    id="btn-confirm",
                    classes="btn",
                    variant="error" if self.destructive else "success",
                )
                yield Button(
                    f"{CONFIRM_NO} (n)",
                    id="btn-cancel",
                    classes="btn",
                )

    def action_confirm(self) -> None:
        """Answer yes."""
        self.dismiss(CONFIRM_YES)

    def action_decline(self) -> None:
        """Answer no."""
        self.dismiss(CONFIRM_NO)

    def action_dismiss_dialog(self) -> None:
        """Close without answering."""
        self.dismiss(None)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "btn-confirm":
            self.action_confirm()
        else:
            self.action_decline()
