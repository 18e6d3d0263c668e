"""Unicode icons for the quickfile TUI."""

# Status Icons
ICON_CHECK = "✓"
ICON_CROSS = "✗"
ICON_WARNING = "⚠"
ICON_INFO = "ℹ"

# Suggestion Icons
ICON_FOLDER = "▸"
ICON_FILE = "•"
ICON_PARENT = "↑"
ICON_CREATE = "+"
ICON_SEPARATOR = "─"

SUGGESTION_ICONS = {
    "navigate_parent": ICON_PARENT,
    "navigate_folder": ICON_FOLDER,
    "open_file": ICON_FILE,
    "create_file": ICON_CREATE,
    "create_folder": ICON_CREATE,
    "separator": ICON_SEPARATOR,
}


def icon_for_kind(kind: str) -> str:
    """Return the icon for a suggestion kind value."""
    return SUGGESTION_ICONS.get(kind, ICON_FILE)
