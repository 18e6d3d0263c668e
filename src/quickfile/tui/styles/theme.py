"""quickfile TUI theme - dark palette with magenta accents."""

from dataclasses import dataclass


@dataclass
class QuickFileTheme:
    """Colors used to render suggestion rows."""

    name: str = "quickfile-dark"

    accent: str = "#00FFFF"           # Cyan

    # Foreground Colors
    fg_base: str = "#FFFFFF"          # Primary text
    fg_muted: str = "#B0B0B0"         # Secondary text
    fg_subtle: str = "#707070"        # Very dim text

    # Status Colors
    success: str = "#00FF66"
    info: str = "#00AAFF"

    def get_kind_color(self, kind: str) -> str:
        """Get the color for a suggestion kind."""
        kind_colors = {
            "CREATE_FILE": self.success,
            "CREATE_FOLDER": self.success,
            "NAVIGATE_FOLDER": self.info,
            "NAVIGATE_PARENT": self.accent,
            "OPEN_FILE": self.fg_base,
            "SEPARATOR": self.fg_subtle,
        }
        return kind_colors.get(kind.upper(), self.fg_muted)


# Global theme instance
_current_theme: QuickFileTheme = QuickFileTheme()


def get_theme() -> QuickFileTheme:
    """Get the current theme."""
    return _current_theme
