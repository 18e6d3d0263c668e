"""quickfile TUI Styles Package.

Contains the theme definition and icons.
"""

from .theme import QuickFileTheme, get_theme
from .icons import *

__all__ = [
    "QuickFileTheme",
    "get_theme",
    "icon_for_kind",
]
