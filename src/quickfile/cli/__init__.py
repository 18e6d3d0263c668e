"""CLI module for quickfile.

This module provides:
- Main CLI application entry point
- ``ui``, ``suggest`` and ``create`` commands
- Console host surface
"""

from quickfile.cli.main import app
from quickfile.cli.host import ConsoleHost

__all__ = [
    "app",
    "ConsoleHost",
]
