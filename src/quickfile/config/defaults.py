"""Default configuration values and config file locations."""

from __future__ import annotations

from pathlib import Path
from typing import Any

ENV_PREFIX = "QUICKFILE_"

# Nested keys in environment variables are separated by a double underscore,
# e.g. QUICKFILE_PICKER__SHOW_HIDDEN_ENTRIES=true
ENV_NESTED_DELIMITER = "__"

PROJECT_CONFIG_FILENAME = ".quickfile.yaml"

DEFAULT_CONFIG_RELATIVE_PATH = Path(".config") / "quickfile" / "config.yaml"

USER_CONFIG_PATH = Path.home() / DEFAULT_CONFIG_RELATIVE_PATH

DEFAULT_CONFIG: dict[str, Any] = {
    "general": {
        "verbosity": "warning",
        "output_format": "text",
        "color_enabled": True,
        "log_file": None,
    },
    "picker": {
        "browse_directories": True,
        "show_hidden_entries": False,
    },
    "host": {
        "launch_editor": False,
    },
}
