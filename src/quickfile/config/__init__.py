"""
Configuration module for quickfile.

Layered configuration loading (overrides > env > project > user > defaults)
validated through pydantic models.
"""

from quickfile.config.defaults import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_RELATIVE_PATH,
    ENV_PREFIX,
    PROJECT_CONFIG_FILENAME,
    USER_CONFIG_PATH,
)

from quickfile.config.settings import (
    Settings,
    GeneralSettings,
    PickerSettings,
    HostSettings,
    ConfigService,
    config_service,
    get_settings,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_RELATIVE_PATH",
    "ENV_PREFIX",
    "PROJECT_CONFIG_FILENAME",
    "USER_CONFIG_PATH",
    "Settings",
    "GeneralSettings",
    "PickerSettings",
    "HostSettings",
    "ConfigService",
    "config_service",
    "get_settings",
]
