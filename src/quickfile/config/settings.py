"""Layered settings for quickfile.

Sources, lowest precedence first: built-in defaults, the user config file,
the project config file in the workspace root, ``QUICKFILE_SECTION__FIELD``
environment variables, and explicit overrides (CLI flags).
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from quickfile.config.defaults import (
    DEFAULT_CONFIG,
    ENV_NESTED_DELIMITER,
    ENV_PREFIX,
    PROJECT_CONFIG_FILENAME,
    USER_CONFIG_PATH,
)
from quickfile.core.errors import ConfigError


class GeneralSettings(BaseModel):
    """Logging and output options."""

    verbosity: Literal["debug", "info", "warning", "error", "critical"] = "warning"
    output_format: Literal["text", "json"] = "text"
    color_enabled: bool = True
    log_file: Optional[Path] = None


class PickerSettings(BaseModel):
    """Suggestion engine options."""

    browse_directories: bool = Field(
        default=True,
        description="List the typed directory when input ends in a separator",
    )
    show_hidden_entries: bool = Field(
        default=False,
        description="Include dot-entries when browsing a directory",
    )


class HostSettings(BaseModel):
    """Console host options."""

    launch_editor: bool = Field(
        default=False,
        description="Open created files with the system's default application",
    )


class Settings(BaseSettings):
    """Top-level settings model.

    Keyword arguments carry the config file layers; environment variables
    such as ``QUICKFILE_PICKER__SHOW_HIDDEN_ENTRIES=true`` take precedence
    over them.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter=ENV_NESTED_DELIMITER,
        extra="ignore",
    )

    general: GeneralSettings = Field(default_factory=GeneralSettings)
    picker: PickerSettings = Field(default_factory=PickerSettings)
    host: HostSettings = Field(default_factory=HostSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings


def _deep_merge(base: dict[str, Any], update: Mapping[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_overrides(settings: Settings, overrides: Mapping[str, Any]) -> Settings:
    """Re-validate each overridden section on top of the loaded values."""
    update: dict[str, BaseModel] = {}
    for section, values in overrides.items():
        current = getattr(settings, section, None)
        if not isinstance(current, BaseModel):
            raise ConfigError(f"Unknown configuration section: {section}")
        update[section] = type(current).model_validate({**current.model_dump(), **values})
    return settings.model_copy(update=update)


class ConfigService:
    """Loads and validates :class:`Settings` from every layer."""

    def __init__(
        self,
        user_config_path: Optional[Path] = USER_CONFIG_PATH,
        env_prefix: str = ENV_PREFIX,
    ):
        self.user_config_path = user_config_path
        self.env_prefix = env_prefix

    def load(
        self,
        project_root: Optional[Path] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> Settings:
        """Merge all layers and validate the result.

        Raises:
            ConfigError: A config file is unreadable or a value is invalid
        """
        data = copy.deepcopy(DEFAULT_CONFIG)

        if self.user_config_path is not None:
            data = _deep_merge(data, self._read_yaml(self.user_config_path))
        if project_root is not None:
            data = _deep_merge(data, self._read_yaml(Path(project_root) / PROJECT_CONFIG_FILENAME))

        try:
            settings = Settings(_env_prefix=self.env_prefix, **data)
            if overrides:
                settings = _apply_overrides(settings, overrides)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc
        return settings

    @staticmethod
    def _read_yaml(path: Path) -> dict[str, Any]:
        if not path.is_file():
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Could not read config file {path}: {exc}") from exc

        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return loaded


config_service = ConfigService()


def get_settings(
    project_root: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Settings:
    """Load settings through the shared :data:`config_service`."""
    return config_service.load(project_root=project_root, overrides=overrides)


__all__ = [
    "GeneralSettings",
    "PickerSettings",
    "HostSettings",
    "Settings",
    "ConfigService",
    "config_service",
    "get_settings",
]
