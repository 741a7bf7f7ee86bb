"""Config – 12-factor settings and loaders."""

from dataselect.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SelectionSettings,
    Settings,
    SettingsLoader,
    load_settings,
)
from dataselect.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SelectionSettings",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
