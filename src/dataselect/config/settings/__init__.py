"""Config settings – 12-factor env-based configuration."""
from dataselect.config.settings.base import SelectionSettings, Settings
from dataselect.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    load_settings,
)

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "SelectionSettings",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
