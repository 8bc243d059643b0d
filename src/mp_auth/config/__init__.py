"""Config – 12-factor settings and loaders."""

from mp_auth.config.settings import EnvSettingsLoader, HashingSettings, Settings, SettingsLoader
from mp_auth.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "HashingSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
