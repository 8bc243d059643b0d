"""Config settings – 12-factor env-based configuration."""
from mp_auth.config.settings.base import HashingSettings, Settings
from mp_auth.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "HashingSettings", "Settings", "SettingsLoader"]
