"""Config settings – 12-factor env-based configuration."""
from mp_deadline.config.settings.base import Settings
from mp_deadline.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
