"""Config – 12-factor settings, loaders, and validation errors."""

from mp_deadline.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from mp_deadline.config.validation import (
    ConfigError,
    InvalidDeadlineError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidDeadlineError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
