"""Config validation errors."""
from mp_deadline.config.validation.errors import (
    ConfigError,
    InvalidDeadlineError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "InvalidDeadlineError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
