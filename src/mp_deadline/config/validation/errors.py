"""Config validation errors."""
from mp_deadline.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class InvalidDeadlineError(InvalidSettingValueError, ValueError):
    """A deadline is not a non-negative number of milliseconds.

    Raised at call time, never delivered through the race result.
    """
    default_code = "invalid_deadline"

    def __init__(
        self,
        value: object,
        reason: str = "expected a non-negative number of milliseconds",
        setting_name: str = "milliseconds",
    ) -> None:
        super().__init__(setting_name, value, reason)


__all__ = [
    "ConfigError",
    "InvalidDeadlineError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
