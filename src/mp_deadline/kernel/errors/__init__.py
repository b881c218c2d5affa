"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError     (application.py)
        ├── TimeoutError
        └── ConfigError      (mp_deadline.config.validation)
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError
                └── InvalidDeadlineError
"""

from mp_deadline.kernel.errors.application import ApplicationError, TimeoutError
from mp_deadline.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "TimeoutError",
]
