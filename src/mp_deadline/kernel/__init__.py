"""Kernel – framework-agnostic building blocks (errors, timer port)."""

from mp_deadline.kernel.errors import ApplicationError, BaseError, TimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "TimeoutError",
]
