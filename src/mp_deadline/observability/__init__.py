"""Observability – structured logging."""

from mp_deadline.observability.logging import ErrorDetailProcessor, JsonLoggerFactory, get_logger

__all__ = [
    "ErrorDetailProcessor",
    "JsonLoggerFactory",
    "get_logger",
]
