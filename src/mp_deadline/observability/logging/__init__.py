"""Observability – structured logging helpers."""
from mp_deadline.observability.logging.factory import JsonLoggerFactory
from mp_deadline.observability.logging.processors import ErrorDetailProcessor, get_logger

__all__ = [
    "ErrorDetailProcessor",
    "JsonLoggerFactory",
    "get_logger",
]
