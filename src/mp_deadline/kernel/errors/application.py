"""Application-layer errors raised to callers of the combinator."""

from __future__ import annotations

from typing import Any

from mp_deadline.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class TimeoutError(ApplicationError):  # noqa: A001
    """An awaited operation did not settle before its deadline.

    Sub-class it for domain-specific timeouts; ``isinstance(exc, TimeoutError)``
    keeps telling timeouts apart from the operation's own failures.
    """

    default_code = "timeout"
    default_message = "Operation timed out"

    def __init__(
        self,
        message: str | None = None,
        *,
        milliseconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message if message is not None else self.default_message, **kwargs)
        self.milliseconds = milliseconds

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.milliseconds is not None:
            base["milliseconds"] = self.milliseconds
        return base


__all__ = ["ApplicationError", "TimeoutError"]
