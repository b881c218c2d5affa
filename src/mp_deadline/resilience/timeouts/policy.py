"""Resilience – timeout policies.

A race resolves its deadline through exactly one of three policies:

* :class:`DefaultTimeout` – reject with :class:`TimeoutError` and a templated message.
* :class:`RaiseTimeout` – reject with a caller-supplied message or exception.
* :class:`FallbackTimeout` – call a producer and follow its outcome instead.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Awaitable, Callable, Union

from mp_deadline.config.validation import ConfigError, InvalidSettingValueError
from mp_deadline.kernel.errors import TimeoutError as AppTimeoutError
from mp_deadline.resilience.timeouts.deadline import Deadline

DEFAULT_MESSAGE_TEMPLATE = "Promise timed out after {milliseconds} milliseconds"


@dataclasses.dataclass(frozen=True)
class DefaultTimeout:
    """Reject with :class:`TimeoutError`; ``template`` receives ``milliseconds``."""
    template: str = DEFAULT_MESSAGE_TEMPLATE

    def build_error(self, deadline: Deadline) -> BaseException:
        return AppTimeoutError(
            self.template.format(milliseconds=deadline.milliseconds),
            milliseconds=deadline.milliseconds,
        )


@dataclasses.dataclass(frozen=True)
class RaiseTimeout:
    """Reject with *error*: a message wrapped in :class:`TimeoutError`, or an
    exception instance raised as-is."""
    error: str | BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.error, (str, BaseException)):
            raise InvalidSettingValueError(
                "message", self.error, "expected a string or an exception instance"
            )

    def build_error(self, deadline: Deadline) -> BaseException:
        if isinstance(self.error, BaseException):
            return self.error
        return AppTimeoutError(self.error, milliseconds=deadline.milliseconds)


@dataclasses.dataclass(frozen=True)
class FallbackTimeout:
    """Call *producer* on timeout; the race follows its value or awaitable."""
    producer: Callable[[], Any | Awaitable[Any]]

    def __post_init__(self) -> None:
        if not callable(self.producer):
            raise InvalidSettingValueError("fallback", self.producer, "expected a callable")


TimeoutPolicy = Union[DefaultTimeout, RaiseTimeout, FallbackTimeout]


def resolve_policy(
    policy: TimeoutPolicy | None = None,
    *,
    message: str | BaseException | None = None,
    fallback: Callable[[], Any | Awaitable[Any]] | None = None,
    template: str = DEFAULT_MESSAGE_TEMPLATE,
) -> TimeoutPolicy:
    """Pick the policy from the explicit arguments; at most one may be given."""
    given = [
        name
        for name, value in (("policy", policy), ("message", message), ("fallback", fallback))
        if value is not None
    ]
    if len(given) > 1:
        raise ConfigError(f"Pass at most one of policy, message, fallback (got {', '.join(given)})")
    if policy is not None:
        if not isinstance(policy, (DefaultTimeout, RaiseTimeout, FallbackTimeout)):
            raise InvalidSettingValueError(
                "policy", policy, "expected DefaultTimeout, RaiseTimeout or FallbackTimeout"
            )
        return policy
    if message is not None:
        return RaiseTimeout(message)
    if fallback is not None:
        return FallbackTimeout(fallback)
    return DefaultTimeout(template)


__all__ = [
    "DEFAULT_MESSAGE_TEMPLATE",
    "DefaultTimeout",
    "FallbackTimeout",
    "RaiseTimeout",
    "TimeoutPolicy",
    "resolve_policy",
]
