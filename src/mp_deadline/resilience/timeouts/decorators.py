"""Resilience – ``@timeout`` decorator for coroutine functions."""
from __future__ import annotations

import functools
import inspect
from typing import Any, Awaitable, Callable, TypeVar

from mp_deadline.kernel.time import Timer
from mp_deadline.resilience.timeouts.deadline import Deadline
from mp_deadline.resilience.timeouts.policy import TimeoutPolicy, resolve_policy
from mp_deadline.resilience.timeouts.race import race

T = TypeVar("T")


def timeout(
    milliseconds: Deadline | float,
    policy: TimeoutPolicy | None = None,
    *,
    message: str | BaseException | None = None,
    fallback: Callable[[], Any] | None = None,
    timer: Timer | None = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Race every call of the decorated ``async def`` against *milliseconds*.

    Arguments are validated when the decorator is applied::

        @timeout(500, message="inventory lookup timed out")
        async def fetch_stock(sku: str) -> int: ...
    """
    deadline = Deadline.of(milliseconds)
    chosen = resolve_policy(policy, message=message, fallback=fallback)

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"@timeout requires an async function, got {func!r}")

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            return await race(func(*args, **kwargs), deadline, chosen, timer=timer)

        return wrapper

    return decorator


__all__ = ["timeout"]
