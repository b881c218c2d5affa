"""Resilience – deadline race combinator.

``race`` pits an awaitable against a timer. Whichever signal arrives first
decides the returned future; the other one is consumed without effect and the
timer handle is released on every path.
"""
from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Generic, TypeVar

from mp_deadline.kernel.time import LoopTimer, Timer
from mp_deadline.resilience.timeouts.cancelable import Cancelable
from mp_deadline.resilience.timeouts.deadline import Deadline
from mp_deadline.resilience.timeouts.policy import (
    FallbackTimeout,
    TimeoutPolicy,
    resolve_policy,
)

T = TypeVar("T")
logger = logging.getLogger(__name__)

_OPERATION = "operation"
_TIMER = "timer"


def _consume(fut: asyncio.Future[Any]) -> None:
    # marks a late exception as retrieved so asyncio does not report it
    if not fut.cancelled():
        fut.exception()


def _discard(operation: Any) -> None:
    if inspect.iscoroutine(operation):
        operation.close()


class _Race(Generic[T]):
    """State of one invocation: result future, timer handle, one-shot latch."""

    def __init__(
        self,
        operation: Awaitable[T],
        deadline: Deadline,
        policy: TimeoutPolicy,
        timer: Timer,
        loop: asyncio.AbstractEventLoop,
    ) -> None:
        self._deadline = deadline
        self._policy = policy
        self._timer = timer
        self._loop = loop
        self._result: asyncio.Future[T] = loop.create_future()
        self._operation: asyncio.Future[T] = asyncio.ensure_future(operation, loop=loop)
        self._owns_operation = self._operation is not operation
        self._cancel_target: Cancelable = (
            operation if isinstance(operation, Cancelable) else self._operation
        )
        self._fallback: asyncio.Future[Any] | None = None
        self._handle: Any = None
        self._winner: str | None = None

    def start(self) -> asyncio.Future[T]:
        try:
            self._handle = self._timer.schedule(self._on_timeout, self._deadline.milliseconds)
        except Exception:
            # a task created here must not outlive the failed call
            if self._owns_operation:
                self._operation.cancel()
            raise
        self._operation.add_done_callback(self._on_operation_done)
        self._result.add_done_callback(self._on_result_done)
        logger.debug(
            "deadline_race.armed", extra={"milliseconds": self._deadline.milliseconds}
        )
        return self._result

    def _claim(self, winner: str) -> bool:
        if self._winner is not None or self._result.done():
            return False
        self._winner = winner
        return True

    def _release_timer(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            self._timer.cancel(handle)

    def _on_operation_done(self, fut: asyncio.Future[T]) -> None:
        if not self._claim(_OPERATION):
            _consume(fut)
            return
        self._release_timer()
        self._follow(fut)

    def _on_timeout(self) -> None:
        self._handle = None
        if not self._claim(_TIMER):
            return
        if isinstance(self._policy, FallbackTimeout):
            self._run_fallback(self._policy)
            return

        error = self._policy.build_error(self._deadline)
        logger.info(
            "deadline_race.timed_out",
            extra={"milliseconds": self._deadline.milliseconds, "error": error},
        )
        self._cancel_operation()
        self._result.set_exception(error)

    def _run_fallback(self, policy: FallbackTimeout) -> None:
        logger.debug(
            "deadline_race.fallback", extra={"milliseconds": self._deadline.milliseconds}
        )
        try:
            produced = policy.producer()
        except Exception as exc:
            self._result.set_exception(exc)
            return
        if inspect.isawaitable(produced):
            self._fallback = asyncio.ensure_future(produced, loop=self._loop)
            self._fallback.add_done_callback(self._follow)
            return
        self._result.set_result(produced)

    def _follow(self, source: asyncio.Future[Any]) -> None:
        if self._result.done():
            _consume(source)
            return
        if source.cancelled():
            self._result.cancel()
            return
        exc = source.exception()
        if exc is not None:
            self._result.set_exception(exc)
        else:
            self._result.set_result(source.result())

    def _cancel_operation(self) -> None:
        try:
            self._cancel_target.cancel()
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "deadline_race.cancel_failed", extra={"error": exc}, exc_info=exc
            )

    def _on_result_done(self, result: asyncio.Future[T]) -> None:
        self._release_timer()
        if result.cancelled():
            if self._winner is None:
                self._cancel_operation()
            if self._fallback is not None and not self._fallback.done():
                self._fallback.cancel()
        logger.debug(
            "deadline_race.settled",
            extra={"winner": self._winner or "caller", "cancelled": result.cancelled()},
        )


def race(
    operation: Awaitable[T],
    milliseconds: Deadline | float,
    policy: TimeoutPolicy | None = None,
    *,
    message: str | BaseException | None = None,
    fallback: Callable[[], T | Awaitable[T]] | None = None,
    timer: Timer | None = None,
) -> asyncio.Future[T]:
    """Race *operation* against a deadline of *milliseconds*.

    Must be called while an event loop is running. Returns a future that
    settles exactly once:

    * with the operation's value or exception if it settles first;
    * otherwise according to the policy: :class:`DefaultTimeout` (the
      default) rejects with ``TimeoutError("Promise timed out after N
      milliseconds")``, ``message=`` rejects with the given text or exception,
      ``fallback=`` follows whatever the producer returns.

    A rejecting timeout calls ``cancel()`` on the operation when it is
    :class:`Cancelable` (coroutines are driven by a task that is cancelled
    instead). A deadline of :data:`UNBOUNDED` arms no timer at all.

    Raises:
        InvalidDeadlineError: *milliseconds* is negative, NaN or not a number.
        ConfigError: more than one of *policy*, *message*, *fallback* given.
    """
    try:
        deadline = Deadline.of(milliseconds)
        chosen = resolve_policy(policy, message=message, fallback=fallback)
        loop = asyncio.get_running_loop()
    except Exception:
        _discard(operation)
        raise

    if deadline.is_unbounded:
        return asyncio.ensure_future(operation, loop=loop)
    return _Race(operation, deadline, chosen, timer or LoopTimer(loop), loop).start()


__all__ = ["race"]
