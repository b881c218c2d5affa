"""Kernel time – Timer port + asyncio implementation."""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Protocol


class Timer(Protocol):
    """Port: one-shot timers on the running event loop.

    ``schedule`` returns an opaque handle; ``cancel`` must accept a handle
    whose callback already ran and treat it as a no-op.
    """

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> Any: ...
    def cancel(self, handle: Any) -> None: ...


class LoopTimer:
    """Production timer backed by :meth:`asyncio.AbstractEventLoop.call_later`."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


__all__ = ["LoopTimer", "Timer"]
