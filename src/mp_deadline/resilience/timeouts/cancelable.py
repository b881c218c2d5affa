"""Resilience – Cancelable capability."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Cancelable(Protocol):
    """An operation that accepts an upstream "result no longer wanted" signal.

    :class:`asyncio.Future` and :class:`asyncio.Task` qualify as they are.
    """

    def cancel(self) -> Any: ...


__all__ = ["Cancelable"]
