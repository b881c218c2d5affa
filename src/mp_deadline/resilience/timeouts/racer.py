"""Resilience – DeadlineRacer."""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

from mp_deadline.config.settings import EnvSettingsLoader, SettingsLoader
from mp_deadline.kernel.time import Timer
from mp_deadline.resilience.timeouts.deadline import Deadline
from mp_deadline.resilience.timeouts.policy import TimeoutPolicy, resolve_policy
from mp_deadline.resilience.timeouts.race import race
from mp_deadline.resilience.timeouts.settings import RaceSettings

T = TypeVar("T")


class DeadlineRacer:
    """:func:`race` bound to :class:`RaceSettings` and a :class:`Timer`.

    ``milliseconds`` falls back to ``settings.default_milliseconds`` and the
    default policy uses ``settings.message_template``.
    """

    def __init__(self, settings: RaceSettings | None = None, timer: Timer | None = None) -> None:
        self._settings = settings or RaceSettings()
        self._timer = timer

    @classmethod
    def from_env(
        cls, loader: SettingsLoader | None = None, timer: Timer | None = None
    ) -> "DeadlineRacer":
        return cls((loader or EnvSettingsLoader()).load(RaceSettings), timer)

    @property
    def settings(self) -> RaceSettings:
        return self._settings

    def race(
        self,
        operation: Awaitable[T],
        milliseconds: Deadline | float | None = None,
        policy: TimeoutPolicy | None = None,
        *,
        message: str | BaseException | None = None,
        fallback: Callable[[], T | Awaitable[T]] | None = None,
    ) -> asyncio.Future[T]:
        if milliseconds is None:
            milliseconds = self._settings.default_milliseconds
        try:
            chosen = resolve_policy(
                policy,
                message=message,
                fallback=fallback,
                template=self._settings.message_template,
            )
        except Exception:
            if asyncio.iscoroutine(operation):
                operation.close()
            raise
        return race(operation, milliseconds, chosen, timer=self._timer)


__all__ = ["DeadlineRacer"]
