"""
mp_deadline – deadlines for asyncio awaitables.

Import path convention::

    from mp_deadline import race, TimeoutError
    from mp_deadline.resilience.timeouts import DeadlineRacer, FallbackTimeout
    from mp_deadline.testing.fakes import FakeTimer

Usage::

    value = await race(fetch_profile(user_id), 500)
    value = await race(fetch_profile(user_id), 500, fallback=lambda: CACHED_PROFILE)
"""

from mp_deadline.kernel.errors import TimeoutError
from mp_deadline.config.validation import InvalidDeadlineError
from mp_deadline.resilience.timeouts import (
    UNBOUNDED,
    DeadlineRacer,
    DefaultTimeout,
    FallbackTimeout,
    RaiseTimeout,
    race,
    timeout,
)

__version__ = "0.1.0"
__all__ = [
    "DeadlineRacer",
    "DefaultTimeout",
    "FallbackTimeout",
    "InvalidDeadlineError",
    "RaiseTimeout",
    "TimeoutError",
    "UNBOUNDED",
    "__version__",
    "race",
    "timeout",
]
