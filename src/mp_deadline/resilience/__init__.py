"""Resilience – deadline race combinator and timeout policies."""

from mp_deadline.resilience.timeouts import (
    UNBOUNDED,
    Cancelable,
    Deadline,
    DeadlineRacer,
    DefaultTimeout,
    FallbackTimeout,
    RaceSettings,
    RaiseTimeout,
    TimeoutPolicy,
    race,
    timeout,
)

__all__ = [
    "Cancelable",
    "Deadline",
    "DeadlineRacer",
    "DefaultTimeout",
    "FallbackTimeout",
    "RaceSettings",
    "RaiseTimeout",
    "TimeoutPolicy",
    "UNBOUNDED",
    "race",
    "timeout",
]
