"""Resilience – deadline race combinator, timeout policies and deadlines."""
from mp_deadline.resilience.timeouts.cancelable import Cancelable
from mp_deadline.resilience.timeouts.deadline import UNBOUNDED, Deadline
from mp_deadline.resilience.timeouts.decorators import timeout
from mp_deadline.resilience.timeouts.policy import (
    DEFAULT_MESSAGE_TEMPLATE,
    DefaultTimeout,
    FallbackTimeout,
    RaiseTimeout,
    TimeoutPolicy,
    resolve_policy,
)
from mp_deadline.resilience.timeouts.race import race
from mp_deadline.resilience.timeouts.racer import DeadlineRacer
from mp_deadline.resilience.timeouts.settings import RaceSettings

__all__ = [
    "Cancelable",
    "DEFAULT_MESSAGE_TEMPLATE",
    "Deadline",
    "DeadlineRacer",
    "DefaultTimeout",
    "FallbackTimeout",
    "RaceSettings",
    "RaiseTimeout",
    "TimeoutPolicy",
    "UNBOUNDED",
    "race",
    "resolve_policy",
    "timeout",
]
