"""Resilience – Deadline."""
from __future__ import annotations

import dataclasses
import math
import numbers
from typing import Any

from mp_deadline.config.validation import InvalidDeadlineError

UNBOUNDED = math.inf


def _as_float(value: Any) -> float:
    # integers past the float range never fire
    try:
        return float(value)
    except OverflowError:
        return UNBOUNDED


@dataclasses.dataclass(frozen=True)
class Deadline:
    """A relative deadline in milliseconds; :data:`UNBOUNDED` never fires.

    ``milliseconds`` keeps the caller's number as given (``200`` stays an
    ``int``) so timeout messages read the way the caller wrote them. A number
    too large for a float (``10**400``) is unbounded.
    """
    milliseconds: Any

    def __post_init__(self) -> None:
        value = self.milliseconds
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidDeadlineError(value, "expected a number of milliseconds")
        if value < 0:
            raise InvalidDeadlineError(value, "must not be negative")
        if math.isnan(_as_float(value)):
            raise InvalidDeadlineError(value, "NaN is not a deadline")

    @classmethod
    def of(cls, value: "Deadline | float") -> "Deadline":
        """Validate *value* into a :class:`Deadline` (instances pass through)."""
        if isinstance(value, Deadline):
            return value
        return cls(value)

    @classmethod
    def unbounded(cls) -> "Deadline":
        return cls(UNBOUNDED)

    @property
    def is_unbounded(self) -> bool:
        return _as_float(self.milliseconds) == UNBOUNDED

    @property
    def seconds(self) -> float:
        return _as_float(self.milliseconds) / 1000.0


__all__ = ["UNBOUNDED", "Deadline"]
