"""Resilience – RaceSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_deadline.config.settings import Settings
from mp_deadline.config.validation import InvalidDeadlineError, InvalidSettingValueError
from mp_deadline.resilience.timeouts.deadline import UNBOUNDED, Deadline
from mp_deadline.resilience.timeouts.policy import DEFAULT_MESSAGE_TEMPLATE


@dataclasses.dataclass
class RaceSettings(Settings):
    """Defaults for :class:`~mp_deadline.resilience.timeouts.DeadlineRacer`.

    Environment variables: ``MP_DEADLINE_DEFAULT_MILLISECONDS`` (``inf`` for
    unbounded) and ``MP_DEADLINE_MESSAGE_TEMPLATE``.
    """

    _prefix: ClassVar[str] = "MP_DEADLINE"

    default_milliseconds: float = UNBOUNDED
    message_template: str = DEFAULT_MESSAGE_TEMPLATE

    def _validate(self) -> None:
        try:
            Deadline.of(self.default_milliseconds)
        except InvalidDeadlineError as exc:
            raise InvalidDeadlineError(
                self.default_milliseconds, exc.reason, setting_name="default_milliseconds"
            ) from None
        try:
            self.message_template.format(milliseconds=0)
        except (KeyError, IndexError, ValueError) as exc:
            raise InvalidSettingValueError(
                "message_template",
                self.message_template,
                "only the {milliseconds} placeholder is available",
            ) from exc


__all__ = ["RaceSettings"]
