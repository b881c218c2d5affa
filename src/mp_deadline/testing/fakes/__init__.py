"""Testing fakes – in-memory doubles for kernel ports."""
from mp_deadline.testing.fakes.timer import FakeTimer

__all__ = ["FakeTimer"]
