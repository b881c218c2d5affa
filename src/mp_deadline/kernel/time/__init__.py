"""Kernel time – Timer port + implementations."""
from mp_deadline.kernel.time.timer import LoopTimer, Timer

__all__ = ["LoopTimer", "Timer"]
