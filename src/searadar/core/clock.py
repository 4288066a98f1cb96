"""Clocks used to stamp the receipt time of decoded messages."""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Protocol for receipt-time sources.

    Both SystemClock (wall clock) and SimClock (deterministic) implement this.
    """

    def now(self) -> float:
        """Current time as epoch seconds."""
        ...


class SystemClock:
    """Wall-clock time. This is the default clock."""

    def now(self) -> float:
        return time.time()


class SimClock:
    """Deterministic clock for replaying recorded sentences and testing.

    Time only moves when :meth:`step` or :meth:`set_time` is called.

    Args:
        start_epoch: Epoch seconds returned by ``now()`` until advanced.
    """

    def __init__(self, start_epoch: float = 0.0):
        self._now = start_epoch

    def now(self) -> float:
        return self._now

    def step(self, dt: float) -> None:
        """Advance time by *dt* seconds.

        Raises:
            ValueError: If *dt* is negative.
        """
        if dt < 0:
            raise ValueError(f"SimClock.step() requires dt >= 0, got {dt}")
        self._now += dt

    def set_time(self, epoch_time: float) -> None:
        """Jump to an absolute epoch time, e.g. one taken from a log file."""
        self._now = epoch_time
