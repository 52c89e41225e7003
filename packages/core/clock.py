"""Clocks and cancellable timers.

Two implementations of the Clock protocol:

- AsyncioClock: real time, backed by the running asyncio event loop.
- ManualClock: logical time that only moves when advance() is called.
  Used by tests and anywhere a deterministic schedule is needed.

Example:
    clock = ManualClock()
    fired = []
    clock.call_later(300, lambda: fired.append("attack done"))
    clock.advance(299)   # nothing yet
    clock.advance(1)     # fired == ["attack done"]
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import time
from typing import Callable, Optional


class AsyncioClock:
    """Clock backed by an asyncio event loop.

    Timers are asyncio.TimerHandle objects, which already provide
    cancel() and cancelled().
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def now_ms(self) -> float:
        return time.monotonic() * 1000

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self._get_loop().call_later(max(0.0, delay_ms) / 1000, callback)


class ManualTimer:
    """Timer handle issued by ManualClock."""

    __slots__ = ("deadline_ms", "_callback", "_cancelled")

    def __init__(self, deadline_ms: float, callback: Callable[[], None]):
        self.deadline_ms = deadline_ms
        self._callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def cancelled(self) -> bool:
        return self._cancelled

    def _fire(self) -> None:
        if not self._cancelled:
            self._cancelled = True
            self._callback()


class ManualClock:
    """Logical clock for deterministic scheduling.

    Callbacks fire in deadline order; callbacks with the same deadline fire
    in the order they were scheduled. A callback that schedules another
    timer due within the current advance() window sees it fire in the
    same call.
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)
        self._queue: list[tuple[float, int, ManualTimer]] = []
        self._seq = itertools.count()

    def now_ms(self) -> float:
        return self._now

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self._now + max(0.0, delay_ms), callback)
        heapq.heappush(self._queue, (timer.deadline_ms, next(self._seq), timer))
        return timer

    @property
    def pending(self) -> int:
        """Number of scheduled timers that have not fired or been cancelled."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled())

    def next_deadline(self) -> Optional[float]:
        """Deadline of the earliest live timer, or None if nothing is scheduled."""
        self._drop_cancelled()
        return self._queue[0][0] if self._queue else None

    def advance(self, delay_ms: float) -> int:
        """Move time forward, firing every timer that comes due.

        Returns:
            Number of callbacks fired
        """
        target = self._now + max(0.0, delay_ms)
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            deadline, _, timer = heapq.heappop(self._queue)
            if timer.cancelled():
                continue
            self._now = deadline
            timer._fire()
            fired += 1
        self._now = target
        return fired

    def run_until_idle(self, max_callbacks: int = 10_000) -> int:
        """Advance until no timers remain.

        Raises:
            RuntimeError: If more than max_callbacks fire (runaway schedule)
        """
        fired = 0
        while True:
            deadline = self.next_deadline()
            if deadline is None:
                return fired
            fired += self.advance(deadline - self._now)
            if fired > max_callbacks:
                raise RuntimeError(f"ManualClock fired more than {max_callbacks} callbacks")

    def _drop_cancelled(self) -> None:
        while self._queue and self._queue[0][2].cancelled():
            heapq.heappop(self._queue)
