"""Scheduler implementations: a manual virtual clock and an asyncio-backed clock"""

import asyncio
import heapq
import itertools
from dataclasses import dataclass
from typing import Callable, List, Tuple


@dataclass(eq=False)
class ManualHandle:
    """Pending callback on a ManualScheduler"""

    due_ms: float
    callback: Callable[[], None]
    _cancelled: bool = False

    def cancel(self) -> None:
        self._cancelled = True

    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler:
    """
    Deterministic clock that only moves when advanced.

    Callbacks run in due-time order (ties in scheduling order) with the clock
    set to their exact due time, so timings can be asserted to the millisecond.
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = start_ms
        self._queue: List[Tuple[float, int, ManualHandle]] = []
        self._sequence = itertools.count()

    def now_ms(self) -> float:
        return self._now

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle(due_ms=self._now + max(delay_ms, 0.0), callback=callback)
        heapq.heappush(self._queue, (handle.due_ms, next(self._sequence), handle))
        return handle

    def advance(self, delta_ms: float) -> None:
        """Move the clock forward by delta_ms, running everything that falls due"""
        if delta_ms < 0:
            raise ValueError("Cannot move the clock backwards")
        self.advance_to(self._now + delta_ms)

    def advance_to(self, target_ms: float) -> None:
        if target_ms < self._now:
            raise ValueError("Cannot move the clock backwards")

        while self._queue and self._queue[0][0] <= target_ms:
            due_ms, _, handle = heapq.heappop(self._queue)
            if handle.cancelled():
                continue
            self._now = due_ms
            handle.callback()

        self._now = target_ms

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting to run"""
        return sum(1 for _, _, handle in self._queue if not handle.cancelled())


class AsyncioScheduler:
    """Scheduler running callbacks on an asyncio event loop"""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def now_ms(self) -> float:
        return self.loop.time() * 1000.0

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(delay_ms, 0.0) / 1000.0, callback)
