"""Scheduled-callback service contract and cancellation tokens"""

import logging
from typing import Callable, Optional, Protocol, Set

from bonai_rewards.infrastructure.observability.metrics import dropped_callback_counter

logger = logging.getLogger(__name__)


class ScheduledHandle(Protocol):
    """Handle of a pending callback (asyncio.TimerHandle satisfies this)"""

    def cancel(self) -> None: ...

    def cancelled(self) -> bool: ...


class Scheduler(Protocol):
    """Single-threaded clock that runs callbacks after a delay"""

    def now_ms(self) -> float: ...

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledHandle: ...


class CancellationToken:
    """
    Cancellation flag shared by every callback an owner schedules.

    Callbacks go through schedule() or guard(); both check the flag right
    before running, so once cancel() returns nothing the owner scheduled can
    touch its state again. cancel() also cancels every outstanding handle.
    """

    def __init__(self, owner: str = ""):
        self.owner = owner
        self._cancelled = False
        self._handles: Set[ScheduledHandle] = set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        for handle in list(self._handles):
            handle.cancel()
        self._handles.clear()

    def guard(self, callback: Callable[..., None]) -> Callable[..., None]:
        """Wrap callback so it becomes a no-op after cancellation"""

        def guarded(*args, **kwargs) -> None:
            if self._cancelled:
                self._record_drop()
                return
            callback(*args, **kwargs)

        return guarded

    def schedule(
        self,
        scheduler: Scheduler,
        delay_ms: float,
        callback: Callable[[], None],
    ) -> Optional[ScheduledHandle]:
        """Run callback after delay_ms unless this token is cancelled first"""
        if self._cancelled:
            self._record_drop()
            return None

        handle: Optional[ScheduledHandle] = None

        def run() -> None:
            self._handles.discard(handle)
            if self._cancelled:
                self._record_drop()
                return
            callback()

        handle = scheduler.call_later(delay_ms, run)
        self._handles.add(handle)
        return handle

    def forget(self, handle: Optional[ScheduledHandle]) -> None:
        """Cancel one pending handle without cancelling the token"""
        if handle is None:
            return
        handle.cancel()
        self._handles.discard(handle)

    @property
    def pending(self) -> int:
        return len(self._handles)

    def _record_drop(self) -> None:
        dropped_callback_counter.inc()
        logger.debug("Dropped callback after disposal", extra={"owner": self.owner})
