"""Time-driven 0..1 progress driver shared by every animation"""

import math
from enum import Enum
from typing import Callable, List, Optional

from bonai_rewards.config import settings
from bonai_rewards.domain.curves import lerp
from bonai_rewards.domain.scheduling import CancellationToken, ScheduledHandle, Scheduler


class AnimationStatus(str, Enum):
    DISMISSED = "dismissed"  # at rest at the start
    FORWARD = "forward"
    REVERSE = "reverse"
    COMPLETED = "completed"  # at rest at the end


StatusListener = Callable[[AnimationStatus], None]
ValueListener = Callable[[float], None]


class Interpolation:
    """
    Linear progress between 0 and 1 over a fixed full-range duration.

    Progress is a pure function of the scheduler clock, so it can be sampled
    at any instant. While running, a completion callback is scheduled for the
    exact end time and value listeners receive a tick every frame interval.

    animate_to() always starts from the current progress and scales the run
    time by the distance left, so retargeting mid-flight is continuous.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        duration_ms: float,
        token: CancellationToken,
        value: float = 0.0,
        frame_interval_ms: float | None = None,
    ):
        self._scheduler = scheduler
        self.duration_ms = duration_ms
        self._token = token
        self._frame_interval_ms = frame_interval_ms or settings.frame_interval_ms

        self._anchor_value = min(max(value, 0.0), 1.0)
        self._anchor_ms = scheduler.now_ms()
        self._target: Optional[float] = None
        self._run_ms = 0.0
        self._repeating = False
        self._disposed = False
        self._status = AnimationStatus.COMPLETED if self._anchor_value >= 1.0 else AnimationStatus.DISMISSED

        self._completion: Optional[ScheduledHandle] = None
        self._tick: Optional[ScheduledHandle] = None
        self._status_listeners: List[StatusListener] = []
        self._value_listeners: List[ValueListener] = []

    # -- sampling -----------------------------------------------------------

    @property
    def value(self) -> float:
        return self.value_at(self._scheduler.now_ms())

    def value_at(self, now_ms: float) -> float:
        if self._repeating:
            position = self._anchor_value + (now_ms - self._anchor_ms) / self.duration_ms
            folded = math.fmod(position, 2.0)
            return folded if folded <= 1.0 else 2.0 - folded

        if self._target is None:
            return self._anchor_value
        if self._run_ms <= 0:
            return self._target

        fraction = min(max((now_ms - self._anchor_ms) / self._run_ms, 0.0), 1.0)
        return lerp(self._anchor_value, self._target, fraction)

    @property
    def status(self) -> AnimationStatus:
        if self._repeating:
            position = self._anchor_value + (self._scheduler.now_ms() - self._anchor_ms) / self.duration_ms
            return AnimationStatus.FORWARD if math.fmod(position, 2.0) < 1.0 else AnimationStatus.REVERSE
        return self._status

    @property
    def is_animating(self) -> bool:
        return self._repeating or self._target is not None

    @property
    def disposed(self) -> bool:
        return self._disposed or self._token.cancelled

    # -- listeners ----------------------------------------------------------

    def add_status_listener(self, listener: StatusListener) -> None:
        self._status_listeners.append(listener)

    def add_listener(self, listener: ValueListener) -> None:
        self._value_listeners.append(listener)
        if self.is_animating and self._tick is None:
            self._schedule_tick()

    # -- driving ------------------------------------------------------------

    def forward(self) -> None:
        self.animate_to(1.0)

    def reverse(self) -> None:
        self.animate_to(0.0)

    def animate_to(self, target: float) -> None:
        """Run from the current progress toward target"""
        if self.disposed:
            return

        current = self.value
        self._cancel_pending()
        self._repeating = False
        self._anchor_value = current
        self._anchor_ms = self._scheduler.now_ms()

        forward = target >= current
        distance = abs(target - current)
        if distance == 0:
            self._settle(target, forward)
            return

        self._target = target
        self._run_ms = self.duration_ms * distance
        self._set_status(AnimationStatus.FORWARD if forward else AnimationStatus.REVERSE)
        self._completion = self._token.schedule(
            self._scheduler, self._run_ms, lambda: self._settle(target, forward)
        )
        self._schedule_tick()

    def repeat(self) -> None:
        """Bounce between 0 and 1 until stopped or disposed"""
        if self.disposed:
            return

        current = self.value
        self._cancel_pending()
        self._target = None
        self._anchor_value = current
        self._anchor_ms = self._scheduler.now_ms()
        self._repeating = True
        self._set_status(AnimationStatus.FORWARD)
        self._schedule_tick()

    def stop(self) -> None:
        """Freeze at the current progress without reaching a rest status"""
        current = self.value
        self._cancel_pending()
        self._repeating = False
        self._target = None
        self._anchor_value = current
        self._anchor_ms = self._scheduler.now_ms()

    def dispose(self) -> None:
        if self._disposed:
            return
        self.stop()
        self._disposed = True
        self._status_listeners.clear()
        self._value_listeners.clear()

    # -- internals ----------------------------------------------------------

    def _settle(self, target: float, forward: bool) -> None:
        self._completion = None
        self._token.forget(self._tick)
        self._tick = None
        self._target = None
        self._anchor_value = target
        self._anchor_ms = self._scheduler.now_ms()
        self._notify_value()
        self._set_status(AnimationStatus.COMPLETED if forward else AnimationStatus.DISMISSED)

    def _cancel_pending(self) -> None:
        self._token.forget(self._completion)
        self._token.forget(self._tick)
        self._completion = None
        self._tick = None

    def _schedule_tick(self) -> None:
        if not self._value_listeners:
            return
        self._token.forget(self._tick)
        self._tick = self._token.schedule(self._scheduler, self._frame_interval_ms, self._on_tick)

    def _on_tick(self) -> None:
        self._tick = None
        if not self.is_animating:
            return
        self._notify_value()
        self._schedule_tick()

    def _set_status(self, status: AnimationStatus) -> None:
        if status == self._status:
            return
        self._status = status
        for listener in list(self._status_listeners):
            self._token.guard(listener)(status)

    def _notify_value(self) -> None:
        value = self.value
        for listener in list(self._value_listeners):
            self._token.guard(listener)(value)
