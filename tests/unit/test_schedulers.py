"""Unit tests for schedulers and cancellation tokens"""

import asyncio
import pytest
from bonai_rewards.domain.animation import AnimationSequencer, AnimationTimings
from bonai_rewards.domain.models import EntryPhase
from bonai_rewards.domain.scheduling import CancellationToken
from bonai_rewards.infrastructure.schedulers import AsyncioScheduler, ManualScheduler


def test_manual_scheduler_runs_in_due_order(scheduler: ManualScheduler):
    fired = []
    scheduler.call_later(30, lambda: fired.append(("c", scheduler.now_ms())))
    scheduler.call_later(10, lambda: fired.append(("a", scheduler.now_ms())))
    scheduler.call_later(10, lambda: fired.append(("b", scheduler.now_ms())))

    scheduler.advance(20)
    assert fired == [("a", 10), ("b", 10)]
    assert scheduler.now_ms() == 20

    scheduler.advance(20)
    assert fired[-1] == ("c", 30)
    assert scheduler.pending == 0


def test_manual_scheduler_runs_callbacks_scheduled_during_advance(scheduler: ManualScheduler):
    fired = []
    scheduler.call_later(10, lambda: scheduler.call_later(5, lambda: fired.append(scheduler.now_ms())))

    scheduler.advance(100)
    assert fired == [15]


def test_manual_scheduler_refuses_to_rewind(scheduler: ManualScheduler):
    scheduler.advance(10)
    with pytest.raises(ValueError):
        scheduler.advance_to(5)
    with pytest.raises(ValueError):
        scheduler.advance(-1)


def test_cancellation_token_drops_pending_work(scheduler: ManualScheduler):
    token = CancellationToken("test")
    fired = []
    token.schedule(scheduler, 10, lambda: fired.append("late"))
    guarded = token.guard(lambda: fired.append("guarded"))

    assert token.pending == 1
    token.cancel()
    scheduler.advance(50)
    guarded()

    assert fired == []
    assert token.pending == 0
    assert token.schedule(scheduler, 10, lambda: fired.append("never")) is None


async def test_asyncio_scheduler_fires_on_loop():
    scheduler = AsyncioScheduler()
    fired = asyncio.Event()

    scheduler.call_later(5, fired.set)
    await asyncio.wait_for(fired.wait(), timeout=1.0)


async def test_sequencer_on_asyncio_loop_settles():
    timings = AnimationTimings(entry_stagger_ms=10, entry_duration_ms=20, frame_interval_ms=5)
    sequencer = AnimationSequencer(AsyncioScheduler(), timings)
    state = sequencer.schedule_entry(1)

    await asyncio.sleep(0.2)

    assert state.entry_phase == EntryPhase.SETTLED
    sequencer.dispose()
