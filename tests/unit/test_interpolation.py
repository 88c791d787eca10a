"""Unit tests for the progress driver"""

import pytest
from bonai_rewards.domain.interpolation import AnimationStatus, Interpolation
from bonai_rewards.domain.scheduling import CancellationToken
from bonai_rewards.infrastructure.schedulers import ManualScheduler


@pytest.fixture
def token() -> CancellationToken:
    return CancellationToken("test")


def test_forward_completes_exactly_after_duration(scheduler: ManualScheduler, token: CancellationToken):
    interpolation = Interpolation(scheduler, 300, token)
    statuses = []
    interpolation.add_status_listener(statuses.append)

    interpolation.forward()
    scheduler.advance(150)
    assert interpolation.value == pytest.approx(0.5)
    assert interpolation.status == AnimationStatus.FORWARD

    scheduler.advance(150)
    assert interpolation.value == 1.0
    assert statuses == [AnimationStatus.FORWARD, AnimationStatus.COMPLETED]
    assert not interpolation.is_animating


def test_retarget_continues_from_current_progress(scheduler: ManualScheduler, token: CancellationToken):
    """Reversing mid-flight starts from where it is and takes proportionally less time"""
    interpolation = Interpolation(scheduler, 300, token)
    interpolation.forward()
    scheduler.advance(150)

    interpolation.reverse()
    assert interpolation.value == pytest.approx(0.5)
    assert interpolation.status == AnimationStatus.REVERSE

    scheduler.advance(75)
    assert interpolation.value == pytest.approx(0.25)

    scheduler.advance(75)
    assert interpolation.value == 0.0
    assert interpolation.status == AnimationStatus.DISMISSED


def test_retarget_to_current_value_settles_immediately(scheduler: ManualScheduler, token: CancellationToken):
    interpolation = Interpolation(scheduler, 300, token)
    interpolation.forward()
    interpolation.reverse()

    assert interpolation.value == 0.0
    assert interpolation.status == AnimationStatus.DISMISSED
    assert scheduler.pending == 0


def test_value_listeners_tick_each_frame(scheduler: ManualScheduler, token: CancellationToken):
    interpolation = Interpolation(scheduler, 100, token, frame_interval_ms=10)
    values = []
    interpolation.add_listener(values.append)

    interpolation.forward()
    scheduler.advance(200)

    assert values == sorted(values)
    assert values[-1] == 1.0
    # nine frame ticks plus the completion notification
    assert len(values) == 10


def test_repeat_bounces_between_ends(scheduler: ManualScheduler, token: CancellationToken):
    interpolation = Interpolation(scheduler, 2000, token)
    interpolation.repeat()

    expected = {0: 0.0, 1000: 0.5, 2000: 1.0, 3000: 0.5, 4000: 0.0, 5000: 0.5}
    for at_ms, value in expected.items():
        scheduler.advance_to(at_ms)
        assert interpolation.value == pytest.approx(value)

    assert interpolation.is_animating


def test_repeat_reports_direction(scheduler: ManualScheduler, token: CancellationToken):
    interpolation = Interpolation(scheduler, 2000, token)
    interpolation.repeat()

    scheduler.advance(500)
    assert interpolation.status == AnimationStatus.FORWARD
    scheduler.advance(2000)
    assert interpolation.status == AnimationStatus.REVERSE


def test_cancelled_token_freezes_and_silences(scheduler: ManualScheduler, token: CancellationToken):
    interpolation = Interpolation(scheduler, 300, token)
    statuses = []
    interpolation.add_status_listener(statuses.append)
    interpolation.forward()
    scheduler.advance(100)

    interpolation.dispose()
    token.cancel()
    frozen = interpolation.value
    scheduler.advance(1000)

    assert interpolation.value == frozen
    assert statuses == [AnimationStatus.FORWARD]
    assert scheduler.pending == 0

    interpolation.forward()
    assert interpolation.value == frozen
