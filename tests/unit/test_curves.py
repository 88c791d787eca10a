"""Unit tests for easing curves"""

import pytest
from bonai_rewards.domain.curves import EASE_IN, EASE_IN_OUT, EASE_OUT, ELASTIC_OUT, LINEAR, lerp


@pytest.mark.parametrize("curve", [LINEAR, EASE_IN, EASE_OUT, EASE_IN_OUT, ELASTIC_OUT])
def test_curves_pin_endpoints(curve):
    assert curve.transform(0.0) == 0.0
    assert curve.transform(1.0) == 1.0


def test_ease_shapes():
    """Ease-in lags linear progress, ease-out leads it, ease-in-out is symmetric"""
    assert EASE_IN.transform(0.5) < 0.5
    assert EASE_OUT.transform(0.5) > 0.5
    assert EASE_IN_OUT.transform(0.5) == pytest.approx(0.5, abs=0.01)
    assert EASE_IN_OUT.transform(0.25) == pytest.approx(1 - EASE_IN_OUT.transform(0.75), abs=0.01)


def test_cubic_curves_are_monotonic():
    for curve in (EASE_IN, EASE_OUT, EASE_IN_OUT):
        samples = [curve.transform(i / 100) for i in range(101)]
        assert samples == sorted(samples)


def test_elastic_out_overshoots_then_settles():
    """Elastic easing goes past 1.0, which a plain ease-out never does"""
    samples = [ELASTIC_OUT.transform(i / 100) for i in range(101)]

    assert max(samples) > 1.0
    assert max(EASE_OUT.transform(i / 100) for i in range(101)) <= 1.0
    assert samples[-5] == pytest.approx(1.0, abs=0.01)


def test_lerp():
    assert lerp(0.2, 0.0, 0.0) == 0.2
    assert lerp(0.2, 0.0, 1.0) == 0.0
    assert lerp(0.8, 1.2, 0.5) == pytest.approx(1.0)
