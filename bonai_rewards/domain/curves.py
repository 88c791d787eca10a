"""Easing curves mapping linear animation progress onto eased progress"""

import math
from dataclasses import dataclass

# Bisection tolerance when inverting the cubic's x(t)
CUBIC_ERROR_BOUND = 0.001


def lerp(begin: float, end: float, t: float) -> float:
    """Linear interpolation between begin and end"""
    return begin + (end - begin) * t


def _evaluate_cubic(a: float, b: float, m: float) -> float:
    return 3 * a * (1 - m) * (1 - m) * m + 3 * b * (1 - m) * m * m + m * m * m


@dataclass(frozen=True)
class CubicCurve:
    """
    Cubic Bezier easing through (0, 0), (a, b), (c, d), (1, 1).

    The x coordinate is inverted by bisection, so the curve is accurate to
    within CUBIC_ERROR_BOUND of the requested progress.
    """

    a: float
    b: float
    c: float
    d: float

    def transform(self, t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0

        start = 0.0
        end = 1.0
        while True:
            midpoint = (start + end) / 2
            estimate = _evaluate_cubic(self.a, self.c, midpoint)
            if abs(t - estimate) < CUBIC_ERROR_BOUND:
                return _evaluate_cubic(self.b, self.d, midpoint)
            if estimate < t:
                start = midpoint
            else:
                end = midpoint


@dataclass(frozen=True)
class ElasticOutCurve:
    """
    Oscillating curve that overshoots 1.0 before settling.

    A plain ease-out never exceeds 1.0, so it cannot stand in for this one.
    """

    period: float = 0.4

    def transform(self, t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        s = self.period / 4.0
        return math.pow(2.0, -10 * t) * math.sin((t - s) * (math.pi * 2.0) / self.period) + 1.0


@dataclass(frozen=True)
class LinearCurve:
    def transform(self, t: float) -> float:
        return min(max(t, 0.0), 1.0)


LINEAR = LinearCurve()
EASE_IN = CubicCurve(0.42, 0.0, 1.0, 1.0)
EASE_OUT = CubicCurve(0.0, 0.0, 0.58, 1.0)
EASE_IN_OUT = CubicCurve(0.42, 0.0, 0.58, 1.0)
ELASTIC_OUT = ElasticOutCurve()
