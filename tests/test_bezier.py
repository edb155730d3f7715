import math

import numpy as np
import pytest

from wavepath import settings
from wavepath.geom import CubicBezier, evaluate_cubic, solve_t_for_y, split_cubic
from wavepath.linalg import Vec2

S_CURVE = CubicBezier(Vec2(0.0, 0.0), Vec2(3.0, 0.0), Vec2(2.0, 10.0), Vec2(5.0, 10.0))
WOBBLY = CubicBezier(Vec2(-1.0, 2.0), Vec2(4.0, 7.5), Vec2(0.5, -3.0), Vec2(6.0, 1.0))


def test_evaluate_endpoints_and_midpoint():
    p = S_CURVE.evaluate(0.0)
    assert p == Vec2(0.0, 0.0)
    p = S_CURVE.evaluate(1.0)
    assert p == Vec2(5.0, 10.0)
    p = evaluate_cubic(*S_CURVE.control_points, 0.5)
    assert math.isclose(p.x, 2.5, abs_tol=1e-12)
    assert math.isclose(p.y, 5.0, abs_tol=1e-12)


@pytest.mark.parametrize("t", [0.1, 0.37, 0.5, 0.8, 0.99])
def test_split_point_matches_evaluation(t):
    left, right = split_cubic(*WOBBLY.control_points, t)
    expected = WOBBLY.evaluate(t)
    assert left.p3 == right.p0
    assert left.p3.isclose(expected, abs_tol=1e-12)
    assert left.p0 == WOBBLY.p0
    assert right.p3 == WOBBLY.p3


def test_split_halves_trace_original():
    t = 0.3
    left, right = WOBBLY.subdivide(t)
    for s in np.linspace(0.0, 1.0, 11):
        assert left.evaluate(s).isclose(WOBBLY.evaluate(s * t), abs_tol=1e-9)
        assert right.evaluate(s).isclose(WOBBLY.evaluate(t + s * (1 - t)), abs_tol=1e-9)


def test_split_preserves_tangent():
    t = 0.42
    left, right = WOBBLY.subdivide(t)
    tangent = WOBBLY.derivative(t)
    incoming = left.p3 - left.p2
    outgoing = right.p1 - right.p0
    assert math.isclose(incoming.cross(tangent), 0.0, abs_tol=1e-9)
    assert math.isclose(outgoing.cross(tangent), 0.0, abs_tol=1e-9)
    assert incoming.dot(outgoing) > 0


def test_solve_t_for_y_ascending():
    t = solve_t_for_y(*S_CURVE.control_points, 5.0)
    assert abs(S_CURVE.evaluate(t).y - 5.0) < 1e-4


def test_solve_t_for_y_runs_fixed_bisection():
    # y(0.5) is exactly 5, so every step after the first moves the lower bound
    t = solve_t_for_y(*S_CURVE.control_points, 5.0)
    assert t == 0.5 - 2.0**-23
    # any target lands on the midpoint of a 2**-22 bracket
    for target in (1.0, 3.3, 8.75):
        k = solve_t_for_y(*S_CURVE.control_points, target) * 2**22 - 0.5
        assert k == int(k)


@pytest.mark.parametrize("target", [0.5, 2.0, 7.5, 9.9])
def test_solve_t_for_y_descending(target):
    curve = S_CURVE.reversed()
    t = curve.solve_t_for_y(target)
    assert 0.0 <= t <= 1.0
    assert abs(curve.evaluate(t).y - target) < 1e-4


def test_solve_t_for_y_at_endpoint():
    t = solve_t_for_y(*S_CURVE.control_points, 0.0)
    assert t < 1e-6


def test_solve_t_for_y_fallback_when_not_straddling():
    # Known degenerate path: both endpoints above the target.
    assert solve_t_for_y(*S_CURVE.control_points, -1.0) == settings.SOLVE_FALLBACK_T
    assert solve_t_for_y(*S_CURVE.control_points, 11.0) == 0.5


def test_derivative_matches_finite_difference():
    d = WOBBLY.derivative(0.6)
    eps = 1e-6
    fd = (WOBBLY.evaluate(0.6 + eps) - WOBBLY.evaluate(0.6 - eps)) / (2 * eps)
    assert d.isclose(fd, abs_tol=1e-4)


def test_translated():
    moved = S_CURVE.translated(Vec2(100.0, 0.0))
    assert moved.p0 == Vec2(100.0, 0.0)
    assert moved.p3 == Vec2(105.0, 10.0)


def test_sample_matches_evaluate():
    pts = WOBBLY.sample(9)
    assert pts.shape == (9, 2)
    for t, (x, y) in zip(np.linspace(0.0, 1.0, 9), pts):
        p = WOBBLY.evaluate(t)
        assert math.isclose(x, p.x, abs_tol=1e-9)
        assert math.isclose(y, p.y, abs_tol=1e-9)
