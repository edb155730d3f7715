"""Cubic Bezier utilities.

The free functions take the four control points explicitly and are what the
wave builder calls; :class:`CubicBezier` bundles the same operations for
callers that prefer to pass a segment around.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .. import settings
from ..linalg import Vec2, lerp_point


def evaluate_cubic(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, t: float) -> Vec2:
    """Evaluate the cubic at ``t`` with the Bernstein basis."""
    mt = 1.0 - t
    b0 = mt * mt * mt
    b1 = 3.0 * mt * mt * t
    b2 = 3.0 * mt * t * t
    b3 = t * t * t
    return Vec2(
        b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x,
        b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y,
    )


def split_cubic(
    p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, t: float
) -> Tuple["CubicBezier", "CubicBezier"]:
    """Split the cubic at ``t`` using de Casteljau.

    Both halves are reparameterized to [0,1]. ``left.p3`` and ``right.p0`` are
    the same point, and the handles on either side of it are collinear with
    the original tangent.
    """
    p01 = lerp_point(p0, p1, t)
    p12 = lerp_point(p1, p2, t)
    p23 = lerp_point(p2, p3, t)
    p012 = lerp_point(p01, p12, t)
    p123 = lerp_point(p12, p23, t)
    mid = lerp_point(p012, p123, t)
    return CubicBezier(p0, p01, p012, mid), CubicBezier(mid, p123, p23, p3)


def solve_t_for_y(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, target_y: float) -> float:
    """Find the parameter where the curve's Y equals ``target_y``.

    The curve's Y is assumed monotonic between ``t=0`` and ``t=1``. When both
    endpoints lie strictly on the same side of ``target_y`` the fixed
    fallback ``SOLVE_FALLBACK_T`` is returned instead of a root.
    """
    y_start = evaluate_cubic(p0, p1, p2, p3, 0.0).y
    y_end = evaluate_cubic(p0, p1, p2, p3, 1.0).y
    if (y_start > target_y and y_end > target_y) or (y_start < target_y and y_end < target_y):
        return settings.SOLVE_FALLBACK_T

    ascending = y_end > y_start
    lo, hi = 0.0, 1.0
    for _ in range(settings.BISECTION_ITERATIONS):
        mid = (lo + hi) / 2
        y = evaluate_cubic(p0, p1, p2, p3, mid).y
        if ascending:
            if y < target_y:
                lo = mid
            else:
                hi = mid
        else:
            if y > target_y:
                lo = mid
            else:
                hi = mid
    return (lo + hi) / 2


@dataclass(frozen=True)
class CubicBezier:
    p0: Vec2
    p1: Vec2
    p2: Vec2
    p3: Vec2

    @property
    def control_points(self) -> Tuple[Vec2, Vec2, Vec2, Vec2]:
        return (self.p0, self.p1, self.p2, self.p3)

    def evaluate(self, u: float) -> Vec2:
        return evaluate_cubic(self.p0, self.p1, self.p2, self.p3, u)

    def subdivide(self, u: float) -> Tuple["CubicBezier", "CubicBezier"]:
        """Subdivide the curve into two at parameter u."""
        return split_cubic(self.p0, self.p1, self.p2, self.p3, u)

    def solve_t_for_y(self, target_y: float) -> float:
        return solve_t_for_y(self.p0, self.p1, self.p2, self.p3, target_y)

    def derivative(self, u: float) -> Vec2:
        mt = 1.0 - u
        d0 = (self.p1 - self.p0) * (mt * mt)
        d1 = (self.p2 - self.p1) * (2.0 * mt * u)
        d2 = (self.p3 - self.p2) * (u * u)
        return (d0 + d1 + d2) * 3.0

    def reversed(self) -> "CubicBezier":
        return CubicBezier(self.p3, self.p2, self.p1, self.p0)

    def translated(self, offset: Vec2) -> "CubicBezier":
        return CubicBezier(*(p + offset for p in self.control_points))

    def sample(self, n: int = 16) -> np.ndarray:
        """Return ``n`` evenly spaced (in parameter) points as an (n, 2) array."""
        t = np.linspace(0.0, 1.0, n)[:, None]
        mt = 1.0 - t
        ctrl = np.array([tuple(p) for p in self.control_points], dtype=float)
        return (
            mt**3 * ctrl[0]
            + 3.0 * mt**2 * t * ctrl[1]
            + 3.0 * mt * t**2 * ctrl[2]
            + t**3 * ctrl[3]
        )
