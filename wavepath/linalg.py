"""Basic 2D linear algebra utilities for wavepath.

Points are plain immutable value objects. The module is intentionally
lightweight so the geometry kernel can depend on it without external
dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec2":
        return Vec2(self.x / scalar, self.y / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec2") -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vec2":
        n = self.norm()
        if n == 0:
            return Vec2(0.0, 0.0)
        return self / n

    def isclose(self, other: "Vec2", abs_tol: float = 1e-9) -> bool:
        return math.isclose(self.x, other.x, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, abs_tol=abs_tol
        )


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation ``a + (b - a) * t``. ``t`` is not clamped."""
    return a + (b - a) * t


def lerp_point(p0: Vec2, p1: Vec2, t: float) -> Vec2:
    return Vec2(lerp(p0.x, p1.x, t), lerp(p0.y, p1.y, t))
