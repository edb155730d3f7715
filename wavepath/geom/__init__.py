"""Geometry utilities for wavepath."""

from .bezier import CubicBezier, evaluate_cubic, solve_t_for_y, split_cubic

__all__ = [
    "CubicBezier",
    "evaluate_cubic",
    "split_cubic",
    "solve_t_for_y",
]
