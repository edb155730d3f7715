"""Repeating top/bottom wave built from cubic Bezier segments.

Every wave is one rising cubic (trough to peak) and one falling cubic (peak
to trough). Each of those is split where it crosses the vertical midline so
the emitted path carries an on-curve node at ``y = wave_height`` on both the
rise and the fall. The split halves trace exactly the original curve.
"""

from __future__ import annotations

import logging
from typing import Iterator, Tuple

from .geom import CubicBezier, solve_t_for_y, split_cubic
from .io.path_commands import PathDescriptor, PathProgram
from .linalg import Vec2
from .params import WaveParams

__all__ = ["wave_segments", "split_at_midline", "build_wave_program", "generate_wave_path"]

log = logging.getLogger("wavepath.wave")


def wave_segments(params: WaveParams, index: int) -> Tuple[CubicBezier, CubicBezier]:
    """Return the rising and falling cubics of wave ``index``."""
    length = params.wave_length
    trough_y = 2 * params.wave_height
    peak_y = 0.0

    start_x = index * length
    end_x = start_x + length
    mid_x = start_x + length / 2
    top_x = mid_x + params.offset * length
    reach = params.roundness * (length / 2)

    c1x = start_x + reach
    c2x = top_x - reach
    c3x = top_x + reach
    c4x = end_x - reach
    if params.clamp_handles:
        c1x = min(max(start_x, c1x), top_x)
        c2x = max(min(c2x, top_x), start_x)
        c3x = max(min(c3x, end_x), top_x)
        c4x = min(max(c4x, top_x), end_x)

    rising = CubicBezier(
        Vec2(start_x, trough_y),
        Vec2(c1x, trough_y),
        Vec2(c2x, peak_y),
        Vec2(top_x, peak_y),
    )
    falling = CubicBezier(
        Vec2(top_x, peak_y),
        Vec2(c3x, peak_y),
        Vec2(c4x, trough_y),
        Vec2(end_x, trough_y),
    )
    return rising, falling


def split_at_midline(segment: CubicBezier, middle_y: float) -> Tuple[CubicBezier, CubicBezier]:
    """Split ``segment`` where its Y crosses ``middle_y``."""
    p0, p1, p2, p3 = segment.control_points
    t = solve_t_for_y(p0, p1, p2, p3, middle_y)
    return split_cubic(p0, p1, p2, p3, t)


def _iter_half_segments(params: WaveParams) -> Iterator[CubicBezier]:
    middle_y = params.wave_height
    for i in range(params.num_waves):
        rising, falling = wave_segments(params, i)
        yield from split_at_midline(rising, middle_y)
        yield from split_at_midline(falling, middle_y)


def build_wave_program(params: WaveParams) -> PathProgram:
    """Lay out ``num_waves`` periods as a path program.

    The path starts at the first trough ``(0, 2h)`` and then holds four curve
    commands per wave: rise to midline, midline to peak, fall to midline,
    midline to trough.
    """
    program = PathProgram()
    program.move_to(Vec2(0.0, 2 * params.wave_height))
    for half in _iter_half_segments(params):
        program.curve_to(half.p1, half.p2, half.p3)
    return program


def generate_wave_path(params: WaveParams) -> PathDescriptor:
    """Generate the finished path descriptor for ``params``.

    The descriptor carries the raw bounding size
    ``(num_waves * wave_length, 2 * wave_height)`` for placement.
    """
    program = build_wave_program(params)
    descriptor = program.to_descriptor(width=params.width, height=params.height)
    log.debug(
        "Generated %d waves (%d commands, %gx%g)",
        params.num_waves,
        len(program),
        params.width,
        params.height,
    )
    return descriptor
