"""Structured vector path commands.

A path is kept as an ordered list of command records and only turned into
the ``M x y C x1 y1 x2 y2 x3 y3`` mini-language when it is serialized.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

import numpy as np

from .. import settings
from ..geom import CubicBezier
from ..linalg import Vec2

__all__ = [
    "format_number",
    "PathCommand",
    "MoveTo",
    "CurveTo",
    "PathProgram",
    "PathDescriptor",
    "parse_path_data",
]


def format_number(value: float, decimals: int = settings.COORD_DECIMALS) -> str:
    """Round half up to ``decimals`` places and drop trailing zeros.

    ``40.0`` renders as ``"40"``, ``12.5`` as ``"12.5"`` and ``-0.0`` as ``"0"``.
    Non-finite values render as ``NaN`` / ``Infinity`` / ``-Infinity``; they
    only show up for degenerate inputs and :func:`parse_path_data` reads them.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    scale = 10**decimals
    if abs(value) >= 2**52:
        # every float this large is already integral
        return str(int(value))
    rounded = math.floor(value * scale + 0.5) / scale
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)


class PathCommand:
    """Base class for path commands."""

    letter = ""

    def __init__(self, end: Vec2):
        self.end = end

    def points(self) -> List[Vec2]:
        raise NotImplementedError("Subclasses must implement points()")

    def to_string(self) -> str:
        parts = [self.letter]
        for p in self.points():
            parts.append(format_number(p.x))
            parts.append(format_number(p.y))
        return " ".join(parts)

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.points() == other.points()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(p) for p in self.points())})"


class MoveTo(PathCommand):
    """M: move the pen to an absolute point."""

    letter = "M"

    def points(self) -> List[Vec2]:
        return [self.end]


class CurveTo(PathCommand):
    """C: cubic curve to ``end`` with two absolute handles."""

    letter = "C"

    def __init__(self, c1: Vec2, c2: Vec2, end: Vec2):
        super().__init__(end)
        self.c1 = c1
        self.c2 = c2

    def points(self) -> List[Vec2]:
        return [self.c1, self.c2, self.end]


@dataclass(frozen=True)
class PathDescriptor:
    """Finished path handed to a sink: command string plus winding rule."""

    data: str
    winding_rule: str = settings.WINDING_RULE
    width: float = 0.0
    height: float = 0.0

    def to_dict(self) -> Dict[str, str]:
        return {"data": self.data, "windingRule": self.winding_rule}


class PathProgram:
    """An ordered sequence of path commands."""

    def __init__(self):
        self.commands: List[PathCommand] = []
        self.current_position: Optional[Vec2] = None

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def add_command(self, command: PathCommand):
        """Add a command and advance the current position."""
        if isinstance(command, CurveTo) and self.current_position is None:
            raise ValueError("A curve needs a current point; start the path with a move")
        self.commands.append(command)
        self.current_position = command.end

    def move_to(self, point: Vec2):
        self.add_command(MoveTo(point))

    def curve_to(self, c1: Vec2, c2: Vec2, end: Vec2):
        self.add_command(CurveTo(c1, c2, end))

    def add_segment(self, segment: CubicBezier):
        """Append a cubic, moving to its start first if the path is empty."""
        if self.current_position is None:
            self.move_to(segment.p0)
        self.curve_to(segment.p1, segment.p2, segment.p3)

    def on_curve_points(self) -> List[Vec2]:
        return [cmd.end for cmd in self.commands]

    def segments(self) -> List[CubicBezier]:
        """Rebuild absolute cubic segments from the curve commands."""
        result = []
        start = None
        for cmd in self.commands:
            if isinstance(cmd, CurveTo):
                result.append(CubicBezier(start, cmd.c1, cmd.c2, cmd.end))
            start = cmd.end
        return result

    def sample(self, samples_per_curve: int = 16) -> np.ndarray:
        """Flatten the path into an (N, 2) polyline.

        Each curve contributes ``samples_per_curve`` points; the first point
        of every curve after the first is dropped since it repeats the
        previous curve's end.
        """
        segments = self.segments()
        if not segments:
            if self.current_position is None:
                return np.empty((0, 2))
            return np.array([tuple(self.current_position)], dtype=float)
        chunks = [segments[0].sample(samples_per_curve)]
        for seg in segments[1:]:
            chunks.append(seg.sample(samples_per_curve)[1:])
        return np.vstack(chunks)

    def to_string(self) -> str:
        """Serialize the whole program as a single path data string."""
        return " ".join(cmd.to_string() for cmd in self.commands)

    def to_descriptor(
        self, width: float = 0.0, height: float = 0.0, winding_rule: str = settings.WINDING_RULE
    ) -> PathDescriptor:
        return PathDescriptor(self.to_string(), winding_rule, width, height)


_TOKEN_RE = re.compile(
    r"NaN|[-+]?Infinity|[A-Za-z]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
)
_ARITY = {"M": 2, "C": 6}
_NON_FINITE = {"NaN", "Infinity"}


def parse_path_data(data: str) -> PathProgram:
    """Parse the absolute ``M``/``C`` subset of path data into a program.

    Operands may be separated by whitespace or commas. Extra operand groups
    after a ``C`` are read as further curves.
    """
    leftover = _TOKEN_RE.sub(" ", data).replace(",", " ").strip()
    if leftover:
        raise ValueError(f"Unexpected characters in path data: {leftover!r}")

    tokens = _TOKEN_RE.findall(data)
    program = PathProgram()
    i = 0
    while i < len(tokens):
        letter = tokens[i]
        if letter not in _ARITY:
            raise ValueError(f"Unsupported path command {letter!r}")
        i += 1
        operands = []
        while i < len(tokens) and (tokens[i] in _NON_FINITE or not tokens[i].isalpha()):
            operands.append(float(tokens[i]))
            i += 1
        arity = _ARITY[letter]
        if not operands or len(operands) % arity:
            raise ValueError(
                f"Command {letter!r} expects a multiple of {arity} numbers, got {len(operands)}"
            )
        if letter == "M" and len(operands) != 2:
            raise ValueError("Implicit line-to after a move is not supported")
        for k in range(0, len(operands), arity):
            pts = [Vec2(operands[j], operands[j + 1]) for j in range(k, k + arity, 2)]
            if letter == "M":
                program.move_to(pts[0])
            else:
                program.curve_to(*pts)
    return program
