"""Placement of a generated path and SVG/JSON output.

This stands in for the design host: the viewport that the host keeps as
global state is passed in explicitly as a :class:`Viewport`.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from .. import settings
from .path_commands import PathDescriptor, format_number

__all__ = ["Viewport", "Stroke", "PlacedPath", "place_path", "fit_viewport", "to_svg", "to_json"]

log = logging.getLogger("wavepath.io")


@dataclass(frozen=True)
class Viewport:
    center_x: float
    center_y: float
    width: float
    height: float


@dataclass(frozen=True)
class Stroke:
    color: Tuple[float, float, float] = settings.STROKE_COLOR
    weight: float = settings.STROKE_WEIGHT

    @property
    def hex(self) -> str:
        r, g, b = (max(0, min(255, round(c * 255))) for c in self.color)
        return f"#{r:02x}{g:02x}{b:02x}"


@dataclass(frozen=True)
class PlacedPath:
    descriptor: PathDescriptor
    x: float
    y: float
    stroke: Stroke = field(default_factory=Stroke)


def place_path(
    descriptor: PathDescriptor, viewport: Viewport, stroke: Optional[Stroke] = None
) -> PlacedPath:
    """Centre the path's bounding box on the viewport centre."""
    x = viewport.center_x - descriptor.width / 2
    y = viewport.center_y - descriptor.height / 2
    return PlacedPath(descriptor, x, y, stroke or Stroke())


def fit_viewport(descriptor: PathDescriptor, margin: float = settings.SVG_MARGIN) -> Viewport:
    """Smallest viewport that holds the path plus ``margin`` on every side."""
    width = descriptor.width + 2 * margin
    height = descriptor.height + 2 * margin
    return Viewport(width / 2, height / 2, width, height)


def to_svg(placed: PlacedPath, out_path: str | os.PathLike, viewport: Viewport) -> Path:
    """Write ``placed`` as a single stroked path in an SVG document."""
    w = format_number(viewport.width)
    h = format_number(viewport.height)
    tx = format_number(placed.x)
    ty = format_number(placed.y)
    fill_rule = placed.descriptor.winding_rule.lower().replace("_", "")
    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
        f'<path d="{placed.descriptor.data}" transform="translate({tx} {ty})" fill="none" '
        f'fill-rule="{fill_rule}" stroke="{placed.stroke.hex}" '
        f'stroke-width="{format_number(placed.stroke.weight)}"/>',
        "</svg>",
    ]
    out_path = Path(out_path)
    out_path.write_text("\n".join(svg_parts), encoding="utf-8")
    log.info("Wrote %s", out_path)
    return out_path


def to_json(descriptor: PathDescriptor, out_path: str | os.PathLike) -> Path:
    """Write the host record ``{"data": ..., "windingRule": ...}``."""
    out_path = Path(out_path)
    out_path.write_text(json.dumps(descriptor.to_dict()), encoding="utf-8")
    log.info("Wrote %s", out_path)
    return out_path
