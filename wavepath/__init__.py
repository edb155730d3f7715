"""Top-level helpers for wavepath."""

__all__ = [
    "WaveParams",
    "InvalidWaveParams",
    "load_params",
    "build_wave_program",
    "generate_wave_path",
    "export_svg",
]

from .params import InvalidWaveParams, WaveParams, load_params
from .wave import build_wave_program, generate_wave_path


def export_svg(params, out_path, viewport=None, stroke=None):
    """Generate the wave for ``params`` and write it as an SVG file.

    Without a viewport the document is sized to the wave plus a margin.
    """
    from .io.svg_writer import fit_viewport, place_path, to_svg

    descriptor = generate_wave_path(params)
    if viewport is None:
        viewport = fit_viewport(descriptor)
    return to_svg(place_path(descriptor, viewport, stroke), out_path, viewport)
