"""Path serialization and output sinks."""

from .path_commands import (
    CurveTo,
    MoveTo,
    PathCommand,
    PathDescriptor,
    PathProgram,
    format_number,
    parse_path_data,
)

__all__ = [
    "CurveTo",
    "MoveTo",
    "PathCommand",
    "PathDescriptor",
    "PathProgram",
    "format_number",
    "parse_path_data",
]
