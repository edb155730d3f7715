"""Wave parameters and validation of raw host records."""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Mapping

from . import settings

__all__ = ["InvalidWaveParams", "WaveParams", "load_params"]

log = logging.getLogger("wavepath.params")

# field name -> (camelCase host key, snake_case key)
_FIELDS = {
    "wave_length": ("waveLength", "wave_length"),
    "wave_height": ("waveHeight", "wave_height"),
    "wave_roundness": ("waveRoundness", "wave_roundness"),
    "wave_offset": ("waveOffset", "wave_offset"),
    "num_waves": ("numWaves", "num_waves"),
    "clamp_handles": ("clampHandles", "clamp_handles"),
}


class InvalidWaveParams(ValueError):
    """Raised when a parameter record cannot be turned into :class:`WaveParams`."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


@dataclass(frozen=True)
class WaveParams:
    wave_length: float
    wave_height: float
    wave_roundness: float
    wave_offset: float
    num_waves: int = settings.DEFAULT_NUM_WAVES
    clamp_handles: bool = False

    @property
    def roundness(self) -> float:
        """Roundness as a fraction (percent / 100)."""
        return self.wave_roundness / 100

    @property
    def offset(self) -> float:
        """Peak offset as a fraction of the wave length."""
        return self.wave_offset / 100

    @property
    def width(self) -> float:
        return self.num_waves * self.wave_length

    @property
    def height(self) -> float:
        return 2 * self.wave_height

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "WaveParams":
        """Validate a host record and build parameters from it.

        Keys may use the host's camelCase names or snake_case. ``num_waves``
        falls back to ``DEFAULT_NUM_WAVES`` when absent.
        """
        if not isinstance(record, Mapping):
            raise InvalidWaveParams("params", f"expected a mapping, got {type(record).__name__}")

        def lookup(field):
            for key in _FIELDS[field]:
                if key in record:
                    return record[key]
            return None

        values: Dict[str, Any] = {}
        for field in ("wave_length", "wave_height", "wave_roundness", "wave_offset"):
            values[field] = _require_number(field, lookup(field))
        for field in ("wave_length", "wave_height"):
            if values[field] <= 0:
                raise InvalidWaveParams(field, f"must be positive, got {values[field]}")

        num_waves = lookup("num_waves")
        if num_waves is None:
            values["num_waves"] = settings.DEFAULT_NUM_WAVES
        else:
            num_waves = _require_number("num_waves", num_waves)
            if not float(num_waves).is_integer() or num_waves < 1:
                raise InvalidWaveParams(
                    "num_waves", f"must be a positive integer, got {num_waves}"
                )
            values["num_waves"] = int(num_waves)

        clamp = lookup("clamp_handles")
        if clamp is not None and not isinstance(clamp, bool):
            raise InvalidWaveParams("clamp_handles", f"must be a boolean, got {clamp!r}")
        values["clamp_handles"] = bool(clamp)

        params = cls(**values)
        log.debug("Validated %s", params)
        return params

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase record the host sends."""
        return {
            "waveLength": self.wave_length,
            "waveHeight": self.wave_height,
            "waveRoundness": self.wave_roundness,
            "waveOffset": self.wave_offset,
            "numWaves": self.num_waves,
            "clampHandles": self.clamp_handles,
        }


def _require_number(field: str, value: Any) -> float:
    if value is None:
        raise InvalidWaveParams(field, "is required")
    # bool is an int subclass but never a meaningful measurement
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidWaveParams(field, f"must be a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError:
        raise InvalidWaveParams(field, "is too large to represent as a float") from None
    if not math.isfinite(number):
        raise InvalidWaveParams(field, f"must be finite, got {value!r}")
    return number


def load_params(path: str | os.PathLike) -> WaveParams:
    """Read parameters from a JSON file.

    The file holds either the parameter record itself or a host message of
    the form ``{"type": "generate-wave", "params": {...}}``.
    """
    with open(path, "r", encoding="utf-8") as f:
        obj = json.load(f)
    if isinstance(obj, dict) and "type" in obj:
        if obj["type"] != "generate-wave":
            raise InvalidWaveParams("type", f"unsupported message type {obj['type']!r}")
        obj = obj.get("params")
    return WaveParams.from_mapping(obj)
