# predictor mode + coder configuration

"""
Configuration for the DPCM coder.
The predictor name is validated exactly once, here; everything downstream
works with the PredictorMode enum.
"""

import numbers
from dataclasses import dataclass
from enum import Enum

from errors import ConfigError


class PredictorMode(Enum):
    ORDER1 = "order1"
    ORDER2 = "order2"
    ADAPTIVE = "adaptive"

    @classmethod
    def parse(cls, name):
        """Case-insensitive lookup of a predictor name ('order1', 'Order-2', ...)."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ConfigError(f"Predictor mode must be a string, got {type(name).__name__}")
        key = name.strip().lower().replace("-", "")
        for mode in cls:
            if mode.value == key:
                return mode
        choices = " | ".join(m.value for m in cls)
        raise ConfigError(f"Unknown predictor type '{name}'. Must be one of: {choices}")


def _check_levels(levels):
    # bool is an Integral; reject it explicitly
    if isinstance(levels, bool) or not isinstance(levels, numbers.Integral):
        raise ConfigError(f"Quantization levels must be an integer, got {levels!r}")
    if levels < 1:
        raise ConfigError(f"Quantization levels must be greater than 0, got {levels}")
    return int(levels)


def quantization_step(levels):
    """step = ceil(256 / levels), in integer arithmetic."""
    levels = _check_levels(levels)
    return -(-256 // levels)


@dataclass(frozen=True)
class CoderConfig:
    mode: PredictorMode
    levels: int
    step: int

    def __post_init__(self):
        if not isinstance(self.mode, PredictorMode):
            raise ConfigError(f"Invalid predictor mode: {self.mode!r}")
        _check_levels(self.levels)
        if isinstance(self.step, bool) or not isinstance(self.step, numbers.Integral) or self.step < 1:
            raise ConfigError(f"Quantization step must be a positive integer, got {self.step!r}")


def configure(predictor_mode, quantization_levels):
    """
    Build a CoderConfig from user-facing values.
    Raises ConfigError before any grid is touched.
    """
    mode = PredictorMode.parse(predictor_mode)
    levels = _check_levels(quantization_levels)
    return CoderConfig(mode=mode, levels=levels, step=quantization_step(levels))
