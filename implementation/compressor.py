# Compressor class - original grid -> quantized residual grid


"""
Compressor - encoder half of the DPCM pipeline:
 - uses Predictor2D over the *original* grid (every prediction reads only
   original pixels, so all cells can be computed at once)
 - error = pixel - prediction
 - residual = UniformQuantizer.quantize(error)
The result is equivalent to visiting the cells in raster order.
"""

import numpy as np

from config import CoderConfig
from errors import ConfigError, InputError
from predictor import Predictor2D
from quantizer import UniformQuantizer


def as_pixel_grid(grid, name="grid"):
    """Validate a grayscale grid: 2-D, non-empty, integer values in [0, 255]."""
    if grid is None:
        raise InputError(f"{name} is missing")
    arr = np.asarray(grid)
    if arr.ndim != 2:
        raise InputError(f"{name} must be 2-D (H x W), got shape {arr.shape}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise InputError(f"{name} must be non-empty, got shape {arr.shape}")
    if arr.dtype.kind not in "iub":
        raise InputError(f"{name} must hold integers, got dtype {arr.dtype}")
    if arr.min() < 0 or arr.max() > 255:
        raise InputError(f"{name} values must lie in [0, 255]")
    return arr.astype(np.int64)


def check_config(config):
    if not isinstance(config, CoderConfig):
        raise ConfigError(f"Expected a CoderConfig, got {type(config).__name__}")
    return config


class Compressor:
    def __init__(self, config):
        self.config = check_config(config)
        self.predictor = Predictor2D(mode=config.mode)
        self.quantizer = UniformQuantizer(step=config.step)

    def prediction_error(self, grid):
        """Unquantized error grid (pixel - prediction), int64."""
        channel = as_pixel_grid(grid)
        return channel - self.predictor.predict_image(channel)

    def compress(self, grid):
        """
        grid: HxW integer array in [0, 255] (not modified)
        Returns a new read-only HxW int32 array of quantized residuals.
        """
        errors = self.prediction_error(grid)
        residuals = self.quantizer.quantize(errors)
        residuals.flags.writeable = False
        return residuals


def encode(grid, config):
    return Compressor(config).compress(grid)
