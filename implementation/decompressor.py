# Decompressor class - quantized residual grid -> reconstructed grid

"""
Decompressor: rebuilds the image from the quantized residuals.
Each prediction reads the grid being reconstructed (left, top, top-left
already hold their final clamped values), so the scan must stay in raster
order: top-to-bottom, left-to-right. Nothing here can be vectorised the way
the encoder is.
"""

import numpy as np

from compressor import check_config
from errors import InputError
from predictor import Predictor2D
from quantizer import UniformQuantizer
from utils import clamp


def as_residual_grid(residuals):
    if residuals is None:
        raise InputError("residual grid is missing")
    arr = np.asarray(residuals)
    if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
        raise InputError(f"residual grid must be a non-empty 2-D array, got shape {arr.shape}")
    if arr.dtype.kind not in "iub":
        raise InputError(f"residual grid must hold integers, got dtype {arr.dtype}")
    return arr


class Decompressor:
    def __init__(self, config):
        self.config = check_config(config)
        self.predictor = Predictor2D(mode=config.mode)
        self.quantizer = UniformQuantizer(step=config.step)

    def decompress(self, residuals):
        """
        residuals: HxW signed integer array produced by Compressor.compress
        Returns a new read-only HxW uint8 array.
        """
        indices = as_residual_grid(residuals)
        H, W = indices.shape
        recon = np.zeros((H, W), dtype=np.int64)

        for i in range(H):
            for j in range(W):
                p = self.predictor.predict_pixel(recon, i, j)
                deq = self.quantizer.dequantize(int(indices[i, j]))
                recon[i, j] = clamp(p + deq, 0, 255)

        out = recon.astype(np.uint8)
        out.flags.writeable = False
        return out


def decode(residuals, config):
    return Decompressor(config).decompress(residuals)
