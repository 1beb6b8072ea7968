# helper functions (clamping, error metrics, compression ratio)

"""
Helper utilities: clamping, MSE / PSNR between two grids, and the nominal
compression ratio.

The ratio assumes every residual costs ceil(log2(levels)) bits against 8 bits
per original pixel. It is an estimate, not the size of any real bitstream.
"""

import numbers

import numpy as np

from errors import ConfigError, DimensionMismatchError, InputError


def clamp(value, lo=0, hi=255):
    return lo if value < lo else (hi if value > hi else value)


def _pair(a, b):
    a = np.asarray(a)
    b = np.asarray(b)
    if a.ndim != 2 or b.ndim != 2:
        raise DimensionMismatchError(f"Expected two 2-D grids, got shapes {a.shape} and {b.shape}")
    if a.shape != b.shape:
        raise DimensionMismatchError(f"Input arrays must be the same size: {a.shape} vs {b.shape}")
    if a.size == 0:
        raise InputError("Cannot compare empty grids")
    return a.astype(np.float64), b.astype(np.float64)


def compute_mse(original, reconstructed):
    a, b = _pair(original, reconstructed)
    return float(np.mean((a - b) ** 2))


def compute_psnr(original, reconstructed, peak=255.0):
    """Peak signal-to-noise ratio in dB; inf when the grids are identical."""
    mse = compute_mse(original, reconstructed)
    if mse == 0:
        return float('inf')
    return float(10 * np.log10(peak ** 2 / mse))


def bits_per_residual(levels):
    """ceil(log2(levels)), floored at 1 bit."""
    if isinstance(levels, bool) or not isinstance(levels, numbers.Integral) or levels < 1:
        raise ConfigError(f"Quantization levels must be a positive integer, got {levels!r}")
    # (levels - 1).bit_length() == ceil(log2(levels)) without float error
    return max(1, (int(levels) - 1).bit_length())


def compute_compression_ratio(width, height, levels):
    if width <= 0 or height <= 0:
        raise InputError(f"Image dimensions must be positive, got {width}x{height}")
    bits = bits_per_residual(levels)
    orig_bits = width * height * 8
    comp_bits = width * height * bits
    return orig_bits / comp_bits
