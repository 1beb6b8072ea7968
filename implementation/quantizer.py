# UniformQuantizer class & quant table printing

"""
UniformQuantizer: maps prediction errors to signed integer indices.
 - quantize:   q = round(error / step), ties rounded toward +inf (round half up)
 - dequantize: q * step
No clamping happens here; the decoder clamps the reconstructed pixel.

Round half up is done in integers: floor(e/s + 1/2) == (2e + s) // (2s).
np.round / builtin round() would round half to even and disagree at exact
half steps (e.g. error 24, step 16 -> 2, not 1).
"""

import numpy as np


def quantize(error, step):
    """Quantize an int or an integer array of errors."""
    if isinstance(error, np.ndarray):
        error = error.astype(np.int64)
        return ((2 * error + step) // (2 * step)).astype(np.int32)
    return (2 * int(error) + step) // (2 * step)


def dequantize(q, step):
    if isinstance(q, np.ndarray):
        return q.astype(np.int64) * step
    return int(q) * step


class UniformQuantizer:
    def __init__(self, step):
        self.step = step

    def quantize(self, error):
        return quantize(error, self.step)

    def dequantize(self, q):
        return dequantize(q, self.step)

    def quant_table(self, max_error=255):
        """
        Return list of tuples (index, dequantized_value, interval_range) for every
        index whose reconstruction lies in [-max_error, max_error].
        The interval is half-open [left, right): errors in it quantize to index.
        """
        table = []
        k_max = max_error // self.step
        for k in range(-k_max, k_max + 1):
            center = k * self.step
            # smallest integer e with (2e + s) // (2s) == k
            left = -((self.step - 2 * k * self.step) // 2)
            right = left + self.step
            table.append((k, center, (left, right)))
        return table
