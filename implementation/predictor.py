# Predictor2D class (configurable causal predictor)

"""
Predictor2D: implements the 2D causal predictors.
Neighbours of pixel X at (i, j):

        C | B
        --+--
        A | X

 - A = left     (i, j-1)
 - B = top      (i-1, j)
 - C = top-left (i-1, j-1)

Any neighbour outside the image reads as 0.
Available predictor modes:
 - ORDER1:   A
 - ORDER2:   A + B - C
 - ADAPTIVE: (A + B) // 2   (floor; neighbours are never negative so this is also truncation)
"""

import numpy as np

from config import PredictorMode


def _neighbours(grid, i, j):
    A = int(grid[i, j-1]) if j-1 >= 0 else 0   # left
    B = int(grid[i-1, j]) if i-1 >= 0 else 0   # top
    C = int(grid[i-1, j-1]) if (i-1 >= 0 and j-1 >= 0) else 0  # top-left
    return A, B, C


def predict(i, j, grid, mode):
    """Predicted intensity of grid[i, j] from its causal neighbours."""
    A, B, C = _neighbours(grid, i, j)
    if mode is PredictorMode.ORDER1:
        return A
    if mode is PredictorMode.ORDER2:
        return A + B - C
    if mode is PredictorMode.ADAPTIVE:
        return (A + B) // 2
    raise TypeError(f"predict() expects a PredictorMode, got {mode!r}")


class Predictor2D:
    def __init__(self, mode=PredictorMode.ORDER1):
        self.mode = mode

    def predict_pixel(self, grid, i, j):
        """
        grid: the grid being read (original when encoding, the partially
        reconstructed one when decoding). Only cells before (i, j) in raster
        order are read.
        """
        return predict(i, j, grid, self.mode)

    def predict_image(self, grid):
        """
        Predict every pixel of `grid` at once from that same grid.
        Only valid when `grid` is fully known up front (encoder side); the
        decoder must use predict_pixel in raster order instead.
        """
        grid = np.asarray(grid, dtype=np.int64)
        H, W = grid.shape
        A = np.zeros((H, W), dtype=np.int64)
        B = np.zeros((H, W), dtype=np.int64)
        C = np.zeros((H, W), dtype=np.int64)
        A[:, 1:] = grid[:, :-1]
        B[1:, :] = grid[:-1, :]
        C[1:, 1:] = grid[:-1, :-1]

        if self.mode is PredictorMode.ORDER1:
            return A
        if self.mode is PredictorMode.ORDER2:
            return A + B - C
        if self.mode is PredictorMode.ADAPTIVE:
            return (A + B) // 2
        raise TypeError(f"predict_image() expects a PredictorMode, got {self.mode!r}")
