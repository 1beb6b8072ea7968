import math

import numpy as np
import pytest

from errors import ConfigError, DimensionMismatchError, InputError
from utils import bits_per_residual, clamp, compute_compression_ratio, compute_mse, compute_psnr


def test_mse_worked_example():
    assert compute_mse([[10, 10], [10, 10]], [[16, 16], [16, 16]]) == 36.0


def test_mse_identical_is_zero():
    grid = np.arange(12).reshape(3, 4)
    assert compute_mse(grid, grid.copy()) == 0.0


def test_mse_is_float_average():
    assert compute_mse(np.array([[0, 0]], dtype=np.uint8), np.array([[1, 2]], dtype=np.uint8)) == 2.5


def test_mse_uint8_does_not_wrap():
    a = np.array([[0]], dtype=np.uint8)
    b = np.array([[255]], dtype=np.uint8)
    assert compute_mse(a, b) == 255.0 ** 2


def test_mse_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        compute_mse(np.zeros((2, 2)), np.zeros((3, 3)))
    with pytest.raises(DimensionMismatchError):
        compute_mse(np.zeros((2, 3)), np.zeros((3, 2)))


def test_psnr():
    assert compute_psnr([[1, 2]], [[1, 2]]) == math.inf
    value = compute_psnr([[10, 10], [10, 10]], [[16, 16], [16, 16]])
    assert value == pytest.approx(10 * math.log10(255 ** 2 / 36))


@pytest.mark.parametrize("levels, bits", [(1, 1), (2, 1), (3, 2), (4, 2), (8, 3), (16, 4), (17, 5), (256, 8), (1000, 10)])
def test_bits_per_residual(levels, bits):
    assert bits_per_residual(levels) == bits


@pytest.mark.parametrize("levels, ratio", [(2, 8.0), (8, 8 / 3), (16, 2.0), (17, 1.6), (256, 1.0)])
def test_compression_ratio(levels, ratio):
    assert compute_compression_ratio(4, 4, levels) == pytest.approx(ratio)


def test_compression_ratio_does_not_depend_on_size():
    assert compute_compression_ratio(640, 480, 16) == compute_compression_ratio(1, 1, 16)


def test_compression_ratio_single_level():
    assert compute_compression_ratio(10, 10, 1) == 8.0


def test_compression_ratio_rejects_bad_arguments():
    with pytest.raises(ConfigError):
        compute_compression_ratio(4, 4, 0)
    with pytest.raises(InputError):
        compute_compression_ratio(0, 4, 16)
    with pytest.raises(InputError):
        compute_compression_ratio(4, -1, 16)


def test_clamp():
    assert clamp(-5) == 0
    assert clamp(300) == 255
    assert clamp(17) == 17
    assert clamp(12, 0, 10) == 10
