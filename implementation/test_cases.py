"""
End-to-end scenarios: smooth gradient, random noise, RGB gradient.
Each one goes through the image files the way the command line does.
"""

import numpy as np
import pytest
from PIL import Image

import main
from image_io import load_grayscale, save_grayscale

SMOOTH = np.array([
    [10,12,14,16,18,20,22,24],
    [11,13,15,17,19,21,23,25],
    [12,14,16,18,20,22,24,26],
    [13,15,17,19,21,23,25,27],
    [14,16,18,20,22,24,26,28],
    [15,17,19,21,23,25,27,29],
    [16,18,20,22,24,26,28,30],
    [17,19,21,23,25,27,29,31],
], dtype=np.uint8)


# -----------------------------------------------------------
# TEST CASE 1 — Smooth small grayscale image (best prediction)
# -----------------------------------------------------------
def test_smooth_order2_residuals_vanish_inside(tmp_path):
    path = save_grayscale(SMOOTH, tmp_path / "tc1_smooth.png")
    result = main.run_pipeline(path, "order2", 256)
    # a plane is predicted exactly by left + top - top-left
    assert (result.residuals[1:, 1:] == 0).all()
    assert result.mse == 0.0


@pytest.mark.parametrize("mode", ["order1", "order2", "adaptive"])
def test_smooth_lossless_with_unit_step(tmp_path, mode):
    path = save_grayscale(SMOOTH, tmp_path / "tc1_smooth.png")
    result = main.run_pipeline(path, mode, 256)
    np.testing.assert_array_equal(result.reconstructed, SMOOTH)
    assert result.ratio == 1.0


# -----------------------------------------------------------
# TEST CASE 2 — Random noise (worst prediction)
# -----------------------------------------------------------
@pytest.mark.parametrize("levels", [2, 8, 32])
def test_noise(tmp_path, levels):
    noise = np.random.default_rng(42).integers(0, 256, (64, 64), dtype=np.uint8)
    path = save_grayscale(noise, tmp_path / "tc2_noise.png")
    result = main.run_pipeline(path, "adaptive", levels)
    assert result.reconstructed.shape == (64, 64)
    assert result.reconstructed.min() >= 0 and result.reconstructed.max() <= 255
    assert result.mse > 0


# -----------------------------------------------------------
# TEST CASE 3 — RGB artificial gradient (converted to grayscale)
# -----------------------------------------------------------
def test_rgb_gradient(tmp_path):
    H, W = 64, 64
    img = np.zeros((H,W,3), dtype=np.uint8)
    img[...,0] = np.linspace(0,255,W)
    img[...,1] = 128
    img[...,2] = np.linspace(255,0,H).reshape(H,1)
    src = tmp_path / "tc3_rgb_gradient.png"
    Image.fromarray(img).save(src)

    out = tmp_path / "tc3_rgb_decompressed.png"
    assert main.main([str(src), str(out), "order2", "16"]) == 0
    recon = load_grayscale(out)
    assert recon.shape == (H, W)
    assert load_grayscale(src).shape == (H, W)
