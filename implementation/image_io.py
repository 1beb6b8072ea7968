# load/save/display grayscale images

import logging
import os

import matplotlib.pyplot as plt
import numpy as np
from PIL import Image, UnidentifiedImageError

from errors import InputError

logger = logging.getLogger(__name__)

OUTPUT_DIR = "outputs"


def load_grayscale(path):
    """Load any image Pillow can read as a read-only (H,W) uint8 grayscale array."""
    if not os.path.isfile(path):
        raise InputError(f"File not found: {path}")
    try:
        with Image.open(path) as img:
            if img.mode != "L":
                logger.info("Converting %s image to grayscale", img.mode)
            arr = np.array(img.convert("L"), dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise InputError(f"Failed to load image '{path}': {e}") from e
    if arr.ndim != 2 or arr.size == 0:
        raise InputError(f"Image '{path}' has no pixels")
    arr.flags.writeable = False
    return arr


def save_grayscale(arr, path):
    """Save an (H,W) array as an 8-bit grayscale image; format taken from the extension."""
    img = Image.fromarray(np.uint8(np.clip(arr, 0, 255)))
    img.save(path)
    return path


def error_to_display(error):
    """Signed error grid shifted by +128 so it can be shown as an image."""
    return np.clip(np.asarray(error, dtype=np.int64) + 128, 0, 255).astype(np.uint8)


def show_and_save_images(grid, titles, out_path=None, figSize=(12, 6), show=False):
    """
    grid: list of numpy images (H,W)
    titles: list of strings
    Saves the montage to out_path (default outputs/result.png) and optionally
    displays it using matplotlib.
    """
    if out_path is None:
        os.makedirs(OUTPUT_DIR, exist_ok=True)
        out_path = os.path.join(OUTPUT_DIR, "result.png")
    n = len(grid)
    cols = min(3, n)
    rows = (n + cols - 1)//cols
    fig = plt.figure(figsize=figSize)
    for i, (img, title) in enumerate(zip(grid, titles)):
        plt.subplot(rows, cols, i+1)
        plt.imshow(np.uint8(np.clip(img, 0, 255)), cmap='gray', vmin=0, vmax=255)
        plt.title(title)
        plt.axis('off')
    plt.tight_layout()
    plt.savefig(out_path, bbox_inches='tight')
    if show:
        plt.show()
    plt.close(fig)
    return out_path
