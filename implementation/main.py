# CLI entry point - load, encode, decode, report, save

"""
Usage:
    python main.py <input_image> <output_image> <order1|order2|adaptive> <levels>
                   [--montage PATH] [--show] [--quant-table] [--debug]

The output image is only written once every earlier stage has succeeded.
"""

import argparse
import logging
import sys
from dataclasses import dataclass

import numpy as np

from compressor import Compressor
from config import CoderConfig, configure
from decompressor import Decompressor
from errors import CodingError
from image_io import error_to_display, load_grayscale, save_grayscale, show_and_save_images
from utils import bits_per_residual, compute_compression_ratio, compute_mse, compute_psnr

logger = logging.getLogger(__name__)

DEBUG_CELLS = 3


@dataclass(frozen=True)
class PipelineResult:
    config: CoderConfig
    original: np.ndarray
    errors: np.ndarray
    residuals: np.ndarray
    reconstructed: np.ndarray
    mse: float
    psnr: float
    ratio: float


def run_pipeline(input_path, predictor_mode, levels):
    """
    configure -> load -> encode -> decode -> statistics.
    Raises CodingError subclasses; never writes anything.
    """
    config = configure(predictor_mode, levels)

    logger.info("Loading image from '%s'...", input_path)
    pixels = load_grayscale(input_path)
    height, width = pixels.shape
    logger.info("Image size: %dx%d", width, height)
    logger.info("Quantization: %d levels, step size = %d", config.levels, config.step)

    logger.info("Encoding residuals with predictor '%s'...", config.mode.value)
    compressor = Compressor(config)
    errors = compressor.prediction_error(pixels)
    residuals = compressor.compress(pixels)
    for j in range(min(DEBUG_CELLS, width)):
        logger.debug("pix(0,%d)=%d pred=%d err=%d q=%d",
                     j, pixels[0, j], pixels[0, j] - errors[0, j], errors[0, j], residuals[0, j])

    logger.info("Reconstructing image from quantized residuals...")
    reconstructed = Decompressor(config).decompress(residuals)

    logger.info("Computing MSE and compression ratio...")
    return PipelineResult(
        config=config,
        original=pixels,
        errors=errors,
        residuals=residuals,
        reconstructed=reconstructed,
        mse=compute_mse(pixels, reconstructed),
        psnr=compute_psnr(pixels, reconstructed),
        ratio=compute_compression_ratio(width, height, config.levels),
    )


def print_quant_table(config):
    from quantizer import UniformQuantizer
    print(f"\nQuantizer table (step={config.step}):")
    for idx, center, rng in UniformQuantizer(config.step).quant_table():
        print(f"level {idx:4d}  dequantized={center:5d}  errors=[{rng[0]},{rng[1]})")


def build_parser():
    parser = argparse.ArgumentParser(
        prog='dpcm-coder',
        description='Lossy 2-D DPCM (predictive coding) of grayscale images'
    )
    parser.add_argument('input', help='Input image (any format Pillow reads)')
    parser.add_argument('output', help='Reconstructed grayscale image to write')
    parser.add_argument('predictor', help='Predictor: order1 | order2 | adaptive')
    parser.add_argument('levels', type=int,
                        help='Number of uniform quantization levels (e.g. 8, 16, 32)')
    parser.add_argument('--montage', metavar='PATH',
                        help='Also save an original/error/residual/reconstruction montage')
    parser.add_argument('--show', action='store_true', help='Display the montage window')
    parser.add_argument('--quant-table', action='store_true', help='Print the quantizer table')
    parser.add_argument('--debug', action='store_true',
                        help='Verbose logging and full stack trace on error')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='[%(levelname)s] %(message)s',
    )

    try:
        result = run_pipeline(args.input, args.predictor, args.levels)
    except CodingError as e:
        if args.debug:
            raise
        logger.error("%s", e)
        return 1

    config = result.config
    print(f"[RESULT] MSE = {result.mse:.2f}")
    print(f"[RESULT] PSNR = {result.psnr:.2f} dB")
    print(f"[RESULT] Compression Ratio = {result.ratio:.4f} "
          f"({bits_per_residual(config.levels)} bits/residual vs 8 bits/pixel)")
    if args.quant_table:
        print_quant_table(config)

    logger.info("Saving reconstructed image to '%s'...", args.output)
    try:
        save_grayscale(result.reconstructed, args.output)
    except (OSError, ValueError) as e:
        if args.debug:
            raise
        logger.error("Failed to save image: %s", e)
        return 1

    if args.montage or args.show:
        deq_error = result.residuals.astype(np.int64) * config.step
        path = show_and_save_images(
            [result.original, error_to_display(result.errors),
             error_to_display(deq_error), result.reconstructed],
            ["Original", "Prediction error", "De-quantized error", "Reconstructed"],
            out_path=args.montage, figSize=(10, 8), show=args.show,
        )
        print("Saved visualization to:", path)

    logger.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
