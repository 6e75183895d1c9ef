"""Palette extraction by median cut, using Pillow's MEDIANCUT quantizer.

Keeps every `quality`-th pixel, packs the samples into a 1-pixel-high
image and quantizes it to k = min(max_colors, distinct sampled colours)
colours. Colours are ordered by how many samples map to them.

Example:
    palette-extractor photo.jpg --algorithm median-cut
"""

import logging

import numpy as np
from PIL import Image

from palette_extractor.core.types import Algorithm, Color, Quantizer
from palette_extractor.quantizers._sampling import cluster_count, ordered_palette, sample_pixels

logger = logging.getLogger(__name__)

quantizer = Quantizer(
    algorithm=Algorithm.MEDIAN_CUT,
    help="Median cut via Pillow's quantizer.",
)


@quantizer.run
def run(pixels: np.ndarray, quality: int, max_colors: int) -> list[Color]:
    samples = sample_pixels(pixels, quality, max_colors)
    k = cluster_count(samples, max_colors)
    logger.debug('median-cut: %d sampled pixels, k=%d', len(samples), k)

    strip = Image.fromarray(np.ascontiguousarray(samples.reshape(1, -1, 3)))
    quantized = strip.quantize(colors=k, method=Image.Quantize.MEDIANCUT)

    flat_palette = quantized.getpalette() or []
    # getcolors() -> [(count, palette_index), ...]
    used = quantized.getcolors(maxcolors=256) or []
    centres = np.array([flat_palette[idx * 3 : idx * 3 + 3] for _count, idx in used], dtype=np.float64)
    counts = np.array([count for count, _idx in used])
    if len(centres) == 0:
        raise ValueError('Median cut produced no colours')
    return ordered_palette(centres, counts)
