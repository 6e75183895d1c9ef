"""Palette extraction by k-means clustering in RGB space (the default).

Keeps every `quality`-th pixel, runs KMeans with k = min(max_colors,
distinct sampled colours), n_init=3 and a fixed random_state so the same
image always yields the same palette. Cluster centres are rounded to 8-bit
and ordered by cluster size, largest first.

Example:
    palette-extractor photo.jpg --algorithm kmeans -m 8
"""

import logging

import numpy as np
from sklearn.cluster import KMeans

from palette_extractor.core.types import Algorithm, Color, Quantizer
from palette_extractor.quantizers._sampling import cluster_count, ordered_palette, sample_pixels

logger = logging.getLogger(__name__)

quantizer = Quantizer(
    algorithm=Algorithm.KMEANS,
    help='k-means clustering over sampled RGB pixels.',
)


@quantizer.run
def run(pixels: np.ndarray, quality: int, max_colors: int) -> list[Color]:
    samples = sample_pixels(pixels, quality, max_colors)
    k = cluster_count(samples, max_colors)
    logger.debug('k-means: %d sampled pixels, k=%d', len(samples), k)

    km = KMeans(n_clusters=k, n_init=3, random_state=42)
    labels = km.fit_predict(samples.astype(np.float64))
    counts = np.bincount(labels, minlength=k)
    centres = np.clip(km.cluster_centers_, 0, 255)
    return ordered_palette(centres, counts)
