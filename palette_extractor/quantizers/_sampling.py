"""Input contract shared by all quantizers: range checks, pixel sampling, result ordering."""

import numpy as np

from palette_extractor.core.types import Color


def sample_pixels(pixels: np.ndarray, quality: int, max_colors: int) -> np.ndarray:
    """Check the engine contract and keep every `quality`-th pixel.

    Returns an (N, 3) uint8 array. Raises ValueError on out-of-range
    parameters or an empty buffer.
    """
    if not 1 <= quality <= 10:
        raise ValueError(f'quality must be in 1..10, got {quality}')
    if not 2 <= max_colors <= 255:
        raise ValueError(f'max_colors must be in 2..255, got {max_colors}')

    flat = np.asarray(pixels, dtype=np.uint8).reshape(-1, 3)
    if len(flat) == 0:
        raise ValueError('No pixels to quantize')
    return flat[::quality]


def cluster_count(samples: np.ndarray, max_colors: int) -> int:
    """Never ask for more clusters than there are distinct colours."""
    n_unique = len(np.unique(samples, axis=0))
    return min(max_colors, n_unique)


def ordered_palette(centres: np.ndarray, counts: np.ndarray) -> list[Color]:
    """Sort centres by population, descending (stable), and drop 8-bit duplicates."""
    order = np.argsort(-np.asarray(counts), kind='stable')
    palette: list[Color] = []
    seen: set[Color] = set()
    for i in order:
        if counts[i] == 0:
            continue
        color = Color.from_sequence(centres[i])
        if color in seen:
            continue
        seen.add(color)
        palette.append(color)
    return palette
