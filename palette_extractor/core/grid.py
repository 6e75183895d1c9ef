"""Swatch grid rendering.

Lays the palette out as CELL_SIZE x CELL_SIZE squares, left to right then
top to bottom, using GridLayout.for_palette. Cells past the end of the
palette stay black (the buffer is zero-initialised).

Example:
    palette of 6 -> 3 columns x 2 rows -> 150 x 100 image
"""

import logging
from pathlib import Path

import numpy as np

from palette_extractor.core import image_io
from palette_extractor.core.errors import ImageSaveError
from palette_extractor.core.types import Color, GridLayout

logger = logging.getLogger(__name__)


def render_grid(palette: list[Color], layout: GridLayout | None = None) -> np.ndarray:
    """Return an H x W x 3 uint8 image with one uniform cell per colour."""
    if layout is None:
        layout = GridLayout.for_palette(len(palette))

    grid = np.zeros((layout.height, layout.width, 3), dtype=np.uint8)
    size = layout.cell_size
    for i, color in enumerate(palette):
        x, y = layout.cell_origin(i)
        grid[y : y + size, x : x + size] = color.as_tuple()
    return grid


def save_grid(palette: list[Color], output_path: str | Path) -> GridLayout:
    """Render the grid and write it to output_path. Raises ImageSaveError on any encoder failure."""
    layout = GridLayout.for_palette(len(palette))
    logger.info(
        'Rendering %d colour(s) as %dx%d grid (%dx%d px)',
        len(palette),
        layout.columns,
        layout.rows,
        layout.width,
        layout.height,
    )
    pixels = render_grid(palette, layout)

    try:
        image_io.encode_and_save(pixels, output_path)
    except (ValueError, KeyError, OSError) as exc:
        logger.debug('Encoder failed for %s: %r', output_path, exc)
        raise ImageSaveError(output_path) from exc

    logger.info('Saved palette grid to %s', output_path)
    return layout
