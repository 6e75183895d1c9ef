"""Image decode/encode via Pillow. Errors from Pillow propagate unchanged; callers map them."""

from pathlib import Path

import numpy as np
from PIL import Image, ImageOps

from palette_extractor.core.types import PixelBuffer


def decode(path: str | Path) -> PixelBuffer:
    """Read the whole image into memory as an RGB pixel buffer.

    EXIF orientation is applied so the buffer matches what a viewer shows.
    """
    with Image.open(path) as im:
        im.load()
        rgb = ImageOps.exif_transpose(im).convert('RGB')
    return PixelBuffer(pixels=np.array(rgb, dtype=np.uint8))


def encode_and_save(pixels: np.ndarray, path: str | Path) -> None:
    """Write an H x W x 3 uint8 array. The format comes from the path extension."""
    Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path)
