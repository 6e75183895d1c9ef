"""Palette extraction: decode the image, then hand the pixels to the selected quantizer."""

import logging

from PIL import Image

from palette_extractor import registry
from palette_extractor.core import image_io
from palette_extractor.core.errors import ImageOpenError, PaletteExtractionError
from palette_extractor.core.types import Color, ExtractionRequest

logger = logging.getLogger(__name__)

DECODE_ERRORS = (OSError, ValueError, Image.DecompressionBombError)


def extract_palette(request: ExtractionRequest) -> list[Color]:
    """Return at most request.max_colors colours in the engine's priority order.

    Raises:
        ImageOpenError: the file could not be decoded.
        PaletteExtractionError: the quantizer failed or returned nothing.
    """
    logger.info('Extracting palette from %s', request.image_path)

    try:
        buffer = image_io.decode(request.image_path)
    except DECODE_ERRORS as exc:
        logger.debug('Decoder failed for %s: %r', request.image_path, exc)
        raise ImageOpenError(request.image_path) from exc
    logger.debug('Decoded %dx%d image', buffer.width, buffer.height)

    try:
        quantizer = registry.get(request.algorithm)
        palette = quantizer.quantize(buffer.flat(), request.quality, request.max_colors)
    except Exception as exc:
        logger.debug('Quantizer %s failed: %r', request.algorithm.value, exc)
        raise PaletteExtractionError() from exc

    if not palette:
        raise PaletteExtractionError()

    logger.info('Successfully extracted color palette')
    return palette[: request.max_colors]
