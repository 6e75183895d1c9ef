"""Argument validation. Checks run in order quality -> max colours -> path; the first failure raises."""

import logging
from pathlib import Path

from palette_extractor.core.errors import InvalidImagePath, InvalidMaxColors, InvalidQuality
from palette_extractor.core.types import Algorithm, ExtractionRequest

logger = logging.getLogger(__name__)

QUALITY_RANGE = range(1, 11)
MAX_COLORS_RANGE = range(2, 256)


def validate_request(
    quality: int,
    max_colors: int,
    image_path: str | Path,
    algorithm: Algorithm = Algorithm.KMEANS,
) -> ExtractionRequest:
    """Return a normalized ExtractionRequest or raise the first validation error."""
    logger.info('Checking whether arguments are provided correctly')

    if quality not in QUALITY_RANGE:
        raise InvalidQuality(quality)
    if max_colors not in MAX_COLORS_RANGE:
        raise InvalidMaxColors(max_colors)

    path = Path(image_path)
    if not path.exists():
        raise InvalidImagePath(image_path)

    return ExtractionRequest(
        image_path=path,
        quality=quality,
        max_colors=max_colors,
        algorithm=algorithm,
    )
