"""Report builder: text lines and JSON output for palette-extractor results."""

import json
from pathlib import Path
from typing import Any

from palette_extractor.core.formatting import format_color, format_palette
from palette_extractor.core.types import Color, ColorFormat, ExtractionRequest


def format_text(palette: list[Color], fmt: ColorFormat = ColorFormat.HEX, prefix: str | None = None) -> str:
    """Format the palette as newline-separated lines, one per colour."""
    return '\n'.join(format_palette(palette, fmt, prefix))


def format_json(request: ExtractionRequest, palette: list[Color], grid_path: str | Path | None = None) -> str:
    """Format the palette as a JSON document."""
    obj: dict[str, Any] = {
        'image': str(request.image_path),
        'algorithm': request.algorithm.value,
        'quality': request.quality,
        'max_colors': request.max_colors,
    }
    obj['colors'] = [
        {
            'index': i,
            'hex': format_color(color, ColorFormat.HEX),
            'rgb': list(color.as_tuple()),
        }
        for i, color in enumerate(palette, start=1)
    ]
    obj['grid'] = str(grid_path) if grid_path is not None else None
    return json.dumps(obj, indent=2)
