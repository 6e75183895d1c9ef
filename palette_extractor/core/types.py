"""Shared types for palette-extractor: Color, ExtractionRequest, PixelBuffer, GridLayout, Quantizer."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import numpy as np

CELL_SIZE = 50  # swatch cell edge in pixels


class ColorFormat(Enum):
    HEX = 'hex'
    RGB = 'rgb'


class Algorithm(str, Enum):
    """Clustering variant used by the quantization engine."""

    KMEANS = 'kmeans'
    MEDIAN_CUT = 'median-cut'


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB colour. Equal channels mean equal colours."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f'Colour channel out of range 0..255: {channel}')

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Color:
        """Build from a float triple (e.g. a cluster centre), rounding and clipping."""
        r, g, b = (int(min(255, max(0, round(float(v))))) for v in values[:3])
        return cls(r, g, b)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class ExtractionRequest:
    """A validated set of extraction parameters."""

    image_path: Path
    quality: int  # 1 = every pixel (slowest), 10 = every 10th pixel
    max_colors: int
    algorithm: Algorithm = Algorithm.KMEANS


@dataclass(frozen=True)
class PixelBuffer:
    """Decoded image: H x W x 3 uint8 RGB array."""

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def flat(self) -> np.ndarray:
        """Return the pixels as an (N, 3) array in row-major order."""
        return self.pixels.reshape(-1, 3)


@dataclass(frozen=True)
class GridLayout:
    """Swatch grid geometry, derived from the palette length."""

    columns: int
    rows: int
    cell_size: int = CELL_SIZE

    @classmethod
    def for_palette(cls, length: int, cell_size: int = CELL_SIZE) -> GridLayout:
        """Halve the palette into columns, clamped so one colour still gets one column."""
        if length < 1:
            raise ValueError(f'Cannot lay out an empty palette (length={length})')
        columns = max(1, length // 2)
        rows = math.ceil(length / columns)
        return cls(columns=columns, rows=rows, cell_size=cell_size)

    @property
    def width(self) -> int:
        return self.columns * self.cell_size

    @property
    def height(self) -> int:
        return self.rows * self.cell_size

    def cell_origin(self, index: int) -> tuple[int, int]:
        """Top-left (x, y) pixel of the cell for palette index `index`."""
        col = index % self.columns
        row = index // self.columns
        return (col * self.cell_size, row * self.cell_size)


class Quantizer:
    """A self-registering quantization engine.

    Usage in a quantizer module:

        quantizer = Quantizer(algorithm=Algorithm.KMEANS, help='k-means clustering')

        @quantizer.run
        def run(pixels, quality, max_colors):
            ...
    """

    def __init__(self, algorithm: Algorithm, help: str = ''):
        self.algorithm = algorithm
        self.name = algorithm.value
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def quantize(self, pixels: np.ndarray, quality: int, max_colors: int) -> list[Color]:
        """Execute the quantizer's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Quantizer {self.name} has no run function')
        return self._run_fn(pixels, quality, max_colors)
