"""Shared fixtures: small synthetic images written with PIL."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image


def write_image(path: Path, pixels: np.ndarray) -> Path:
    Image.fromarray(pixels.astype(np.uint8)).save(path)
    return path


@pytest.fixture
def red_png(tmp_path: Path) -> Path:
    """2x2 solid red."""
    arr = np.zeros((2, 2, 3), dtype=np.uint8)
    arr[:, :] = (255, 0, 0)
    return write_image(tmp_path / 'red.png', arr)


@pytest.fixture
def two_tone_png(tmp_path: Path) -> Path:
    """20x10: left 15 columns blue, right 5 columns yellow (blue is the majority)."""
    arr = np.zeros((10, 20, 3), dtype=np.uint8)
    arr[:, :15] = (0, 0, 255)
    arr[:, 15:] = (255, 255, 0)
    return write_image(tmp_path / 'two_tone.png', arr)


@pytest.fixture
def not_an_image(tmp_path: Path) -> Path:
    path = tmp_path / 'notes.png'
    path.write_text('this is not a png\n')
    return path
