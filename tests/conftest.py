import numpy as np
import pytest

from maze_solver.image import MazeImage

_LEGEND = {
    ".": (255, 255, 255),
    "#": (0, 0, 0),
    "R": (255, 0, 0),
}


def image_from_rows(rows):
    """Build an image from strings: '.' open, '#' wall, 'R' marker."""

    pixels = np.array([[_LEGEND[ch] for ch in row] for row in rows], dtype=np.uint8)
    return MazeImage(pixels)


@pytest.fixture
def maze_image():
    return image_from_rows
