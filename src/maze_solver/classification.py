"""Pixel classification helpers."""

from __future__ import annotations

from enum import Enum

import numpy as np

from .image import Color, MazeImage


ON_THRESHOLD = 3 * 128
MARKER_MIN_RED = 200
MARKER_MAX_GREEN = 80
MARKER_MAX_BLUE = 80


class PixelClass(Enum):
    OPEN = "open"
    WALL = "wall"


def color_is_marker(color: Color) -> bool:
    r, g, b = color
    return r >= MARKER_MIN_RED and g <= MARKER_MAX_GREEN and b <= MARKER_MAX_BLUE


def color_is_on(color: Color) -> bool:
    """Return True when `color` belongs to the wall (foreground) class.

    Markers are always open even though red is darker than the threshold.
    """

    if color_is_marker(color):
        return False
    r, g, b = color
    return int(r) + int(g) + int(b) < ON_THRESHOLD


def is_marker(image: MazeImage, x: int, y: int) -> bool:
    return color_is_marker(image.get_rgb(x, y))


def is_on(image: MazeImage, x: int, y: int) -> bool:
    return color_is_on(image.get_rgb(x, y))


def classify(image: MazeImage, x: int, y: int) -> PixelClass:
    return PixelClass.WALL if is_on(image, x, y) else PixelClass.OPEN


def marker_mask(image: MazeImage) -> np.ndarray:
    """Return an (H, W) boolean array flagging marker pixels."""

    pixels = image.pixels
    return (
        (pixels[..., 0] >= MARKER_MIN_RED)
        & (pixels[..., 1] <= MARKER_MAX_GREEN)
        & (pixels[..., 2] <= MARKER_MAX_BLUE)
    )


def on_mask(image: MazeImage) -> np.ndarray:
    """Return an (H, W) boolean array flagging wall pixels, same rule as `is_on`."""

    luminance = image.pixels.astype(np.int32).sum(axis=2)
    return (luminance < ON_THRESHOLD) & ~marker_mask(image)
