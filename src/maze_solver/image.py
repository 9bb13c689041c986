"""Raster image wrapper used by the solver."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import InputUnavailableError

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)


class MazeImage:
    """A W x H grid of RGB pixels addressed by ``(x, y)``.

    Pixels live in an ``(H, W, 3)`` uint8 numpy array, so ``pixels[y, x]``
    is the pixel at column `x` and row `y`.
    """

    def __init__(self, pixels: np.ndarray) -> None:
        array = np.asarray(pixels)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) RGB array, got shape {array.shape}")
        if array.shape[0] < 1 or array.shape[1] < 1:
            raise ValueError("Image dimensions must be at least 1x1")
        self.pixels = np.ascontiguousarray(array, dtype=np.uint8)

    @classmethod
    def blank(cls, width: int, height: int, color: Color = BLACK) -> "MazeImage":
        pixels = np.empty((height, width, 3), dtype=np.uint8)
        pixels[:, :] = color
        return cls(pixels)

    @classmethod
    def from_file(cls, path: str | Path) -> "MazeImage":
        """Decode `path` into an RGB image."""

        path = Path(path)
        try:
            with Image.open(path) as pil_image:
                rgb = pil_image.convert("RGB")
        except FileNotFoundError as exc:
            raise InputUnavailableError(f"Maze image not found at '{path}'") from exc
        except (UnidentifiedImageError, OSError) as exc:
            raise InputUnavailableError(f"Could not decode maze image '{path}': {exc}") from exc
        return cls(np.array(rgb))

    def width(self) -> int:
        return int(self.pixels.shape[1])

    def height(self) -> int:
        return int(self.pixels.shape[0])

    def get_rgb(self, x: int, y: int) -> Color:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def set(self, x: int, y: int, color: Color) -> None:
        self.pixels[y, x] = color

    def copy(self) -> "MazeImage":
        return MazeImage(self.pixels.copy())

    def to_pil(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def save(self, path: str | Path) -> None:
        self.to_pil().save(Path(path))

    def show(self, title: str | None = None) -> None:
        self.to_pil().show(title=title)

    def __repr__(self) -> str:
        return f"MazeImage(width={self.width()}, height={self.height()})"
