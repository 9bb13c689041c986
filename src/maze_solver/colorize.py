"""Component colorization."""

from __future__ import annotations

from typing import Dict, Set

import numpy as np

from .image import Color, MazeImage
from .segmentation import MazeSegmentation


NAVY: Color = (0, 0, 100)
MAX_COLOR = 0xFFFFFF
DEFAULT_SEED = 0


class ComponentColorizer:
    """Assign every component root a color of its own.

    The first root seen gets navy. Later roots draw from a seeded generator,
    so the same input always gives the same picture.
    """

    def __init__(self, seed: int | None = DEFAULT_SEED) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self.palette: Dict[int, Color] = {}
        self._used: Set[Color] = set()

    def _reset(self) -> None:
        self._rng = np.random.default_rng(self.seed)
        self.palette = {}
        self._used = set()

    def color_for(self, root: int) -> Color:
        color = self.palette.get(root)
        if color is not None:
            return color
        if not self.palette:
            color = NAVY
        else:
            color = self._draw_color()
        self.palette[root] = color
        self._used.add(color)
        return color

    def _draw_color(self) -> Color:
        while True:
            value = int(self._rng.integers(0, MAX_COLOR + 1))
            color = ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
            if color not in self._used:
                return color

    def colorize(self, segmentation: MazeSegmentation) -> MazeImage:
        """Return a new image with each component painted in its palette color.

        Every call starts a fresh palette, so the first root of `segmentation`
        is always navy and the colors depend only on the seed.
        """

        self._reset()

        labels = segmentation.label_array()
        roots, first_index, inverse = np.unique(labels.ravel(), return_index=True, return_inverse=True)
        # np.unique sorts by root id; assign colors by first appearance instead.
        for position in np.argsort(first_index, kind="stable"):
            self.color_for(int(roots[position]))

        lookup = np.asarray([self.palette[int(root)] for root in roots], dtype=np.uint8)
        pixels = lookup[inverse.reshape(-1)].reshape(labels.shape[0], labels.shape[1], 3)
        return MazeImage(pixels)


def colorize_components(segmentation: MazeSegmentation, seed: int | None = DEFAULT_SEED) -> MazeImage:
    return ComponentColorizer(seed).colorize(segmentation)


__all__ = ["ComponentColorizer", "colorize_components", "NAVY", "DEFAULT_SEED"]
