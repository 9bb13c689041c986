"""Connected-component segmentation of maze images."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .classification import PixelClass, color_is_on, marker_mask, on_mask
from .image import WHITE, Color, MazeImage
from .structures import DisjointSet

Point = Tuple[int, int]


class MazeSegmentation:
    """Decompose a maze image into 4-connected components.

    The whole scan runs in the constructor. Afterwards `has_solution` and
    `connected` answer queries against the finished partition. Marker
    pixels in `image` are painted over with `replacement_color`.
    """

    def __init__(
        self,
        image: MazeImage,
        replacement_color: Color = WHITE,
        use_tqdm: bool | None = False,
    ) -> None:
        if color_is_on(replacement_color):
            raise ValueError(f"Replacement color {replacement_color} must classify as open space")

        self.image = image
        self.replacement_color = tuple(int(c) for c in replacement_color)
        self.use_tqdm = use_tqdm
        self.start: Optional[Point] = None
        self.end: Optional[Point] = None
        self.markers_found = 0

        width = image.width()
        height = image.height()
        self._width = width
        self._uf = DisjointSet(width * height)
        self._on: List[List[bool]] = on_mask(image).tolist()
        self._marker: List[List[bool]] = marker_mask(image).tolist()

        rows: Iterable[int] = range(height - 1)
        if height > 1 and self._use_tqdm:
            rows = tqdm(rows, desc="   Scanning rows", unit="row")

        for y in rows:
            # Every pixel except the last column has a right and a lower neighbour.
            for x in range(width - 1):
                self._visit(x, y)
                self.connect(x, y, x + 1, y)
                self.connect(x, y, x, y + 1)
            self._visit(width - 1, y)
            self.connect(width - 1, y, width - 1, y + 1)

        # The last row only has right neighbours.
        for x in range(width):
            self._visit(x, height - 1)
            if x < width - 1:
                self.connect(x, height - 1, x + 1, height - 1)

    @property
    def _use_tqdm(self) -> bool:
        if self.use_tqdm is not None:
            return self.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    def _visit(self, x: int, y: int) -> None:
        if not self._marker[y][x]:
            return
        if self.start is None:
            self.start = (x, y)
        else:
            self.end = (x, y)
        self.markers_found += 1
        self.image.set(x, y, self.replacement_color)

    def pixel_to_id(self, x: int, y: int) -> int:
        """Map `(x, y)` to its disjoint-set id; ids start at 1."""

        return y * self._width + x + 1

    def id_to_pixel(self, pixel_id: int) -> Point:
        y, x = divmod(pixel_id - 1, self._width)
        return x, y

    def connect(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Fuse two neighbouring pixels if they share a class and are not yet connected."""

        root_left = self._uf.find(self.pixel_to_id(x1, y1))
        root_right = self._uf.find(self.pixel_to_id(x2, y2))
        if root_left == root_right:
            return
        if self._on[y1][x1] == self._on[y2][x2]:
            self._uf.union(root_left, root_right)

    def component_of(self, x: int, y: int) -> int:
        return self._uf.find(self.pixel_to_id(x, y))

    def connected(self, first: Point, second: Point) -> bool:
        return self.component_of(*first) == self.component_of(*second)

    def num_components(self) -> int:
        return self._uf.num_components()

    def has_solution(self) -> bool:
        """Return True iff both markers were found and lie in the same component."""

        if self.start is None or self.end is None:
            return False
        return self.connected(self.start, self.end)

    def is_wall(self, x: int, y: int) -> bool:
        return self._on[y][x]

    def pixel_class(self, x: int, y: int) -> PixelClass:
        return PixelClass.WALL if self._on[y][x] else PixelClass.OPEN

    def label_array(self) -> np.ndarray:
        """Return an (H, W) array holding the component root of every pixel."""

        find = self._uf.find
        labels = [find(pixel_id) for pixel_id in range(1, self._uf.size + 1)]
        return np.asarray(labels, dtype=np.int64).reshape(self.image.height(), self._width)

    def components(self) -> Dict[int, List[Point]]:
        """Group pixels by component root, both in raster order."""

        component_map: Dict[int, List[Point]] = defaultdict(list)
        for pixel_id in range(1, self._uf.size + 1):
            component_map[self._uf.find(pixel_id)].append(self.id_to_pixel(pixel_id))
        return dict(component_map)

    def component_table(self) -> pd.DataFrame:
        """Summarise each component as a row, ordered by first appearance."""

        start_root = self.component_of(*self.start) if self.start is not None else None
        end_root = self.component_of(*self.end) if self.end is not None else None
        rows = []
        for root, pixels in self.components().items():
            first_x, first_y = pixels[0]
            rows.append(
                {
                    "component_id": root,
                    "pixel_count": len(pixels),
                    "pixel_class": self.pixel_class(first_x, first_y).value,
                    "first_x": first_x,
                    "first_y": first_y,
                    "contains_start": root == start_root,
                    "contains_end": root == end_root,
                }
            )
        return pd.DataFrame(
            rows,
            columns=[
                "component_id",
                "pixel_count",
                "pixel_class",
                "first_x",
                "first_y",
                "contains_start",
                "contains_end",
            ],
        )


__all__ = ["MazeSegmentation", "Point"]
