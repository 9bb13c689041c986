"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError, OutOfRangeError


@dataclass(eq=False)
class DisjointSet:
    """Weighted union-find over the ids ``1..size``.

    Id 0 is a sentinel and never part of any set. ``weight`` is only
    meaningful for representatives.
    """

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size + 1))
        self.weight = [0] + [1] * self.size
        self.num_sets = self.size

    def find(self, index: int) -> int:
        """Return the representative of `index`, compressing the path to it."""

        self._check_range(index)
        parent = self.parent
        root = index
        while parent[root] != root:
            root = parent[root]
        while index != root:
            next_index = parent[index]
            parent[index] = root
            index = next_index
        return root

    def union(self, left: int, right: int) -> None:
        """Merge the sets represented by `left` and `right`.

        Both arguments must be representatives. On equal weights `left` wins.
        """

        self._check_range(left)
        self._check_range(right)
        parent = self.parent
        if parent[left] != left or parent[right] != right:
            raise InvalidArgumentError(f"{left} and {right} are not representative elements.")
        if left == right:
            return

        joint_weight = self.weight[left] + self.weight[right]
        if self.weight[left] < self.weight[right]:
            parent[left] = right
            self.weight[right] = joint_weight
        else:
            parent[right] = left
            self.weight[left] = joint_weight
        self.num_sets -= 1

    def num_components(self) -> int:
        return self.num_sets

    def is_root(self, index: int) -> bool:
        self._check_range(index)
        return self.parent[index] == index

    def _check_range(self, index: int) -> None:
        if not 1 <= index <= self.size:
            raise OutOfRangeError(f"element {index} outside [1, {self.size}]")
