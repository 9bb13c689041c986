import random

import pytest

from maze_solver.errors import InvalidArgumentError, OutOfRangeError
from maze_solver.structures import DisjointSet


def _assert_invariants(uf):
    roots = set()
    for index in range(1, uf.size + 1):
        seen = set()
        node = index
        while uf.parent[node] != node:
            assert node not in seen
            seen.add(node)
            node = uf.parent[node]
        roots.add(node)
    assert uf.num_components() == sum(1 for i in range(1, uf.size + 1) if uf.parent[i] == i)
    for root in roots:
        members = [i for i in range(1, uf.size + 1) if uf.find(i) == root]
        assert uf.weight[root] == len(members)


def test_create_makes_singletons():
    uf = DisjointSet(4)
    assert uf.num_components() == 4
    assert uf.parent[1:] == [1, 2, 3, 4]
    assert uf.weight[1:] == [1, 1, 1, 1]


def test_create_rejects_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_find_rejects_out_of_range_ids():
    uf = DisjointSet(3)
    with pytest.raises(OutOfRangeError):
        uf.find(0)
    with pytest.raises(OutOfRangeError):
        uf.find(4)


def test_union_of_non_roots_fails_and_leaves_state_unchanged():
    uf = DisjointSet(5)
    uf.union(1, 2)
    parent, weight = list(uf.parent), list(uf.weight)
    with pytest.raises(InvalidArgumentError, match="1 and 2"):
        uf.union(1, 2)
    assert uf.parent == parent
    assert uf.weight == weight
    assert uf.num_components() == 4


def test_union_same_root_is_noop():
    uf = DisjointSet(3)
    uf.union(2, 2)
    assert uf.num_components() == 3
    assert uf.weight[2] == 1


def test_union_tie_favours_first_argument():
    uf = DisjointSet(2)
    uf.union(2, 1)
    assert uf.find(1) == 2
    assert uf.weight[2] == 2


def test_union_lighter_root_joins_heavier():
    uf = DisjointSet(3)
    uf.union(1, 2)
    uf.union(3, 1)
    assert uf.find(3) == 1
    assert uf.weight[1] == 3


def test_weight_growth_to_single_set():
    uf = DisjointSet(4)
    uf.union(1, 2)
    uf.union(3, 4)
    uf.union(uf.find(1), uf.find(3))
    assert uf.num_components() == 1
    roots = {uf.find(i) for i in range(1, 5)}
    assert len(roots) == 1
    assert uf.weight[roots.pop()] == 4


def test_find_compresses_path():
    uf = DisjointSet(4)
    uf.union(1, 2)
    uf.union(3, 4)
    uf.union(1, 3)
    assert uf.parent[4] == 3
    assert uf.find(4) == 1
    assert uf.parent[4] == 1
    assert uf.weight[1] == 4


def test_find_handles_long_chains_without_recursion():
    size = 50_000
    uf = DisjointSet(size)
    # Build a deep chain by hand; union would keep the tree shallow.
    for index in range(2, size + 1):
        uf.parent[index] = index - 1
    assert uf.find(size) == 1
    assert uf.parent[size] == 1


def test_random_operations_preserve_invariants():
    rng = random.Random(7)
    uf = DisjointSet(30)
    for _ in range(60):
        left = rng.randint(1, 30)
        right = rng.randint(1, 30)
        root_left, root_right = uf.find(left), uf.find(right)
        assert uf.find(root_left) == root_left
        uf.union(root_left, root_right)
        assert uf.find(left) == uf.find(right)
        _assert_invariants(uf)
