import numpy as np
import pytest

from maze_forest.errors import GridWiringError, UninitializedSetError
from maze_forest.forest import DisjointSetForest
from maze_forest.grid import Grid
from maze_forest.node import Node
from maze_forest.test_helpers.assertions import (
    assert_forest_acyclic,
    snapshot_forest,
)


def test_make_sets_singletons(grid_3x3: Grid):
    forest = DisjointSetForest(grid_3x3)
    forest.make_sets()
    for node in grid_3x3:
        assert forest.find(node) is node
        assert node.rank == 0
    assert forest.n_sets() == 9


def test_make_sets_empty_is_noop(grid_2x2: Grid):
    forest = DisjointSetForest(grid_2x2)
    forest.make_sets([])
    assert all(node.parent is None for node in grid_2x2)


def test_make_sets_resets_previous_unions(grid_2x2: Grid, forest_2x2: DisjointSetForest):
    forest_2x2.union(grid_2x2[0, 0], grid_2x2[0, 1])
    forest_2x2.make_sets()
    assert forest_2x2.n_sets() == 4
    assert all(node.rank == 0 for node in grid_2x2)


def test_make_sets_rejects_foreign_node(grid_2x2: Grid):
    forest = DisjointSetForest(grid_2x2)
    with pytest.raises(GridWiringError):
        forest.make_sets([Node(0, 0)])
    with pytest.raises(GridWiringError):
        forest.make_sets([Grid(2, 2)[1, 1]])


def test_uninitialized_find_and_union(grid_2x2: Grid):
    forest = DisjointSetForest(grid_2x2)
    with pytest.raises(UninitializedSetError):
        forest.find(grid_2x2[0, 0])
    with pytest.raises(UninitializedSetError):
        forest.union(grid_2x2[0, 0], grid_2x2[0, 1])


def test_partially_initialized_union(grid_2x2: Grid):
    forest = DisjointSetForest(grid_2x2)
    forest.make_sets([grid_2x2[0, 0]])
    assert forest.find(grid_2x2[0, 0]) is grid_2x2[0, 0]
    with pytest.raises(UninitializedSetError):
        forest.union(grid_2x2[0, 0], grid_2x2[1, 1])


def test_union_connects(grid_2x2: Grid, forest_2x2: DisjointSetForest):
    a, b = grid_2x2[0, 0], grid_2x2[1, 1]
    assert not forest_2x2.connected(a, b)
    assert forest_2x2.union(a, b)
    assert forest_2x2.find(a) is forest_2x2.find(b)
    assert forest_2x2.connected(a, b)


def test_union_tie_puts_first_root_under_second(
    grid_2x2: Grid, forest_2x2: DisjointSetForest
):
    a, b = grid_2x2[0, 0], grid_2x2[0, 1]
    forest_2x2.union(a, b)
    assert a.parent == b.handle
    assert b.parent == b.handle
    assert b.rank == 1
    assert a.rank == 0


def test_union_unequal_ranks_keeps_ranks(grid_3x3: Grid):
    forest = DisjointSetForest(grid_3x3)
    forest.make_sets()
    big_a, big_b, small = grid_3x3[0, 0], grid_3x3[0, 1], grid_3x3[2, 2]
    forest.union(big_a, big_b)  # big_b is root, rank 1

    # smaller rank goes under larger, whichever argument it is
    assert forest.union(small, big_a)
    assert small.parent == big_b.handle
    assert big_b.rank == 1
    assert small.rank == 0

    other = grid_3x3[2, 0]
    assert forest.union(big_a, other)
    assert other.parent == big_b.handle
    assert big_b.rank == 1


def test_union_idempotent(grid_3x3: Grid):
    forest = DisjointSetForest(grid_3x3)
    forest.make_sets()
    a, b = grid_3x3[0, 0], grid_3x3[2, 2]
    assert forest.union(a, b)
    before = snapshot_forest(grid_3x3)
    assert not forest.union(a, b)
    assert not forest.union(b, a)
    assert snapshot_forest(grid_3x3) == before


def test_union_same_node_is_noop(grid_2x2: Grid, forest_2x2: DisjointSetForest):
    node = grid_2x2[1, 0]
    assert not forest_2x2.union(node, node)
    assert node.rank == 0


def test_path_compression(grid_2x2: Grid, forest_2x2: DisjointSetForest):
    n00, n01, n10, n11 = grid_2x2[0, 0], grid_2x2[0, 1], grid_2x2[1, 0], grid_2x2[1, 1]
    forest_2x2.union(n00, n01)
    forest_2x2.union(n10, n11)
    forest_2x2.union(n00, n10)
    # n00 -> n01 -> n11 before compression
    assert n00.parent == n01.handle
    assert forest_2x2.find(n00) is n11
    assert n00.parent == n11.handle


def test_find_deep_chain_is_iterative():
    n: int = 5000
    grid = Grid(1, n)
    forest = DisjointSetForest(grid)
    forest.make_sets()
    # hand-build a chain longer than the default recursion limit
    for node in grid:
        if node.handle > 0:
            node.parent = node.handle - 1

    assert forest.find(grid[0, n - 1]) is grid[0, 0]
    assert all(node.parent == 0 for node in grid)


def test_sets_and_roots(grid_2x2: Grid, forest_2x2: DisjointSetForest):
    forest_2x2.union(grid_2x2[0, 0], grid_2x2[0, 1])
    sets = forest_2x2.sets()
    assert sorted(len(members) for members in sets.values()) == [1, 1, 2]
    assert forest_2x2.roots() == set(sets.keys())
    assert forest_2x2.n_sets([grid_2x2[0, 0], grid_2x2[0, 1]]) == 1


def test_scenario_2x2(grid_2x2: Grid):
    forest = DisjointSetForest(grid_2x2)
    forest.make_sets()
    n00, n01, n10, n11 = grid_2x2[0, 0], grid_2x2[0, 1], grid_2x2[1, 0], grid_2x2[1, 1]
    assert len({id(forest.find(n)) for n in grid_2x2}) == 4

    n_merges: int = 0
    n_merges += forest.union(n00, n01)
    n_merges += forest.union(n10, n11)
    assert sorted(len(m) for m in forest.sets().values()) == [2, 2]

    n_merges += forest.union(n00, n10)
    assert [len(m) for m in forest.sets().values()] == [4]
    root = forest.find(n00)
    assert all(forest.find(n) is root for n in grid_2x2)

    before = snapshot_forest(grid_2x2)
    n_merges += forest.union(n01, n11)
    assert snapshot_forest(grid_2x2) == before
    assert n_merges == 3


def test_random_unions_keep_invariants():
    grid = Grid(6, 7)
    forest = DisjointSetForest(grid)
    forest.make_sets()
    rng = np.random.default_rng(0)

    ranks = [node.rank for node in grid]
    n_merges: int = 0
    for _ in range(300):
        a = grid.node(int(rng.integers(grid.n_nodes)))
        b = grid.node(int(rng.integers(grid.n_nodes)))
        n_merges += forest.union(a, b)

        new_ranks = [node.rank for node in grid]
        assert all(new >= old for new, old in zip(new_ranks, ranks))
        ranks = new_ranks
        assert_forest_acyclic(grid)
        assert forest.connected(a, b)

    # every merge removes exactly one set
    assert forest.n_sets() == grid.n_nodes - n_merges
    # union by rank keeps ranks logarithmic
    assert max(ranks) <= int(np.log2(grid.n_nodes))


def test_find_and_union_reject_node_from_other_grid(
    grid_2x2: Grid, forest_2x2: DisjointSetForest
):
    other = Grid(2, 2)
    DisjointSetForest(other).make_sets()
    foreign = other[1, 1]
    # same position and handle as grid_2x2[1, 1], but not the same node
    assert foreign == grid_2x2[1, 1]

    before_local = snapshot_forest(grid_2x2)
    before_other = snapshot_forest(other)
    with pytest.raises(GridWiringError):
        forest_2x2.find(foreign)
    with pytest.raises(GridWiringError):
        forest_2x2.union(grid_2x2[0, 0], foreign)
    with pytest.raises(GridWiringError):
        forest_2x2.union(foreign, grid_2x2[0, 0])
    assert snapshot_forest(grid_2x2) == before_local
    assert snapshot_forest(other) == before_other


def test_find_rejects_handle_out_of_range(forest_2x2: DisjointSetForest):
    with pytest.raises(GridWiringError):
        forest_2x2.find(Node(9, 9, handle=99))
    with pytest.raises(GridWiringError):
        forest_2x2.find(Node(0, 0))


def test_failed_make_sets_leaves_forest_unchanged(
    grid_2x2: Grid, forest_2x2: DisjointSetForest
):
    forest_2x2.union(grid_2x2[0, 0], grid_2x2[0, 1])
    before = snapshot_forest(grid_2x2)
    with pytest.raises(GridWiringError):
        forest_2x2.make_sets([grid_2x2[0, 1], Node(9, 9)])
    assert snapshot_forest(grid_2x2) == before
    assert forest_2x2.connected(grid_2x2[0, 0], grid_2x2[0, 1])
