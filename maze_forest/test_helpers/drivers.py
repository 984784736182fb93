import numpy as np

from maze_forest.forest import DisjointSetForest
from maze_forest.grid import Grid
from maze_forest.node import Node


def kruskal_connect(
    grid: Grid,
    forest: DisjointSetForest,
    rng: np.random.Generator,
) -> int:
    """reference driver: knock down walls in random order wherever they join two sets

    algorithm:
    1. put every node in its own set
    2. shuffle the list of interior walls
    3. for each wall, if the nodes on either side are in different sets, merge the sets and
       knock the wall down, otherwise leave it up
    4. stop as soon as a single set is left

    returns the number of merging unions performed
    """
    forest.make_sets(grid)
    walls: list[tuple[Node, Node]] = grid.interior_walls()
    order: np.ndarray = rng.permutation(len(walls))

    n_merges: int = 0
    n_sets: int = grid.n_nodes
    for i in order:
        if n_sets == 1:
            break
        a, b = walls[i]
        if forest.union(a, b):
            a.knock_down_wall(b)
            n_merges += 1
            n_sets -= 1

    return n_merges
