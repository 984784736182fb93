import numpy as np
import pytest

from maze_forest.config import GridConfig
from maze_forest.forest import DisjointSetForest
from maze_forest.grid import Grid


# When this module becomes unmanageable we can organise the fixtures into multiple modules and import them here
@pytest.fixture()
def grid_2x2() -> Grid:
    return Grid(2, 2)


@pytest.fixture()
def grid_3x3() -> Grid:
    return Grid(3, 3)


@pytest.fixture()
def forest_2x2(grid_2x2: Grid) -> DisjointSetForest:
    forest = DisjointSetForest(grid_2x2)
    forest.make_sets()
    return forest


@pytest.fixture()
def rng() -> np.random.Generator:
    return GridConfig(n_rows=1, n_cols=1, seed=42).get_rng()
