from enum import Enum

import numpy as np
from jaxtyping import Bool

CoordTup = tuple[int, int]
ConnectionList = Bool[np.ndarray, "lattice_dim row col"]


class Direction(Enum):
    """the four sides of a grid cell, valued by their (row, col) offset"""

    N = (-1, 0)
    E = (0, 1)
    S = (1, 0)
    W = (0, -1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        """the side facing back toward this one"""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.N: Direction.S,
    Direction.E: Direction.W,
    Direction.S: Direction.N,
    Direction.W: Direction.E,
}

# order in which `Node.neighbors()` and `Node.passable_neighbors()` report links
WALL_ORDER: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)

# scan order for the frontier probes `first_walled_neighbor` / `first_untouched_neighbor`
PRIORITY_ORDER: tuple[Direction, ...] = (
    Direction.E,
    Direction.S,
    Direction.N,
    Direction.W,
)
