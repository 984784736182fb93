import logging
import typing

import numpy as np

from maze_forest.config import GridConfig
from maze_forest.constants import ConnectionList, CoordTup, Direction
from maze_forest.forest import DisjointSetForest
from maze_forest.node import Node

logger = logging.getLogger(__name__)


class Grid:
    """rectangular arena of `Node`s, wired to their up-to-four neighbors

    nodes are stored row-major, so a node's handle is `row * n_cols + col`. indexing with an
    int returns the node with that handle, indexing with a `(row, col)` tuple returns the
    node at that position. wiring is symmetric: if `a`'s east neighbor is `b` then `b`'s west
    neighbor is `a`, and border sides are `None`.
    """

    def __init__(self, n_rows: int, n_cols: int) -> None:
        if n_rows < 1 or n_cols < 1:
            raise ValueError(
                f"grid must have at least one row and one column, got {n_rows = }, {n_cols = }"
            )
        self._n_rows: int = n_rows
        self._n_cols: int = n_cols
        self._nodes: list[Node] = [
            Node(row, col, handle=row * n_cols + col)
            for row in range(n_rows)
            for col in range(n_cols)
        ]
        self._wire()
        logger.debug(f"built {n_rows}x{n_cols} grid with {len(self._nodes)} nodes")

    def _at(self, row: int, col: int) -> Node | None:
        if 0 <= row < self._n_rows and 0 <= col < self._n_cols:
            return self._nodes[row * self._n_cols + col]
        return None

    def _wire(self) -> None:
        for node in self._nodes:
            r, c = node.coord
            node.set_neighbors(
                north=self._at(r - 1, c),
                east=self._at(r, c + 1),
                south=self._at(r + 1, c),
                west=self._at(r, c - 1),
            )

    @classmethod
    def from_config(cls, cfg: GridConfig) -> "Grid":
        return cls(cfg.n_rows, cfg.n_cols)

    # ============================================================
    # arena access
    # ============================================================
    n_rows = property(lambda self: self._n_rows)
    n_cols = property(lambda self: self._n_cols)
    grid_shape = property(lambda self: (self._n_rows, self._n_cols))
    n_nodes = property(lambda self: len(self._nodes))
    nodes = property(lambda self: tuple(self._nodes))

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> typing.Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, item: int | CoordTup) -> Node:
        if isinstance(item, tuple):
            return self.get_node(*item)
        return self.node(item)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n_rows={self._n_rows}, n_cols={self._n_cols})"

    def node(self, handle: int) -> Node:
        """return the node with the given handle"""
        if not 0 <= handle < len(self._nodes):
            raise IndexError(f"invalid handle {handle!r} for grid of {len(self)} nodes")
        return self._nodes[handle]

    def get_node(self, row: int, col: int) -> Node:
        """return the node at the given row and column"""
        if not 0 <= row < self._n_rows:
            raise IndexError(f"Invalid row {row!r}")
        if not 0 <= col < self._n_cols:
            raise IndexError(f"Invalid col {col!r}")
        return self._nodes[row * self._n_cols + col]

    # ============================================================
    # walls
    # ============================================================
    def interior_walls(self) -> list[tuple[Node, Node]]:
        """every pair of adjacent nodes once, as `(node, east or south neighbor)`

        this is the candidate list a Kruskal-style driver shuffles, whatever the walls' state
        """
        pairs: list[tuple[Node, Node]] = []
        for node in self._nodes:
            for direction in (Direction.E, Direction.S):
                other: Node | None = node.neighbor(direction)
                if other is not None:
                    pairs.append((node, other))
        return pairs

    def n_open_walls(self) -> int:
        """number of adjacent pairs with the wall between them knocked down"""
        return sum(
            1 for a, b in self.interior_walls() if not a.is_wall(a.direction_to(b))
        )

    def is_perfect_maze(self, forest: DisjointSetForest) -> bool:
        """true when every node is in one set and exactly `n_nodes - 1` walls are open

        together these mean the open passages form a spanning tree
        """
        return (forest.n_sets(self._nodes) == 1) and (
            self.n_open_walls() == self.n_nodes - 1
        )

    def reset_flags(self) -> None:
        """clear `visited` and `examined` on every node"""
        for node in self._nodes:
            node.reset_flags()

    # ============================================================
    # to and from connection list
    # ============================================================
    def as_connection_list(self) -> ConnectionList:
        """export the walls as a lattice connection list

        `connection_list[0, r, c]` is true when `(r, c)` is open toward `(r + 1, c)` (down),
        `connection_list[1, r, c]` when it is open toward `(r, c + 1)` (right). the last row's
        downward and the last column's rightward entries are always false.
        """
        connection_list: ConnectionList = np.zeros(
            (2, self._n_rows, self._n_cols), dtype=np.bool_
        )
        for node in self._nodes:
            r, c = node.coord
            if node.neighbor(Direction.S) is not None:
                connection_list[0, r, c] = not node.south
            if node.neighbor(Direction.E) is not None:
                connection_list[1, r, c] = not node.east
        return connection_list

    @classmethod
    def from_connection_list(cls, connection_list: ConnectionList) -> "Grid":
        """build a grid whose walls match a lattice connection list (see `as_connection_list`)"""
        connection_list = np.asarray(connection_list, dtype=np.bool_)
        if connection_list.ndim != 3 or connection_list.shape[0] != 2:
            raise ValueError(
                f"expected a connection list of shape (2, n_rows, n_cols), got {connection_list.shape}"
            )
        n_rows, n_cols = connection_list.shape[1:]
        if n_rows < 1 or n_cols < 1:
            raise ValueError(
                f"connection list must cover at least one row and one column, got {connection_list.shape}"
            )
        if connection_list[0, -1, :].any() or connection_list[1, :, -1].any():
            raise ValueError(
                "connection list opens a wall on the grid border (last row down or last column right)"
            )

        grid: Grid = cls(int(n_rows), int(n_cols))
        for node in grid:
            if connection_list[0, node.row, node.col]:
                node.knock_down_wall(node.neighbor(Direction.S))
            if connection_list[1, node.row, node.col]:
                node.knock_down_wall(node.neighbor(Direction.E))
        return grid
