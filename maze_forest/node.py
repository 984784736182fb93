import numpy as np

from maze_forest.constants import PRIORITY_ORDER, WALL_ORDER, CoordTup, Direction
from maze_forest.errors import (
    GridWiringError,
    NoPassableNeighborError,
    NotAdjacentError,
)


class Node:
    """a single grid cell: four walls, links to up to four neighbors, and union-find bookkeeping

    - walls all start up. a wall shared with a wired neighbor is only ever cleared through
      `knock_down_wall`, which clears both sides together
    - neighbor links are set once by grid wiring. `None` marks a border
    - `parent` is the handle (arena index) of this node's parent in the disjoint-set forest,
      or `None` until `DisjointSetForest.make_sets` has run. `rank` is only an upper bound on
      subtree height, never an exact size or height
    - `visited` and `examined` belong to traversal code, the forest never reads them

    equality and hashing use `(row, col)` only, so nodes from two different grids at the same
    position compare equal. key any container holding nodes of several grids by grid as well.
    """

    __slots__ = (
        "_row",
        "_col",
        "_handle",
        "_walls",
        "_neighbors",
        "_wired",
        "parent",
        "rank",
        "visited",
        "examined",
    )

    def __init__(self, row: int, col: int, handle: int | None = None) -> None:
        self._row: int = row
        self._col: int = col
        self._handle: int | None = handle
        self._walls: dict[Direction, bool] = {d: True for d in WALL_ORDER}
        self._neighbors: dict[Direction, "Node | None"] = {d: None for d in WALL_ORDER}
        self._wired: bool = False
        self.parent: int | None = None
        self.rank: int = 0
        self.visited: bool = False
        self.examined: bool = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(row={self._row}, col={self._col})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.coord == other.coord

    def __hash__(self) -> int:
        return hash(self.coord)

    # ============================================================
    # identity
    # ============================================================
    row = property(lambda self: self._row)
    col = property(lambda self: self._col)
    handle = property(lambda self: self._handle)

    @property
    def coord(self) -> CoordTup:
        return (self._row, self._col)

    # ============================================================
    # walls
    # ============================================================
    north = property(lambda self: self._walls[Direction.N])
    east = property(lambda self: self._walls[Direction.E])
    south = property(lambda self: self._walls[Direction.S])
    west = property(lambda self: self._walls[Direction.W])

    def is_wall(self, direction: Direction) -> bool:
        """whether the wall on the given side is up"""
        return self._walls[direction]

    def has_all_walls(self) -> bool:
        """true for a cell no passage has been carved into yet"""
        return all(self._walls.values())

    def knock_down_wall(self, neighbor: "Node") -> None:
        """open the passage between this node and `neighbor`, clearing the wall on both sides

        `neighbor` must be the very object wired on one of the four sides, a node that merely
        sits at an adjacent position (say, in another grid) is rejected.

        # Raises:
        - `NotAdjacentError` : if `neighbor` is not wired to this node. no wall changes
        """
        direction: Direction = self.direction_to(neighbor)
        self._walls[direction] = False
        neighbor._walls[direction.opposite] = False

    # ============================================================
    # adjacency
    # ============================================================
    def set_neighbors(
        self,
        north: "Node | None",
        east: "Node | None",
        south: "Node | None",
        west: "Node | None",
    ) -> None:
        """wire the four neighbor links, `None` marking a border. may only be called once"""
        if self._wired:
            raise GridWiringError(f"neighbors of {self!r} are already set")
        self._neighbors[Direction.N] = north
        self._neighbors[Direction.E] = east
        self._neighbors[Direction.S] = south
        self._neighbors[Direction.W] = west
        self._wired = True

    def neighbor(self, direction: Direction) -> "Node | None":
        return self._neighbors[direction]

    def neighbors(self) -> list["Node"]:
        """all wired neighbors, walled or not"""
        return [n for n in self._neighbors.values() if n is not None]

    def direction_to(self, neighbor: "Node") -> Direction:
        """the side of this node on which `neighbor` is wired"""
        for direction, linked in self._neighbors.items():
            if linked is not None and linked is neighbor:
                return direction
        raise NotAdjacentError(f"{neighbor!r} is not a wired neighbor of {self!r}")

    def passable_neighbors(self) -> list["Node"]:
        """wired neighbors whose connecting wall is down, in N, E, S, W order

        returns an empty list when every side is walled or a border
        """
        return [
            n
            for d, n in self._neighbors.items()
            if n is not None and not self._walls[d]
        ]

    def random_passable_neighbor(self, rng: np.random.Generator) -> "Node":
        """pick one of `passable_neighbors()` uniformly, using the caller's random source

        pass the same seeded `np.random.Generator` (see `GridConfig.get_rng`) through a whole
        run to make it reproducible

        # Raises:
        - `NoPassableNeighborError` : if there is no passable neighbor
        """
        options: list[Node] = self.passable_neighbors()
        if not options:
            raise NoPassableNeighborError(f"{self!r} has no passable neighbor")
        return options[int(rng.integers(len(options)))]

    def first_walled_neighbor(self) -> "Node | None":
        """first neighbor, scanning east, south, north, west, that still has a wall between it and this node"""
        for direction in PRIORITY_ORDER:
            n: Node | None = self._neighbors[direction]
            if n is not None and self._walls[direction]:
                return n
        return None

    def first_untouched_neighbor(self) -> "Node | None":
        """first neighbor, scanning east, south, north, west, with all four of its walls up"""
        for direction in PRIORITY_ORDER:
            n: Node | None = self._neighbors[direction]
            if n is not None and n.has_all_walls():
                return n
        return None

    # ============================================================
    # traversal flags
    # ============================================================
    def visit(self) -> None:
        self.visited = True

    def examine(self) -> None:
        self.examined = True

    def reset_flags(self) -> None:
        self.visited = False
        self.examined = False
