from maze_forest.constants import WALL_ORDER, Direction
from maze_forest.grid import Grid
from maze_forest.node import Node


class ForestCycleError(AssertionError):
    """raised when following parent handles does not reach a root within the arena size"""

    pass


class WallAsymmetryError(AssertionError):
    """raised when two wired neighbors disagree about the wall between them"""

    pass


def assert_forest_acyclic(grid: Grid) -> None:
    """every node reaches a self-rooted node within `n_nodes` parent steps"""
    n: int = grid.n_nodes
    for node in grid:
        current: Node = node
        for _ in range(n + 1):
            assert current.parent is not None, f"{current!r} has no parent"
            if current.parent == current.handle:
                break
            current = grid.node(current.parent)
        else:
            raise ForestCycleError(
                f"no root reached from {node!r} within {n} steps, stuck at {current!r}"
            )


def assert_walls_symmetric(grid: Grid) -> None:
    """for every wired pair, both sides of the shared wall agree, and wiring is mutual"""
    for node in grid:
        direction: Direction
        for direction in WALL_ORDER:
            other: Node | None = node.neighbor(direction)
            if other is None:
                continue
            if other.neighbor(direction.opposite) is not node:
                raise WallAsymmetryError(
                    f"{node!r} links {other!r} to the {direction.name}, but not the other way round"
                )
            if node.is_wall(direction) != other.is_wall(direction.opposite):
                raise WallAsymmetryError(
                    f"wall between {node!r} and {other!r} disagrees: "
                    f"{node.is_wall(direction) = }, {other.is_wall(direction.opposite) = }"
                )


def snapshot_forest(grid: Grid) -> list[tuple[int | None, int]]:
    """`(parent, rank)` of every node, in handle order"""
    return [(node.parent, node.rank) for node in grid]
