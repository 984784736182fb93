class MazeForestError(Exception):
    """base class for errors raised by `maze_forest`"""

    pass


class UninitializedSetError(MazeForestError):
    """raised when `find` or `union` reaches a node that was never passed to `make_sets`"""

    pass


class NotAdjacentError(MazeForestError, ValueError):
    """raised when a node is not one of the four neighbors wired to another node"""

    pass


class NoPassableNeighborError(MazeForestError, LookupError):
    """raised when a random passable neighbor is requested but every side is walled or a border"""

    pass


class GridWiringError(MazeForestError):
    """raised when neighbor links are set twice, or a node is handed to a forest whose arena does not hold it"""

    pass
