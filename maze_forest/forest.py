"""disjoint-set forest whose parent and rank fields live in the grid nodes themselves

references:
- https://en.wikipedia.org/wiki/Disjoint-set_data_structure
- https://weblog.jamisbuck.org/2011/1/3/maze-generation-kruskal-s-algorithm
"""

import logging
import typing
from collections import defaultdict
from typing import Iterable

from maze_forest.errors import GridWiringError, UninitializedSetError
from maze_forest.node import Node

logger = logging.getLogger(__name__)


class DisjointSetForest:
    """union-find over the nodes of an arena, with path compression and union by rank

    the forest keeps no sets of its own. `arena` is only used to resolve parent handles back
    to nodes, and must satisfy `arena[node.handle] is node` for every node it is handed
    (a `Grid` does).

    # Usage:
    ```
    >>> grid = Grid(3, 4)
    >>> forest = DisjointSetForest(grid)
    >>> forest.make_sets()
    >>> a, b = grid[0, 0], grid[0, 1]
    >>> if forest.union(a, b):
    ...     a.knock_down_wall(b)
    ```
    """

    def __init__(self, arena: typing.Sequence[Node]) -> None:
        self.arena: typing.Sequence[Node] = arena

    def _check_member(self, node: Node) -> None:
        handle: int | None = node.handle
        if (
            handle is None
            or not 0 <= handle < len(self.arena)
            or self.arena[handle] is not node
        ):
            raise GridWiringError(
                f"{node!r} with handle {handle} is not at that slot of the arena"
            )

    def _parent(self, node: Node) -> Node:
        if node.parent is None:
            raise UninitializedSetError(
                f"{node!r} is not in any set, call `make_sets` before `find` or `union`"
            )
        return self.arena[node.parent]

    def make_sets(self, nodes: Iterable[Node] | None = None) -> None:
        """make every node its own singleton set: `rank = 0`, `parent = ` its own handle

        with `nodes=None` every node in the arena is reset. every node is checked against
        the arena before any is reset, so a `GridWiringError` leaves the forest untouched
        """
        members: list[Node] = list(self.arena if nodes is None else nodes)
        for node in members:
            self._check_member(node)
        for node in members:
            node.rank = 0
            node.parent = node.handle
        logger.debug(f"made {len(members)} singleton sets")

    def find(self, node: Node) -> Node:
        """return the root of `node`'s set, pointing every node on the way directly at it

        iterative, so chain length is never limited by the recursion limit

        # Raises:
        - `GridWiringError` : if `node` does not belong to this forest's arena
        - `UninitializedSetError` : if `make_sets` never reached a node on the path
        """
        self._check_member(node)
        # first pass: walk up to the root
        root: Node = node
        parent: Node = self._parent(root)
        while parent is not root:
            root = parent
            parent = self._parent(root)

        # second pass: compress the path
        current: Node = node
        while current is not root:
            next_node: Node = self.arena[current.parent]
            current.parent = root.handle
            current = next_node

        return root

    def union(self, a: Node, b: Node) -> bool:
        """merge the sets containing `a` and `b`

        returns `False` without changing anything when they already share a root, in which
        case the wall between them must stay up (removing it would close a cycle). otherwise
        the root of lower rank goes under the root of higher rank; on a tie `a`'s root goes
        under `b`'s root and `b`'s root gains one rank. returns `True` after a merge
        """
        # both checked before either find compresses anything
        self._check_member(a)
        self._check_member(b)
        root_a: Node = self.find(a)
        root_b: Node = self.find(b)
        if root_a is root_b:
            return False

        if root_a.rank < root_b.rank:
            root_a.parent = root_b.handle
        elif root_a.rank > root_b.rank:
            root_b.parent = root_a.handle
        else:
            root_a.parent = root_b.handle
            root_b.rank += 1
        return True

    def connected(self, a: Node, b: Node) -> bool:
        """whether `a` and `b` are in the same set"""
        return self.find(a) is self.find(b)

    def roots(self, nodes: Iterable[Node] | None = None) -> set[Node]:
        if nodes is None:
            nodes = self.arena
        return {self.find(node) for node in nodes}

    def n_sets(self, nodes: Iterable[Node] | None = None) -> int:
        """number of distinct sets among `nodes` (default: the whole arena)"""
        return len(self.roots(nodes))

    def sets(self, nodes: Iterable[Node] | None = None) -> dict[Node, list[Node]]:
        """map each root to the members of its set"""
        if nodes is None:
            nodes = self.arena
        members: dict[Node, list[Node]] = defaultdict(list)
        for node in nodes:
            members[self.find(node)].append(node)
        return dict(members)
