"""
Breadth-first and depth-first traversal of molecular graphs.

Both algorithms come in two flavours: a path search that stops at a target
and returns the path to it, and a full visit that applies a function to every
reachable node. They only rely on ``Graph.neighbors``, which in turn is built
on ``find_edges_containing``, so traversal is undirected whatever the storage.
"""

import logging
from collections import deque
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional

from ..classes.node import Node
from ..core.graph import Graph

logger = logging.getLogger(__name__)


class TraversalStrategy(Enum):
    """Available traversal orders."""
    BFS = "bfs"
    DFS = "dfs"


class TraversalControl(Enum):
    """Values a visitor may return to steer a full-visit traversal."""
    CONTINUE = "continue"
    STOP = "stop"


Visitor = Callable[[Node], Any]


class GraphSearch:
    """
    Traversal algorithms over a ``Graph``.

    This class provides:
    - Shortest path search (breadth-first)
    - Depth-first path search
    - Full visits of the connected component around a node, in either order

    Every call keeps its own visited state, so one instance can be reused as
    long as the graph is not modified during a traversal.
    """

    def __init__(self, graph: Graph):
        """
        Initialize the search.

        Args:
            graph: Graph to traverse
        """
        self.graph = graph

    # ========================================================================
    # PATH SEARCH
    # ========================================================================

    def bfs(self, start: Node, end: Node) -> Optional[List[Node]]:
        """
        Find a shortest path from ``start`` to ``end`` using BFS.

        Nodes are processed in strict distance order, so the returned path
        has the fewest possible edges. When several shortest paths exist the
        one through the first-discovered predecessor is returned.

        Args:
            start: Starting node
            end: Target node

        Returns:
            ``[start, ..., end]``, ``[start]`` when start is end, or None if
            ``end`` is unreachable
        """
        predecessors: Dict[Node, Optional[Node]] = {}
        for node in self._breadth_first(start, predecessors):
            if node is end:
                path = self._build_path(predecessors, end)
                logger.debug(f"BFS found path of {len(path) - 1} edges from {start!r} to {end!r}")
                return path

        logger.debug(f"BFS found no path from {start!r} to {end!r}")
        return None

    def dfs(self, start: Node, end: Node) -> Optional[List[Node]]:
        """
        Find a path from ``start`` to ``end`` using DFS.

        The first path reached is returned and the rest of the search is
        abandoned. Which path that is depends on edge storage order; it is
        not necessarily the shortest.

        Args:
            start: Starting node
            end: Target node

        Returns:
            ``[start, ..., end]``, ``[start]`` when start is end, or None if
            ``end`` is unreachable
        """
        predecessors: Dict[Node, Optional[Node]] = {}
        for node in self._depth_first(start, predecessors):
            if node is end:
                path = self._build_path(predecessors, end)
                logger.debug(f"DFS found path of {len(path) - 1} edges from {start!r} to {end!r}")
                return path

        logger.debug(f"DFS found no path from {start!r} to {end!r}")
        return None

    def find_path(self, start: Node, end: Node,
                  strategy: TraversalStrategy = TraversalStrategy.BFS) -> Optional[List[Node]]:
        """Find a path with the given strategy. See ``bfs`` and ``dfs``."""
        if strategy is TraversalStrategy.DFS:
            return self.dfs(start, end)
        return self.bfs(start, end)

    # ========================================================================
    # FULL VISIT
    # ========================================================================

    def bfs_visit(self, start: Node, visitor: Visitor, end: Optional[Node] = None) -> List[Node]:
        """
        Apply ``visitor`` to every node reachable from ``start``, breadth first.

        Nodes are visited in non-decreasing distance from ``start``. The
        traversal stops right after the visitor has run on ``end`` (if given)
        or as soon as the visitor returns ``TraversalControl.STOP``.

        Args:
            start: Starting node
            visitor: Called once per node
            end: Optional node to stop at

        Returns:
            Visited nodes, in visit order
        """
        return self._visit(self._breadth_first(start, {}), visitor, end)

    def dfs_visit(self, start: Node, visitor: Visitor, end: Optional[Node] = None) -> List[Node]:
        """
        Apply ``visitor`` to every node reachable from ``start``, depth first.

        Same stopping rules as ``bfs_visit``; the visitor runs when a node is
        entered.

        Args:
            start: Starting node
            visitor: Called once per node
            end: Optional node to stop at

        Returns:
            Visited nodes, in visit order
        """
        return self._visit(self._depth_first(start, {}), visitor, end)

    def visit(self, start: Node, visitor: Visitor, end: Optional[Node] = None,
              strategy: TraversalStrategy = TraversalStrategy.BFS) -> List[Node]:
        """Full visit with the given strategy. See ``bfs_visit`` and ``dfs_visit``."""
        if strategy is TraversalStrategy.DFS:
            return self.dfs_visit(start, visitor, end)
        return self.bfs_visit(start, visitor, end)

    # ========================================================================
    # INTERNALS
    # ========================================================================

    def _visit(self, order: Iterator[Node], visitor: Visitor, end: Optional[Node]) -> List[Node]:
        if not callable(visitor):
            raise TypeError(f"visitor must be callable, got {type(visitor).__name__}")

        visited = []
        for node in order:
            visited.append(node)
            control = visitor(node)
            if node is end or control is TraversalControl.STOP:
                break

        logger.debug(f"Visited {len(visited)} nodes")
        return visited

    def _breadth_first(self, start: Node, predecessors: Dict[Node, Optional[Node]]) -> Iterator[Node]:
        """
        Yield nodes in breadth-first order.

        A node is staged once, by whichever node discovers it first, and its
        predecessor is recorded in ``predecessors`` at that moment. Neighbors
        of a node are only looked up after the consumer has resumed the
        generator, so breaking out early stops all further discovery.
        """
        predecessors[start] = None
        queue = deque([start])

        while queue:
            current = queue.popleft()
            yield current

            for neighbor in self.graph.neighbors(current):
                if neighbor not in predecessors:
                    predecessors[neighbor] = current
                    queue.append(neighbor)

    def _depth_first(self, start: Node, predecessors: Dict[Node, Optional[Node]]) -> Iterator[Node]:
        """
        Yield nodes in depth-first order, on entry.

        Uses an explicit stack of neighbor iterators instead of recursion. A
        neighbor is marked visited before it is descended into, and marks are
        never undone, so a node reached through one branch is skipped by its
        siblings. The order is the same as the recursive formulation.
        """
        predecessors[start] = None
        yield start
        stack = [(start, iter(self.graph.neighbors(start)))]

        while stack:
            current, pending = stack[-1]
            for neighbor in pending:
                if neighbor not in predecessors:
                    predecessors[neighbor] = current
                    yield neighbor
                    stack.append((neighbor, iter(self.graph.neighbors(neighbor))))
                    break
            else:
                stack.pop()

    @staticmethod
    def _build_path(predecessors: Dict[Node, Optional[Node]], end: Node) -> List[Node]:
        path = [end]
        node = predecessors[end]
        while node is not None:
            path.append(node)
            node = predecessors[node]
        path.reverse()
        return path


def bfs(graph: Graph, start: Node, end: Node) -> Optional[List[Node]]:
    """Shortest path from ``start`` to ``end``, or None."""
    return GraphSearch(graph).bfs(start, end)


def dfs(graph: Graph, start: Node, end: Node) -> Optional[List[Node]]:
    """Depth-first path from ``start`` to ``end``, or None."""
    return GraphSearch(graph).dfs(start, end)


def bfs_visit(graph: Graph, start: Node, visitor: Visitor, end: Optional[Node] = None) -> List[Node]:
    """Breadth-first full visit from ``start``."""
    return GraphSearch(graph).bfs_visit(start, visitor, end)


def dfs_visit(graph: Graph, start: Node, visitor: Visitor, end: Optional[Node] = None) -> List[Node]:
    """Depth-first full visit from ``start``."""
    return GraphSearch(graph).dfs_visit(start, visitor, end)
