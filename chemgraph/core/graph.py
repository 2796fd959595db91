"""
Core graph data structures for molecular connectivity.

This module provides the graph protocol used by the traversal algorithms and
a simple list-backed implementation of it.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple

from ..classes.node import Node

logger = logging.getLogger(__name__)

Edge = Tuple[Node, Node]


class Graph(ABC):
    """
    Abstract graph protocol.

    A graph owns a set of member nodes and some storage of ordered edges.
    Subclasses decide how edges are stored; they implement the six edge
    operations below. Everything else, including the traversal algorithms,
    is written against those operations only.

    Edges are ordered pairs ``(from, to)`` in storage, but
    ``find_edges_containing`` reports an edge for either endpoint, which is
    what makes reachability undirected.
    """

    def __init__(self):
        # dict keys give an insertion-ordered set
        self._nodes: Dict[Node, None] = {}

    # ========================================================================
    # EDGE PROTOCOL
    # ========================================================================

    @abstractmethod
    def add_edge(self, node1: Node, node2: Node) -> None:
        """Register both nodes and record the edge ``(node1, node2)``."""

    @abstractmethod
    def remove_edge(self, node1: Node, node2: Node) -> None:
        """Remove the edge ``(node1, node2)`` if present (not its reverse)."""

    @abstractmethod
    def edgep(self, node1: Node, node2: Node) -> Optional[Edge]:
        """Return the stored edge ``(node1, node2)``, or None."""

    @abstractmethod
    def find_edges_from(self, node: Node) -> List[Edge]:
        """Return all edges whose origin is ``node``."""

    @abstractmethod
    def find_edges_to(self, node: Node) -> List[Edge]:
        """Return all edges whose terminus is ``node``."""

    @abstractmethod
    def find_edges_containing(self, node: Node) -> List[Edge]:
        """Return all edges with ``node`` at either end."""

    @property
    @abstractmethod
    def edges(self) -> List[Edge]:
        """All stored edges."""

    # ========================================================================
    # NODE MEMBERSHIP
    # ========================================================================

    def add_node(self, node: Node) -> None:
        """Register ``node`` as a member. Adding an existing member is a no-op."""
        self._nodes.setdefault(node, None)

    def remove_node(self, node: Node) -> None:
        """
        Remove ``node`` and every edge touching it.

        Removing a node that is not a member does nothing.
        """
        if node not in self._nodes:
            return
        for node1, node2 in self.find_edges_containing(node):
            self.remove_edge(node1, node2)
        del self._nodes[node]

    def has_node(self, node: Node) -> bool:
        return node in self._nodes

    @property
    def nodes(self) -> List[Node]:
        """Member nodes, in registration order."""
        return list(self._nodes)

    def number_of_edges(self) -> int:
        return len(self.edges)

    def neighbors(self, node: Node) -> List[Node]:
        """
        Get the nodes sharing an edge with ``node``, ignoring direction.
        A self-loop does not make ``node`` its own neighbor.

        Args:
            node: Node to look up

        Returns:
            Distinct neighbors in the order their edges are reported by
            ``find_edges_containing``
        """
        seen = {}
        for node1, node2 in self.find_edges_containing(node):
            other = node2 if node1 is node else node1
            if other is not node:
                seen.setdefault(other, None)
        return list(seen)

    def __contains__(self, node: Node) -> bool:
        return self.has_node(node)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self):
        return iter(self.nodes)


class ListGraph(Graph):
    """
    Graph storing its edges as a list of ordered node pairs.

    Every query is a linear scan over the edge list. That is fine for
    molecule-sized graphs (tens to a few hundred atoms) but does not scale to
    large networks.
    """

    def __init__(self, edges: Optional[Iterable[Edge]] = None):
        """
        Initialize the graph.

        Args:
            edges: Optional ``(node1, node2)`` pairs to insert with ``add_edge``
        """
        super().__init__()
        self._edges: List[Edge] = []

        if edges is not None:
            for node1, node2 in edges:
                self.add_edge(node1, node2)
            logger.debug(f"Built ListGraph with {len(self._nodes)} nodes and {len(self._edges)} edges")

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    def add_edge(self, node1: Node, node2: Node) -> None:
        self.add_node(node1)
        self.add_node(node2)
        if self.edgep(node1, node2) is None:
            self._edges.append((node1, node2))

    def remove_edge(self, node1: Node, node2: Node) -> None:
        for idx, (start, end) in enumerate(self._edges):
            if start is node1 and end is node2:
                del self._edges[idx]
                return

    def edgep(self, node1: Node, node2: Node) -> Optional[Edge]:
        for edge in self._edges:
            if edge[0] is node1 and edge[1] is node2:
                return edge
        return None

    def find_edges_from(self, node: Node) -> List[Edge]:
        return [edge for edge in self._edges if edge[0] is node]

    def find_edges_to(self, node: Node) -> List[Edge]:
        return [edge for edge in self._edges if edge[1] is node]

    def find_edges_containing(self, node: Node) -> List[Edge]:
        """
        Get every edge touching ``node``.

        Single pass over the edge list; outgoing edges come first, then
        incoming ones. A self-loop is reported once.
        """
        outgoing = []
        incoming = []
        for edge in self._edges:
            if edge[0] is node:
                outgoing.append(edge)
            elif edge[1] is node:
                incoming.append(edge)
        return outgoing + incoming

    def __repr__(self) -> str:
        return f"ListGraph(nodes={len(self._nodes)}, edges={len(self._edges)})"
