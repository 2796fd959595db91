"""
Connectivity analysis for molecular graphs.

Fragments (connected components), degree counts and adjacency matrices over
the undirected view of a graph.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..classes.node import Node
from ..core.graph import Graph
from .traversal import GraphSearch

logger = logging.getLogger(__name__)


def connected_component(graph: Graph, node: Node) -> List[Node]:
    """
    Get all nodes reachable from ``node``, in breadth-first order.

    Args:
        graph: Graph to analyze
        node: Any node of the component

    Returns:
        Nodes of the component, starting with ``node``
    """
    return GraphSearch(graph).bfs_visit(node, lambda n: None)


def connected_components(graph: Graph) -> List[List[Node]]:
    """
    Split a graph into its connected components (molecular fragments).

    Components are listed in the order of their first member node; isolated
    nodes form single-node components.

    Args:
        graph: Graph to analyze

    Returns:
        List of components, each a list of nodes
    """
    search = GraphSearch(graph)
    assigned = set()
    components = []

    for node in graph.nodes:
        if node in assigned:
            continue
        component = search.bfs_visit(node, assigned.add)
        components.append(component)

    logger.debug(f"Found {len(components)} connected components in {len(graph)} nodes")
    return components


def is_connected(graph: Graph) -> bool:
    """Check whether every node can reach every other one. Empty graphs count as connected."""
    nodes = graph.nodes
    if not nodes:
        return True
    return len(connected_component(graph, nodes[0])) == len(nodes)


def degree(graph: Graph, node: Node) -> int:
    """Number of distinct neighbors of ``node``."""
    return len(graph.neighbors(node))


def adjacency_matrix(graph: Graph, nodes: Optional[Sequence[Node]] = None) -> np.ndarray:
    """
    Build the symmetric adjacency matrix of the undirected view.

    Args:
        graph: Graph to convert
        nodes: Row/column ordering, defaults to ``graph.nodes``

    Returns:
        ``(n, n)`` int8 array with 1 where two nodes share an edge

    Raises:
        ValueError: If an edge endpoint is missing from ``nodes``
    """
    if nodes is None:
        nodes = graph.nodes

    index = {node: i for i, node in enumerate(nodes)}
    matrix = np.zeros((len(nodes), len(nodes)), dtype=np.int8)

    for node1, node2 in graph.edges:
        if node1 not in index or node2 not in index:
            raise ValueError(f"Edge ({node1!r}, {node2!r}) has an endpoint outside the node ordering")
        i, j = index[node1], index[node2]
        matrix[i, j] = 1
        matrix[j, i] = 1

    return matrix
