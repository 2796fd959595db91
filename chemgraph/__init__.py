"""
ChemGraph - Molecular Connectivity Graph Library

A small in-memory graph library used as the structural backbone for chemical
entities: atoms are nodes, bonds are edges. It answers connectivity questions
such as whether two atoms are linked and which atoms belong to a fragment.

Main Classes:
    Node: Identity-bearing node with a name and an opaque payload
    Graph: Abstract graph protocol
    ListGraph: Graph storing its edges in a list
    GraphSearch: Breadth-first and depth-first traversal
    Element: Chemical element record, usable as node payload

Example:
    >>> from chemgraph import Node, ListGraph, bfs
    >>> c1, c2, o = Node("C1"), Node("C2"), Node("O")
    >>> graph = ListGraph([(c1, c2), (c2, o)])
    >>> bfs(graph, c1, o)
    [Node('C1'), Node('C2'), Node('O')]
"""

__version__ = "0.1.0"

from chemgraph.classes.node import Node
from chemgraph.classes.element import Element, Isotope
from chemgraph.core.graph import Graph, ListGraph
from chemgraph.analysis.traversal import (
    GraphSearch,
    TraversalControl,
    TraversalStrategy,
    bfs,
    bfs_visit,
    dfs,
    dfs_visit,
)
from chemgraph.analysis.connectivity import (
    adjacency_matrix,
    connected_component,
    connected_components,
    degree,
    is_connected,
)
from chemgraph.formats.read_elements import ElementTable, read_elements

__all__ = [
    'Node',
    'Element',
    'Isotope',
    'Graph',
    'ListGraph',
    'GraphSearch',
    'TraversalControl',
    'TraversalStrategy',
    'bfs',
    'bfs_visit',
    'dfs',
    'dfs_visit',
    'adjacency_matrix',
    'connected_component',
    'connected_components',
    'degree',
    'is_connected',
    'ElementTable',
    'read_elements',
]
