"""
Shared fixtures: small molecular skeletons.
"""

import pytest

from chemgraph import ListGraph, Node


@pytest.fixture
def chain():
    """Linear chain A-B-C-D, edges stored as (A,B), (B,C), (C,D)."""
    a, b, c, d = Node("A"), Node("B"), Node("C"), Node("D")
    graph = ListGraph([(a, b), (b, c), (c, d)])
    return graph, (a, b, c, d)


@pytest.fixture
def star():
    """Centre A bonded to B and C."""
    a, b, c = Node("A"), Node("B"), Node("C")
    graph = ListGraph([(a, b), (a, c)])
    return graph, (a, b, c)


@pytest.fixture
def benzene_ring():
    """Six-membered ring a0..a5, each edge stored as (a_i, a_i+1)."""
    atoms = [Node(f"a{i}") for i in range(6)]
    graph = ListGraph()
    for i in range(6):
        graph.add_edge(atoms[i], atoms[(i + 1) % 6])
    return graph, atoms


@pytest.fixture
def two_fragments():
    """Fragment A-B plus fragment C-D-E, and an isolated atom F."""
    a, b, c, d, e, f = (Node(n) for n in "ABCDEF")
    graph = ListGraph([(a, b), (c, d), (d, e)])
    graph.add_node(f)
    return graph, (a, b, c, d, e, f)
