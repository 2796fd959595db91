"""
Tests for Node, the Graph protocol and ListGraph storage.
"""

import pytest

from chemgraph import Element, Graph, ListGraph, Node


class TestNode:
    """Node identity and payload."""

    def test_attributes(self):
        carbon = Element(6, "C", name="Carbon", mass=12.011)
        node = Node("C1", carbon)

        assert node.name == "C1"
        assert node.data is carbon

    def test_defaults(self):
        node = Node()

        assert node.name is None
        assert node.data is None

    def test_mutable(self):
        node = Node("C1")
        node.name = "C2"
        node.data = {"charge": -1}

        assert node.name == "C2"
        assert node.data == {"charge": -1}

    def test_identity_equality(self):
        first = Node("C", data=1)
        second = Node("C", data=1)

        assert first == first
        assert first != second
        assert len({first, second}) == 2

    def test_repr(self):
        assert repr(Node("O")) == "Node('O')"
        assert repr(Node()).startswith("Node(at 0x")


class TestGraphProtocol:
    """The abstract protocol."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            Graph()

    def test_list_graph_is_graph(self):
        assert isinstance(ListGraph(), Graph)


class TestAddEdge:
    """Edge insertion."""

    def test_registers_nodes(self):
        graph = ListGraph()
        a, b = Node("A"), Node("B")

        graph.add_edge(a, b)

        assert a in graph
        assert b in graph
        assert graph.nodes == [a, b]
        assert graph.edges == [(a, b)]

    def test_idempotent(self):
        graph = ListGraph()
        a, b = Node("A"), Node("B")

        graph.add_edge(a, b)
        graph.add_edge(a, b)

        assert graph.number_of_edges() == 1
        assert len(graph) == 2

    def test_reverse_pair_is_distinct(self):
        graph = ListGraph()
        a, b = Node("A"), Node("B")

        graph.add_edge(a, b)
        graph.add_edge(b, a)

        assert graph.edges == [(a, b), (b, a)]

    def test_dedup_is_by_identity(self):
        graph = ListGraph()
        a, b = Node("A"), Node("B")
        b_twin = Node("B")

        graph.add_edge(a, b)
        graph.add_edge(a, b_twin)

        assert graph.number_of_edges() == 2

    def test_constructor_edges(self, chain):
        graph, (a, b, c, d) = chain

        assert graph.edges == [(a, b), (b, c), (c, d)]
        assert graph.nodes == [a, b, c, d]


class TestRemoveEdge:
    """Edge removal."""

    def test_remove(self, chain):
        graph, (a, b, c, d) = chain

        graph.remove_edge(b, c)

        assert graph.edgep(b, c) is None
        assert graph.edges == [(a, b), (c, d)]

    def test_keeps_orphaned_nodes(self, chain):
        graph, (a, b, c, d) = chain

        graph.remove_edge(a, b)

        assert a in graph
        assert len(graph) == 4

    def test_reverse_is_not_removed(self, chain):
        graph, (a, b, c, d) = chain

        graph.remove_edge(b, a)

        assert graph.edgep(a, b) == (a, b)
        assert graph.number_of_edges() == 3

    def test_missing_edge_is_noop(self, chain):
        graph, (a, b, c, d) = chain

        graph.remove_edge(a, d)
        graph.remove_edge(Node("X"), Node("Y"))

        assert graph.number_of_edges() == 3


class TestEdgeQueries:
    """edgep and the find_edges_* scans."""

    def test_edgep_is_directional(self):
        graph = ListGraph()
        a, b = Node("A"), Node("B")
        graph.add_edge(a, b)

        edge = graph.edgep(a, b)

        assert edge == (a, b)
        assert edge[0] is a and edge[1] is b
        assert graph.edgep(b, a) is None

    def test_find_edges_from(self, chain):
        graph, (a, b, c, d) = chain

        assert graph.find_edges_from(b) == [(b, c)]
        assert graph.find_edges_from(d) == []

    def test_find_edges_to(self, chain):
        graph, (a, b, c, d) = chain

        assert graph.find_edges_to(b) == [(a, b)]
        assert graph.find_edges_to(a) == []

    def test_find_edges_containing_sees_both_ends(self):
        graph = ListGraph()
        a, b = Node("A"), Node("B")
        graph.add_edge(a, b)

        assert (a, b) in graph.find_edges_containing(a)
        assert (a, b) in graph.find_edges_containing(b)

    def test_find_edges_containing_is_union(self, chain):
        graph, (a, b, c, d) = chain

        containing = graph.find_edges_containing(c)

        assert containing == graph.find_edges_from(c) + graph.find_edges_to(c)
        assert containing == [(c, d), (b, c)]

    def test_self_loop_reported_once(self):
        graph = ListGraph()
        a = Node("A")
        graph.add_edge(a, a)

        assert graph.find_edges_containing(a) == [(a, a)]
        assert graph.neighbors(a) == []

    def test_self_loop_is_not_a_neighbor(self):
        a, b = Node("A"), Node("B")
        graph = ListGraph([(a, a), (a, b)])

        assert graph.neighbors(a) == [b]
        assert graph.neighbors(b) == [a]

    def test_unknown_node(self, chain):
        graph, _ = chain
        stranger = Node("X")

        assert graph.find_edges_containing(stranger) == []
        assert graph.neighbors(stranger) == []


class TestNodeMembership:
    """Node helpers on the protocol."""

    def test_add_isolated_node(self):
        graph = ListGraph()
        a = Node("A")

        graph.add_node(a)
        graph.add_node(a)

        assert graph.nodes == [a]
        assert graph.number_of_edges() == 0

    def test_remove_node_drops_incident_edges(self, chain):
        graph, (a, b, c, d) = chain

        graph.remove_node(b)

        assert b not in graph
        assert graph.edges == [(c, d)]
        assert a in graph

    def test_remove_unknown_node(self, chain):
        graph, _ = chain

        graph.remove_node(Node("X"))

        assert len(graph) == 4
        assert graph.number_of_edges() == 3

    def test_neighbors_distinct(self):
        graph = ListGraph()
        a, b = Node("A"), Node("B")
        graph.add_edge(a, b)
        graph.add_edge(b, a)

        assert graph.neighbors(a) == [b]
        assert graph.neighbors(b) == [a]

    def test_iteration(self, star):
        graph, (a, b, c) = star

        assert list(graph) == [a, b, c]
        assert repr(graph) == "ListGraph(nodes=3, edges=2)"
