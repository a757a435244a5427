import pytest
from graph_paths.graph import Graph
from graph_paths.vertex import Vertex


class TestVertex:
    def test_get_data(self):
        v = Vertex("A")
        assert v.get_data() == "A"
        assert v.data == "A"

    def test_add_adjacent_vertex_is_local(self):
        a, b = Vertex("A"), Vertex("B")
        a.add_adjacent_vertex(b, 2.5)
        assert a.get_adjacent_vertices() == {b: 2.5}
        assert b.get_adjacent_vertices() == {}

    def test_add_adjacent_vertex_overwrites_weight(self):
        a, b = Vertex("A"), Vertex("B")
        a.add_adjacent_vertex(b, 1)
        a.add_adjacent_vertex(b, 7)
        assert a.get_weight(b) == 7
        assert len(a.get_adjacent_vertices()) == 1

    def test_get_weight_missing_neighbor(self):
        assert Vertex("A").get_weight(Vertex("B")) is None

    def test_identity_not_payload_equality(self):
        first, second = Vertex("A"), Vertex("A")
        assert first != second
        assert len({first, second}) == 2

    def test_repr(self):
        assert repr(Vertex("A")) == "Vertex('A')"


class TestGraph:
    def test_add_vertex(self):
        g = Graph()
        a = Vertex("A")
        g.add_vertex(a)
        assert a in g
        assert len(g) == 1
        assert g.get_vertices_count() == 1
        assert g.get_adjacent_vertices(a) == []

    def test_add_vertex_twice_resets_adjacency_list(self):
        g = Graph()
        a, b = Vertex("A"), Vertex("B")
        g.add_vertex(a)
        g.add_vertex(b)
        g.add_edge(a, b, 1)
        g.add_vertex(a)
        assert g.get_adjacent_vertices(a) == []
        assert len(g) == 2

    def test_add_edge_is_symmetric(self):
        g = Graph()
        a, b = Vertex("A"), Vertex("B")
        g.add_vertex(a)
        g.add_vertex(b)
        g.add_edge(a, b, 2.5)
        assert a.get_weight(b) == b.get_weight(a) == 2.5
        assert g.get_adjacent_vertices(a) == [b]
        assert g.get_adjacent_vertices(b) == [a]
        assert g.get_edge_weight(a, b) == 2.5
        assert g.get_edge_weight(b, a) == 2.5
        assert g.get_edges_count() == 1

    def test_add_edge_unregistered_endpoint_is_ignored(self):
        g = Graph()
        a, b = Vertex("A"), Vertex("B")
        g.add_vertex(a)
        g.add_edge(a, b, 1)
        g.add_edge(b, a, 1)
        assert g.get_adjacent_vertices(a) == []
        assert a.get_adjacent_vertices() == {}
        assert b.get_adjacent_vertices() == {}
        assert b not in g
        assert g.get_edges_count() == 0

    def test_duplicate_edge_overwrites_weight_and_keeps_entries(self):
        g = Graph()
        a, b = Vertex("A"), Vertex("B")
        g.add_vertex(a)
        g.add_vertex(b)
        g.add_edge(a, b, 1)
        g.add_edge(a, b, 4)
        assert a.get_weight(b) == 4
        assert b.get_weight(a) == 4
        assert g.get_adjacent_vertices(a) == [b, b]
        assert g.get_adjacent_vertices(b) == [a, a]
        assert g.get_edges_count() == 2

    def test_self_loop(self):
        g = Graph()
        a = Vertex("A")
        g.add_vertex(a)
        g.add_edge(a, a, 3)
        assert a.get_weight(a) == 3
        assert g.get_adjacent_vertices(a) == [a, a]
        assert g.get_edges_count() == 1

    def test_adjacency_keeps_insertion_order(self):
        g = Graph()
        a, b, c, d = Vertex("A"), Vertex("B"), Vertex("C"), Vertex("D")
        for v in (a, b, c, d):
            g.add_vertex(v)
        g.add_edge(a, d, 1)
        g.add_edge(a, b, 1)
        g.add_edge(c, a, 1)
        assert g.get_adjacent_vertices(a) == [d, b, c]

    def test_get_adjacent_vertices_unknown_vertex(self):
        g = Graph()
        assert g.get_adjacent_vertices(Vertex("Z")) == []

    def test_get_edge_weight_non_existent_edge(self):
        g = Graph()
        a, b = Vertex("A"), Vertex("B")
        g.add_vertex(a)
        g.add_vertex(b)
        assert g.get_edge_weight(a, b) is None
        assert g.get_edge_weight(a, Vertex("C")) is None

    def test_get_all_vertices(self):
        g = Graph()
        vertices = {Vertex(label) for label in "ABCD"}
        for v in vertices:
            g.add_vertex(v)
        assert g.get_all_vertices() == vertices

    def test_get_all_vertices_empty_graph(self):
        assert Graph().get_all_vertices() == set()

    def test_equal_payloads_are_distinct_vertices(self):
        g = Graph()
        first, second = Vertex("A"), Vertex("A")
        g.add_vertex(first)
        g.add_vertex(second)
        assert len(g) == 2

    def test_find_vertex(self):
        g = Graph()
        a, b = Vertex("A"), Vertex("B")
        g.add_vertex(a)
        g.add_vertex(b)
        assert g.find_vertex("B") is b

    def test_find_vertex_missing_raises_value_error(self):
        g = Graph()
        g.add_vertex(Vertex("A"))
        with pytest.raises(ValueError, match="Vertex Z not found."):
            g.find_vertex("Z")

    def test_contains_and_len(self):
        g = Graph()
        assert len(g) == 0
        a = Vertex("A")
        assert a not in g
        g.add_vertex(a)
        assert a in g
        assert len(g) == 1
