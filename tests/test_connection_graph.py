"""Unit tests for the connection graph."""

import pytest

from social_registry.core.connection_graph import ConnectionGraph
from social_registry.core.exceptions import InvalidNameError, SelfConnectionError, UnknownClientError


@pytest.fixture
def path_graph():
    """Graph with edges A-B, B-C, C-D and an isolated vertex E."""
    graph = ConnectionGraph()
    for name in "ABCDE":
        graph.add_vertex(name)
    graph.connect("A", "B")
    graph.connect("B", "C")
    graph.connect("C", "D")
    return graph


def test_connect_is_symmetric_and_idempotent():
    """Test that edges are stored both ways exactly once."""
    graph = ConnectionGraph()
    assert graph.connect("A", "B") is True
    assert graph.connect("B", "A") is False

    assert graph.neighbors("A") == {"B"}
    assert graph.neighbors("B") == {"A"}
    assert graph.exists_edge("B", "A")
    assert graph.edge_count() == 1
    assert graph.vertex_count() == 2


def test_connect_rejects_invalid_names():
    """Test self-connections and blank names."""
    graph = ConnectionGraph()
    with pytest.raises(SelfConnectionError):
        graph.connect("A", "A")
    with pytest.raises(InvalidNameError):
        graph.connect("A", " ")
    assert graph.is_empty()


def test_neighbors(path_graph):
    """Test neighbor lookup for connected, isolated and unknown names."""
    assert path_graph.neighbors("B") == {"A", "C"}
    assert path_graph.neighbors("E") == frozenset()
    assert path_graph.neighbors("Z") == frozenset()

    with pytest.raises(InvalidNameError):
        path_graph.neighbors("")


def test_distance_on_path(path_graph):
    """Test BFS hop counts along a path."""
    assert path_graph.distance("A", "D") == 3
    assert path_graph.distance("D", "A") == 3
    assert path_graph.distance("A", "B") == 1
    assert path_graph.distance("A", "A") == 0


def test_distance_disconnected(path_graph):
    """Test that registered but unreachable vertices give -1."""
    assert path_graph.distance("A", "E") == -1


def test_distance_unknown_vertex(path_graph):
    """Test that unregistered vertices are reported."""
    with pytest.raises(UnknownClientError):
        path_graph.distance("A", "Z")
    with pytest.raises(UnknownClientError):
        path_graph.distance("Z", "A")
    with pytest.raises(InvalidNameError):
        path_graph.distance("A", "")


def test_distance_takes_shortest_path_in_cycle():
    """Test shortest-path semantics on the cycle A-B-C-D-A."""
    graph = ConnectionGraph()
    for a, b in [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")]:
        graph.connect(a, b)

    assert graph.distance("A", "C") == 2
    assert graph.distance("A", "D") == 1
    assert graph.edge_count() == 4


def test_remove_vertex(path_graph):
    """Test that removing a vertex drops its incident edges."""
    assert path_graph.remove_vertex("B") == {"A", "C"}

    assert "B" not in path_graph
    assert path_graph.neighbors("A") == frozenset()
    assert path_graph.neighbors("C") == {"D"}
    assert path_graph.edge_count() == 1
    assert path_graph.distance("A", "D") == -1
