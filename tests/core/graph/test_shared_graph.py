"""
Tests for the shared-ownership graph and its clone-on-edge behaviour.
"""

import pytest

from graphkit.core.exceptions import NodeNotFoundError
from graphkit.core.graph import SharedGraph, SharedNode
from graphkit.core.types import NodeHandle


def test_new_graph_is_empty():
    """Test creating an empty shared graph."""
    graph = SharedGraph()

    assert graph.node_count == 0
    assert graph.edge_count == 0
    assert list(graph) == []


def test_add_nodes():
    """Test that node handles are sequential and payloads are stored."""
    graph = SharedGraph()

    n1 = graph.add_node(0)
    n2 = graph.add_node(1)

    assert n1.index == 0
    assert n2.index == 1
    assert graph.get_data(n1) == 0
    assert graph.get_data(n2) == 1


def test_add_edge_clones_target():
    """Test that each edge carries its own clone of the target node."""
    graph = SharedGraph()

    n1 = graph.add_node(0)
    n2 = graph.add_node(1)
    n3 = graph.add_node(2)
    n4 = graph.add_node(3)

    graph.add_edge(n1, n2)
    graph.add_edge(n1, n3)
    graph.add_edge(n1, n4)

    cells = graph.neighbor_nodes(n1)
    assert [cell.data for cell in cells] == [1, 2, 3]
    assert all(isinstance(cell, SharedNode) for cell in cells)

    cells[0].data = 100

    # The cell is shared: every holder sees the change...
    assert graph.neighbor_nodes(n1)[0].data == 100
    # ...but the node it was cloned from does not.
    assert graph.get_data(n2) == 1


def test_payload_changes_do_not_reach_earlier_clones():
    """Test the copy-on-edge divergence from the arena representation."""
    graph = SharedGraph()

    source = graph.add_node("source")
    target = graph.add_node(["original"])

    graph.add_edge(source, target)
    graph.get_data_mut(target).append("mutated")
    graph.set_data(source, "renamed")

    assert graph.get_data(target) == ["original", "mutated"]
    assert graph.neighbor_nodes(source)[0].data == ["original"]

    graph.add_edge(source, target)
    assert graph.neighbor_nodes(source)[1].data == ["original", "mutated"]


def test_edges_added_after_clone_are_not_visible_in_clone():
    """Test that a clone keeps the neighbor list the target had at clone time."""
    graph = SharedGraph()

    a = graph.add_node("a")
    b = graph.add_node("b")
    c = graph.add_node("c")

    graph.add_edge(a, b)
    graph.add_edge(b, c)

    assert graph.get_neighbors(b) == [c]
    assert graph.neighbor_nodes(a)[0].neighbors == []


def test_get_neighbors_insertion_order():
    """Test that shared graph neighbors come back in insertion order."""
    graph = SharedGraph()

    n0 = graph.add_node(0)
    n1 = graph.add_node(1)
    n2 = graph.add_node(2)

    graph.add_edge(n0, n1)
    graph.add_edge(n0, n2)

    assert graph.get_neighbors(n0) == [n1, n2]
    assert graph.edge_count == 2


def test_add_edge_invalid_handles():
    """Test that edges referencing missing nodes fail."""
    graph = SharedGraph()
    a = graph.add_node(0)

    with pytest.raises(NodeNotFoundError, match="Target node"):
        graph.add_edge(a, NodeHandle(1))

    with pytest.raises(NodeNotFoundError, match="Target node"):
        graph.add_edge(a, NodeHandle(-1))

    with pytest.raises(NodeNotFoundError, match="Source node"):
        graph.add_edge(NodeHandle(9), a)


def test_get_data_invalid_index_returns_none():
    """Test that lookups of unknown handles return None."""
    graph = SharedGraph()

    assert graph.get_data(NodeHandle(0)) is None
    assert graph.get_data_mut(NodeHandle(2**63)) is None

    graph.add_node(0)
    graph.add_node(1)

    assert graph.get_data(NodeHandle(2)) is None
    assert graph.get_data(NodeHandle(-1)) is None
    assert graph.get_neighbors(NodeHandle(2)) == []


def test_neighbor_nodes_invalid_handle_raises():
    """Test that neighbor cells of unknown handles cannot be requested."""
    graph = SharedGraph()

    with pytest.raises(NodeNotFoundError):
        graph.neighbor_nodes(NodeHandle(0))


def test_find_no_match_returns_none():
    """Test find on empty and non-matching graphs."""
    graph = SharedGraph()
    assert graph.find(lambda d: d == 0) is None

    graph.add_node(0)
    graph.add_node(1)

    assert graph.find(lambda d: d == 2) is None


def test_find_node_data():
    """Test find on string payloads."""
    graph = SharedGraph()
    graph.add_node("Hello")
    graph.add_node("Graph")
    graph.add_node("!")

    assert graph.find(lambda d: d == "Hello") == NodeHandle(0)
    assert graph.find(lambda d: d == "Graph") == NodeHandle(1)
    assert graph.find(lambda d: d == "!") == NodeHandle(2)


def test_search_ignores_stale_clones():
    """Test that searches read payloads from the graph, not from the clones."""
    graph = SharedGraph()
    start = graph.add_node(0)
    expensive = graph.add_node(1000)
    cheap = graph.add_node(1)
    destination = graph.add_node(3)

    graph.add_edge(start, expensive)
    graph.add_edge(start, cheap)
    graph.add_edge(expensive, destination)
    graph.add_edge(cheap, destination)

    assert graph.dijkstra(start, destination, lambda c: c) == [start, cheap, destination]

    graph.set_data(cheap, 5000)

    assert graph.neighbor_nodes(start)[1].data == 1
    assert graph.dijkstra(start, destination, lambda c: c) == [start, expensive, destination]
