"""Shared test fixtures."""

import pytest

from graphkit.core.graph import ArenaGraph, SharedGraph


@pytest.fixture(params=[ArenaGraph, SharedGraph], ids=["arena", "shared"])
def graph_cls(request):
    """Fixture providing each general-purpose graph representation."""
    return request.param


@pytest.fixture
def cost_graph(graph_cls):
    """
    Fixture providing a small graph whose payloads are entry costs:

        0 -> 1000 -> 2 -> 3
        |            ^
        +---> 1 -----+

    Handles are returned in insertion order alongside the graph.
    """
    graph = graph_cls()
    start = graph.add_node(0)
    expensive = graph.add_node(1000)
    cheap = graph.add_node(1)
    middle = graph.add_node(2)
    destination = graph.add_node(3)

    graph.add_edge(start, expensive)
    graph.add_edge(start, cheap)
    graph.add_edge(cheap, middle)
    graph.add_edge(expensive, middle)
    graph.add_edge(middle, destination)
    return graph, (start, expensive, cheap, middle, destination)
