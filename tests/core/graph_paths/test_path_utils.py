"""
Tests for search utilities.
"""

import pytest

from graphkit.core.exceptions import ConfigurationError
from graphkit.core.graph import ArenaGraph
from graphkit.core.graph_paths import (
    calculate_path_cost,
    reconstruct_path,
    reconstruct_path_from_frontier,
)
from graphkit.core.graph_paths.utils import MemoryManager, PriorityQueue, get_node_cost
from graphkit.core.types import NodeHandle

A, B, C, D = (NodeHandle(i) for i in range(4))


def test_priority_queue_pops_lowest_first():
    """Test ordering of pops."""
    pq = PriorityQueue()
    pq.add_or_update(A, 5)
    pq.add_or_update(B, 1)
    pq.add_or_update(C, 3)

    assert len(pq) == 3
    assert pq.pop() == (1, B)
    assert pq.pop() == (3, C)
    assert pq.pop() == (5, A)
    assert pq.empty()
    assert pq.pop() is None


def test_priority_queue_decrease_key():
    """Test that lowering a priority replaces the old entry."""
    pq = PriorityQueue()
    pq.add_or_update(A, 10)
    pq.add_or_update(B, 5)
    pq.add_or_update(A, 2)

    assert len(pq) == 2
    assert A in pq
    assert pq.pop() == (2, A)
    assert pq.pop() == (5, B)
    assert pq.pop() is None


def test_priority_queue_ignores_increase():
    """Test that raising a priority is ignored."""
    pq = PriorityQueue()
    pq.add_or_update(A, 2)
    pq.add_or_update(A, 9)

    assert pq.pop() == (2, A)
    assert A not in pq


def test_reconstruct_path():
    """Test walking the predecessor map back to the start."""
    came_from = {A: A, B: A, C: B}

    assert reconstruct_path(came_from, A, C) == [A, B, C]
    assert reconstruct_path(came_from, A, A) == [A]
    assert reconstruct_path(came_from, A, D) == []


def test_reconstruct_path_from_frontier():
    """Test walking back to whichever frontier node was reached."""
    came_from = {A: A, B: B, C: B, D: C}

    assert reconstruct_path_from_frontier(came_from, {A, B}, D) == [B, C, D]
    assert reconstruct_path_from_frontier(came_from, {A, B}, A) == [A]
    assert reconstruct_path_from_frontier(came_from, {A, B}, None) == []


def test_calculate_path_cost():
    """Test that the first node of a path is free."""
    graph = ArenaGraph()
    nodes = [graph.add_node(value) for value in (100, 2, 3)]

    assert calculate_path_cost(graph, nodes, lambda v: v) == 5
    assert calculate_path_cost(graph, nodes[:1], lambda v: v) == 0
    assert calculate_path_cost(graph, [], lambda v: v) == 0


def test_get_node_cost():
    """Test cost validation."""
    assert get_node_cost(4, lambda v: v) == 4
    assert get_node_cost(4, lambda v: v / 2) == 2.0

    with pytest.raises(ValueError, match="numeric"):
        get_node_cost("x", lambda v: v)

    with pytest.raises(ValueError, match="finite"):
        get_node_cost(float("inf"), lambda v: v)


def test_memory_manager_disabled():
    """Test that no limit means no checks."""
    manager = MemoryManager()

    assert not manager.enabled
    manager.check_memory()
    assert manager.peak_memory is None


def test_memory_manager_enabled():
    """Test a memory guard with a generous limit."""
    manager = MemoryManager(max_memory_mb=8192)

    assert manager.enabled
    manager.check_memory()
    assert manager.peak_memory > 0


def test_memory_manager_rejects_bad_limits():
    """Test configuration validation."""
    with pytest.raises(ConfigurationError, match="positive"):
        MemoryManager(max_memory_mb=0)

    with pytest.raises(ConfigurationError, match="number"):
        MemoryManager(max_memory_mb="lots")


def test_memory_manager_limit_exceeded(caplog):
    """Test that growth past the limit logs a warning and raises."""
    manager = MemoryManager(max_memory_mb=1)
    # Pretend the search started from nothing and the last sample is old
    manager.start_memory = 0
    manager._last_check = 0

    with pytest.raises(MemoryError, match="exceeds limit of 1.0MB"):
        manager.check_memory()

    assert "Search memory limit of 1.0MB exceeded" in caplog.text
