"""
Utility functions for shortest-path search.
"""

import gc
import logging
import math
import os
import time
from heapq import heappop, heappush
from numbers import Real
from typing import Any, Collection, Dict, List, Optional, Tuple

import psutil

from ..exceptions import ConfigurationError
from ..types import CostFunc, NodeHandle

logger = logging.getLogger(__name__)

# Constants
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between two resident memory samples


def get_node_cost(data: Any, cost_fn: CostFunc) -> Real:
    """
    Get the cost of entering a node with payload ``data``.

    Raises:
        ValueError: If the cost is not a finite real number
    """
    cost = cost_fn(data)
    if isinstance(cost, bool) or not isinstance(cost, Real):
        raise ValueError(f"Cost must be numeric, got {type(cost).__name__}")
    if isinstance(cost, float) and (math.isnan(cost) or math.isinf(cost)):
        raise ValueError("Cost must be a finite number")
    return cost


def is_better_cost(new_cost: Real, old_cost: Real) -> bool:
    """Return True only for a strictly smaller cost, so ties keep the first predecessor."""
    return new_cost < old_cost


def calculate_path_cost(graph: Any, path: List[NodeHandle], cost_fn: CostFunc) -> Real:
    """Sum the cost of every node on ``path`` after the first one."""
    total: Real = 0
    for node in path[1:]:
        total += get_node_cost(graph.get_data(node), cost_fn)
    return total


def reconstruct_path(
    came_from: Dict[NodeHandle, NodeHandle], start: NodeHandle, target: NodeHandle
) -> List[NodeHandle]:
    """
    Rebuild the path from ``start`` to ``target`` out of a predecessor map.

    Returns an empty list when ``target`` was never reached.
    """
    if target not in came_from:
        return []

    path = []
    current = target
    while current != start:
        path.append(current)
        current = came_from[current]

    path.append(start)
    path.reverse()
    return path


def reconstruct_path_from_frontier(
    came_from: Dict[NodeHandle, NodeHandle],
    frontier: Collection[NodeHandle],
    target: Optional[NodeHandle],
) -> List[NodeHandle]:
    """
    Rebuild the path from whichever frontier node led to ``target``.

    The backtrace stops at the first frontier node it meets; frontier nodes are
    their own predecessors. Returns an empty list when no target was found.
    """
    if target is None:
        return []

    path = []
    current = target
    while current not in frontier:
        path.append(current)
        current = came_from[current]

    path.append(current)
    path.reverse()
    return path


class PriorityQueue:
    """Min priority queue with decrease-key, backed by a binary heap."""

    def __init__(self):
        self._queue: List[Tuple[Real, int, NodeHandle]] = []
        self._entry_finder: Dict[NodeHandle, Tuple[Real, int]] = {}
        self._counter = 0  # Unique counter so the heap never compares handles

    def add_or_update(self, item: NodeHandle, priority: Real) -> None:
        """Insert ``item``, or lower its priority if it is already queued."""
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            # Only update if new priority is lower (better)
            if not is_better_cost(priority, old_priority):
                return

        # Older heap entries for the item become stale and are skipped by pop()
        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, (priority, self._counter, item))
        self._counter += 1

    def pop(self) -> Optional[Tuple[Real, NodeHandle]]:
        """Remove and return the item with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            if self._entry_finder.get(item) == (priority, count):
                del self._entry_finder[item]
                return (priority, item)
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)

    def __contains__(self, item: NodeHandle) -> bool:
        return item in self._entry_finder


class MemoryManager:
    """
    Optional resident-memory guard for long searches.

    Without a limit every check is a no-op and psutil is never queried.
    With a limit, memory is sampled at most every MEMORY_CHECK_INTERVAL
    seconds and MemoryError is raised once growth since the start of the
    search exceeds the limit.
    """

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        if max_memory_mb is not None:
            if isinstance(max_memory_mb, bool) or not isinstance(max_memory_mb, Real):
                raise ConfigurationError("max_memory_mb must be a number")
            if max_memory_mb <= 0:
                raise ConfigurationError("max_memory_mb must be positive")

        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage() if self.max_memory else 0
        self._peak_memory = self.start_memory
        self._last_check = time.time()

    @property
    def enabled(self) -> bool:
        return self.max_memory is not None

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        if not self.max_memory:
            return

        current_time = time.time()
        if current_time - self._last_check < MEMORY_CHECK_INTERVAL:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.warning(
                    f"Search memory limit of {self.max_memory/1024/1024:.1f}MB exceeded"
                )
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> Optional[int]:
        """Peak resident memory in bytes, or None when the guard is disabled."""
        return self._peak_memory if self.max_memory else None


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
