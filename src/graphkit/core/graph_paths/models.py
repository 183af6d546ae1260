"""
Data models for shortest-path search.

This module provides the data structures returned by the search engine:
- SearchResult: Container for a found path, its total cost and metrics
- SearchMetrics: Container for per-search performance metrics
- PathValidationError: Exception for path validation failures

A search miss is represented by an empty SearchResult, never by an exception.

Example:
    >>> result = graph.shortest_path(start, target, cost_fn=lambda c: c)
    >>> result.path
    [NodeHandle(0), NodeHandle(2), NodeHandle(3), NodeHandle(4)]
    >>> result.total_cost
    6
"""

import math
from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Any, Dict, Iterator, List, Optional, Union

from ..types import CostFunc, NodeHandle
from .utils import calculate_path_cost


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Discontinuities in the path (consecutive nodes not connected by an edge)
    - Nodes that do not belong to the graph
    - Cost inconsistencies
    """

    pass


@dataclass
class SearchMetrics:
    """
    Container for search performance metrics.

    Attributes:
        operation: Name of the search operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        frontier_size: Number of nodes seeded at cost 0
        nodes_explored: Number of entries popped from the priority queue
        path_length: Number of nodes in the found path (if applicable)
        max_memory_used: Peak memory usage during operation (bytes)

    Example:
        >>> metrics = SearchMetrics(operation="dijkstra", start_time=time())
        >>> # ... perform search ...
        >>> metrics.end_time = time()
        >>> print(f"Search took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    frontier_size: int = 0
    nodes_explored: int = 0
    path_length: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "frontier_size": self.frontier_size,
            "nodes_explored": self.nodes_explored,
            "path_length": self.path_length,
            "max_memory_used": self.max_memory_used,
        }


@dataclass
class SearchResult:
    """
    Container for shortest-path search results.

    The path runs from the start (or frontier) node to the target node, both
    inclusive. The total cost is the sum of the costs of every node after the
    first one, because entering a node is what costs; the start node is free.

    Attributes:
        path: Sequence of node handles, empty when no path exists
        total_cost: Cumulative cost of the path
        metrics: Metrics collected while searching

    Example:
        >>> result = SearchResult(path=[NodeHandle(0), NodeHandle(4)], total_cost=3)
        >>> result.validate(graph, cost_fn=lambda c: c)
        >>> bool(result)
        True
    """

    path: List[NodeHandle] = field(default_factory=list)
    total_cost: Real = 0
    metrics: Optional[SearchMetrics] = None

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.path, list):
            raise TypeError("path must be a list")

        if not all(isinstance(node, NodeHandle) for node in self.path):
            raise TypeError("path must contain only NodeHandle objects")

        if not isinstance(self.total_cost, Real):
            raise TypeError("total_cost must be a numeric value")

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self.path)

    def __getitem__(self, index: int) -> NodeHandle:
        return self.path[index]

    def __iter__(self) -> Iterator[NodeHandle]:
        return iter(self.path)

    def __bool__(self) -> bool:
        return bool(self.path)

    @property
    def found(self) -> bool:
        """Whether the search reached a target."""
        return bool(self.path)

    @property
    def start(self) -> Optional[NodeHandle]:
        return self.path[0] if self.path else None

    @property
    def target(self) -> Optional[NodeHandle]:
        return self.path[-1] if self.path else None

    def payloads(self, graph: Any) -> List[Any]:
        """Return the payload of every node on the path, in order."""
        return [graph.get_data(node) for node in self.path]

    def validate(
        self,
        graph: Any,
        cost_fn: Optional[CostFunc] = None,
        cost_epsilon: float = 1e-9,
    ) -> None:
        """
        Validate the path's consistency against a graph.

        Performs the following checks:
        - Every node exists in the graph
        - Every consecutive pair is connected by a directed edge
        - The stored total cost matches the cost function (if given)

        Args:
            graph: The graph the path was found in
            cost_fn: Optional cost function used for the search
            cost_epsilon: Tolerance for cost comparison of float costs

        Raises:
            PathValidationError: If any validation check fails
        """
        if not self.path:
            if self.total_cost != 0:
                raise PathValidationError("Empty path must have zero cost")
            return

        for node in self.path:
            if not graph.has_node(node):
                raise PathValidationError(f"Node {node} not found in graph")

        for i in range(len(self.path) - 1):
            current, following = self.path[i], self.path[i + 1]
            if following not in graph.get_neighbors(current):
                raise PathValidationError(
                    f"Path discontinuity between nodes {i} and {i + 1}: "
                    f"no edge from {current} to {following}"
                )

        if cost_fn is not None:
            try:
                calculated = calculate_path_cost(graph, self.path, cost_fn)
            except (TypeError, ValueError) as e:
                raise PathValidationError(f"Error calculating path cost: {str(e)}") from e

            # Integers compare exactly; isclose would overflow on huge ones
            if isinstance(calculated, Integral) and isinstance(self.total_cost, Integral):
                matches = calculated == self.total_cost
            else:
                matches = math.isclose(calculated, self.total_cost, abs_tol=cost_epsilon)
            if not matches:
                raise PathValidationError(
                    f"Cost mismatch: calculated {calculated} != stored {self.total_cost}"
                )
