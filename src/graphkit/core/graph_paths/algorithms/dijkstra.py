"""
Dijkstra's algorithm over the graph contract.

Costs are attached to nodes rather than edges: moving into a node costs
``cost_fn(payload)`` of that node, so the node a search starts from is free.
Two entry points are provided, a single start/target pair and a frontier
search where every node matching a predicate is a zero-cost source and the
first popped node matching a second predicate ends the search.
"""

import logging
from contextlib import contextmanager
from time import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ...exceptions import GraphOperationError
from ...types import CostFunc, NodeHandle, NodePredicate
from ..base import PathFinder
from ..models import SearchMetrics, SearchResult
from ..utils import (
    MemoryManager,
    PriorityQueue,
    get_node_cost,
    is_better_cost,
    reconstruct_path,
    reconstruct_path_from_frontier,
)

logger = logging.getLogger(__name__)


class NegativeCostError(GraphOperationError):
    """Raised when a cost function returns a negative cost."""

    pass


class DijkstraFinder(PathFinder):
    """
    Dijkstra shortest-path search over any graph implementing the contract.

    The finder only reads the graph through ``has_node``, ``get_data``,
    ``get_neighbors`` and ``find_nodes``; it never mutates it. All search
    state lives in local variables of a single call.

    Args:
        graph: Graph to search
        max_memory_mb: Optional limit on memory growth during one search
        validate: Re-check found paths against the graph before returning. The
            check calls cost_fn again, so leave it off for stateful cost functions
    """

    def __init__(self, graph: Any, max_memory_mb: Optional[float] = None, validate: bool = False):
        super().__init__(graph)
        self.memory_manager = MemoryManager(max_memory_mb)
        self.validate = validate
        self.metrics: Optional[SearchMetrics] = None

    @contextmanager
    def _search_context(self, operation: str):
        """Track metrics for one search call."""
        self.metrics = SearchMetrics(operation=operation, start_time=time())
        try:
            yield self.metrics
        finally:
            self.metrics.end_time = time()
            self.metrics.max_memory_used = self.memory_manager.peak_memory

    def find_path(self, start: NodeHandle, target: NodeHandle, cost_fn: CostFunc) -> SearchResult:
        """
        Find the cheapest path from ``start`` to ``target``.

        Returns a result whose path runs from ``start`` to ``target`` inclusive,
        ``[start]`` when both are the same node, and an empty result when the
        target cannot be reached or either handle is not part of the graph.
        """
        with self._search_context("dijkstra") as metrics:
            if not self.validate_nodes(start, target):
                logger.debug(f"Invalid handle in search from {start} to {target}")
                return SearchResult(metrics=metrics)

            logger.debug(f"Starting Dijkstra's algorithm from {start} to {target}")
            came_from, cost_so_far, _ = self._relax(
                [start], lambda node: node == target, cost_fn, metrics
            )
            path = reconstruct_path(came_from, start, target)
            return self._build_result(path, cost_so_far, cost_fn, metrics)

    def find_path_from_frontier(
        self,
        frontier_fn: NodePredicate,
        target_fn: NodePredicate,
        cost_fn: CostFunc,
    ) -> SearchResult:
        """
        Find the cheapest path from any frontier node to any target node.

        Every node whose payload satisfies ``frontier_fn`` starts at cost 0. The
        search ends at the first node popped from the queue whose payload
        satisfies ``target_fn``. An empty frontier, or a frontier from which no
        target can be reached, gives an empty result.
        """
        with self._search_context("dijkstra_search") as metrics:
            frontier = self.graph.find_nodes(frontier_fn)
            if not frontier:
                logger.debug("Frontier predicate matched no nodes")
                return SearchResult(metrics=metrics)

            logger.debug(f"Starting Dijkstra's algorithm from {len(frontier)} frontier nodes")
            came_from, cost_so_far, found = self._relax(
                frontier, lambda node: target_fn(self.graph.get_data(node)), cost_fn, metrics
            )
            path = reconstruct_path_from_frontier(came_from, set(frontier), found)
            return self._build_result(path, cost_so_far, cost_fn, metrics)

    def _relax(
        self,
        sources: Iterable[NodeHandle],
        is_target: Callable[[NodeHandle], bool],
        cost_fn: CostFunc,
        metrics: SearchMetrics,
    ) -> Tuple[Dict[NodeHandle, NodeHandle], Dict[NodeHandle, Any], Optional[NodeHandle]]:
        """
        Run the relaxation loop until a target is popped or the queue drains.

        Returns the predecessor map, the best-cost map and the popped target
        (None when no target was popped).
        """
        pq = PriorityQueue()
        came_from: Dict[NodeHandle, NodeHandle] = {}
        cost_so_far: Dict[NodeHandle, Any] = {}

        for source in sources:
            pq.add_or_update(source, 0)
            came_from[source] = source
            cost_so_far[source] = 0
        metrics.frontier_size = len(came_from)
        trace = logger.isEnabledFor(logging.DEBUG)

        while not pq.empty():
            self.memory_manager.check_memory()

            current_cost, current = pq.pop()
            metrics.nodes_explored += 1
            if trace:
                logger.debug(f"Popped {current} with cost {current_cost}")

            if is_target(current):
                logger.debug(f"Reached target {current} with cost {current_cost}")
                return came_from, cost_so_far, current

            for neighbor in self.graph.get_neighbors(current):
                cost = get_node_cost(self.graph.get_data(neighbor), cost_fn)
                if cost < 0:
                    raise NegativeCostError(f"Negative cost {cost} found at node {neighbor}")

                new_cost = cost_so_far[current] + cost
                if neighbor not in cost_so_far or is_better_cost(new_cost, cost_so_far[neighbor]):
                    cost_so_far[neighbor] = new_cost
                    came_from[neighbor] = current
                    if trace:
                        logger.debug(f"Relaxed {neighbor} via {current} to cost {new_cost}")
                    pq.add_or_update(neighbor, new_cost)

        logger.debug(f"Queue exhausted after exploring {metrics.nodes_explored} nodes")
        return came_from, cost_so_far, None

    def _build_result(
        self,
        path: List[NodeHandle],
        cost_so_far: Dict[NodeHandle, Any],
        cost_fn: CostFunc,
        metrics: SearchMetrics,
    ) -> SearchResult:
        if not path:
            metrics.path_length = 0
            return SearchResult(metrics=metrics)

        metrics.path_length = len(path)
        result = SearchResult(path=path, total_cost=cost_so_far[path[-1]], metrics=metrics)
        if self.validate:
            result.validate(self.graph, cost_fn)
        return result
