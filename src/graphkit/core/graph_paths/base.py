from abc import ABC, abstractmethod
from typing import Any

from ..types import CostFunc, NodeHandle, NodePredicate
from .models import SearchResult


class PathFinder(ABC):
    """Abstract base class for path finding algorithms."""

    def __init__(self, graph: Any):
        """Initialize finder with graph."""
        self.graph = graph

    @abstractmethod
    def find_path(self, start: NodeHandle, target: NodeHandle, cost_fn: CostFunc) -> SearchResult:
        """Find the cheapest path between two nodes."""
        pass

    @abstractmethod
    def find_path_from_frontier(
        self,
        frontier_fn: NodePredicate,
        target_fn: NodePredicate,
        cost_fn: CostFunc,
    ) -> SearchResult:
        """Find the cheapest path from any frontier node to any target node."""
        pass

    def validate_nodes(self, *nodes: NodeHandle) -> bool:
        """Return True when every node exists in the graph."""
        return all(self.graph.has_node(node) for node in nodes)
