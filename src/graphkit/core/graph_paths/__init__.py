"""Shortest-path search over the graph contract."""

from .algorithms.dijkstra import DijkstraFinder, NegativeCostError
from .base import PathFinder
from .models import PathValidationError, SearchMetrics, SearchResult
from .utils import calculate_path_cost, reconstruct_path, reconstruct_path_from_frontier

__all__ = [
    "DijkstraFinder",
    "NegativeCostError",
    "PathFinder",
    "PathValidationError",
    "SearchMetrics",
    "SearchResult",
    "calculate_path_cost",
    "reconstruct_path",
    "reconstruct_path_from_frontier",
]
