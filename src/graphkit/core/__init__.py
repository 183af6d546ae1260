"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
)
from .types import CostFunc, EdgeHandle, NodeHandle, NodePredicate
from .graph import ArenaGraph, Graph, Grid, SharedGraph
from .graph_paths import DijkstraFinder, NegativeCostError, SearchMetrics, SearchResult

__all__ = [
    "ArenaGraph",
    "ConfigurationError",
    "CostFunc",
    "DijkstraFinder",
    "EdgeHandle",
    "EdgeNotFoundError",
    "Graph",
    "GraphOperationError",
    "Grid",
    "NegativeCostError",
    "NodeHandle",
    "NodeNotFoundError",
    "NodePredicate",
    "ResourceNotFoundError",
    "SearchMetrics",
    "SearchResult",
    "SharedGraph",
]
