"""
graphkit - Graph primitives for grid and graph search problems

This package provides a small set of reusable building blocks:

- A graph contract with arena-based and shared-ownership implementations
- A grid adapter that wires a rectangular lattice into a graph
- Dijkstra shortest-path search between two nodes or between predicate-selected
  node sets, with path reconstruction
"""

__version__ = "0.1.0"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("graphkit requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import ArenaGraph, Graph, Grid, SharedGraph
from .core.types import EdgeHandle, NodeHandle

__all__ = [
    "ArenaGraph",
    "EdgeHandle",
    "Graph",
    "Grid",
    "NodeHandle",
    "SharedGraph",
]
